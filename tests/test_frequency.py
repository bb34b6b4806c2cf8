import pytest

from charfreq.frequency import (
    CharFrequency,
    char_frequencies,
    count_characters,
    sanitize_line,
    sort_key,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("abc\n", "abc"),
        ("abc\r\n", "abc"),
        ("abc", "ab"),
        ("", ""),
        ("\n", ""),
        ("ab\0cd\n", "a"),
    ],
)
def test_sanitize_line(raw, expected):
    assert sanitize_line(raw) == expected


def test_count_characters_ignores_non_printable():
    counts = count_characters("a\tb\x7fa\u00e9 ~")
    assert counts == {"a": 2, "b": 1, " ": 1, "~": 1}


def test_count_characters_empty():
    assert count_characters("") == {}


def test_char_frequencies_order():
    result = char_frequencies("ccbbba")
    assert result == [
        CharFrequency("a", 1),
        CharFrequency("c", 2),
        CharFrequency("b", 3),
    ]


def test_ties_ordered_by_code():
    result = char_frequencies("zyxa")
    assert [item.char for item in result] == sorted("zyxa")


def test_code_property():
    assert CharFrequency("A", 4).code == ord("A")


def test_sort_key_orders_by_count_then_code():
    low = CharFrequency("z", 1)
    high = CharFrequency("a", 2)
    same_count = CharFrequency("b", 1)
    assert sorted([high, low, same_count], key=sort_key) == [same_count, low, high]


def test_total_count_matches_admissible_length():
    text = "Hello, World!\x01\x02"
    result = char_frequencies(text)
    assert sum(item.count for item in result) == len(text) - 2