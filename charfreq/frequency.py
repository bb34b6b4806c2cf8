"""Per-line character frequency counting for printable ASCII text."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

MIN_CHAR = 32
MAX_CHAR = 127  # one above the highest admissible character


@dataclass(frozen=True)
class CharFrequency:
    """A printable character together with how often it occurred."""

    char: str
    count: int

    @property
    def code(self) -> int:
        """The character's code point."""
        return ord(self.char)


def _is_admissible(ch: str) -> bool:
    return MIN_CHAR <= ord(ch) < MAX_CHAR


def sanitize_line(line: str) -> str:
    """Drop the final character of a line, then a trailing carriage return.

    The line is first cut at its first NUL character. The final character
    is removed whether or not it is a newline, so a last line without a
    terminating newline loses its last character.
    """
    line = line.split("\0", 1)[0]
    if not line:
        return ""
    line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def count_characters(text: str) -> Counter[str]:
    """Count the printable ASCII characters in ``text``; others are ignored."""
    return Counter(ch for ch in text if _is_admissible(ch))


def sort_key(item: CharFrequency) -> tuple[int, int]:
    """Order by ascending count, then by ascending character code."""
    return (item.count, item.code)


def char_frequencies(text: str) -> list[CharFrequency]:
    """Return the characters of ``text`` with their counts, least frequent first."""
    counts = count_characters(text)
    return sorted(
        (CharFrequency(ch, n) for ch, n in counts.items()),
        key=sort_key,
    )