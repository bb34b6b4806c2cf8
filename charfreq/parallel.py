"""Concurrent variants: chunked counting, merge sorting and per-line workers."""

from __future__ import annotations

from collections import Counter, deque
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, TypeVar

from charfreq.frequency import (
    CharFrequency,
    char_frequencies,
    count_characters,
    sort_key,
)

T = TypeVar("T")

DEFAULT_CHUNK_SIZE = 250
DEFAULT_CHUNK_WORKERS = 4
DEFAULT_LINE_WORKERS = 2


def merge_sort(items: Iterable[T], key: Callable[[T], object]) -> list[T]:
    """Return ``items`` sorted ascending by ``key`` using a top-down merge sort.

    When two keys compare equal, the element from the right half is taken first.
    """
    items = list(items)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    left = deque(merge_sort(items[:mid], key))
    right = deque(merge_sort(items[mid:], key))
    merged: list[T] = []
    while left and right:
        if key(left[0]) < key(right[0]):
            merged.append(left.popleft())
        else:
            merged.append(right.popleft())
    merged.extend(left)
    merged.extend(right)
    return merged


def _check_workers(workers: int) -> None:
    if workers < 1:
        raise ValueError("workers must be at least 1")


def count_chunked(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    workers: int = DEFAULT_CHUNK_WORKERS,
) -> Counter[str]:
    """Count printable characters by splitting ``text`` into chunks counted concurrently."""
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    _check_workers(workers)
    chunks = [text[start:start + chunk_size] for start in range(0, len(text), chunk_size)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(count_characters, chunks), Counter())


def char_frequencies_chunked(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    workers: int = DEFAULT_CHUNK_WORKERS,
) -> list[CharFrequency]:
    """Like ``char_frequencies`` but counts in chunks and orders with ``merge_sort``."""
    counts = count_chunked(text, chunk_size, workers)
    return merge_sort(
        (CharFrequency(ch, n) for ch, n in counts.items()),
        sort_key,
    )


def process_lines(
    lines: Iterable[str], workers: int = DEFAULT_LINE_WORKERS
) -> list[list[CharFrequency]]:
    """Compute the frequencies of every line concurrently, keeping input order."""
    _check_workers(workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(char_frequencies, lines))