"""Command line: read lines from standard input and print their character frequencies."""

from __future__ import annotations

import argparse
import io
import sys
from typing import Iterable, Iterator, TextIO

from charfreq.frequency import CharFrequency, sanitize_line
from charfreq.parallel import char_frequencies_chunked, process_lines

MAX_LINE_LENGTH = 1000


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield raw pieces of ``stream``, each a line or at most 1000 characters of one."""
    while piece := stream.readline(MAX_LINE_LENGTH):
        yield piece


def format_frequencies(frequencies: Iterable[CharFrequency]) -> str:
    """Render one block: a "code count" line per nonzero entry, then a blank line."""
    body = "".join(f"{item.code} {item.count}\n" for item in frequencies if item.count)
    return body + "\n"


def run(stream: TextIO, out: TextIO, workers: int = 1, chunked: bool = False) -> int:
    """Process every line of ``stream`` into ``out``; return the number of lines."""
    lines = [sanitize_line(raw) for raw in read_lines(stream)]
    if chunked:
        results = [char_frequencies_chunked(line) for line in lines]
    else:
        results = process_lines(lines, workers)
    for frequencies in results:
        out.write(format_frequencies(frequencies))
    return len(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="charfreq",
        description="Print the character frequencies of each input line.",
    )
    parser.add_argument("-w", "--workers", type=int, default=1,
                        help="number of lines processed concurrently")
    parser.add_argument("-c", "--chunked", action="store_true",
                        help="count each line in concurrent chunks")
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    stream = io.TextIOWrapper(sys.stdin.buffer, encoding="latin-1", newline="")
    run(stream, sys.stdout, args.workers, args.chunked)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())