# charfreq

`charfreq` reads text line by line. For each line it counts how often each
printable ASCII character (codes 32 to 126) appears. It then lists the
characters that occur, from the least frequent to the most frequent. When two
characters have the same count, the one with the lower code comes first.
It ignores every other character.

## Command line

```
charfreq < input.txt
```

The program reads standard input as Latin-1. Each input line gives one block
of output. Every line in the block is `<character code> <count>`, and a blank
line ends the block.

Before counting, the program removes the last character of each line, and
then a trailing carriage return if there is one. It removes that last
character even when it is not a newline. A final line with no terminating
newline therefore loses its last character. A line is also cut at its first
NUL character. The program reads lines in pieces of at most 1000 characters,
so it treats a longer line as several lines.

Options:

- `-w N`, `--workers N`: process up to `N` lines at the same time in worker
  threads (default 1). The output keeps the input order.
- `-c`, `--chunked`: count each line in chunks of 250 characters across 4
  worker threads, and sort the result with a merge sort. With this option
  `--workers` has no effect.

Example:

```
$ printf 'abba\nzz a\n' | charfreq
97 2
98 2

32 1
97 1
122 2

```

## Library

```python
from charfreq.frequency import char_frequencies, sanitize_line
from charfreq.parallel import char_frequencies_chunked, process_lines
from charfreq.cli import format_frequencies

freqs = char_frequencies("hello")      # list of CharFrequency, sorted
print(format_frequencies(freqs), end="")

# Count one line in chunks across worker threads
freqs = char_frequencies_chunked("hello" * 1000, chunk_size=250, workers=4)

# Process many lines at once; results come back in input order
results = process_lines(["abc", "aab"], workers=2)
```

- `charfreq.frequency`
  - `CharFrequency` holds a character (`char`) and its `count`. Its `code`
    property gives the character's code point.
  - `count_characters(text)` returns a `Counter` of the printable characters
    in `text`.
  - `sort_key(item)` gives the ordering described above: count first, then
    code.
  - `char_frequencies(text)` combines the two and returns a sorted list.
  - `sanitize_line(line)` applies the line trimming described above.
- `charfreq.parallel`
  - `count_chunked(text, chunk_size, workers)` counts chunks of `text` in a
    thread pool.
  - `char_frequencies_chunked(text, chunk_size, workers)` sorts that count
    with `merge_sort`.
  - `merge_sort(items, key)` sorts items by any key.
  - `process_lines(lines, workers)` runs `char_frequencies` over many lines
    concurrently.
  - Each of these raises `ValueError` when `workers` or `chunk_size` is below
    1.
- `charfreq.cli`
  - `read_lines(stream)` yields the raw lines of a stream.
  - `format_frequencies(frequencies)` renders one output block.
  - `run(stream, out, workers, chunked)` does the whole job from one text
    stream to another and returns the number of lines it processed.
  - `main(argv)` is the command-line entry point.

## Tests

```
pip install -e .[test]
pytest
```