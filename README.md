# linetally

`linetally` reads a C-like source file and reports three simple metrics:

- **Effective lines**: lines that end in `;` (ignoring trailing whitespace) or
  contain a comparison operator (`==`, `!=`, `<=`, `>=`, `<`, `>`). Blank
  lines, lines that start with `//`, `/*` or `#include` (after leading
  whitespace), and a line that is exactly `{` or `}` do not count.
- **Keywords**: tokens that are reserved words such as `int`, `if`, `return`,
  `struct`, `typedef`, `unsigned` or `#include`. Tokens are separated by
  whitespace and the characters `;(){}=<>+-*^%!&|`.
- **Comments**: `//` and `/*` comment openings. Text inside a `/* ... */`
  block on the same line is not searched for further openings.

The file is read with lines of at most 255 characters; longer lines are split
into several pieces, each analysed on its own. Lines are grouped into rounds
of one line per worker, and each round is analysed by a pool of worker
threads. Three synchronisation strategies are available: barriers, shared
flags, or semaphores. They all give the same counts; they differ only in how
the reader and the workers coordinate.

## Installation

```
pip install .
```

## Command line

```
linetally FILE WORKERS [--strategy {barrier,flags,semaphores}]
```

Example:

```
linetally program.c 4 --strategy semaphores
```

The default strategy is `barrier`. The report (in Spanish) shows the total
time, the latency per counted line, the throughput in lines per second, and
the three counts. Counted lines are effective lines plus comments. A worker
count that is not a positive integer prints `Numero de hilos invalido` and
exits with status 1; a file that cannot be opened is reported on standard
error with status 1; missing arguments are rejected by the argument parser.

## Library use

```python
from linetally.cli import Strategy, run, format_report

report = run("program.c", 4, Strategy.BARRIER)
print(format_report(report))
print(report.latency(), report.throughput())
```

`run` also accepts the strategy as a string (`"barrier"`, `"flags"`,
`"semaphores"`) and raises `ValueError` for a worker count that is not
positive.

The per-line analysis is available on its own in `linetally.metrics`:

```python
from linetally.metrics import analyze_line, is_effective_line, count_keywords, count_comments

counts = analyze_line("int x = 0; // start\n")
# counts.effective_lines == 1, counts.keywords == 1, counts.comments == 1
```

`Counts` objects can be added together, and `Counts.total_lines()` returns
effective lines plus comments.

`linetally.metrics.read_chunks(stream, size)` splits a text stream into lists
of up to `size` lines. `linetally.barrier.analyze_with_barrier`,
`linetally.flags.analyze_with_flags` and
`linetally.semaphores.analyze_with_semaphores` each take such chunks and a
number of workers, analyse them with that many threads and return the summed
`Counts`. A chunk with more lines than workers raises `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```