"""Command line entry point: analyze a source file with a chosen thread scheme."""

from __future__ import annotations

import argparse
import enum
import math
import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from linetally.barrier import analyze_with_barrier
from linetally.flags import analyze_with_flags
from linetally.metrics import Counts, read_chunks
from linetally.semaphores import analyze_with_semaphores


class Strategy(enum.Enum):
    """How the reader and the worker threads synchronise."""

    BARRIER = "barrier"
    FLAGS = "flags"
    SEMAPHORES = "semaphores"


_Analyzer = Callable[[Iterable[Iterable[str]], int], Counts]

_ANALYZERS: Dict[Strategy, _Analyzer] = {
    Strategy.BARRIER: analyze_with_barrier,
    Strategy.FLAGS: analyze_with_flags,
    Strategy.SEMAPHORES: analyze_with_semaphores,
}


@dataclass(frozen=True)
class Report:
    """Metrics of one analyzed file and the wall time the analysis took."""

    counts: Counts
    elapsed: float

    def latency(self) -> float:
        """Seconds spent per counted line."""
        lines = self.counts.total_lines()
        if lines == 0:
            return math.inf if self.elapsed > 0 else math.nan
        return self.elapsed / lines

    def throughput(self) -> float:
        """Counted lines per second."""
        lines = self.counts.total_lines()
        if self.elapsed == 0:
            return math.inf if lines > 0 else math.nan
        return lines / self.elapsed


def run(path: str, workers: int, strategy: Union[Strategy, str] = Strategy.BARRIER) -> Report:
    """Analyze the file at ``path`` using ``workers`` threads and the given strategy."""
    if workers <= 0:
        raise ValueError("number of workers must be positive")
    analyzer = _ANALYZERS[Strategy(strategy)]
    start = time.monotonic()
    # latin-1 maps every byte to one character, so line limits count bytes.
    with open(path, encoding="latin-1") as stream:
        counts = analyzer(read_chunks(stream, workers), workers)
    elapsed = time.monotonic() - start
    return Report(counts=counts, elapsed=elapsed)


def format_report(report: Report) -> str:
    """Render the report as the lines printed by the command."""
    counts = report.counts
    lines: List[str] = [
        f"Tiempo total: {report.elapsed:.3f} segundos",
        f"Latencia: {report.latency():.6f} segundo/líneas",
        f"Throughput: {report.throughput():.2f} líneas/segundo",
        "",
        f"Líneas efectivas : {counts.effective_lines}",
        f"Palabras clave   : {counts.keywords}",
        f"Comentarios      : {counts.comments}",
    ]
    return "\n".join(lines) + "\n"


def _parse_workers(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the analyzer from the command line and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="linetally",
        description="Count effective lines, reserved words and comments of a source file.",
    )
    parser.add_argument("file", help="source file to analyze")
    parser.add_argument("workers", help="number of worker threads")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in Strategy],
        default=Strategy.BARRIER.value,
        help="thread synchronisation scheme (default: barrier)",
    )
    args = parser.parse_args(argv)

    workers = _parse_workers(args.workers)
    if workers <= 0:
        print("Numero de hilos invalido")
        return 1

    try:
        report = run(args.file, workers, Strategy(args.strategy))
    except OSError as error:
        print(f"fopen: {error.strerror or error}", file=sys.stderr)
        return 1

    sys.stdout.write(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())