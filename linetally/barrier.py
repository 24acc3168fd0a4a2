"""Line analysis where the reader and the workers meet at two barriers per round."""

from __future__ import annotations

import threading
from typing import Iterable, List

from linetally.metrics import Counts, analyze_line


def _round_lines(chunk: Iterable[str], workers: int) -> List[str]:
    lines = list(chunk)
    if len(lines) > workers:
        raise ValueError(
            f"chunk of {len(lines)} lines does not fit {workers} workers"
        )
    return lines


def analyze_with_barrier(chunks: Iterable[Iterable[str]], workers: int) -> Counts:
    """Analyze chunks of lines with one thread per slot, synchronised by barriers.

    Each chunk holds at most ``workers`` lines; worker ``i`` analyzes line ``i``
    of every chunk.  All workers and the reader wait at one barrier once the
    lines are in place and at another once they have been analyzed.
    """
    if workers <= 0:
        raise ValueError("number of workers must be positive")

    slots = [""] * workers
    lines_read = threading.Barrier(workers + 1)
    lines_analyzed = threading.Barrier(workers + 1)
    lock = threading.Lock()
    total = Counts()
    finished = False

    def work(index: int) -> None:
        nonlocal total
        while True:
            lines_read.wait()
            if finished:
                break
            counts = analyze_line(slots[index])
            with lock:
                total += counts
            lines_analyzed.wait()
        lines_analyzed.wait()

    def run_round(lines: List[str], last: bool) -> None:
        nonlocal finished
        slots[:] = lines + [""] * (workers - len(lines))
        finished = last
        lines_read.wait()
        lines_analyzed.wait()

    threads = [
        threading.Thread(target=work, args=(index,), daemon=True)
        for index in range(workers)
    ]
    for thread in threads:
        thread.start()

    try:
        for chunk in chunks:
            run_round(_round_lines(chunk, workers), last=False)
    finally:
        run_round([], last=True)
        for thread in threads:
            thread.join()
    return total