"""Line analysis where workers pick up work through per-slot flags."""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from linetally.metrics import Counts, analyze_line


def _round_lines(chunk: Iterable[str], workers: int) -> List[str]:
    lines = list(chunk)
    if len(lines) > workers:
        raise ValueError(
            f"chunk of {len(lines)} lines does not fit {workers} workers"
        )
    return lines


def analyze_with_flags(chunks: Iterable[Iterable[str]], workers: int) -> Counts:
    """Analyze chunks of lines with one thread per slot, coordinated by flags.

    The reader marks each filled slot as available and waits until every
    slot is marked done.  Slots left empty in a round are done at once and
    their worker stays idle.
    """
    if workers <= 0:
        raise ValueError("number of workers must be positive")

    slots: List[Optional[str]] = [None] * workers
    available = [False] * workers
    done = [True] * workers
    condition = threading.Condition()
    total = Counts()
    finished = False

    def work(index: int) -> None:
        nonlocal total
        while True:
            with condition:
                condition.wait_for(lambda: available[index] or finished)
                if not available[index]:
                    return
                available[index] = False
                line = slots[index] or ""
            counts = analyze_line(line)
            with condition:
                total += counts
                done[index] = True
                condition.notify_all()

    threads = [
        threading.Thread(target=work, args=(index,), daemon=True)
        for index in range(workers)
    ]
    for thread in threads:
        thread.start()

    try:
        for chunk in chunks:
            lines = _round_lines(chunk, workers)
            padded: List[Optional[str]] = [*lines, *([None] * (workers - len(lines)))]
            with condition:
                for index, line in enumerate(padded):
                    slots[index] = line
                    available[index] = line is not None
                    done[index] = line is None
                condition.notify_all()
                condition.wait_for(lambda: all(done))
    finally:
        with condition:
            finished = True
            condition.notify_all()
        for thread in threads:
            thread.join()
    return total