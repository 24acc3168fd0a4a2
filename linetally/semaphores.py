"""Line analysis where the reader and each worker signal through semaphores."""

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


def analyze_with_semaphores(chunks: Iterable[Iterable[str]], workers: int) -> Counts:
    """Analyze chunks of lines with one thread per slot, signalled by semaphores.

    For every round the reader releases each worker's "line ready" semaphore
    and then acquires each worker's "analyzed" semaphore in turn.
    """
    if workers <= 0:
        raise ValueError("number of workers must be positive")

    slots = [""] * workers
    ready = [threading.Semaphore(0) for _ in range(workers)]
    analyzed = [threading.Semaphore(0) for _ in range(workers)]
    lock = threading.Lock()
    total = Counts()
    finished = False

    def work(index: int) -> None:
        nonlocal total
        while True:
            ready[index].acquire()
            if finished:
                break
            counts = analyze_line(slots[index])
            with lock:
                total += counts
            analyzed[index].release()
        analyzed[index].release()

    def run_round(lines: List[str], last: bool) -> None:
        nonlocal finished
        slots[:] = lines + [""] * (workers - len(lines))
        finished = last
        for semaphore in ready:
            semaphore.release()
        for semaphore in analyzed:
            semaphore.acquire()

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