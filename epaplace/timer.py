"""Accumulating wall-clock timer with pause support."""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator


class Timer:
    """Records the durations, in seconds, of repeated start/stop intervals."""

    def __init__(self, initial: float | None = None) -> None:
        self._durations: list[float] = []
        self._pauses: list[float] = []
        self._start = 0.0
        self._pause_start = 0.0
        if initial is not None:
            self._durations.append(initial)

    def start(self) -> None:
        self._start = time.perf_counter()

    def pause(self) -> None:
        self._pause_start = time.perf_counter()

    def resume(self) -> None:
        self._pauses.append(time.perf_counter() - self._pause_start)

    def stop(self) -> None:
        """Record the time since ``start`` minus any pauses."""
        end = time.perf_counter()
        self._durations.append(end - self._start - self.sum_pauses())
        self._pauses.clear()

    def insert(self, position: int, durations: Iterable[float]) -> None:
        self._durations[position:position] = list(durations)

    def sum(self) -> float:
        return sum(self._durations, 0.0)

    def sum_pauses(self) -> float:
        return sum(self._pauses, 0.0)

    def average(self) -> float:
        """Mean recorded duration; raises ZeroDivisionError when empty."""
        return self.sum() / len(self._durations)

    def clear(self) -> None:
        self._durations.clear()

    def __iter__(self) -> Iterator[float]:
        return iter(self._durations)

    def __len__(self) -> int:
        return len(self._durations)