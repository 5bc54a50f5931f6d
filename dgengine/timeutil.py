"""Elapsed and per-frame time with millisecond resolution."""

from __future__ import annotations

import time
from typing import Callable, Optional


def _whole_milliseconds(seconds: float) -> float:
    return int(seconds * 1000) / 1000.0


class Clock:
    """Measures time since first use and time between successive calls."""

    def __init__(self, now: Optional[Callable[[], float]] = None):
        self._now = now or time.perf_counter
        self._start: Optional[float] = None
        self._last: Optional[float] = None

    def time(self) -> float:
        """Seconds since the first call, truncated to whole milliseconds."""
        current = self._now()
        if self._start is None:
            self._start = current
        return _whole_milliseconds(current - self._start)

    def delta_time(self) -> float:
        """Seconds since the previous call, truncated to whole milliseconds."""
        current = self._now()
        last = current if self._last is None else self._last
        self._last = current
        return _whole_milliseconds(current - last)


_clock = Clock()


def get_time() -> float:
    """Engine time in seconds since it was first asked for."""
    return _clock.time()


def get_delta_time() -> float:
    """Seconds elapsed since the previous call."""
    return _clock.delta_time()