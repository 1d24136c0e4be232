"""Injected time sources and the per-frame clock."""

from __future__ import annotations

import time
from typing import Callable, Protocol

from idle_frame.types import FrameContext, RandomSource


class Clock(Protocol):
    def now_ms(self) -> float: ...


class SystemClock:
    """Wall-clock milliseconds since the epoch."""

    def now_ms(self) -> float:
        return time.time() * 1000.0


class ManualClock:
    """Clock that only moves when told to. Used to make frames reproducible."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = float(start_ms)

    def now_ms(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"cannot move a clock backwards, got {ms}")
        self._now += ms
        return self._now

    def set(self, now_ms: float) -> None:
        self._now = float(now_ms)


class FrameClock:
    """Counts frames and measures the wall time between them.

    The first frame after a reset reports ``dt == 0`` so nothing jumps when a
    loop starts or resumes after a pause.
    """

    def __init__(self, source: Clock, max_dt: float = 0.25) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._source = source
        self._max_dt = max_dt
        self._frame_number = 0
        self._start_ms: float | None = None
        self._last_ms: float | None = None
        self._now_ms = source.now_ms()
        self._dt = 0.0

    @property
    def source(self) -> Clock:
        return self._source

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def dt(self) -> float:
        return self._dt

    def advance(self) -> int:
        now = self._source.now_ms()
        if self._start_ms is None:
            self._start_ms = now
        if self._last_ms is None:
            self._dt = 0.0
        else:
            # Capped: a stalled host resumes with at most max_dt of motion.
            self._dt = min(max(now - self._last_ms, 0.0) * 0.001, self._max_dt)
        self._last_ms = now
        self._now_ms = now
        self._frame_number += 1
        return self._frame_number

    def context(self, stop_fn: Callable[[], None], rng: RandomSource) -> FrameContext:
        elapsed = 0.0 if self._start_ms is None else (self._now_ms - self._start_ms) * 0.001
        return FrameContext(
            frame_number=self._frame_number,
            now_ms=self._now_ms,
            elapsed=elapsed,
            dt=self._dt,
            request_stop=stop_fn,
            random=rng,
        )

    def resume(self) -> None:
        """Drop the last frame time; the next frame reports dt == 0."""
        self._last_ms = None
        self._dt = 0.0

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number
        self._start_ms = None
        self._last_ms = None
        self._dt = 0.0
