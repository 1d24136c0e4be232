"""FrameLoop - per-frame system dispatch, pacing, and lifecycle hooks."""
from __future__ import annotations

import os
import random
import time
from typing import Callable

from idle_frame.clock import Clock, FrameClock, SystemClock
from idle_frame.types import FrameContext, System

Hook = Callable[[FrameContext], None]


class FrameLoop:
    """Runs registered systems once per rendered frame, in registration order.

    A host that owns its own event loop (pygame, a browser bridge) calls
    :meth:`step` once per frame. Headless callers use :meth:`run` for a fixed
    number of frames or :meth:`run_forever`, which sleeps to hold ``fps``.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        seed: int | None = None,
        fps: int = 60,
        max_dt: float = 0.25,
    ) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self._fps = fps
        self._clock = FrameClock(clock if clock is not None else SystemClock(), max_dt=max_dt)
        self._systems: list[System] = []
        self._hooks: dict[str, list[Hook]] = {"start": [], "stop": []}
        self._stopping = False

        self._seed = seed if seed is not None else int.from_bytes(os.urandom(8))
        self._rng = random.Random(self._seed)

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._hooks["start"].append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._hooks["stop"].append(hook)

    def _stop(self) -> None:
        self._stopping = True

    def _context(self) -> FrameContext:
        return self._clock.context(self._stop, self._rng)

    def _fire(self, phase: str) -> None:
        ctx = self._context()
        for hook in self._hooks[phase]:
            hook(ctx)

    def _dispatch(self) -> None:
        self._clock.advance()
        ctx = self._context()
        for system in self._systems:
            system(ctx)
            if self._stopping:
                return

    def step(self) -> None:
        """One frame, without lifecycle hooks."""
        self._stopping = False
        self._dispatch()

    def _drive(self, frames: int | None, paced: bool) -> None:
        self._stopping = False
        self._fire("start")
        budget = 1.0 / self._fps
        done = 0
        while not self._stopping and (frames is None or done < frames):
            started = time.monotonic()
            self._dispatch()
            done += 1
            if paced and not self._stopping:
                remaining = budget - (time.monotonic() - started)
                if remaining > 0:
                    time.sleep(remaining)
        self._fire("stop")

    def run(self, n: int) -> None:
        """Run ``n`` frames back to back, or fewer if a system requests a stop."""
        self._drive(n, paced=False)

    def run_forever(self) -> None:
        self._drive(None, paced=True)

    def pause(self) -> None:
        """Forget the last frame time so the next frame starts with dt == 0."""
        self._clock.resume()
