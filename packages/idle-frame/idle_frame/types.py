"""Shared value types and protocols for the frame loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

Vec2 = tuple[float, float]
Color = tuple[int, int, int]


class RandomSource(Protocol):
    """The slice of ``random.Random`` the visual systems draw from."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    now_ms: float
    elapsed: float
    dt: float
    request_stop: Callable[[], None]
    random: RandomSource

    @property
    def seconds(self) -> float:
        """Wall-clock time in seconds, the time base of wave motion."""
        return self.now_ms * 0.001


@dataclass(frozen=True, slots=True)
class FloatingNumberEvent:
    """A transient numeric callout for the render layer. Never stored."""

    x: float
    y: float
    value: float
    color: Color
    icon: str | None = None


System = Callable[[FrameContext], None]
