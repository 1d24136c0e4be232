"""2-D vector helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

from idle_frame.types import Vec2


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def from_polar(angle: float, length: float) -> Vec2:
    return (math.cos(angle) * length, math.sin(angle) * length)

