"""Floating-number callouts waiting to be drawn."""
from __future__ import annotations

from dataclasses import dataclass

from idle_frame import FloatingNumberEvent

CALLOUT_LIFETIME_MS = 1200.0


@dataclass
class Callout:
    event: FloatingNumberEvent
    born_ms: float


def expire(callouts: list[Callout], now_ms: float) -> list[Callout]:
    return [c for c in callouts if now_ms - c.born_ms < CALLOUT_LIFETIME_MS]
