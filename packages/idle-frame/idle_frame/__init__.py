"""idle-frame - Per-frame loop, clocks and signal bus for idle-game visuals."""
from __future__ import annotations

from idle_frame.bus import SignalBus
from idle_frame.clock import Clock, FrameClock, ManualClock, SystemClock
from idle_frame.color import lerp_color, parse_color, to_hex
from idle_frame.engine import FrameLoop
from idle_frame.systems import make_signal_system
from idle_frame.types import Color, FloatingNumberEvent, FrameContext, RandomSource, System, Vec2

__all__ = [
    "Clock",
    "Color",
    "FloatingNumberEvent",
    "FrameClock",
    "FrameContext",
    "FrameLoop",
    "ManualClock",
    "RandomSource",
    "SignalBus",
    "System",
    "SystemClock",
    "Vec2",
    "lerp_color",
    "make_signal_system",
    "parse_color",
    "to_hex",
]
