"""RGB color helpers shared by the swarm and blob packages."""
from __future__ import annotations

from collections.abc import Sequence

from idle_frame.types import Color


def parse_color(value: str | Sequence[int]) -> Color:
    """Accept ``"#rrggbb"``, ``"#rgb"`` or an (r, g, b) sequence."""
    if isinstance(value, str):
        text = value.strip().lstrip("#")
        if len(text) == 3:
            text = "".join(ch * 2 for ch in text)
        if len(text) != 6:
            raise ValueError(f"Malformed color string: {value!r}")
        try:
            return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
        except ValueError:
            raise ValueError(f"Malformed color string: {value!r}") from None
    channels = tuple(int(c) for c in value)
    if len(channels) != 3 or any(c < 0 or c > 255 for c in channels):
        raise ValueError(f"Color must be three channels in 0..255, got {value!r}")
    return channels  # type: ignore[return-value]


def to_hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Blend from ``a`` toward ``b``. ``t`` saturates to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return (
        round(a[0] + (b[0] - a[0]) * t),
        round(a[1] + (b[1] - a[1]) * t),
        round(a[2] + (b[2] - a[2]) * t),
    )
