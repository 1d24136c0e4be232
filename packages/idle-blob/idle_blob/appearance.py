"""Heat-blended colors, glow, and clicks-per-minute feedback."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from idle_blob.config import BlobColors
from idle_blob.state import BlobAnimationState
from idle_frame.color import lerp_color
from idle_frame.types import Color

# (upper bound exclusive, color); the last entry catches everything above.
CPM_COLORS: tuple[tuple[float, Color], ...] = (
    (10.0, (59, 130, 246)),
    (30.0, (34, 197, 94)),
    (60.0, (251, 191, 36)),
    (100.0, (249, 115, 22)),
    (float("inf"), (239, 68, 68)),
)


@dataclass(frozen=True)
class BlobAppearance:
    fill: Color
    stroke: Color
    glow: Color
    glow_deviation: float
    gradient_intensity: float
    scale: float


def heat_color(base: Color, heat: float, hot: Color, peak: float = 1.0) -> Color:
    """Blend ``base`` toward ``hot`` by ``heat / peak``, saturating at peak."""
    if peak <= 0:
        return base
    return lerp_color(base, hot, heat / peak)


def blob_appearance(
    state: BlobAnimationState,
    colors: BlobColors,
    heat_peak: float = 1.0,
    disabled: bool = False,
) -> BlobAppearance:
    heat = max(state.click_heat, 0.0)
    return BlobAppearance(
        fill=heat_color(colors.base, heat, colors.hot, heat_peak),
        stroke=heat_color(colors.stroke, heat * colors.stroke_heat_factor, colors.hot, heat_peak),
        glow=colors.glow,
        glow_deviation=4.0 + 10.0 * heat,
        gradient_intensity=0.9 + 2.0 * heat,
        scale=colors.disabled_scale if disabled else 1.0,
    )


def clicks_per_minute(
    timestamps: Iterable[float], now_ms: float, window_ms: float = 60_000.0,
) -> float:
    cutoff = now_ms - window_ms
    recent = sum(1 for t in timestamps if cutoff < t <= now_ms)
    return recent * 60_000.0 / window_ms


def cpm_color(cpm: float, palette: Sequence[tuple[float, Color]] = CPM_COLORS) -> Color:
    for limit, color in palette:
        if cpm < limit:
            return color
    return palette[-1][1]
