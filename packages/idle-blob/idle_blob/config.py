"""Tuning for blob animation, silhouette and colors."""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from idle_frame.color import parse_color
from idle_frame.types import Color

_POSITIVE = (
    "boost_decay",
    "heat_decay",
    "ripple_decay",
    "pressure_rise",
    "pressure_relax",
    "click_window_ms",
    "epsilon",
)

_NON_NEGATIVE = (
    "breathing_rate",
    "click_boost_peak",
    "click_heat_peak",
    "ripple_peak",
    "ripple_speed",
    "noise_speed",
    "noise_reversion",
    "breathing_amplitude",
    "noise_amplitude",
    "boost_amplitude",
    "ripple_amplitude",
    "pressure_amplitude",
    "rotation_step_deg",
)


@dataclass(frozen=True)
class BlobAnimationConfig:
    """Rates are per second, amplitudes are fractions of the nominal radius.

    Attributes:
        breathing_rate: Idle pulsation phase speed (rad/s).
        click_boost_peak: click_boost right after a click.
        click_heat_peak: click_heat right after a click; heat at or above it
            renders fully hot.
        ripple_peak: ripple_intensity right after a click.
        boost_decay: Exponential decay rate of click_boost.
        heat_decay: Exponential decay rate of click_heat, usually slower than
            boost_decay.
        ripple_decay: Exponential decay rate of ripple_intensity.
        ripple_speed: Ripple phase speed while the ripple is visible (rad/s).
        pressure_rise: Approach rate toward full pressure while held.
        pressure_relax: Decay rate of pressure once released.
        lobes: Number of noise samples around the rim.
        points_per_lobe: Contour points between two noise samples.
        noise_speed: Random-walk step scale per second.
        noise_reversion: Pull of each sample back toward 0 per second.
        max_deviation: Hard bound on |r / nominal - 1|. Must be below 1.
        epsilon: Channels below this snap to exactly 0.
        click_window_ms: Retention of recent clicks for clicks-per-minute.
        max_recent_clicks: Cap on retained click timestamps.
        size_smoothing: Per-frame fraction of the gap to the target size closed.
        rotation_step_deg: Slow spin per frame.
    """

    breathing_rate: float = 1.6
    click_boost_peak: float = 1.0
    click_heat_peak: float = 1.0
    ripple_peak: float = 1.0
    boost_decay: float = 6.0
    heat_decay: float = 1.5
    ripple_decay: float = 2.5
    ripple_speed: float = 9.0
    pressure_rise: float = 12.0
    pressure_relax: float = 8.0
    lobes: int = 8
    points_per_lobe: int = 8
    noise_speed: float = 0.6
    noise_reversion: float = 0.4
    breathing_amplitude: float = 0.03
    noise_amplitude: float = 0.06
    boost_amplitude: float = 0.08
    ripple_amplitude: float = 0.05
    pressure_amplitude: float = 0.06
    max_deviation: float = 0.3
    epsilon: float = 1e-4
    click_window_ms: float = 60_000.0
    max_recent_clicks: int = 600
    size_smoothing: float = 0.05
    rotation_step_deg: float = 0.2

    def __post_init__(self) -> None:
        for name in _POSITIVE:
            value = getattr(self, name)
            if not (value > 0 and math.isfinite(value)):
                raise ValueError(f"{name} must be positive, got {value}")
        for name in _NON_NEGATIVE:
            value = getattr(self, name)
            if not (value >= 0 and math.isfinite(value)):
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.lobes < 3:
            raise ValueError(f"lobes must be >= 3, got {self.lobes}")
        if self.points_per_lobe < 1:
            raise ValueError(f"points_per_lobe must be >= 1, got {self.points_per_lobe}")
        if not 0 < self.max_deviation < 1:
            raise ValueError(f"max_deviation must be in (0, 1), got {self.max_deviation}")
        if self.max_recent_clicks < 1:
            raise ValueError(f"max_recent_clicks must be >= 1, got {self.max_recent_clicks}")
        if not 0 < self.size_smoothing <= 1:
            raise ValueError(f"size_smoothing must be in (0, 1], got {self.size_smoothing}")

    @property
    def contour_points(self) -> int:
        return self.lobes * self.points_per_lobe

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlobAnimationConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown blob animation settings: {sorted(unknown)}")
        return cls(**data)


@dataclass(frozen=True)
class BlobColors:
    base: Color = (74, 222, 128)
    stroke: Color = (134, 239, 172)
    glow: Color = (134, 239, 172)
    hot: Color = (255, 87, 51)
    stroke_heat_factor: float = 0.7
    disabled_scale: float = 0.9

    def __post_init__(self) -> None:
        for name in ("base", "stroke", "glow", "hot"):
            object.__setattr__(self, name, parse_color(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlobColors:
        return cls(**data)
