"""Tuning for generator motion and contribution coloring."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from idle_frame.color import parse_color
from idle_frame.types import Color
from idle_swarm.catalog import DEFAULT_ICON

EMISSION_INTERVAL_MS = 1000.0


@dataclass(frozen=True)
class MovementConfig:
    """Drift speed (px/s) and the margin kept inside the blob at spawn (px)."""

    speed: float = 5.0
    padding: float = 20.0

    def __post_init__(self) -> None:
        if self.speed < 0 or not math.isfinite(self.speed):
            raise ValueError(f"speed must be a finite value >= 0, got {self.speed}")
        if self.padding < 0 or not math.isfinite(self.padding):
            raise ValueError(f"padding must be a finite value >= 0, got {self.padding}")


@dataclass(frozen=True)
class ContributionThresholds:
    """Share-of-output cut points, strictly ascending."""

    low: float = 0.05
    medium: float = 0.15
    high: float = 0.3
    very_high: float = 0.5

    def __post_init__(self) -> None:
        values = (self.low, self.medium, self.high, self.very_high)
        if any(not math.isfinite(v) for v in values):
            raise ValueError(f"thresholds must be finite, got {values}")
        if not self.low < self.medium < self.high < self.very_high:
            raise ValueError(
                f"thresholds must be strictly ascending (low < medium < high < very_high), got {values}"
            )


@dataclass(frozen=True)
class TierColors:
    """RGB color per contribution tier, least to most."""

    low: Color = (34, 197, 94)
    medium: Color = (234, 179, 8)
    high: Color = (249, 115, 22)
    very_high: Color = (239, 68, 68)
    max: Color = (168, 85, 247)

    def __post_init__(self) -> None:
        for name in ("low", "medium", "high", "very_high", "max"):
            object.__setattr__(self, name, parse_color(getattr(self, name)))


@dataclass(frozen=True)
class SwarmConfig:
    movement: MovementConfig = field(default_factory=MovementConfig)
    thresholds: ContributionThresholds = field(default_factory=ContributionThresholds)
    colors: TierColors = field(default_factory=TierColors)
    emission_interval_ms: float = EMISSION_INTERVAL_MS
    default_icon: str = DEFAULT_ICON

    def __post_init__(self) -> None:
        if self.emission_interval_ms <= 0:
            raise ValueError(
                f"emission_interval_ms must be positive, got {self.emission_interval_ms}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SwarmConfig:
        """Build from a plain mapping such as a parsed JSON tuning file.

        Missing sections and keys keep their defaults.
        """
        kwargs: dict[str, Any] = {}
        if "movement" in data:
            kwargs["movement"] = MovementConfig(**data["movement"])
        if "thresholds" in data:
            kwargs["thresholds"] = ContributionThresholds(**data["thresholds"])
        if "colors" in data:
            kwargs["colors"] = TierColors(**data["colors"])
        for key in ("emission_interval_ms", "default_icon"):
            if key in data:
                kwargs[key] = data[key]
        return cls(**kwargs)
