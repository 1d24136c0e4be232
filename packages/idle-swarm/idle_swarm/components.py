"""Generator records and their on-screen visual entities."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field

from idle_frame.types import Vec2


@dataclass(frozen=True)
class GeneratorRecord:
    """Read-only view of one owned generator, as the game economy reports it."""

    id: str
    level: int
    growth_per_tick: float
    unlocked_at_level: str


class VisualKind(enum.Enum):
    INDIVIDUAL = "individual"
    STACKED = "stacked"


@dataclass(frozen=True)
class WaveProfile:
    """Per-entity wave parameters, drawn once at spawn and never redrawn."""

    phase_offset: float
    frequency_hz: float
    amplitude_px: float
    speed_multiplier: float


@dataclass(frozen=True)
class GeneratorVisual:
    """One animated token orbiting the blob.

    Attributes:
        id: Generator id, or ``"stacked-<level>"`` for a stacked token.
        kind: Individual (current level) or stacked (an earlier level).
        icon: Leading glyph of the catalog name.
        position: Offset from the blob center, in px.
        velocity: Constant drift, in px/s.
        count: Generator units represented (sum of levels when stacked).
        total_effect: Output per tick represented by the token.
        level_id: Unlock level of the token's generators.
        last_emission_ms: Time of the last floating number; spawn time at first.
        wave: Wave profile driving the orbit.
    """

    id: str
    kind: VisualKind
    icon: str
    position: Vec2
    velocity: Vec2
    count: int
    total_effect: float
    level_id: str
    last_emission_ms: float
    wave: WaveProfile


@dataclass(frozen=True)
class GeneratorGroups:
    """Result of partitioning generators by unlock level."""

    current_level: tuple[GeneratorRecord, ...] = ()
    previous_levels: dict[str, tuple[GeneratorRecord, ...]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.current_level) + sum(len(g) for g in self.previous_levels.values())
