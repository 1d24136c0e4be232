"""idle-swarm - Generator tokens orbiting the blob, with throttled output callouts."""
from __future__ import annotations

from idle_swarm import vec
from idle_swarm.catalog import DEFAULT_ICON, extract_icon, lookup_icon
from idle_swarm.colorize import ContributionTier, classify, contribution_ratio, tier_color
from idle_swarm.components import (
    GeneratorGroups,
    GeneratorRecord,
    GeneratorVisual,
    VisualKind,
    WaveProfile,
)
from idle_swarm.config import (
    EMISSION_INTERVAL_MS,
    ContributionThresholds,
    MovementConfig,
    SwarmConfig,
    TierColors,
)
from idle_swarm.emitter import collect_floating_numbers, commit_emissions, is_due
from idle_swarm.grouping import group_generators
from idle_swarm.motion import advance, advance_one, spawn_individual, spawn_stacked
from idle_swarm.swarm import GeneratorSwarm
from idle_swarm.systems import FLOATING_NUMBER_SIGNAL, make_swarm_system

__all__ = [
    "DEFAULT_ICON",
    "EMISSION_INTERVAL_MS",
    "FLOATING_NUMBER_SIGNAL",
    "ContributionThresholds",
    "ContributionTier",
    "GeneratorGroups",
    "GeneratorRecord",
    "GeneratorSwarm",
    "GeneratorVisual",
    "MovementConfig",
    "SwarmConfig",
    "TierColors",
    "VisualKind",
    "WaveProfile",
    "advance",
    "advance_one",
    "classify",
    "collect_floating_numbers",
    "commit_emissions",
    "contribution_ratio",
    "extract_icon",
    "group_generators",
    "is_due",
    "lookup_icon",
    "make_swarm_system",
    "spawn_individual",
    "spawn_stacked",
    "tier_color",
    "vec",
]
