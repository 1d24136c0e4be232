"""Contribution tiers: how much of total output a token accounts for."""
from __future__ import annotations

import enum
import math

from idle_frame.types import Color
from idle_swarm.config import ContributionThresholds, TierColors


class ContributionTier(enum.IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2
    VERY_HIGH = 3
    MAX = 4


def contribution_ratio(total_effect: float, total_output: float) -> float:
    """Share of output, or 0.0 when there is no meaningful total to divide by."""
    if not math.isfinite(total_output) or total_output <= 0:
        return 0.0
    ratio = total_effect / total_output
    if not math.isfinite(ratio):
        return 0.0
    return ratio


def classify(ratio: float, thresholds: ContributionThresholds) -> ContributionTier:
    # Highest first, so a ratio sitting on a threshold takes the upper tier.
    if ratio >= thresholds.very_high:
        return ContributionTier.MAX
    if ratio >= thresholds.high:
        return ContributionTier.VERY_HIGH
    if ratio >= thresholds.medium:
        return ContributionTier.HIGH
    if ratio >= thresholds.low:
        return ContributionTier.MEDIUM
    return ContributionTier.LOW


def tier_color(tier: ContributionTier, colors: TierColors) -> Color:
    return {
        ContributionTier.LOW: colors.low,
        ContributionTier.MEDIUM: colors.medium,
        ContributionTier.HIGH: colors.high,
        ContributionTier.VERY_HIGH: colors.very_high,
        ContributionTier.MAX: colors.max,
    }[tier]
