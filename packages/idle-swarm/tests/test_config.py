"""Tests for swarm configuration validation and loading."""

import pytest
from idle_swarm import (
    DEFAULT_ICON,
    EMISSION_INTERVAL_MS,
    ContributionThresholds,
    MovementConfig,
    SwarmConfig,
    TierColors,
)


def test_defaults_are_valid():
    config = SwarmConfig()
    assert config.movement.speed == 5.0
    assert config.emission_interval_ms == 1000.0
    assert config.default_icon == "⚪"


@pytest.mark.parametrize(
    "values",
    [
        (0.1, 0.1, 0.3, 0.5),
        (0.5, 0.3, 0.2, 0.1),
        (0.0, 0.1, 0.2, float("nan")),
    ],
)
def test_thresholds_must_ascend(values):
    with pytest.raises(ValueError):
        ContributionThresholds(*values)


def test_movement_rejects_negative_values():
    with pytest.raises(ValueError):
        MovementConfig(speed=-1.0)
    with pytest.raises(ValueError):
        MovementConfig(padding=-5.0)


def test_tier_colors_accept_hex():
    colors = TierColors(low="#22c55e")
    assert colors.low == (34, 197, 94)


def test_tier_colors_reject_garbage():
    with pytest.raises(ValueError):
        TierColors(max="purple")


def test_from_dict_partial():
    config = SwarmConfig.from_dict({
        "movement": {"speed": 8.0},
        "thresholds": {"low": 0.01, "medium": 0.02, "high": 0.04, "very_high": 0.08},
        "colors": {"max": "#a855f7"},
        "emission_interval_ms": 500,
    })
    assert config.movement.speed == 8.0
    assert config.movement.padding == 20.0
    assert config.thresholds.very_high == 0.08
    assert config.colors.max == (168, 85, 247)
    assert config.colors.low == TierColors().low
    assert config.emission_interval_ms == 500


def test_from_dict_empty_is_default():
    assert SwarmConfig.from_dict({}) == SwarmConfig()


def test_defaults_share_module_constants():
    config = SwarmConfig()
    assert config.emission_interval_ms == EMISSION_INTERVAL_MS
    assert config.default_icon == DEFAULT_ICON
