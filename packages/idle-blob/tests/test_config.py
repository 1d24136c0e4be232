"""Tests for blob configuration validation."""

import pytest
from idle_blob import BlobAnimationConfig, BlobColors


def test_defaults():
    config = BlobAnimationConfig()
    assert config.contour_points == 64
    assert config.heat_decay < config.boost_decay
    assert 0 < config.max_deviation < 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"boost_decay": 0.0},
        {"heat_decay": -1.0},
        {"ripple_speed": -0.1},
        {"max_deviation": 1.0},
        {"max_deviation": 0.0},
        {"lobes": 2},
        {"points_per_lobe": 0},
        {"max_recent_clicks": 0},
        {"size_smoothing": 0.0},
        {"epsilon": float("nan")},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        BlobAnimationConfig(**kwargs)


def test_from_dict():
    config = BlobAnimationConfig.from_dict({"lobes": 6, "heat_decay": 0.5})
    assert config.lobes == 6
    assert config.heat_decay == 0.5
    assert config.contour_points == 48


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="wobble"):
        BlobAnimationConfig.from_dict({"wobble": 1})


def test_colors_accept_hex():
    colors = BlobColors.from_dict({"base": "#3b82f6", "hot": "#ef4444"})
    assert colors.base == (59, 130, 246)
    assert colors.hot == (239, 68, 68)
