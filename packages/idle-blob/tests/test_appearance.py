"""Tests for heat colors, glow, and clicks-per-minute feedback."""

import pytest
from idle_blob import (
    CPM_COLORS,
    BlobAnimationState,
    BlobColors,
    blob_appearance,
    clicks_per_minute,
    cpm_color,
    heat_color,
)

BASE = (0, 100, 200)
HOT = (255, 0, 0)


def test_heat_color_blends():
    assert heat_color(BASE, 0.0, HOT) == BASE
    assert heat_color(BASE, 1.0, HOT) == HOT
    assert heat_color(BASE, 0.5, HOT) == (128, 50, 100)


def test_heat_color_saturates_at_peak():
    assert heat_color(BASE, 5.0, HOT) == HOT
    assert heat_color(BASE, 2.0, HOT, peak=4.0) == heat_color(BASE, 0.5, HOT)


def test_appearance_cold():
    colors = BlobColors()
    look = blob_appearance(BlobAnimationState(), colors)
    assert look.fill == colors.base
    assert look.stroke == colors.stroke
    assert look.glow_deviation == 4.0
    assert look.gradient_intensity == pytest.approx(0.9)
    assert look.scale == 1.0


def test_appearance_hot():
    colors = BlobColors(base="#000000", stroke="#000000", hot="#ffffff")
    look = blob_appearance(BlobAnimationState(click_heat=1.0), colors)
    assert look.fill == (255, 255, 255)
    # stroke heats to 70%
    assert look.stroke == (178, 178, 178)
    assert look.glow_deviation == pytest.approx(14.0)
    assert look.gradient_intensity == pytest.approx(2.9)


def test_appearance_disabled_shrinks():
    look = blob_appearance(BlobAnimationState(), BlobColors(), disabled=True)
    assert look.scale == 0.9


def test_clicks_per_minute_counts_window():
    stamps = [0.0, 10_000.0, 50_000.0, 59_000.0]
    assert clicks_per_minute(stamps, 60_000.0) == 3.0
    assert clicks_per_minute(stamps, 60_000.0, window_ms=30_000.0) == 4.0
    assert clicks_per_minute([], 1000.0) == 0.0


@pytest.mark.parametrize(
    "cpm,index",
    [(0, 0), (9.9, 0), (10, 1), (29, 1), (30, 2), (59, 2), (60, 3), (99, 3), (100, 4), (1e6, 4)],
)
def test_cpm_color_tiers(cpm, index):
    assert cpm_color(cpm) == CPM_COLORS[index][1]
