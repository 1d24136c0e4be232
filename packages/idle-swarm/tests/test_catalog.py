"""Tests for icon extraction and catalog lookups."""

import logging

from idle_swarm import DEFAULT_ICON, extract_icon, lookup_icon


def test_extract_first_token():
    assert extract_icon("🦠 Bacteria Colony") == "🦠"
    assert extract_icon("  🐭   Mouse") == "🐭"


def test_extract_falls_back():
    assert extract_icon("") == DEFAULT_ICON
    assert extract_icon("   ") == DEFAULT_ICON
    assert extract_icon(None) == DEFAULT_ICON
    assert extract_icon(None, default="?") == "?"


def test_lookup_hit():
    assert lookup_icon({"tank": "🚜 Tank"}, "tank") == "🚜"


def test_lookup_miss_returns_none_and_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="idle_swarm.catalog"):
        assert lookup_icon({}, "ghost") is None
    assert "ghost" in caplog.text
