"""Tests for GeneratorSwarm syncing and stepping."""

import random

import pytest
from idle_swarm import GeneratorRecord, GeneratorSwarm, VisualKind

CATALOG = {
    "bacteria": "🦠 Bacteria Colony",
    "mouse": "🐭 Mouse Farm",
    "tank": "🚜 Tank",
}


def _record(gid, level, growth=1.0, unlocked="L1"):
    return GeneratorRecord(id=gid, level=level, growth_per_tick=growth, unlocked_at_level=unlocked)


def _swarm(seed=42):
    return GeneratorSwarm(CATALOG, random.Random(seed))


def test_sync_builds_individual_then_stacked():
    swarm = _swarm()
    gens = {
        "bacteria": _record("bacteria", 3, unlocked="L1"),
        "mouse": _record("mouse", 1, unlocked="L2"),
        "tank": _record("tank", 2, unlocked="L2"),
    }
    assert swarm.sync(gens, "L2", 400.0, now_ms=0.0)

    assert [v.id for v in swarm.visuals] == ["mouse", "tank", "stacked-L1"]
    assert [v.kind for v in swarm.visuals] == [
        VisualKind.INDIVIDUAL, VisualKind.INDIVIDUAL, VisualKind.STACKED,
    ]
    assert len(swarm) == 3


def test_sync_without_changes_is_noop():
    swarm = _swarm()
    gens = {"mouse": _record("mouse", 1, unlocked="L2")}
    swarm.sync(gens, "L2", 400.0, 0.0)
    before = swarm.visuals
    assert not swarm.sync(dict(gens), "L2", 400.0, 500.0)
    assert swarm.visuals is before


def test_level_up_keeps_motion_and_refreshes_totals():
    swarm = _swarm()
    swarm.sync({"mouse": _record("mouse", 1, growth=2.0, unlocked="L2")}, "L2", 400.0, 0.0)
    old = swarm.visuals[0]

    swarm.sync({"mouse": _record("mouse", 4, growth=2.0, unlocked="L2")}, "L2", 400.0, 800.0)
    new = swarm.visuals[0]

    assert new.count == 4
    assert new.total_effect == pytest.approx(8.0)
    assert new.position == old.position
    assert new.wave == old.wave
    assert new.last_emission_ms == 0.0


def test_advancing_player_level_stacks_old_generators():
    swarm = _swarm()
    gens = {
        "bacteria": _record("bacteria", 3, growth=1.0, unlocked="L1"),
        "mouse": _record("mouse", 2, growth=2.0, unlocked="L1"),
    }
    swarm.sync(gens, "L1", 400.0, 0.0)
    assert {v.id for v in swarm.visuals} == {"bacteria", "mouse"}

    swarm.sync(gens, "L2", 400.0, 100.0)
    assert [v.id for v in swarm.visuals] == ["stacked-L1"]
    stacked = swarm.visuals[0]
    assert stacked.count == 5
    assert stacked.total_effect == pytest.approx(7.0)
    assert stacked.last_emission_ms == 100.0


def test_sold_generators_disappear():
    swarm = _swarm()
    swarm.sync({"mouse": _record("mouse", 2, unlocked="L2")}, "L2", 400.0, 0.0)
    swarm.sync({"mouse": _record("mouse", 0, unlocked="L2")}, "L2", 400.0, 10.0)
    assert swarm.visuals == ()


def test_step_orders_move_emit_commit():
    swarm = _swarm()
    swarm.sync({"mouse": _record("mouse", 2, growth=1.5, unlocked="L2")}, "L2", 400.0, 0.0)
    start = swarm.visuals[0]

    assert swarm.step(t=0.5, dt=0.5, now_ms=500.0, total_output=3.0, blob_center=(0.0, 0.0)) == []
    events = swarm.step(t=1.0, dt=0.5, now_ms=1000.0, total_output=3.0, blob_center=(100.0, 100.0))

    assert len(events) == 1
    moved = swarm.visuals[0]
    assert moved.position != start.position
    # The callout is placed where the token is after this frame's move.
    assert (events[0].x, events[0].y) == pytest.approx((100.0 + moved.position[0], 100.0 + moved.position[1]))
    assert events[0].value == pytest.approx(3.0)
    assert moved.last_emission_ms == 1000.0

    assert swarm.step(1.5, 0.5, 1500.0, 3.0, (0.0, 0.0)) == []


def test_same_seed_same_swarm():
    gens = {
        "bacteria": _record("bacteria", 3, unlocked="L1"),
        "mouse": _record("mouse", 1, unlocked="L2"),
    }
    a, b = _swarm(7), _swarm(7)
    a.sync(gens, "L2", 400.0, 0.0)
    b.sync(gens, "L2", 400.0, 0.0)
    assert a.visuals == b.visuals


def test_clear():
    swarm = _swarm()
    swarm.sync({"mouse": _record("mouse", 1, unlocked="L2")}, "L2", 400.0, 0.0)
    swarm.clear()
    assert swarm.visuals == ()
    assert swarm.sync({"mouse": _record("mouse", 1, unlocked="L2")}, "L2", 400.0, 0.0)


def test_invalidate_picks_up_catalog_additions():
    catalog = {"mouse": "🐭 Mouse Farm"}
    swarm = GeneratorSwarm(catalog, random.Random(3))
    gens = {
        "mouse": _record("mouse", 1, unlocked="L2"),
        "cat": _record("cat", 2, unlocked="L2"),
    }
    swarm.sync(gens, "L2", 400.0, 0.0)
    assert [v.id for v in swarm.visuals] == ["mouse"]
    mouse = swarm.visuals[0]

    catalog["cat"] = "🐈 Cat Colony"
    assert not swarm.sync(gens, "L2", 400.0, 100.0)

    swarm.invalidate()
    assert swarm.sync(gens, "L2", 400.0, 200.0)
    assert [v.id for v in swarm.visuals] == ["mouse", "cat"]
    assert swarm.visuals[0].position == mouse.position
    assert swarm.visuals[0].wave == mouse.wave
    assert swarm.visuals[1].icon == "🐈"
