"""Tests for the demo economy and how it feeds the swarm."""

import random

from idle_swarm import GeneratorSwarm, SwarmConfig

from game.economy import CATALOG, TICKS_PER_SECOND, Economy


def test_buy_spends_biomass_and_levels_generator():
    eco = Economy(biomass=100.0)
    assert eco.buy("amoeba")
    assert eco.generators["amoeba"].level == 1
    assert eco.biomass == 90.0


def test_buy_rejects_locked_or_unaffordable():
    eco = Economy(biomass=5.0)
    assert not eco.buy("amoeba")
    assert not eco.buy("ship")
    assert eco.biomass == 5.0


def test_per_second_output_is_per_tick_times_rate():
    eco = Economy(biomass=100.0)
    eco.buy("amoeba")
    eco.buy("worm")
    assert eco.growth_per_tick() == 0.2 + 1.0
    assert eco.total_output() == eco.growth_per_tick() * TICKS_PER_SECOND


def test_sole_generator_gets_top_contribution_color():
    eco = Economy()
    assert eco.buy("amoeba")
    swarm = GeneratorSwarm(CATALOG, random.Random(1))
    swarm.sync(eco.generators, eco.current_level_id, eco.blob_size(), now_ms=0.0)

    events = swarm.step(1.0, 1 / 60, 1000.0, eco.growth_per_tick(), (0.0, 0.0))

    assert len(events) == 1
    assert events[0].value == 0.2
    assert events[0].color == SwarmConfig().colors.max


def test_level_advances_with_biomass():
    eco = Economy(biomass=499.0)
    eco.update(0.0)
    assert eco.current_level_id == "microscopic"
    eco.click(1.0)
    eco.update(0.0)
    assert eco.current_level_id == "small"
    assert "mouse" in eco.unlocked()
