"""Throttled floating-number callouts for generator visuals.

Checking and committing are separate steps. ``collect_floating_numbers``
only reads; ``commit_emissions`` stamps the entities that fired. Within a
frame, call them in that order with the same ``now_ms``.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from idle_frame.types import FloatingNumberEvent, Vec2
from idle_swarm.colorize import classify, contribution_ratio, tier_color
from idle_swarm.components import GeneratorVisual
from idle_swarm.config import EMISSION_INTERVAL_MS, SwarmConfig


def is_due(visual: GeneratorVisual, now_ms: float, interval_ms: float = EMISSION_INTERVAL_MS) -> bool:
    return now_ms - visual.last_emission_ms >= interval_ms


def collect_floating_numbers(
    visuals: Iterable[GeneratorVisual],
    now_ms: float,
    total_output: float,
    blob_center: Vec2,
    config: SwarmConfig,
) -> list[FloatingNumberEvent]:
    events: list[FloatingNumberEvent] = []

    for visual in visuals:
        if not is_due(visual, now_ms, config.emission_interval_ms):
            continue
        ratio = contribution_ratio(visual.total_effect, total_output)
        color = tier_color(classify(ratio, config.thresholds), config.colors)
        events.append(FloatingNumberEvent(
            x=blob_center[0] + visual.position[0],
            y=blob_center[1] + visual.position[1],
            value=visual.total_effect,
            color=color,
            icon=visual.icon,
        ))

    return events


def commit_emissions(
    visuals: Sequence[GeneratorVisual],
    now_ms: float,
    interval_ms: float = EMISSION_INTERVAL_MS,
) -> list[GeneratorVisual]:
    return [
        replace(v, last_emission_ms=now_ms) if is_due(v, now_ms, interval_ms) else v
        for v in visuals
    ]
