"""Spawning and per-frame wave motion for generator visuals."""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable, Mapping, Sequence

from idle_frame.types import RandomSource, Vec2
from idle_swarm import vec
from idle_swarm.catalog import extract_icon, lookup_icon
from idle_swarm.components import GeneratorRecord, GeneratorVisual, VisualKind, WaveProfile
from idle_swarm.config import SwarmConfig

TAU = 2 * math.pi

# Fraction of the blob's size used as its drawn radius.
BLOB_RADIUS_FACTOR = 0.35

# Y wave runs at 0.7x the frequency and 0.8x the amplitude of X.
WAVE_Y_FREQUENCY_RATIO = 0.7
WAVE_Y_AMPLITUDE_RATIO = 0.8


def available_radius(blob_size: float, config: SwarmConfig) -> float:
    return blob_size * BLOB_RADIUS_FACTOR - config.movement.padding


def _spawn_motion(
    rng: RandomSource, radius: float, speed: float,
) -> tuple[Vec2, Vec2, WaveProfile]:
    # Distance is uniform in r, not in area: tokens bunch toward the center.
    angle = rng.random() * TAU
    distance = rng.random() * radius
    position = vec.from_polar(angle, distance)

    velocity = vec.from_polar(rng.random() * TAU, speed)

    wave = WaveProfile(
        phase_offset=rng.random() * TAU,
        frequency_hz=1.0 + rng.random() * 2.0,
        amplitude_px=50.0 + rng.random() * 150.0,
        speed_multiplier=0.5 + rng.random() * 1.5,
    )
    return position, velocity, wave


def spawn_individual(
    records: Iterable[GeneratorRecord],
    blob_size: float,
    catalog: Mapping[str, str],
    config: SwarmConfig,
    rng: RandomSource,
    now_ms: float,
) -> list[GeneratorVisual]:
    """One visual per current-level generator. Generators unknown to the catalog are skipped."""
    radius = available_radius(blob_size, config)
    visuals: list[GeneratorVisual] = []

    for record in records:
        icon = lookup_icon(catalog, record.id, config.default_icon)
        if icon is None:
            continue
        position, velocity, wave = _spawn_motion(rng, radius, config.movement.speed)
        visuals.append(GeneratorVisual(
            id=record.id,
            kind=VisualKind.INDIVIDUAL,
            icon=icon,
            position=position,
            velocity=velocity,
            count=record.level,
            total_effect=record.growth_per_tick * record.level,
            level_id=record.unlocked_at_level,
            last_emission_ms=now_ms,
            wave=wave,
        ))

    return visuals


def stacked_id(level_id: str) -> str:
    return f"stacked-{level_id}"


def spawn_stacked(
    previous_levels: Mapping[str, Sequence[GeneratorRecord]],
    blob_size: float,
    catalog: Mapping[str, str],
    config: SwarmConfig,
    rng: RandomSource,
    now_ms: float,
) -> list[GeneratorVisual]:
    """One visual per earlier unlock level, aggregating all of its generators."""
    radius = available_radius(blob_size, config)
    visuals: list[GeneratorVisual] = []

    for level_id, records in previous_levels.items():
        if not records:
            continue

        total_count = sum(r.level for r in records)
        total_effect = sum(r.growth_per_tick * r.level for r in records)
        icon = extract_icon(catalog.get(records[0].id), config.default_icon)

        position, velocity, wave = _spawn_motion(rng, radius, config.movement.speed)
        visuals.append(GeneratorVisual(
            id=stacked_id(level_id),
            kind=VisualKind.STACKED,
            icon=icon,
            position=position,
            velocity=velocity,
            count=total_count,
            total_effect=total_effect,
            level_id=level_id,
            last_emission_ms=now_ms,
            wave=wave,
        ))

    return visuals


def wave_offset(wave: WaveProfile, t: float) -> Vec2:
    """Wave displacement rate at time ``t`` seconds."""
    wave_time = t * wave.frequency_hz + wave.phase_offset
    wave_x = math.sin(wave_time) * wave.amplitude_px
    wave_y = math.cos(wave_time * WAVE_Y_FREQUENCY_RATIO) * wave.amplitude_px * WAVE_Y_AMPLITUDE_RATIO
    return (wave_x, wave_y)


def advance_one(visual: GeneratorVisual, t: float, dt: float) -> GeneratorVisual:
    rate = vec.add(visual.velocity, wave_offset(visual.wave, t))
    return replace(visual, position=vec.add(visual.position, vec.scale(rate, dt)))


def advance(visuals: Iterable[GeneratorVisual], t: float, dt: float) -> list[GeneratorVisual]:
    """Move every visual by one frame. No bounds: tokens may drift anywhere."""
    return [advance_one(v, t, dt) for v in visuals]
