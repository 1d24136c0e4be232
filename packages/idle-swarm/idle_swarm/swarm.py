"""GeneratorSwarm - keeps the visual tokens in step with owned generators."""
from __future__ import annotations

from dataclasses import replace
from typing import Hashable, Mapping

from idle_frame.types import FloatingNumberEvent, RandomSource, Vec2
from idle_swarm.catalog import extract_icon, lookup_icon
from idle_swarm.components import GeneratorRecord, GeneratorVisual
from idle_swarm.config import SwarmConfig
from idle_swarm.emitter import collect_floating_numbers, commit_emissions
from idle_swarm.grouping import group_generators
from idle_swarm.motion import advance, spawn_individual, spawn_stacked, stacked_id


class GeneratorSwarm:
    """Owns the current tuple of visuals and replaces it wholesale each frame.

    Tokens that survive a :meth:`sync` keep their position, wave and emission
    timestamp; only their count, effect and icon are refreshed. New tokens are
    spawned from the injected random source, vanished ones are dropped.
    """

    def __init__(
        self,
        catalog: Mapping[str, str],
        rng: RandomSource,
        config: SwarmConfig | None = None,
    ) -> None:
        self._catalog = catalog
        self._rng = rng
        self._config = config if config is not None else SwarmConfig()
        self._visuals: tuple[GeneratorVisual, ...] = ()
        self._sync_key: Hashable = None

    @property
    def config(self) -> SwarmConfig:
        return self._config

    @property
    def visuals(self) -> tuple[GeneratorVisual, ...]:
        return self._visuals

    def __len__(self) -> int:
        return len(self._visuals)

    def sync(
        self,
        generators: Mapping[str, GeneratorRecord],
        current_level_id: str,
        blob_size: float,
        now_ms: float,
    ) -> bool:
        """Rebuild tokens from the generator records. Returns False if nothing changed.

        ``blob_size`` only bounds where new tokens spawn. The catalog is not
        part of the change check; call :meth:`invalidate` after editing it.
        """
        key = (
            current_level_id,
            tuple(
                (r.id, r.level, r.growth_per_tick, r.unlocked_at_level)
                for r in generators.values()
            ),
        )
        if key == self._sync_key:
            return False
        self._sync_key = key

        groups = group_generators(generators, current_level_id)
        existing = {v.id: v for v in self._visuals}
        cfg = self._config
        result: list[GeneratorVisual] = []

        for record in groups.current_level:
            kept = existing.get(record.id)
            if kept is None:
                result.extend(spawn_individual(
                    [record], blob_size, self._catalog, cfg, self._rng, now_ms,
                ))
                continue
            icon = lookup_icon(self._catalog, record.id, cfg.default_icon)
            if icon is None:
                continue
            result.append(replace(
                kept,
                icon=icon,
                count=record.level,
                total_effect=record.growth_per_tick * record.level,
            ))

        for level_id, records in groups.previous_levels.items():
            kept = existing.get(stacked_id(level_id))
            if kept is None:
                result.extend(spawn_stacked(
                    {level_id: records}, blob_size, self._catalog, cfg, self._rng, now_ms,
                ))
                continue
            result.append(replace(
                kept,
                icon=extract_icon(self._catalog.get(records[0].id), cfg.default_icon),
                count=sum(r.level for r in records),
                total_effect=sum(r.growth_per_tick * r.level for r in records),
            ))

        self._visuals = tuple(result)
        return True

    def step(
        self,
        t: float,
        dt: float,
        now_ms: float,
        total_output: float,
        blob_center: Vec2,
    ) -> list[FloatingNumberEvent]:
        """Move, check for callouts, then commit timestamps, in that order."""
        moved = advance(self._visuals, t, dt)
        events = collect_floating_numbers(moved, now_ms, total_output, blob_center, self._config)
        self._visuals = tuple(commit_emissions(moved, now_ms, self._config.emission_interval_ms))
        return events

    def invalidate(self) -> None:
        """Force the next :meth:`sync` to rebuild. Surviving tokens keep their motion."""
        self._sync_key = None

    def clear(self) -> None:
        self._visuals = ()
        self._sync_key = None
