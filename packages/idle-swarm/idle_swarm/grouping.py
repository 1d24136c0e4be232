"""Partition owned generators into individual and stacked groups."""
from __future__ import annotations

from typing import Mapping

from idle_swarm.components import GeneratorGroups, GeneratorRecord


def group_generators(
    generators: Mapping[str, GeneratorRecord], current_level_id: str,
) -> GeneratorGroups:
    """Split generators by unlock level.

    Generators unlocked at ``current_level_id`` stay individual; every other
    unlock level becomes one bucket, in first-encounter order. Generators at
    level 0 are not owned and are left out.
    """
    current: list[GeneratorRecord] = []
    previous: dict[str, list[GeneratorRecord]] = {}

    for record in generators.values():
        if record.level <= 0:
            continue
        if record.unlocked_at_level == current_level_id:
            current.append(record)
        else:
            previous.setdefault(record.unlocked_at_level, []).append(record)

    return GeneratorGroups(
        current_level=tuple(current),
        previous_levels={level: tuple(records) for level, records in previous.items()},
    )
