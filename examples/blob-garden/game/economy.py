"""Toy economy feeding the demo: biomass, owned generators, player level."""
from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from idle_swarm import GeneratorRecord

CATALOG: dict[str, str] = {
    "amoeba": "🦠 Amoeba Culture",
    "worm": "🪱 Worm Pit",
    "mouse": "🐭 Mouse Nest",
    "cat": "🐈 Cat Colony",
    "tank": "🚜 Biomass Tank",
    "ship": "🚀 Spore Ship",
}

# (generator id, unlock level, growth per tick, base cost)
GENERATORS: list[tuple[str, str, float, float]] = [
    ("amoeba", "microscopic", 0.2, 10.0),
    ("worm", "microscopic", 1.0, 60.0),
    ("mouse", "small", 5.0, 400.0),
    ("cat", "small", 20.0, 2_500.0),
    ("tank", "industrial", 90.0, 15_000.0),
    ("ship", "industrial", 400.0, 90_000.0),
]

# (level id, biomass needed)
LEVELS: list[tuple[str, float]] = [
    ("microscopic", 0.0),
    ("small", 500.0),
    ("industrial", 20_000.0),
]

TICKS_PER_SECOND = 10
COST_GROWTH = 1.15


@dataclass
class Economy:
    biomass: float = 20.0
    level_index: int = 0
    generators: dict[str, GeneratorRecord] = field(default_factory=lambda: {
        gid: GeneratorRecord(gid, level=0, growth_per_tick=growth, unlocked_at_level=level)
        for gid, level, growth, _ in GENERATORS
    })

    @property
    def current_level_id(self) -> str:
        return LEVELS[self.level_index][0]

    def growth_per_tick(self) -> float:
        """Biomass per tick from all generators, the unit of token effects."""
        return sum(g.growth_per_tick * g.level for g in self.generators.values())

    def total_output(self) -> float:
        """Biomass per second, for display."""
        return self.growth_per_tick() * TICKS_PER_SECOND

    def unlocked(self) -> list[str]:
        open_levels = {lid for lid, _ in LEVELS[: self.level_index + 1]}
        return [gid for gid, level, _, _ in GENERATORS if level in open_levels]

    def cost(self, gid: str) -> float:
        base = next(c for g, _, _, c in GENERATORS if g == gid)
        return base * COST_GROWTH ** self.generators[gid].level

    def buy(self, gid: str) -> bool:
        if gid not in self.unlocked():
            return False
        price = self.cost(gid)
        if self.biomass < price:
            return False
        self.biomass -= price
        record = self.generators[gid]
        self.generators[gid] = replace(record, level=record.level + 1)
        return True

    def click(self, power: float) -> None:
        self.biomass += power

    def update(self, dt: float) -> None:
        self.biomass += self.total_output() * dt
        while (
            self.level_index + 1 < len(LEVELS)
            and self.biomass >= LEVELS[self.level_index + 1][1]
        ):
            self.level_index += 1

    def blob_size(self) -> float:
        return 160.0 + 40.0 * math.log10(1.0 + self.biomass)
