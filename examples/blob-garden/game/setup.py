"""Build the complete demo state."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from idle_blob import Blob, BlobAnimationConfig, BlobColors, make_blob_system
from idle_frame import FloatingNumberEvent, FrameLoop, SignalBus, make_signal_system, to_hex
from idle_swarm import FLOATING_NUMBER_SIGNAL, GeneratorSwarm, SwarmConfig, make_swarm_system

from game.callouts import Callout
from game.economy import CATALOG, Economy

logger = logging.getLogger(__name__)


@dataclass
class GardenState:
    """Holds the frame loop and everything it drives, plus pointer and pause handling."""

    loop: FrameLoop
    bus: SignalBus
    economy: Economy
    swarm: GeneratorSwarm
    blob: Blob
    callouts: list[Callout] = field(default_factory=list)
    paused: bool = False

    def land_click(self, event: FloatingNumberEvent | None, now_ms: float) -> None:
        if event is None:
            return
        self.economy.click(event.value)
        self.callouts.append(Callout(event=event, born_ms=now_ms))

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        if self.paused:
            self.blob.cancel_press()
        else:
            self.loop.pause()

    def pointer_down(self, x: float, y: float) -> None:
        if not self.paused and self.blob.contains(x, y):
            self.blob.click_down()

    def pointer_up(self, x: float, y: float, now_ms: float) -> None:
        if self.paused or not self.blob.state.pressed:
            return
        if self.blob.contains(x, y):
            self.land_click(self.blob.click_up(x, y, now_ms), now_ms)
        else:
            self.blob.cancel_press()

    def key_click(self, now_ms: float) -> None:
        if not self.paused:
            self.land_click(self.blob.key_click(now_ms), now_ms)


def load_config(path: Path | None) -> tuple[SwarmConfig, BlobAnimationConfig, BlobColors]:
    if path is None:
        return SwarmConfig(), BlobAnimationConfig(), BlobColors()
    data = json.loads(path.read_text(encoding="utf-8"))
    swarm_config = SwarmConfig.from_dict(data.get("swarm", {}))
    blob_config = BlobAnimationConfig.from_dict(data.get("blob", {}))
    blob_colors = BlobColors.from_dict(data.get("blob_colors", {}))
    logger.info(
        "loaded tuning from %s (blob %s, hot %s)",
        path, to_hex(blob_colors.base), to_hex(blob_colors.hot),
    )
    return swarm_config, blob_config, blob_colors


def build_garden(
    seed: int = 42,
    fps: int = 60,
    center: tuple[float, float] = (400.0, 320.0),
    config_path: Path | None = None,
) -> GardenState:
    """Wire up the loop, swarm, blob, and bus, and return GardenState."""
    swarm_config, blob_config, blob_colors = load_config(config_path)

    loop = FrameLoop(seed=seed, fps=fps)
    bus = SignalBus()
    economy = Economy()
    swarm = GeneratorSwarm(CATALOG, loop.random, swarm_config)
    blob = Blob(
        loop.random,
        size=economy.blob_size(),
        center=center,
        config=blob_config,
        colors=blob_colors,
    )
    state = GardenState(loop=loop, bus=bus, economy=economy, swarm=swarm, blob=blob)

    def on_floating_number(signal: str, data: dict) -> None:
        event: FloatingNumberEvent = data["event"]
        state.callouts.append(Callout(event=event, born_ms=loop.clock.now_ms))

    bus.subscribe(FLOATING_NUMBER_SIGNAL, on_floating_number)

    def economy_system(ctx) -> None:
        economy.update(ctx.dt)
        blob.resize(economy.blob_size())

    # Systems (order matters!)
    loop.add_system(economy_system)                                        # 1
    loop.add_system(make_swarm_system(                                     # 2
        swarm,
        total_output=economy.growth_per_tick,
        blob_center=lambda: blob.center,
        source=lambda: (economy.generators, economy.current_level_id, blob.visual_size),
        bus=bus,
    ))
    loop.add_system(make_blob_system(blob))                                # 3
    loop.add_system(make_signal_system(bus))                               # 4

    return state
