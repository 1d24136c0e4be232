"""System factory driving a GeneratorSwarm from the frame loop."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Mapping

from idle_swarm.swarm import GeneratorSwarm

if TYPE_CHECKING:
    from idle_frame import FloatingNumberEvent, FrameContext, SignalBus, Vec2
    from idle_swarm.components import GeneratorRecord

FLOATING_NUMBER_SIGNAL = "floating_number"

GeneratorSource = Callable[[], "tuple[Mapping[str, GeneratorRecord], str, float]"]


def make_swarm_system(
    swarm: GeneratorSwarm,
    total_output: Callable[[], float],
    blob_center: Callable[[], Vec2],
    source: GeneratorSource | None = None,
    bus: SignalBus | None = None,
    on_emit: Callable[[FrameContext, list[FloatingNumberEvent]], None] | None = None,
) -> Callable[[FrameContext], None]:
    """Return a system that syncs, moves and emits for ``swarm`` every frame.

    ``source`` returns ``(generators, current_level_id, blob_size)``; when given
    the swarm is re-synced each frame (a no-op unless something changed).
    Emitted events go to ``bus`` as ``"floating_number"`` signals and/or to
    ``on_emit``.
    """

    def swarm_system(ctx: FrameContext) -> None:
        if source is not None:
            generators, level_id, blob_size = source()
            swarm.sync(generators, level_id, blob_size, ctx.now_ms)

        events = swarm.step(ctx.seconds, ctx.dt, ctx.now_ms, total_output(), blob_center())
        if not events:
            return
        if bus is not None:
            for event in events:
                bus.publish(FLOATING_NUMBER_SIGNAL, event=event)
        if on_emit is not None:
            on_emit(ctx, events)

    return swarm_system
