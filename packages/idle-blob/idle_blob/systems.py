"""System factory ticking a Blob from the frame loop."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from idle_blob.blob import Blob

if TYPE_CHECKING:
    from idle_frame import FrameContext, SignalBus

BLOB_ANIMATION_SIGNAL = "blob_animation"


def make_blob_system(
    blob: Blob,
    bus: SignalBus | None = None,
) -> Callable[[FrameContext], None]:
    """Return a system that ticks ``blob`` and optionally reports its boost and pressure."""

    def blob_system(ctx: FrameContext) -> None:
        blob.tick(ctx.dt, ctx.now_ms)
        if bus is not None:
            bus.publish(
                BLOB_ANIMATION_SIGNAL,
                click_boost=blob.state.click_boost,
                pressure=blob.state.pressure,
            )

    return blob_system
