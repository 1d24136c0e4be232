"""System factory for end-of-frame signal dispatch."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from idle_frame.bus import SignalBus

if TYPE_CHECKING:
    from idle_frame.types import FrameContext

logger = logging.getLogger(__name__)


def make_signal_system(bus: SignalBus) -> Callable[[FrameContext], None]:
    """Flush ``bus`` once per frame. Add it after every system that publishes."""

    def signal_system(ctx: FrameContext) -> None:
        delivered = bus.flush()
        if delivered:
            logger.debug("frame %d: %d signal deliveries", ctx.frame_number, delivered)

    return signal_system
