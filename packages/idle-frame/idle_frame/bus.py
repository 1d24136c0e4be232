"""Frame-deferred signal bus: publish any time, deliver once at end of frame."""
from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable

logger = logging.getLogger(__name__)

Handler = Callable[[str, dict[str, Any]], None]

# Past this many queued signals the oldest are dropped.
DEFAULT_MAX_PENDING = 4096


class SignalBus:
    """Queues ``(name, payload)`` pairs until :meth:`flush`.

    Handlers run in subscription order. Anything published while a flush is
    delivering is held for the next flush, so one frame's signals never
    cascade within that frame.
    """

    def __init__(self, max_pending: int = DEFAULT_MAX_PENDING) -> None:
        if max_pending < 1:
            raise ValueError(f"max_pending must be >= 1, got {max_pending}")
        self._handlers: dict[str, list[Handler]] = {}
        self._pending: deque[tuple[str, dict[str, Any]]] = deque(maxlen=max_pending)
        self._dropped = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def dropped(self) -> int:
        """Signals discarded because the queue was full."""
        return self._dropped

    def subscribe(self, signal_name: str, handler: Handler) -> Callable[[], None]:
        """Register ``handler``; the returned callable unsubscribes it."""
        self._handlers.setdefault(signal_name, []).append(handler)
        return lambda: self.unsubscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._handlers.get(signal_name, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        if len(self._pending) == self._pending.maxlen:
            self._dropped += 1
            logger.warning("signal queue full, dropping oldest %r", self._pending[0][0])
        self._pending.append((signal_name, data))

    def flush(self) -> int:
        """Deliver everything queued before this call. Returns the handler call count."""
        batch = list(self._pending)
        self._pending.clear()
        delivered = 0
        for signal_name, data in batch:
            for handler in list(self._handlers.get(signal_name, ())):
                handler(signal_name, data)
                delivered += 1
        return delivered

    def clear(self) -> None:
        self._pending.clear()
