"""Fire-and-forget event delivery to optional listeners."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, List

from .events import EngineEvent

logger = logging.getLogger(__name__)

# Maximum number of events retained in :attr:`EventBus.recent`.
MAX_RECENT_EVENTS = 20

Listener = Callable[[EngineEvent], None]


class EventBus:
    """Deliver engine events to subscribed listeners.

    Delivery is synchronous and unacknowledged. With no listeners events are
    only kept in the bounded :attr:`recent` history. A listener that raises is
    logged and the remaining listeners still receive the event.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []
        self.recent: Deque[EngineEvent] = deque(maxlen=MAX_RECENT_EVENTS)

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: EngineEvent) -> None:
        self.recent.append(event)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(
                    "Listener %r failed handling %s: %s",
                    listener,
                    type(event).__name__,
                    e,
                    exc_info=True,
                )

    def clear(self) -> None:
        self.recent.clear()

    def __len__(self) -> int:
        return len(self._listeners)


__all__ = ["EventBus", "Listener", "MAX_RECENT_EVENTS"]
