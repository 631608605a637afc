"""Domain event dispatch."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, Iterable, Mapping

logger = logging.getLogger(__name__)

EventPayload = Mapping[str, Any]
EventListener = Callable[[EventPayload], None]


class EventBus:
    """Synchronous pub-sub; listeners run after the inventory commits a change.

    A failing listener is logged and skipped. It cannot undo or fail the
    operation that published the event.
    """

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, list[EventListener]] = defaultdict(list)

    def subscribe(self, event_name: str, listener: EventListener) -> None:
        self._listeners[event_name].append(listener)

    def unsubscribe(self, event_name: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event_name)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def publish(self, event_name: str, payload: EventPayload) -> None:
        for listener in list(self._listeners.get(event_name, ())):
            try:
                listener(payload)
            except Exception:
                logger.exception("Listener %r failed for event %s", listener, event_name)

    def clear(self) -> None:
        self._listeners.clear()

    def listeners(self, event_name: str) -> Iterable[EventListener]:
        return tuple(self._listeners.get(event_name, ()))
