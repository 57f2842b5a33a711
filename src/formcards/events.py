"""Listener registration for card-level events.

Listeners for an event are called in registration order. A listener that
raises stops delivery to later listeners; the error reaches whoever emitted.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

import structlog

log = structlog.get_logger()

Listener = Callable[[Any], None]


class EventEmitter:
    def __init__(self) -> None:
        self._listeners: defaultdict[str, list[Listener]] = defaultdict(list)

    def subscribe(self, event: str, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for ``event`` and return a function that removes it."""
        self._listeners[event].append(listener)
        return lambda: self.unsubscribe(event, listener)

    def unsubscribe(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: str, payload: Any = None) -> None:
        # Copy so listeners may unsubscribe themselves mid-delivery.
        listeners = list(self._listeners.get(event, []))
        log.debug("event_emitted", event_name=event, listener_count=len(listeners))
        for listener in listeners:
            listener(payload)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))
