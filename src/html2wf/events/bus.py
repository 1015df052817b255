"""Synchronous event bus carrying conversion progress."""

from __future__ import annotations

from typing import Any, Callable

from html2wf.events.types import ProgressUpdated

ProgressCallback = Callable[[str, int], None]


class EventBus:
    """Publish-subscribe bus; listeners run synchronously in registration order.

    ``on_all`` listeners see every event before type-specific ones do.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable[[Any], None]]] = {}
        self._global_listeners: list[Callable[[Any], None]] = []

    def subscribe(self, event_type: type, callback: Callable[[Any], None]) -> None:
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: type, callback: Callable[[Any], None]) -> None:
        """Remove a previously subscribed callback; unknown callbacks are ignored."""
        listeners = self._listeners.get(event_type, [])
        if callback in listeners:
            listeners.remove(callback)

    def on_all(self, callback: Callable[[Any], None]) -> None:
        self._global_listeners.append(callback)

    def on_progress(self, callback: ProgressCallback) -> Callable[[Any], None]:
        """Call ``callback(status, progress)`` for every ProgressUpdated event.

        Returns the registered listener so it can be passed to :meth:`unsubscribe`.
        """

        def listener(event: ProgressUpdated) -> None:
            callback(event.status, event.progress)

        self.subscribe(ProgressUpdated, listener)
        return listener

    def emit(self, event: Any) -> None:
        for cb in self._global_listeners:
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
