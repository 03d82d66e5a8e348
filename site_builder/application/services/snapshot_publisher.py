"""In-process broadcaster that hands new store snapshots to subscribers."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]


class SnapshotPublisher:
    """Keeps a list of listeners and calls each one after a store mutation.

    Listeners receive ``(topic, snapshot)`` — e.g. ``("content:barbershop",
    ContentRecord(...))``. Everything runs synchronously on the caller's
    thread; a failing listener is logged and does not undo the mutation.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, topic: str, snapshot: Any) -> None:
        for listener in list(self._listeners):
            try:
                listener(topic, snapshot)
            except Exception:
                logger.exception("Snapshot listener failed for topic '%s'", topic)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
