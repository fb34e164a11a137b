"""Typed publish/subscribe channel for item-collection changes.

Owned by a repository and injected into it, so subscribers are never held
in module-level state.
"""

from __future__ import annotations

from collections.abc import Callable

from sis.domain.model.inventory import InventoryItem

ItemsListener = Callable[[list[InventoryItem]], None]
Unsubscribe = Callable[[], None]


class ChangeNotifier:

    def __init__(self) -> None:
        self._listeners: list[ItemsListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ItemsListener, snapshot: list[InventoryItem]) -> Unsubscribe:
        """Register ``listener`` and call it once with ``snapshot``.

        The returned callable removes the listener; calling it again is a
        no-op.
        """
        self._listeners.append(listener)
        listener(list(snapshot))

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, snapshot: list[InventoryItem]) -> None:
        # Copy so a listener may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(list(snapshot))
