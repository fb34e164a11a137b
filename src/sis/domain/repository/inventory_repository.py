"""Abstract repository for the InventoryItem aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (JSON file, in-memory)
live elsewhere and publish every change through a ChangeNotifier.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sis.domain.model.inventory import InventoryItem
from sis.domain.repository.change_notifier import (
    ChangeNotifier,
    ItemsListener,
    Unsubscribe,
)


class InventoryRepository(ABC):

    def __init__(self, notifier: ChangeNotifier | None = None) -> None:
        self._notifier = notifier or ChangeNotifier()

    @abstractmethod
    def get_by_id(self, item_id: str) -> InventoryItem | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every item."""

    @abstractmethod
    def save(self, item: InventoryItem) -> None:
        """Persist a new item or overwrite an existing one as a whole."""

    @abstractmethod
    def delete(self, item_id: str) -> None:
        """Remove an item together with its ledger."""

    def subscribe(self, listener: ItemsListener) -> Unsubscribe:
        """Receive the current items now and after every change."""
        return self._notifier.subscribe(listener, self.list_all())

    def _publish(self) -> None:
        if self._notifier.listener_count:
            self._notifier.publish(self.list_all())
