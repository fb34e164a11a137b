"""Application service: Delete Item use case.

Removes the item and its whole ledger in a single repository call.
"""

from __future__ import annotations

import logging

from sis.domain.exceptions import EntityNotFoundError
from sis.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class DeleteItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: str) -> None:
        item = self._inventory_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Item with ID '{item_id}' not found")

        self._inventory_repo.delete(item_id)
        logger.info("Deleted item %s (%s)", item.name, item.id)
