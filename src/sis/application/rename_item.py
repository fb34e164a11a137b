"""Application service: Rename Item use case."""

from __future__ import annotations

import logging

from sis.domain.exceptions import EntityNotFoundError
from sis.domain.model.inventory import validate_name
from sis.domain.model.ledger import rename
from sis.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class RenameItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: str, new_name: str) -> None:
        # Validate before touching the store
        validate_name(new_name)

        item = self._inventory_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Item with ID '{item_id}' not found")

        renamed = rename(item, new_name)
        self._inventory_repo.save(renamed)
        logger.info("Renamed item %s: %s -> %s", item.id, item.name, renamed.name)
