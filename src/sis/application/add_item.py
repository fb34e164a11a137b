"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from sis.application.dto import ItemDTO
from sis.domain.exceptions import ValidationError
from sis.domain.model.inventory import Category, InventoryItem, validate_name
from sis.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, name: str, category: Category | str) -> ItemDTO:
        """Add a new item with an empty ledger."""
        name = validate_name(name)
        if isinstance(category, str):
            category = Category.parse(category)

        for existing in self._inventory_repo.list_all():
            if existing.name.lower() == name.lower():
                raise ValidationError(f"Item '{name}' already exists")

        item = InventoryItem.create(name, category)
        self._inventory_repo.save(item)
        logger.info("Added item %s (%s) in %s", item.name, item.id, category.value)
        return ItemDTO(id=item.id, name=item.name, category=item.category.label)
