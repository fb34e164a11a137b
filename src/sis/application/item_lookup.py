"""Resolve a user-supplied item reference to an item."""

from __future__ import annotations

from sis.domain.exceptions import EntityNotFoundError
from sis.domain.model.inventory import InventoryItem
from sis.domain.repository.inventory_repository import InventoryRepository


def resolve_item(inventory_repo: InventoryRepository, ref: str) -> InventoryItem:
    """Find an item by exact id, falling back to case-insensitive name."""
    item = inventory_repo.get_by_id(ref)
    if item is not None:
        return item

    wanted = ref.strip().lower()
    for candidate in inventory_repo.list_all():
        if candidate.name.lower() == wanted:
            return candidate
    raise EntityNotFoundError(f"Item not found: '{ref}'")
