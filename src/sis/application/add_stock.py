"""Application service: Add Stock use case (bulk intake).

Every entry is validated and every item resolved before anything is
written, so a typo in the last line does not leave the first lines
applied.  Entries for the same item are then folded into one
read-modify-write of that item's ledger.
"""

from __future__ import annotations

import logging

from sis.application.dto import IntakeSpec
from sis.application.item_lookup import resolve_item
from sis.domain.model.inventory import InventoryItem
from sis.domain.model.ledger import intake
from sis.domain.model.value_objects import ExpiryDate, Quantity
from sis.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class AddStockHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, intakes: list[IntakeSpec]) -> dict[str, int]:
        """Receive stock; returns units added per item name."""
        # Phase 1: validate and resolve
        items: dict[str, InventoryItem] = {}
        entries: dict[str, list[tuple[ExpiryDate, Quantity]]] = {}

        for spec in intakes:
            qty = Quantity(spec.quantity)
            expiry = ExpiryDate.of(spec.expiry_date)
            item = resolve_item(self._inventory_repo, spec.item)
            items.setdefault(item.id, item)
            entries.setdefault(item.id, []).append((expiry, qty))

        # Phase 2: fold into each ledger and persist once per item
        added: dict[str, int] = {}
        for item_id, item_entries in entries.items():
            item = items[item_id]
            for expiry, qty in item_entries:
                item = intake(item, expiry.value, qty.value)
            self._inventory_repo.save(item)

            units = sum(qty.value for _, qty in item_entries)
            added[item.name] = units
            logger.info("Added %d unit(s) of %s", units, item.name)

        return added
