"""Application service: Correct Batch use case.

Overwrites a batch's quantity and optionally its expiry date.  Setting
the quantity to zero is how a single batch row is deleted.
"""

from __future__ import annotations

import logging

from sis.domain.exceptions import EntityNotFoundError, ValidationError
from sis.domain.model.ledger import correct
from sis.domain.model.value_objects import ExpiryDate
from sis.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class CorrectBatchHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(
        self,
        item_id: str,
        batch_id: str,
        quantity: int,
        expiry_date: str | None = None,
    ) -> None:
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError("Quantity must be an integer")
        new_expiry = ExpiryDate.of(expiry_date).value if expiry_date else None

        item = self._inventory_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Item with ID '{item_id}' not found")
        if item.find_batch(batch_id) is None:
            raise EntityNotFoundError(
                f"Batch '{batch_id}' not found for item '{item.name}'"
            )

        self._inventory_repo.save(correct(item, batch_id, quantity, new_expiry))
        if quantity <= 0:
            logger.info("Removed batch %s of %s", batch_id, item.name)
        else:
            logger.info("Corrected batch %s of %s to %d", batch_id, item.name, quantity)
