"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from datetime import date

from sis.application.dto import BatchLineDTO, InventoryLineDTO
from sis.domain.model.inventory import Category, InventoryItem
from sis.domain.repository.inventory_repository import InventoryRepository
from sis.domain.service.stock_aggregator import (
    DEFAULT_EXPIRY_THRESHOLD_DAYS,
    DEFAULT_LOW_STOCK_THRESHOLD,
    days_remaining,
    needs_attention,
    sort_batches,
    stock_status,
    total_stock,
)


class ShowInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        expiry_threshold_days: int = DEFAULT_EXPIRY_THRESHOLD_DAYS,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._expiry_threshold_days = expiry_threshold_days
        self._low_stock_threshold = low_stock_threshold

    def handle(
        self,
        category: Category | None = None,
        alerts_only: bool = False,
        today: date | None = None,
    ) -> list[InventoryLineDTO]:
        """List items grouped by category, optionally only those needing attention."""
        today = today or date.today()
        items = self._inventory_repo.list_all()

        if category is not None:
            items = [i for i in items if i.category == category]
        if alerts_only:
            items = [
                i
                for i in items
                if needs_attention(
                    i, self._expiry_threshold_days, self._low_stock_threshold, today
                )
            ]

        items.sort(key=lambda i: (i.category.sort_key, i.name.lower()))
        return [self._to_line(item, today) for item in items]

    def _to_line(self, item: InventoryItem, today: date) -> InventoryLineDTO:
        batches = [
            BatchLineDTO(
                id=b.id,
                expiry_date=b.expiry_date.isoformat(),
                quantity=b.quantity,
                days_remaining=days_remaining(b.expiry_date, today),
            )
            for b in sort_batches(item.batches)
        ]
        status = stock_status(
            item, self._expiry_threshold_days, self._low_stock_threshold, today
        )
        return InventoryLineDTO(
            id=item.id,
            name=item.name,
            category=item.category.label,
            total=total_stock(item),
            status=status.value,
            nearest_expiry=batches[0].expiry_date if batches else None,
            days_remaining=batches[0].days_remaining if batches else None,
            batches=batches,
        )
