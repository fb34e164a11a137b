"""Sample items written to a brand-new store when demo seeding is enabled."""

from __future__ import annotations

from datetime import date, timedelta

from sis.domain.model.inventory import Batch, Category, InventoryItem


def demo_items(today: date | None = None) -> list[InventoryItem]:
    """Two items: one expiring today alongside fresh stock, one already expired."""
    today = today or date.today()
    return [
        InventoryItem(
            id="demo001",
            name="Demo: pineapple cake",
            category=Category.PINEAPPLE_CAKE,
            batches=(
                Batch("demob01", today, 2),
                Batch("demob02", today + timedelta(days=180), 10),
            ),
        ),
        InventoryItem(
            id="demo002",
            name="Demo: egg yolk pastry",
            category=Category.PUFF_PASTRY,
            batches=(Batch("demob03", today - timedelta(days=3), 1),),
        ),
    ]
