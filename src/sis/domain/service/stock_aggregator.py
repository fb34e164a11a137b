"""Domain service: stock aggregation over a ledger snapshot.

Stateless queries used for display and alerting.  ``sort_batches`` also
defines the consumption order used by the deduction planner.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from enum import Enum

from sis.domain.model.inventory import Batch, InventoryItem

DEFAULT_EXPIRY_THRESHOLD_DAYS = 7
DEFAULT_LOW_STOCK_THRESHOLD = 3


class StockStatus(Enum):
    OK = "OK"
    LOW = "LOW"
    OUT = "OUT"
    EXPIRING = "EXPIRING"


def total_stock(item: InventoryItem) -> int:
    return sum(batch.quantity for batch in item.batches)


def days_remaining(expiry_date: date, today: date | None = None) -> int:
    """Whole calendar days until ``expiry_date``: 0 today, negative once past."""
    today = today or date.today()
    return (expiry_date - today).days


def sort_batches(batches: Iterable[Batch]) -> list[Batch]:
    """Earliest expiry first; ``sorted`` is stable so ties keep ledger order."""
    return sorted(batches, key=lambda b: b.expiry_date)


def nearest_expiry_batch(item: InventoryItem) -> Batch | None:
    ordered = sort_batches(item.batches)
    return ordered[0] if ordered else None


def is_out_of_stock(item: InventoryItem) -> bool:
    return total_stock(item) == 0


def is_expiring_soon(
    item: InventoryItem,
    threshold_days: int = DEFAULT_EXPIRY_THRESHOLD_DAYS,
    today: date | None = None,
) -> bool:
    """True if any batch expires within the threshold, expired ones included.

    An item with no stock is out of stock, never "expiring".
    """
    if is_out_of_stock(item):
        return False
    return any(
        days_remaining(b.expiry_date, today) <= threshold_days for b in item.batches
    )


def is_low_stock(item: InventoryItem, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
    total = total_stock(item)
    return 0 < total <= threshold


def needs_attention(
    item: InventoryItem,
    threshold_days: int = DEFAULT_EXPIRY_THRESHOLD_DAYS,
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    today: date | None = None,
) -> bool:
    return is_expiring_soon(item, threshold_days, today) or is_low_stock(
        item, low_stock_threshold
    )


def stock_status(
    item: InventoryItem,
    threshold_days: int = DEFAULT_EXPIRY_THRESHOLD_DAYS,
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    today: date | None = None,
) -> StockStatus:
    """Single display status; an expiry warning outranks a low-stock one."""
    if is_out_of_stock(item):
        return StockStatus.OUT
    if is_expiring_soon(item, threshold_days, today):
        return StockStatus.EXPIRING
    if is_low_stock(item, low_stock_threshold):
        return StockStatus.LOW
    return StockStatus.OK
