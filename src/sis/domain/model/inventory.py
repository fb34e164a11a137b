"""InventoryItem aggregate: a sample item and its ledger of expiry batches.

Both the item and its batches are immutable values.  Ledger mutations
(see ``sis.domain.model.ledger``) take a snapshot and return a new one,
leaving the read-modify-write round trip to the repository adapter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from sis.domain.exceptions import ValidationError
from sis.domain.model.value_objects import generate_id


class Category(Enum):
    """Display categories, declared in the order they are shown."""

    PINEAPPLE_CAKE = "pineapple_cake"
    PUFF_PASTRY = "puff_pastry"
    CAKE = "cake"
    CHINESE_PIE = "chinese_pie"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def sort_key(self) -> int:
        return list(Category).index(self)

    @staticmethod
    def parse(raw: str) -> Category:
        """Accept a member value or member name, case-insensitively."""
        key = raw.strip().lower().replace("-", "_").replace(" ", "_")
        for category in Category:
            if key in (category.value, category.name.lower()):
                return category
        choices = ", ".join(c.value for c in Category)
        raise ValidationError(f"Unknown category {raw!r} (expected one of: {choices})")


_CATEGORY_LABELS = {
    Category.PINEAPPLE_CAKE: "Pineapple cakes",
    Category.PUFF_PASTRY: "Puff pastries",
    Category.CAKE: "Cakes",
    Category.CHINESE_PIE: "Chinese pies",
    Category.OTHER: "Other",
}


@dataclass(frozen=True)
class Batch:
    """A quantity of one item sharing a single expiry date."""

    id: str
    expiry_date: date
    quantity: int

    def with_quantity(self, quantity: int) -> Batch:
        return Batch(id=self.id, expiry_date=self.expiry_date, quantity=quantity)


@dataclass(frozen=True)
class InventoryItem:
    """Aggregate root for a stocked sample item.

    Use the ``InventoryItem.create()`` factory for new items; it
    validates the name and starts with an empty ledger.  The
    ``__init__`` stays simple so the repository can reconstitute
    persisted items without re-validating.

    Invariants (upheld by the ledger functions):
    - no two batches share an expiry date
    - no batch is kept with a quantity of zero or less
    """

    id: str
    name: str
    category: Category
    batches: tuple[Batch, ...] = field(default_factory=tuple)

    # --- Factory (used for NEW items only) ------------------------------------

    @staticmethod
    def create(
        name: str,
        category: Category,
        item_id: str | None = None,
    ) -> InventoryItem:
        return InventoryItem(
            id=item_id or generate_id(),
            name=validate_name(name),
            category=category,
        )

    # --- Lookups --------------------------------------------------------------

    def find_batch(self, batch_id: str) -> Batch | None:
        for batch in self.batches:
            if batch.id == batch_id:
                return batch
        return None

    def find_batch_by_date(self, expiry_date: date) -> Batch | None:
        for batch in self.batches:
            if batch.expiry_date == expiry_date:
                return batch
        return None

    def with_batches(self, batches: list[Batch] | tuple[Batch, ...]) -> InventoryItem:
        return InventoryItem(
            id=self.id, name=self.name, category=self.category, batches=tuple(batches)
        )


def validate_name(name: str) -> str:
    """Return the stripped name, rejecting empty input."""
    if not name or not name.strip():
        raise ValidationError("Item name is required")
    return name.strip()
