"""Domain service: apply committed deductions to persisted ledgers.

Deductions are grouped by item so each touched item costs exactly one
read and one write, no matter how many of its batches are consumed.
Items are processed one at a time; there is no cross-item atomicity, so
a repository failure part-way through leaves earlier items written.

A plan may go stale between computation and commit (another device
edited the ledger).  Deductions whose item or batch has vanished are
skipped and reported rather than failing the whole commit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from sis.domain.model.ledger import deduct_many
from sis.domain.repository.inventory_repository import InventoryRepository
from sis.domain.service.deduction_planner import StockDeduction

logger = logging.getLogger(__name__)


@dataclass
class CommitResult:
    applied: list[StockDeduction] = field(default_factory=list)
    skipped: list[StockDeduction] = field(default_factory=list)

    @property
    def quantity_applied(self) -> int:
        return sum(d.quantity_to_take for d in self.applied)

    @property
    def items_touched(self) -> int:
        return len({d.item_id for d in self.applied})


class InventoryDeductionService:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def apply(self, deductions: Iterable[StockDeduction]) -> CommitResult:
        """Apply deductions, one read-modify-write per item."""
        by_item: dict[str, list[StockDeduction]] = {}
        for d in deductions:
            by_item.setdefault(d.item_id, []).append(d)

        result = CommitResult()
        for item_id, item_deductions in by_item.items():
            item = self._inventory_repo.get_by_id(item_id)
            if item is None:
                logger.warning(
                    "Item %s no longer exists; skipping %d deduction(s)",
                    item_id,
                    len(item_deductions),
                )
                result.skipped.extend(item_deductions)
                continue

            updated, found = deduct_many(
                item, [(d.batch_id, d.quantity_to_take) for d in item_deductions]
            )
            for d, was_found in zip(item_deductions, found):
                if was_found:
                    result.applied.append(d)
                else:
                    logger.warning(
                        "Batch %s of %s no longer exists; skipping",
                        d.batch_id,
                        item.name,
                    )
                    result.skipped.append(d)

            if updated != item:
                self._inventory_repo.save(updated)

        logger.info(
            "Committed %d unit(s) across %d item(s), %d deduction(s) skipped",
            result.quantity_applied,
            result.items_touched,
            len(result.skipped),
        )
        return result
