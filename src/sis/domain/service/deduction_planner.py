"""Domain service: FIFO-by-expiry deduction planner.

Given a requested quantity and an item snapshot, work out which batches
to consume, in what order and by how much.  The result is a proposal to
be shown for confirmation; nothing is mutated here, so planning can be
repeated freely (e.g. every time the requested quantity changes).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from sis.domain.exceptions import ValidationError
from sis.domain.model.inventory import InventoryItem
from sis.domain.service.stock_aggregator import sort_batches

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Deduction:
    """One line of a plan: take ``quantity_to_take`` from a single batch."""

    batch_id: str
    expiry_date: date
    quantity_to_take: int


@dataclass(frozen=True)
class DeductionPlan:
    """Proposed consumption for one item.

    ``is_complete`` is False when stock ran out before the request was
    met; the plan then drains everything that exists.
    """

    item_id: str
    item_name: str
    total_requested: int
    deductions: tuple[Deduction, ...]
    is_complete: bool

    @property
    def quantity_planned(self) -> int:
        return sum(d.quantity_to_take for d in self.deductions)

    @property
    def shortfall(self) -> int:
        return self.total_requested - self.quantity_planned


@dataclass(frozen=True)
class StockDeduction:
    """Flat commit instruction for a single batch of a single item."""

    item_id: str
    batch_id: str
    quantity_to_take: int


def plan_deduction(item: InventoryItem, quantity_requested: int) -> DeductionPlan:
    """Plan a take of ``quantity_requested`` units, earliest expiry first.

    Insufficient stock is a normal outcome, reported via ``is_complete``.
    A request of zero yields an empty, complete plan.
    """
    if quantity_requested < 0:
        raise ValidationError("Requested quantity cannot be negative")

    remaining = quantity_requested
    deductions: list[Deduction] = []

    for batch in sort_batches(item.batches):
        if remaining <= 0:
            break
        take = min(batch.quantity, remaining)
        if take <= 0:
            continue
        deductions.append(
            Deduction(
                batch_id=batch.id,
                expiry_date=batch.expiry_date,
                quantity_to_take=take,
            )
        )
        remaining -= take

    plan = DeductionPlan(
        item_id=item.id,
        item_name=item.name,
        total_requested=quantity_requested,
        deductions=tuple(deductions),
        is_complete=remaining == 0,
    )
    logger.debug(
        "Planned %d of %d for %s across %d batch(es)",
        plan.quantity_planned,
        quantity_requested,
        item.name,
        len(deductions),
    )
    return plan


def flatten_plans(plans: Iterable[DeductionPlan]) -> list[StockDeduction]:
    """Turn per-item plans into the flat list the commit step consumes."""
    return [
        StockDeduction(
            item_id=plan.item_id,
            batch_id=d.batch_id,
            quantity_to_take=d.quantity_to_take,
        )
        for plan in plans
        for d in plan.deductions
    ]
