"""Batch ledger mutation rules.

Every function takes an ``InventoryItem`` snapshot and returns a new one.
The input is never modified, so a plan computed against a snapshot stays
valid for as long as the caller holds on to that snapshot.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import date

from sis.domain.model.inventory import Batch, InventoryItem, validate_name
from sis.domain.model.value_objects import generate_id


def intake(
    item: InventoryItem,
    expiry_date: date,
    quantity: int,
    id_factory: Callable[[], str] = generate_id,
) -> InventoryItem:
    """Add stock, merging into the batch that already carries this date.

    Non-positive quantities are ignored; callers are expected to validate
    before getting here.
    """
    if quantity <= 0:
        return item

    existing = item.find_batch_by_date(expiry_date)
    if existing is not None:
        return _replace_batch(
            item, existing.id, existing.with_quantity(existing.quantity + quantity)
        )

    new_batch = Batch(id=id_factory(), expiry_date=expiry_date, quantity=quantity)
    return item.with_batches(item.batches + (new_batch,))


def correct(
    item: InventoryItem,
    batch_id: str,
    new_quantity: int,
    new_expiry_date: date | None = None,
) -> InventoryItem:
    """Overwrite a batch's quantity (and optionally its date).

    A quantity of zero or less removes the batch.  Moving a batch onto a
    date already held by another batch merges the two: the other batch
    keeps its id and absorbs the corrected quantity.
    """
    batch = item.find_batch(batch_id)
    if batch is None:
        return item
    if new_quantity <= 0:
        return _remove_batch(item, batch_id)

    if new_expiry_date is None or new_expiry_date == batch.expiry_date:
        return _replace_batch(item, batch_id, batch.with_quantity(new_quantity))

    clash = item.find_batch_by_date(new_expiry_date)
    if clash is not None:
        merged = clash.with_quantity(clash.quantity + new_quantity)
        return _remove_batch(_replace_batch(item, clash.id, merged), batch_id)

    return _replace_batch(
        item,
        batch_id,
        Batch(id=batch_id, expiry_date=new_expiry_date, quantity=new_quantity),
    )


def deduct(item: InventoryItem, batch_id: str, amount: int) -> InventoryItem:
    """Take ``amount`` units from one batch, removing it once exhausted.

    Over-deduction clamps to removal; the ledger never holds a negative row.
    """
    if amount <= 0:
        return item
    batch = item.find_batch(batch_id)
    if batch is None:
        return item

    left = batch.quantity - amount
    if left <= 0:
        return _remove_batch(item, batch_id)
    return _replace_batch(item, batch_id, batch.with_quantity(left))


def deduct_many(
    item: InventoryItem,
    deductions: Iterable[tuple[str, int]],
) -> tuple[InventoryItem, list[bool]]:
    """Apply several ``(batch_id, amount)`` deductions as one compound update.

    Returns the new snapshot and, in input order, whether each deduction
    found its batch.  A batch used up by an earlier entry counts as not
    found for the entries after it.
    """
    batches = {b.id: b for b in item.batches}
    outcomes: list[bool] = []
    for batch_id, amount in deductions:
        batch = batches.get(batch_id)
        if batch is None:
            outcomes.append(False)
            continue
        outcomes.append(True)
        if amount <= 0:
            continue
        left = batch.quantity - amount
        if left <= 0:
            del batches[batch_id]
        else:
            batches[batch_id] = batch.with_quantity(left)

    if not any(outcomes):
        return item, outcomes
    kept = [batches[b.id] for b in item.batches if b.id in batches]
    return item.with_batches(kept), outcomes


def rename(item: InventoryItem, new_name: str) -> InventoryItem:
    return replace(item, name=validate_name(new_name))


# --- Internal helpers ---------------------------------------------------------


def _replace_batch(item: InventoryItem, batch_id: str, new_batch: Batch) -> InventoryItem:
    return item.with_batches(
        [new_batch if b.id == batch_id else b for b in item.batches]
    )


def _remove_batch(item: InventoryItem, batch_id: str) -> InventoryItem:
    return item.with_batches([b for b in item.batches if b.id != batch_id])
