"""Application service: Plan Take use case (query).

Builds one FIFO deduction plan per requested item from the current
snapshot.  Nothing is written; the plans are shown for confirmation and
then handed to CommitTakeHandler, or simply dropped.
"""

from __future__ import annotations

from sis.application.dto import TakeSpec
from sis.application.item_lookup import resolve_item
from sis.domain.model.inventory import InventoryItem
from sis.domain.model.value_objects import Quantity
from sis.domain.repository.inventory_repository import InventoryRepository
from sis.domain.service.deduction_planner import DeductionPlan, plan_deduction


class PlanTakeHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, requests: list[TakeSpec]) -> list[DeductionPlan]:
        items: dict[str, InventoryItem] = {}
        wanted: dict[str, int] = {}

        for spec in requests:
            qty = Quantity(spec.quantity)
            item = resolve_item(self._inventory_repo, spec.item)
            items.setdefault(item.id, item)
            # The same item listed twice is one request for the sum
            wanted[item.id] = wanted.get(item.id, 0) + qty.value

        return [plan_deduction(items[item_id], qty) for item_id, qty in wanted.items()]
