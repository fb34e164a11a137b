"""Application service: Commit Take use case.

Flattens confirmed plans and applies them through the deduction
service.  Stale references are skipped and reported in the result.
"""

from __future__ import annotations

from sis.domain.repository.inventory_repository import InventoryRepository
from sis.domain.service.deduction_planner import DeductionPlan, flatten_plans
from sis.domain.service.inventory_deduction_service import (
    CommitResult,
    InventoryDeductionService,
)


class CommitTakeHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, plans: list[DeductionPlan]) -> CommitResult:
        svc = InventoryDeductionService(self._inventory_repo)
        return svc.apply(flatten_plans(plans))
