"""Unit tests for the FIFO deduction planner."""

from datetime import date

import pytest

from sis.domain.exceptions import ValidationError
from sis.domain.model.inventory import Batch, Category, InventoryItem
from sis.domain.service.deduction_planner import (
    Deduction,
    DeductionPlan,
    StockDeduction,
    flatten_plans,
    plan_deduction,
)


def _item() -> InventoryItem:
    return InventoryItem(
        id="1",
        name="Pineapple cake",
        category=Category.PINEAPPLE_CAKE,
        batches=(
            Batch("jun", date(2025, 6, 1), 5),
            Batch("may", date(2025, 5, 1), 3),
            Batch("jul", date(2025, 7, 1), 10),
        ),
    )


class TestPlanDeduction:

    def test_earliest_expiry_consumed_first(self):
        plan = plan_deduction(_item(), 6)
        assert plan.deductions == (
            Deduction("may", date(2025, 5, 1), 3),
            Deduction("jun", date(2025, 6, 1), 3),
        )
        assert plan.is_complete

    def test_plan_carries_item_identity(self):
        plan = plan_deduction(_item(), 1)
        assert plan.item_id == "1"
        assert plan.item_name == "Pineapple cake"
        assert plan.total_requested == 1

    def test_exact_total_is_complete(self):
        plan = plan_deduction(_item(), 18)
        assert plan.is_complete
        assert plan.quantity_planned == 18
        assert plan.shortfall == 0

    def test_shortfall_drains_everything(self):
        plan = plan_deduction(_item(), 100)
        assert [(d.batch_id, d.quantity_to_take) for d in plan.deductions] == [
            ("may", 3),
            ("jun", 5),
            ("jul", 10),
        ]
        assert not plan.is_complete
        assert plan.total_requested - plan.quantity_planned == 82
        assert plan.shortfall == 82

    def test_zero_request_is_empty_and_complete(self):
        plan = plan_deduction(_item(), 0)
        assert plan.deductions == ()
        assert plan.is_complete

    def test_empty_ledger_is_incomplete(self):
        empty = InventoryItem.create("Mochi", Category.OTHER)
        plan = plan_deduction(empty, 2)
        assert plan.deductions == ()
        assert not plan.is_complete

    def test_negative_request_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            plan_deduction(_item(), -1)

    def test_zero_quantity_rows_skipped(self):
        item = InventoryItem(
            id="2",
            name="Cake",
            category=Category.CAKE,
            batches=(Batch("z", date(2025, 1, 1), 0), Batch("a", date(2025, 2, 1), 4)),
        )
        plan = plan_deduction(item, 2)
        assert [d.batch_id for d in plan.deductions] == ["a"]

    def test_ties_keep_ledger_order(self):
        same_day = date(2025, 6, 1)
        item = InventoryItem(
            id="3",
            name="Pie",
            category=Category.CHINESE_PIE,
            batches=(Batch("first", same_day, 2), Batch("second", same_day, 2)),
        )
        plan = plan_deduction(item, 3)
        assert [(d.batch_id, d.quantity_to_take) for d in plan.deductions] == [
            ("first", 2),
            ("second", 1),
        ]

    def test_idempotent_and_does_not_mutate_snapshot(self):
        item = _item()
        first = plan_deduction(item, 7)
        second = plan_deduction(item, 7)
        assert first == second
        assert item == _item()


class TestFlattenPlans:

    def test_flattens_in_plan_order(self):
        a = plan_deduction(_item(), 4)
        b = DeductionPlan(
            item_id="9",
            item_name="Other",
            total_requested=1,
            deductions=(Deduction("x", date(2025, 1, 1), 1),),
            is_complete=True,
        )
        assert flatten_plans([a, b]) == [
            StockDeduction("1", "may", 3),
            StockDeduction("1", "jun", 1),
            StockDeduction("9", "x", 1),
        ]

    def test_empty(self):
        assert flatten_plans([]) == []
