"""CLI commands for stock intake, take and correction."""

from __future__ import annotations

from datetime import date

import click

from sis.application.add_stock import AddStockHandler
from sis.application.commit_take import CommitTakeHandler
from sis.application.correct_batch import CorrectBatchHandler
from sis.application.dto import IntakeSpec, TakeSpec
from sis.application.item_lookup import resolve_item
from sis.application.plan_take import PlanTakeHandler
from sis.domain.exceptions import DomainException
from sis.domain.service.deduction_planner import DeductionPlan
from sis.infrastructure.bootstrap import inventory_repository


def _parse_qty(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid quantity '{raw}' for item '{name}'.")


def _parse_intakes(raw: str) -> list[IntakeSpec]:
    """Parse 'Name:2025-06-01:4,Other:3' into IntakeSpec list.

    The date may be omitted, in which case today's date is used.
    """
    specs: list[IntakeSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.rsplit(":", 2)
        if len(parts) == 3:
            name, expiry, qty_str = parts
        elif len(parts) == 2:
            name, qty_str = parts
            expiry = date.today().isoformat()
        else:
            raise click.BadParameter(
                f"Invalid entry '{entry}'. Expected 'ItemName:YYYY-MM-DD:Quantity'."
            )
        name = name.strip()
        specs.append(
            IntakeSpec(item=name, expiry_date=expiry.strip(), quantity=_parse_qty(qty_str, name))
        )
    return specs


def _parse_takes(raw: str) -> list[TakeSpec]:
    """Parse 'Name:3,Other:5' into TakeSpec list."""
    specs: list[TakeSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        name = name.strip()
        specs.append(TakeSpec(item=name, quantity=_parse_qty(qty_str, name)))
    return specs


def _display_plan(plan: DeductionPlan) -> None:
    click.echo(f"{plan.item_name}  (take {plan.total_requested})")
    for d in plan.deductions:
        click.echo(f"  {d.expiry_date.isoformat():<12} x{d.quantity_to_take:>4}   [{d.batch_id}]")
    if not plan.is_complete:
        click.echo(
            f"  ! only {plan.quantity_planned} available, short by {plan.shortfall}"
        )


@click.command("add")
@click.option(
    "--items",
    "items_str",
    required=True,
    help="Batches as 'Item:YYYY-MM-DD:Qty,Item:Qty' (date defaults to today).",
)
def stock_add(items_str: str) -> None:
    """Receive stock for one or more items."""
    specs = _parse_intakes(items_str)
    handler = AddStockHandler(inventory_repo=inventory_repository())

    try:
        added = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for name, units in added.items():
        click.echo(f"{name}: +{units}")


@click.command("take")
@click.option("--items", "items_str", required=True, help="Items as 'Item:Qty,Item:Qty'.")
@click.option("--yes", is_flag=True, default=False, help="Commit without asking.")
def stock_take(items_str: str, yes: bool) -> None:
    """Take stock, earliest expiry first.

    The plan is shown and must be confirmed before anything is deducted.
    """
    specs = _parse_takes(items_str)
    repo = inventory_repository()

    try:
        plans = PlanTakeHandler(inventory_repo=repo).handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for plan in plans:
        _display_plan(plan)

    if not any(plan.deductions for plan in plans):
        click.echo("Nothing to take.")
        return

    if not yes:
        click.confirm("Deduct these batches?", abort=True)

    try:
        result = CommitTakeHandler(inventory_repo=repo).handle(plans)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Took {result.quantity_applied} unit(s) from {result.items_touched} item(s).")
    if result.skipped:
        click.echo(
            f"{len(result.skipped)} batch deduction(s) skipped: stock changed since planning."
        )


@click.command("correct")
@click.option("--item", "item_ref", required=True, help="Item name or ID.")
@click.option("--batch", "batch_id", required=True, help="Batch ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes the batch).")
@click.option("--expiry", default=None, help="New expiry date (YYYY-MM-DD).")
def stock_correct(item_ref: str, batch_id: str, quantity: int, expiry: str | None) -> None:
    """Correct a batch's quantity or expiry date."""
    repo = inventory_repository()
    handler = CorrectBatchHandler(inventory_repo=repo)

    try:
        target = resolve_item(repo, item_ref)
        handler.handle(target.id, batch_id, quantity, expiry)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if quantity <= 0:
        click.echo(f"Batch {batch_id} of '{target.name}' removed.")
    else:
        click.echo(f"Batch {batch_id} of '{target.name}' set to {quantity}.")
