"""CLI commands for browsing inventory."""

from __future__ import annotations

import click

from sis.application.show_inventory import ShowInventoryHandler
from sis.domain.exceptions import DomainException
from sis.domain.model.inventory import Category
from sis.infrastructure.bootstrap import inventory_repository, settings

_STATUS_MARKERS = {"OK": "", "LOW": "low stock", "OUT": "out of stock", "EXPIRING": "expiring"}


@click.command("show")
@click.option(
    "--category",
    default=None,
    type=click.Choice([c.value for c in Category], case_sensitive=False),
    help="Only show one category.",
)
@click.option("--alerts", is_flag=True, default=False, help="Only items expiring soon or low on stock.")
@click.option("--batches", is_flag=True, default=False, help="List every batch under its item.")
def inventory_show(category: str | None, alerts: bool, batches: bool) -> None:
    """Show current stock levels."""
    try:
        current = settings()
        handler = ShowInventoryHandler(
            inventory_repo=inventory_repository(current),
            expiry_threshold_days=current.expiry_threshold_days,
            low_stock_threshold=current.low_stock_threshold,
        )
        lines = handler.handle(
            category=Category.parse(category) if category else None,
            alerts_only=alerts,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No items found.")
        return

    click.echo(f"{'Item':<24} {'Category':<16} {'Stock':>6} {'Nearest':>11} {'Days':>5}  Status")
    click.echo("-" * 80)
    for line in lines:
        nearest = line.nearest_expiry or "-"
        days = "" if line.days_remaining is None else str(line.days_remaining)
        click.echo(
            f"{line.name:<24} {line.category:<16} {line.total:>6} {nearest:>11} {days:>5}  "
            f"{_STATUS_MARKERS[line.status]}"
        )
        if batches:
            for b in line.batches:
                click.echo(f"    [{b.id}] {b.expiry_date}  x{b.quantity}  ({b.days_remaining}d)")
