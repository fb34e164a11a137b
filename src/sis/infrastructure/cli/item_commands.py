"""CLI commands for managing items."""

from __future__ import annotations

import click

from sis.application.add_item import AddItemHandler
from sis.application.delete_item import DeleteItemHandler
from sis.application.item_lookup import resolve_item
from sis.application.rename_item import RenameItemHandler
from sis.domain.exceptions import DomainException
from sis.domain.model.inventory import Category
from sis.infrastructure.bootstrap import inventory_repository

CATEGORY_CHOICES = [c.value for c in Category]


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option(
    "--category",
    required=True,
    type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
    help="Display category.",
)
def item_add(name: str, category: str) -> None:
    """Add a new item with no stock."""
    handler = AddItemHandler(inventory_repo=inventory_repository())

    try:
        dto = handler.handle(name=name, category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item '{dto.name}' added to {dto.category} (id={dto.id})")


@click.command("rename")
@click.option("--item", "item_ref", required=True, help="Item name or ID.")
@click.option("--name", required=True, help="New item name.")
def item_rename(item_ref: str, name: str) -> None:
    """Rename an item."""
    repo = inventory_repository()
    handler = RenameItemHandler(inventory_repo=repo)

    try:
        target = resolve_item(repo, item_ref)
        handler.handle(target.id, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item '{target.name}' renamed to '{name.strip()}'")


@click.command("delete")
@click.option("--item", "item_ref", required=True, help="Item name or ID.")
@click.option("--yes", is_flag=True, default=False, help="Skip confirmation.")
def item_delete(item_ref: str, yes: bool) -> None:
    """Delete an item and all of its batches."""
    repo = inventory_repository()
    handler = DeleteItemHandler(inventory_repo=repo)

    try:
        target = resolve_item(repo, item_ref)
        if not yes:
            click.confirm(
                f"Delete '{target.name}' and all its batches? This cannot be undone.",
                abort=True,
            )
        handler.handle(target.id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item '{target.name}' deleted.")
