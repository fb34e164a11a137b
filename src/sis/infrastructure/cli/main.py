import logging

import click

from sis.domain.exceptions import DomainException
from sis.infrastructure.bootstrap import settings
from sis.infrastructure.cli.inventory_commands import inventory_show
from sis.infrastructure.cli.item_commands import item_add, item_delete, item_rename
from sis.infrastructure.cli.stock_commands import stock_add, stock_correct, stock_take
from sis.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """SIS: Sample Inventory System"""
    try:
        level = settings().log_level
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(logging.DEBUG if verbose else level)


@cli.group()
def item() -> None:
    """Manage items."""


@cli.group()
def stock() -> None:
    """Receive, take and correct stock."""


@cli.group()
def inventory() -> None:
    """Browse inventory."""


# Register subcommands
item.add_command(item_add)
item.add_command(item_delete)
item.add_command(item_rename)
stock.add_command(stock_add)
stock.add_command(stock_correct)
stock.add_command(stock_take)
inventory.add_command(inventory_show)
