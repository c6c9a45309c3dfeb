import click

from restock.infrastructure.cli.auth_commands import auth_login, auth_logout, auth_whoami
from restock.infrastructure.cli.inventory_commands import inventory_low_stock, inventory_show
from restock.infrastructure.cli.request_commands import request_session
from restock.infrastructure.config import load_settings
from restock.infrastructure.log import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override RESTOCK_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Restock: stock replenishment console"""
    configure_logging(log_level or load_settings().log_level)


@cli.group()
def inventory() -> None:
    """Inspect inventory levels."""


@cli.group()
def request() -> None:
    """Draft and submit stock requests."""


@cli.group()
def auth() -> None:
    """Manage the stored session credential."""


# Register subcommands
inventory.add_command(inventory_low_stock)
inventory.add_command(inventory_show)
request.add_command(request_session)
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_whoami)
