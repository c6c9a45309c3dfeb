"""CLI commands for inventory inspection."""

from __future__ import annotations

import click

from restock.application.dto import InventoryLineDTO
from restock.application.open_session import OpenSessionHandler
from restock.domain.exceptions import DomainException
from restock.infrastructure.bootstrap import inventory_provider


def _load():
    try:
        return OpenSessionHandler(inventory_provider()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def display_inventory(lines: list[InventoryLineDTO]) -> None:
    """Shared formatting for inventory tables."""
    click.echo(f"{'ID':<8} {'Product':<28} {'Stock':>7} {'Minimum':>8}")
    click.echo("-" * 54)
    for line in lines:
        minimum = "-" if line.minimum is None else str(line.minimum)
        flag = "  LOW" if line.low_stock else ""
        click.echo(f"{line.id:<8} {line.name:<28} {line.current:>7} {minimum:>8}{flag}")


@click.command("show")
def inventory_show() -> None:
    """Show the product catalog with stock levels."""
    snapshot = _load()

    if not snapshot.catalog:
        click.echo("No products found.")
        return

    display_inventory([InventoryLineDTO.from_item(item) for item in snapshot.catalog])


@click.command("low-stock")
def inventory_low_stock() -> None:
    """Show products at or below their minimum level."""
    snapshot = _load()

    if not snapshot.low_stock:
        click.echo("No low stock alerts.")
        return

    display_inventory([InventoryLineDTO.from_item(item) for item in snapshot.low_stock])
