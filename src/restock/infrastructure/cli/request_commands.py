"""Interactive CLI session for drafting and submitting stock requests.

The draft only lives as long as the ``session`` command runs; leaving
the session discards it.
"""

from __future__ import annotations

import click

from restock.application.dto import DraftLineDTO, PrefillDTO
from restock.application.notifications import ERROR, Notification, Notifier
from restock.application.workflow import RestockWorkflow
from restock.domain.model.value_objects import SUPPLIERS, Urgency
from restock.domain.service.line_item_validator import LineItemCandidate
from restock.infrastructure.bootstrap import restock_workflow
from restock.infrastructure.cli.inventory_commands import display_inventory

HELP = """Commands:
  catalog              show all products
  alerts               show low stock alerts
  add                  add a line (prompts for product, quantity, supplier...)
  alert <product-id>   add a line pre-filled from a low stock alert
  list                 show the draft
  remove <draft-id>    drop a line from the draft
  clear                drop every line and restart numbering
  submit               send the whole draft as one batch
  quit                 leave (the draft is discarded)"""


class ClickNotifier(Notifier):

    def notify(self, notification: Notification) -> None:
        if notification.level == ERROR:
            click.secho(notification.message, fg="red", err=True)
        else:
            click.secho(notification.message, fg="green")


def _resolve_supplier(raw: str) -> str:
    """Accept either a supplier's number in the list or its name."""
    raw = raw.strip()
    if raw.isdigit() and 1 <= int(raw) <= len(SUPPLIERS):
        return SUPPLIERS[int(raw) - 1]
    return raw


def _prompt_line(workflow: RestockWorkflow, prefill: PrefillDTO | None) -> None:
    if prefill is None:
        product_id = click.prompt("Product ID", default="", show_default=False).strip()
        if product_id:
            prefill = workflow.select_product(product_id)
            if prefill is None:
                return
    else:
        product_id = prefill.product_id

    if prefill is not None:
        click.echo(f"  {prefill.product_name}")
    default_qty = "" if prefill is None or prefill.quantity is None else str(prefill.quantity)
    quantity = click.prompt("Quantity", default=default_qty, show_default=bool(default_qty))

    for i, name in enumerate(SUPPLIERS, start=1):
        click.echo(f"  {i}. {name}")
    supplier = click.prompt("Supplier", default="", show_default=False)

    urgency = click.prompt(
        "Urgency",
        type=click.Choice([u.value for u in Urgency]),
        default=prefill.urgency if prefill is not None else Urgency.NORMAL.value,
    )
    notes = click.prompt("Notes", default="", show_default=False)

    line = workflow.add_line(
        LineItemCandidate(
            product_id=product_id,
            quantity=quantity,
            supplier=_resolve_supplier(supplier),
            urgency=urgency,
            notes=notes,
        )
    )
    if line is not None:
        click.echo(f"  #{line.draft_id} {line.product_name} x{line.quantity} from {line.supplier}")


def _display_lines(lines: list[DraftLineDTO]) -> None:
    if not lines:
        click.echo("Draft is empty.")
        return
    click.echo(f"Draft Request List ({len(lines)})")
    click.echo(f"  {'#':>3} {'Product':<24} {'Qty':>5} {'Urgency':<8} {'Supplier':<28} {'Stock':>9}")
    click.echo(f"  {'-'*82}")
    for line in lines:
        minimum = "-" if line.min_stock is None else str(line.min_stock)
        stock = f"{line.current_stock}/{minimum}"
        click.echo(
            f"  {line.draft_id:>3} {line.product_name:<24} {line.quantity:>5} "
            f"{line.urgency:<8} {line.supplier:<28} {stock:>9}"
        )
        if line.notes:
            click.echo(f"      {line.notes}")


def _parse_id(arg: str) -> int | None:
    try:
        return int(arg)
    except ValueError:
        click.secho(f"Invalid draft id '{arg}'.", fg="red", err=True)
        return None


@click.command("session")
@click.pass_context
def request_session(ctx: click.Context) -> None:
    """Open an interactive draft of stock requests."""
    expired: list[bool] = []
    workflow = restock_workflow(
        ClickNotifier(),
        on_session_expired=lambda: expired.append(True),
    )

    if not workflow.open():
        if expired:
            click.echo("Session expired. Run 'restock auth login' and try again.")
        ctx.exit(1)

    alerts = workflow.low_stock()
    if alerts:
        click.secho(f"Low Stock Alerts ({len(alerts)})", fg="yellow")
        display_inventory(alerts)
    click.echo("Type 'help' for commands.")

    while not expired:
        raw = click.prompt("restock", default="", show_default=False, prompt_suffix="> ")
        command, _, arg = raw.strip().partition(" ")
        arg = arg.strip()

        if command in ("quit", "exit"):
            if workflow.lines():
                click.echo("Draft discarded.")
            return
        elif command == "help":
            click.echo(HELP)
        elif command == "catalog":
            display_inventory(workflow.catalog())
        elif command == "alerts":
            display_inventory(workflow.low_stock())
        elif command == "add":
            _prompt_line(workflow, None)
        elif command == "alert":
            prefill = workflow.select_low_stock_alert(arg)
            if prefill is not None:
                _prompt_line(workflow, prefill)
        elif command == "list":
            _display_lines(workflow.lines())
        elif command == "remove":
            draft_id = _parse_id(arg)
            if draft_id is not None and not workflow.remove_line(draft_id):
                click.echo(f"No draft line #{draft_id}.")
        elif command == "clear":
            dropped = workflow.clear_all()
            click.echo(f"Cleared {dropped} line(s).")
        elif command == "submit":
            workflow.submit()
        elif command:
            click.echo(f"Unknown command '{command}'. Type 'help'.")

    click.echo("Session expired. Run 'restock auth login' and try again.")
    ctx.exit(1)
