"""CLI commands for the stored session credential."""

from __future__ import annotations

import click

from restock.infrastructure.api.credentials import Credential, basic_token
from restock.infrastructure.bootstrap import credential_store


@click.command("login")
@click.option("--email", required=True, prompt=True, help="Account e-mail.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Account password.")
@click.option("--role", default=None, help="Role shown by 'whoami' (e.g. MANAGER).")
def auth_login(email: str, password: str, role: str | None) -> None:
    """Store a credential for subsequent API calls."""
    credential_store().set(
        Credential(token=basic_token(email, password), user=email, role=role)
    )
    click.echo(f"Signed in as {email}")


@click.command("logout")
def auth_logout() -> None:
    """Forget the stored credential."""
    credential_store().clear()
    click.echo("Signed out.")


@click.command("whoami")
def auth_whoami() -> None:
    """Show who the stored credential belongs to."""
    credential = credential_store().get()
    if credential is None:
        click.echo("Not signed in.")
        return
    role = f" ({credential.role})" if credential.role else ""
    click.echo(f"{credential.user or 'unknown user'}{role}")
