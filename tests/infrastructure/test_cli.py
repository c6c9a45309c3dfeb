"""CLI tests driven through click's CliRunner with in-memory collaborators."""

import pytest
from click.testing import CliRunner

from restock.application.workflow import RestockWorkflow
from restock.domain.exceptions import AuthenticationError, ServerRejectionError
from restock.infrastructure.api.credentials import InMemoryCredentialStore
from restock.infrastructure.cli import auth_commands, inventory_commands, request_commands
from restock.infrastructure.cli.main import cli
from tests.fakes import FakeInventoryProvider, FakeStockRequestGateway, sample_catalog


@pytest.fixture
def gateway():
    return FakeStockRequestGateway()


@pytest.fixture
def patched(monkeypatch, gateway):
    provider = FakeInventoryProvider(sample_catalog())

    def _workflow(notifier, on_session_expired=None):
        gateway.on_session_expired = on_session_expired
        return RestockWorkflow(provider=provider, gateway=gateway, notifier=notifier)

    monkeypatch.setattr(request_commands, "restock_workflow", _workflow)
    monkeypatch.setattr(inventory_commands, "inventory_provider", lambda: provider)
    return provider


class TestInventoryCommands:

    def test_show_lists_catalog(self, patched):
        result = CliRunner().invoke(cli, ["inventory", "show"])
        assert result.exit_code == 0
        assert "Printer Paper" in result.output
        assert "Desk Lamp" in result.output

    def test_low_stock_flags_items(self, patched):
        result = CliRunner().invoke(cli, ["inventory", "low-stock"])
        assert result.exit_code == 0
        assert "Toner" in result.output
        assert "Stapler" not in result.output

    def test_fetch_failure_is_click_error(self, monkeypatch):
        provider = FakeInventoryProvider(error=ServerRejectionError("boom", 500))
        monkeypatch.setattr(inventory_commands, "inventory_provider", lambda: provider)

        result = CliRunner().invoke(cli, ["inventory", "show"])

        assert result.exit_code == 1
        assert "Failed to fetch products" in result.output


class TestRequestSession:

    def test_add_and_submit(self, patched, gateway):
        keystrokes = "\n".join([
            "add", "p1", "", "1", "", "first batch",
            "list",
            "submit",
            "quit",
        ]) + "\n"

        result = CliRunner().invoke(cli, ["request", "session"], input=keystrokes)

        assert result.exit_code == 0, result.output
        assert "Low Stock Alerts (2)" in result.output
        assert "#1 Printer Paper x17 from Office Depot" in result.output
        assert "Stock requests submitted successfully!" in result.output
        record = gateway.batches[0][0]
        assert (record.product_id, record.quantity, record.urgency) == ("p1", 17, "normal")
        assert record.notes == "first batch"

    def test_alert_shortcut_prefills_urgency(self, patched, gateway):
        keystrokes = "\n".join(["alert p3", "", "2", "", "", "submit", "quit"]) + "\n"

        result = CliRunner().invoke(cli, ["request", "session"], input=keystrokes)

        assert result.exit_code == 0, result.output
        record = gateway.batches[0][0]
        assert (record.product_id, record.quantity, record.urgency) == ("p3", 7, "urgent")
        assert record.supplier == "Tech Solutions Inc."

    def test_validation_message_and_empty_submit(self, patched, gateway):
        keystrokes = "\n".join(["add", "p1", "0", "1", "", "", "submit", "quit"]) + "\n"

        result = CliRunner().invoke(cli, ["request", "session"], input=keystrokes)

        assert "quantity must be positive" in result.output
        assert "nothing to submit" in result.output
        assert gateway.batches == []

    def test_remove_and_clear(self, patched):
        keystrokes = "\n".join([
            "add", "p2", "4", "2", "", "",
            "add", "p4", "1", "3", "", "",
            "remove 1",
            "remove 9",
            "clear",
            "quit",
        ]) + "\n"

        result = CliRunner().invoke(cli, ["request", "session"], input=keystrokes)

        assert "No draft line #9." in result.output
        assert "Cleared 1 line(s)." in result.output

    def test_session_expiry_ends_session(self, patched, gateway):
        # what the API client does on a 401
        gateway.error = AuthenticationError()
        gateway.during_call = lambda: gateway.on_session_expired()
        keystrokes = "\n".join(["add", "p1", "", "1", "", "", "submit", "list"]) + "\n"

        result = CliRunner().invoke(cli, ["request", "session"], input=keystrokes)

        assert result.exit_code == 1
        assert "Session expired" in result.output


class TestAuthCommands:

    def test_login_whoami_logout(self, monkeypatch):
        store = InMemoryCredentialStore()
        monkeypatch.setattr(auth_commands, "credential_store", lambda: store)
        runner = CliRunner()

        result = runner.invoke(
            cli, ["auth", "login", "--email", "a@b.c", "--password", "pw", "--role", "MANAGER"]
        )
        assert result.exit_code == 0
        assert store.get().token == "YUBiLmM6cHc="

        assert "a@b.c (MANAGER)" in runner.invoke(cli, ["auth", "whoami"]).output

        runner.invoke(cli, ["auth", "logout"])
        assert store.get() is None
        assert "Not signed in." in runner.invoke(cli, ["auth", "whoami"]).output
