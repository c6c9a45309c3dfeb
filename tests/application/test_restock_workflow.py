"""Tests for the workflow controller and its notification channel."""

from restock.application.workflow import LINE_ADDED, RestockWorkflow
from restock.domain.exceptions import (
    AuthenticationError,
    NetworkError,
    ServerRejectionError,
)
from restock.domain.service.line_item_validator import LineItemCandidate
from tests.fakes import (
    CollectingNotifier,
    FakeInventoryProvider,
    FakeStockRequestGateway,
    sample_catalog,
)


def _setup(gateway=None, provider=None):
    notifier = CollectingNotifier()
    gateway = gateway or FakeStockRequestGateway()
    workflow = RestockWorkflow(
        provider=provider or FakeInventoryProvider(sample_catalog()),
        gateway=gateway,
        notifier=notifier,
    )
    return workflow, gateway, notifier


def _candidate(product_id="p1", qty="5", supplier="Office Depot"):
    return LineItemCandidate(product_id=product_id, quantity=qty, supplier=supplier)


class TestOpen:

    def test_open_loads_snapshot_once(self):
        provider = FakeInventoryProvider(sample_catalog())
        workflow, _, _ = _setup(provider=provider)

        assert workflow.open() is True
        assert provider.calls == 2
        assert [line.id for line in workflow.low_stock()] == ["p1", "p3"]
        assert len(workflow.catalog()) == 4

    def test_open_failure_is_notified(self):
        provider = FakeInventoryProvider(error=ServerRejectionError("boom", 500))
        workflow, _, notifier = _setup(provider=provider)

        assert workflow.open() is False
        assert notifier.errors == ["Failed to fetch products. Please try again."]


class TestDraftCommands:

    def test_add_notifies_success(self):
        workflow, _, notifier = _setup()
        workflow.open()

        dto = workflow.add_line(_candidate())

        assert dto.draft_id == 1
        assert notifier.successes == [LINE_ADDED]

    def test_validation_error_is_notified_not_raised(self):
        workflow, _, notifier = _setup()
        workflow.open()

        assert workflow.add_line(_candidate(product_id="")) is None
        assert notifier.errors == ["product required"]
        assert workflow.lines() == []

    def test_remove_and_clear_all(self):
        workflow, _, _ = _setup()
        workflow.open()
        for _ in range(3):
            workflow.add_line(_candidate())

        assert workflow.remove_line(2) is True
        assert workflow.remove_line(2) is False
        assert [line.draft_id for line in workflow.lines()] == [1, 3]

        assert workflow.clear_all() == 2
        assert workflow.add_line(_candidate()).draft_id == 1

    def test_select_unknown_product_is_notified(self):
        workflow, _, notifier = _setup()
        workflow.open()
        assert workflow.select_product("zz") is None
        assert notifier.errors == ["product zz not in inventory snapshot"]

    def test_alert_prefill(self):
        workflow, _, _ = _setup()
        workflow.open()
        prefill = workflow.select_low_stock_alert("p3")
        assert prefill.urgency == "urgent"


class TestSubmit:

    def test_success_empties_draft(self):
        workflow, gateway, notifier = _setup()
        workflow.open()
        workflow.add_line(_candidate())
        workflow.add_line(_candidate("p2"))

        outcome = workflow.submit()

        assert outcome.submitted == 2
        assert workflow.lines() == []
        assert notifier.successes[-1] == "Stock requests submitted successfully!"
        assert workflow.add_line(_candidate()).draft_id == 1
        assert workflow.submitting is False

    def test_empty_submit_is_notified(self):
        workflow, gateway, notifier = _setup()
        workflow.open()

        assert workflow.submit() is None
        assert notifier.errors == ["nothing to submit"]
        assert gateway.batches == []

    def test_failure_keeps_lines_and_surfaces_message(self):
        gateway = FakeStockRequestGateway(error=ServerRejectionError("Quota exceeded", 400))
        workflow, _, notifier = _setup(gateway=gateway)
        workflow.open()
        workflow.add_line(_candidate())
        before = workflow.lines()

        assert workflow.submit() is None

        assert workflow.lines() == before
        assert notifier.errors == ["Quota exceeded"]
        assert workflow.submitting is False

    def test_network_and_auth_failures_are_notified(self):
        gateway = FakeStockRequestGateway(error=NetworkError("Network error. Please check your connection and try again."))
        workflow, _, notifier = _setup(gateway=gateway)
        workflow.open()
        workflow.add_line(_candidate())

        workflow.submit()
        gateway.error = AuthenticationError()
        workflow.submit()

        assert notifier.errors == [
            "Network error. Please check your connection and try again.",
            "authentication required",
        ]
        assert len(workflow.lines()) == 1

    def test_reentrant_submit_is_refused(self):
        gateway = FakeStockRequestGateway()
        workflow, _, notifier = _setup(gateway=gateway)
        workflow.open()
        workflow.add_line(_candidate())

        nested = []
        gateway.during_call = lambda: nested.append(workflow.submit())
        workflow.submit()

        assert nested == [None]
        assert "submission already in progress" in notifier.errors
        assert len(gateway.batches) == 1

    def test_lines_added_in_flight_survive_success(self):
        gateway = FakeStockRequestGateway()
        workflow, _, _ = _setup(gateway=gateway)
        workflow.open()
        workflow.add_line(_candidate("p1"))

        gateway.during_call = lambda: workflow.add_line(_candidate("p2"))
        workflow.submit()

        remaining = workflow.lines()
        assert [(line.draft_id, line.product_id) for line in remaining] == [(2, "p2")]
        assert workflow.add_line(_candidate()).draft_id == 3

    def test_clear_all_during_submit_keeps_unsent_line(self):
        gateway = FakeStockRequestGateway()
        workflow, _, _ = _setup(gateway=gateway)
        workflow.open()
        workflow.add_line(_candidate("p1"))

        def clear_and_add():
            workflow.clear_all()
            workflow.add_line(_candidate("p2"))

        gateway.during_call = clear_and_add
        workflow.submit()

        assert [r.product_id for r in gateway.batches[0]] == ["p1"]
        assert [(line.draft_id, line.product_id) for line in workflow.lines()] == [(1, "p2")]
