"""Restock workflow: the controller behind the stock-request screen.

Owns one DraftSession and the inventory snapshot it was opened with.
Every call that touches the draft goes through ``self._lock`` so there
is a single writer, whatever thread the call comes from. Only the
network calls run outside the lock.

Errors never escape: each DomainException is turned into one error
notification and the method returns None (or False).
"""

from __future__ import annotations

import logging
import threading

from restock.application.add_line_item import AddLineItemHandler
from restock.application.dto import (
    DraftLineDTO,
    InventoryLineDTO,
    PrefillDTO,
    SubmissionOutcome,
)
from restock.application.notifications import Notifier
from restock.application.open_session import OpenSessionHandler
from restock.application.prefill import PrefillHandler
from restock.application.remove_line_item import ClearDraftHandler, RemoveLineItemHandler
from restock.application.submit_batch import SubmitBatchHandler
from restock.domain.exceptions import DomainException, SubmissionInProgressError
from restock.domain.model.draft import DraftSession
from restock.domain.model.inventory import InventorySnapshot
from restock.domain.repository.inventory_provider import InventorySnapshotProvider
from restock.domain.repository.stock_request_gateway import StockRequestGateway
from restock.domain.service.line_item_validator import LineItemCandidate

logger = logging.getLogger(__name__)

LINE_ADDED = "Request added to draft list"


class RestockWorkflow:

    def __init__(
        self,
        provider: InventorySnapshotProvider,
        gateway: StockRequestGateway,
        notifier: Notifier,
    ) -> None:
        self._provider = provider
        self._submitter = SubmitBatchHandler(gateway)
        self._notifier = notifier
        self._session = DraftSession()
        self._snapshot = InventorySnapshot()
        self._lock = threading.RLock()
        self._submitting = False

    # --- Queries --------------------------------------------------------------

    @property
    def snapshot(self) -> InventorySnapshot:
        return self._snapshot

    @property
    def submitting(self) -> bool:
        return self._submitting

    def catalog(self) -> list[InventoryLineDTO]:
        return [InventoryLineDTO.from_item(item) for item in self._snapshot.catalog]

    def low_stock(self) -> list[InventoryLineDTO]:
        return [InventoryLineDTO.from_item(item) for item in self._snapshot.low_stock]

    def lines(self) -> list[DraftLineDTO]:
        with self._lock:
            return [DraftLineDTO.from_line(line) for line in self._session.list()]

    # --- Commands -------------------------------------------------------------

    def open(self) -> bool:
        """Load the inventory snapshot and start with an empty draft."""
        try:
            snapshot = OpenSessionHandler(self._provider).handle()
        except DomainException as exc:
            self._report(exc)
            return False
        with self._lock:
            self._snapshot = snapshot
            self._session = DraftSession()
        return True

    def select_product(self, product_id: str) -> PrefillDTO | None:
        try:
            return PrefillHandler(self._snapshot).for_selection(product_id)
        except DomainException as exc:
            self._report(exc)
            return None

    def select_low_stock_alert(self, product_id: str) -> PrefillDTO | None:
        try:
            return PrefillHandler(self._snapshot).for_low_stock_alert(product_id)
        except DomainException as exc:
            self._report(exc)
            return None

    def add_line(self, candidate: LineItemCandidate) -> DraftLineDTO | None:
        with self._lock:
            try:
                dto = AddLineItemHandler(self._session, self._snapshot).handle(candidate)
            except DomainException as exc:
                self._report(exc)
                return None
        logger.debug("Draft line #%d added for product %s", dto.draft_id, dto.product_id)
        self._notifier.success(LINE_ADDED)
        return dto

    def remove_line(self, draft_id: int) -> bool:
        with self._lock:
            return RemoveLineItemHandler(self._session).handle(draft_id)

    def clear_all(self) -> int:
        with self._lock:
            return ClearDraftHandler(self._session).handle()

    def submit(self) -> SubmissionOutcome | None:
        """Submit every draft line in one call.

        A second submit while one is in flight is refused. Lines may
        still be added or removed during the call.
        """
        try:
            with self._lock:
                if self._submitting:
                    raise SubmissionInProgressError("submission already in progress")
                batch = self._submitter.prepare(self._session)
                self._submitting = True
        except DomainException as exc:
            self._report(exc)
            return None

        outcome = None
        try:
            receipt = self._submitter.send(batch)
            with self._lock:
                outcome = self._submitter.settle(self._session, batch, receipt)
        except DomainException as exc:
            self._report(exc)
        finally:
            with self._lock:
                self._submitting = False

        if outcome is not None:
            self._notifier.success(outcome.message)
        return outcome

    # --- Internal helpers -----------------------------------------------------

    def _report(self, exc: DomainException) -> None:
        logger.info("%s: %s", type(exc).__name__, exc)
        self._notifier.error(str(exc))
