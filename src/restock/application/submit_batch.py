"""Application service: submit the whole draft as one batch.

From the client's point of view the batch is all-or-nothing: on success
every submitted line leaves the draft, on any failure the draft is left
exactly as it was so the user can retry.

The work is split in three phases so a caller that serializes access to
the session can release it while the network call is in flight:

  prepare: capture the ordered lines (rejects an empty draft locally)
  send:    one network call carrying every line
  settle:  drop the submitted lines; restart ids if nothing is left
"""

from __future__ import annotations

import logging

from restock.application.dto import SubmissionOutcome
from restock.domain.exceptions import EmptyBatchError, ServerRejectionError
from restock.domain.model.draft import DraftLineItem, DraftSession
from restock.domain.repository.stock_request_gateway import (
    StockRequestGateway,
    StockRequestRecord,
    SubmissionReceipt,
)

logger = logging.getLogger(__name__)

SUBMITTED = "Stock requests submitted successfully!"
SUBMIT_FAILED = "Failed to submit requests. Please try again."


def to_wire(lines: list[DraftLineItem]) -> list[StockRequestRecord]:
    """Project draft lines to wire records, preserving order."""
    return [
        StockRequestRecord(
            product_id=line.product_id,
            quantity=line.quantity.value,
            supplier=line.supplier,
            urgency=line.urgency.value,
            notes=line.notes,
        )
        for line in lines
    ]


class SubmitBatchHandler:

    def __init__(self, gateway: StockRequestGateway) -> None:
        self._gateway = gateway

    def handle(self, session: DraftSession) -> SubmissionOutcome:
        batch = self.prepare(session)
        receipt = self.send(batch)
        return self.settle(session, batch, receipt)

    # --- Phases ---------------------------------------------------------------

    @staticmethod
    def prepare(session: DraftSession) -> list[DraftLineItem]:
        batch = session.list()
        if not batch:
            raise EmptyBatchError("nothing to submit")
        return batch

    def send(self, batch: list[DraftLineItem]) -> SubmissionReceipt:
        logger.info("Submitting %d stock request(s)", len(batch))
        try:
            return self._gateway.submit_batch(to_wire(batch))
        except ServerRejectionError as exc:
            logger.warning("Stock request batch rejected: %s", exc)
            message = str(exc) or SUBMIT_FAILED
            raise ServerRejectionError(message, status=exc.status) from exc

    @staticmethod
    def settle(
        session: DraftSession,
        batch: list[DraftLineItem],
        receipt: SubmissionReceipt,
    ) -> SubmissionOutcome:
        session.discard(batch)
        if len(session) == 0:
            session.reset()
        else:
            # Lines added while the call was in flight keep their ids.
            logger.info("%d line(s) added during submission kept in draft", len(session))
        if receipt.message:
            logger.info("Server acknowledged batch: %s", receipt.message)
        return SubmissionOutcome(submitted=len(batch), message=SUBMITTED)
