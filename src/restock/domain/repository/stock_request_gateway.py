"""Abstract transport for submitting a replenishment batch."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StockRequestRecord:
    """Wire form of one line item. Display-only fields are not sent."""

    product_id: str
    quantity: int
    supplier: str
    urgency: str
    notes: str

    def to_payload(self) -> dict:
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
            "supplier": self.supplier,
            "urgency": self.urgency,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class SubmissionReceipt:
    """Server acknowledgement of a whole batch."""

    message: str | None = None


class StockRequestGateway(ABC):

    @abstractmethod
    def submit_batch(self, records: list[StockRequestRecord]) -> SubmissionReceipt:
        """Send the whole batch in a single call.

        Raises a SubmissionError subclass if the batch was not accepted.
        """
