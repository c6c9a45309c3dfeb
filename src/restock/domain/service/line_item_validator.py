"""Domain service: admission rules for a draft line item.

Rules are checked in order and the first failure wins, so the user
always gets exactly one actionable message.
"""

from __future__ import annotations

from dataclasses import dataclass

from restock.domain.exceptions import ValidationError
from restock.domain.model.value_objects import Quantity, Urgency


@dataclass(frozen=True)
class LineItemCandidate:
    """Raw form input for one line item, before any parsing."""

    product_id: str | None
    quantity: str | int | None
    supplier: str | None
    urgency: str | Urgency | None = Urgency.NORMAL
    notes: str | None = ""


@dataclass(frozen=True)
class ValidatedLine:
    product_id: str
    quantity: Quantity
    supplier: str
    urgency: Urgency
    notes: str


def validate(candidate: LineItemCandidate) -> ValidatedLine:
    """Check a candidate and return its parsed form.

    Raises ValidationError with one of:
    "product required", "quantity must be positive",
    "supplier required", "invalid urgency".
    """
    product_id = str(candidate.product_id).strip() if candidate.product_id is not None else ""
    if not product_id:
        raise ValidationError("product required")

    quantity = Quantity.parse(candidate.quantity)

    supplier = (candidate.supplier or "").strip()
    if not supplier:
        raise ValidationError("supplier required")

    urgency = Urgency.parse(candidate.urgency)

    return ValidatedLine(
        product_id=product_id,
        quantity=quantity,
        supplier=supplier,
        urgency=urgency,
        notes=(candidate.notes or "").strip(),
    )
