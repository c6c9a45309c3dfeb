"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from restock.domain.model.draft import DraftLineItem
from restock.domain.model.inventory import InventoryItem


@dataclass(frozen=True)
class InventoryLineDTO:
    id: str
    name: str
    current: int
    minimum: int | None
    low_stock: bool

    @staticmethod
    def from_item(item: InventoryItem) -> InventoryLineDTO:
        return InventoryLineDTO(
            id=item.id,
            name=item.name,
            current=item.current_quantity,
            minimum=item.min_quantity,
            low_stock=item.is_low_stock,
        )


@dataclass(frozen=True)
class PrefillDTO:
    """Output: form values proposed for a selected product.

    ``quantity`` is None when nothing should be pre-filled.
    """

    product_id: str
    product_name: str
    quantity: int | None
    urgency: str


@dataclass(frozen=True)
class DraftLineDTO:
    """Output: a single draft line as displayed to the user."""

    draft_id: int
    product_id: str
    product_name: str
    quantity: int
    supplier: str
    urgency: str
    notes: str
    current_stock: int
    min_stock: int | None

    @staticmethod
    def from_line(line: DraftLineItem) -> DraftLineDTO:
        return DraftLineDTO(
            draft_id=line.draft_id,  # type: ignore[arg-type]
            product_id=line.product_id,
            product_name=line.product_name,
            quantity=line.quantity.value,
            supplier=line.supplier,
            urgency=line.urgency.value,
            notes=line.notes,
            current_stock=line.current_stock,
            min_stock=line.min_stock,
        )


@dataclass(frozen=True)
class SubmissionOutcome:
    """Output: an accepted batch."""

    submitted: int
    message: str
