"""Application service: admit a line item into the draft.

Validation runs first; the product is then resolved in the snapshot and
its display fields are copied onto the line.
"""

from __future__ import annotations

from restock.application.dto import DraftLineDTO
from restock.domain.exceptions import EntityNotFoundError
from restock.domain.model.draft import DraftLineItem, DraftSession
from restock.domain.model.inventory import InventorySnapshot
from restock.domain.service.line_item_validator import LineItemCandidate, validate


class AddLineItemHandler:

    def __init__(self, session: DraftSession, snapshot: InventorySnapshot) -> None:
        self._session = session
        self._snapshot = snapshot

    def handle(self, candidate: LineItemCandidate) -> DraftLineDTO:
        line = validate(candidate)

        product = self._snapshot.find(line.product_id)
        if product is None:
            raise EntityNotFoundError(
                f"product {line.product_id} not in inventory snapshot"
            )

        admitted = self._session.add(
            DraftLineItem(
                product_id=product.id,
                product_name=product.name,
                quantity=line.quantity,
                supplier=line.supplier,
                urgency=line.urgency,
                notes=line.notes,
                current_stock=product.current_quantity,  # snapshot at admission
                min_stock=product.min_quantity,
            )
        )
        return DraftLineDTO.from_line(admitted)
