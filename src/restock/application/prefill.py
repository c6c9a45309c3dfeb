"""Application service: propose form values for a selected product.

There are two entry points and they intentionally differ:
- picking from the catalog keeps urgency at normal and may leave the
  quantity blank;
- picking from a low-stock alert raises urgency and always proposes at
  least one unit.
"""

from __future__ import annotations

from restock.application.dto import PrefillDTO
from restock.domain.exceptions import EntityNotFoundError
from restock.domain.model.inventory import InventoryItem, InventorySnapshot
from restock.domain.service.suggestion import (
    suggest_for_low_stock_alert,
    suggest_for_selection,
)


class PrefillHandler:

    def __init__(self, snapshot: InventorySnapshot) -> None:
        self._snapshot = snapshot

    def for_selection(self, product_id: str) -> PrefillDTO:
        item = self._require(self._snapshot.find(product_id), product_id)
        suggestion = suggest_for_selection(item)
        return PrefillDTO(
            product_id=item.id,
            product_name=item.name,
            quantity=suggestion.quantity,
            urgency=suggestion.urgency.value,
        )

    def for_low_stock_alert(self, product_id: str) -> PrefillDTO:
        item = self._snapshot.find_low_stock(product_id) or self._snapshot.find(product_id)
        item = self._require(item, product_id)
        suggestion = suggest_for_low_stock_alert(item)
        quantity = max(suggestion.quantity or 0, 1)
        return PrefillDTO(
            product_id=item.id,
            product_name=item.name,
            quantity=quantity,
            urgency=suggestion.urgency.value,
        )

    @staticmethod
    def _require(item: InventoryItem | None, product_id: str) -> InventoryItem:
        if item is None:
            raise EntityNotFoundError(f"product {product_id} not in inventory snapshot")
        return item
