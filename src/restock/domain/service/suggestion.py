"""Domain service: reorder suggestions.

Pure functions of an InventoryItem. The target level is twice the
configured minimum; nothing is suggested when no minimum is configured.
"""

from __future__ import annotations

from dataclasses import dataclass

from restock.domain.model.inventory import InventoryItem
from restock.domain.model.value_objects import Urgency


@dataclass(frozen=True)
class Suggestion:
    quantity: int | None
    urgency: Urgency


def suggested_quantity(item: InventoryItem) -> int | None:
    if item.min_quantity is None:
        return None
    return max(0, item.min_quantity * 2 - item.current_quantity)


def alert_urgency(item: InventoryItem) -> Urgency:
    """Urgency for an item raised from a low-stock alert."""
    return Urgency.URGENT if item.current_quantity <= 1 else Urgency.HIGH


def suggest_for_selection(item: InventoryItem) -> Suggestion:
    """Prefill for a product picked from the catalog.

    Urgency stays NORMAL; raising it is left to the user.
    """
    return Suggestion(quantity=suggested_quantity(item), urgency=Urgency.NORMAL)


def suggest_for_low_stock_alert(item: InventoryItem) -> Suggestion:
    """Prefill for a product picked from the low-stock alert list."""
    return Suggestion(quantity=suggested_quantity(item), urgency=alert_urgency(item))
