"""Inventory snapshot as seen by the replenishment workflow.

The snapshot is fetched once when the workflow opens and is never
refreshed while the session lives. Items are read-only.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InventoryItem:
    """A catalog entry with its current stock level.

    ``min_quantity`` is None when no reorder threshold is configured.
    """

    id: str
    name: str
    current_quantity: int
    min_quantity: int | None = None

    @property
    def has_threshold(self) -> bool:
        return self.min_quantity is not None

    @property
    def is_low_stock(self) -> bool:
        return self.min_quantity is not None and self.current_quantity <= self.min_quantity


@dataclass(frozen=True)
class InventorySnapshot:
    """Full catalog plus the server-filtered low-stock subset."""

    catalog: tuple[InventoryItem, ...] = ()
    low_stock: tuple[InventoryItem, ...] = field(default=())

    def find(self, product_id: str) -> InventoryItem | None:
        """Look up a catalog item; ids are compared in their string form."""
        key = str(product_id)
        for item in self.catalog:
            if item.id == key:
                return item
        return None

    def find_low_stock(self, product_id: str) -> InventoryItem | None:
        key = str(product_id)
        for item in self.low_stock:
            if item.id == key:
                return item
        return None
