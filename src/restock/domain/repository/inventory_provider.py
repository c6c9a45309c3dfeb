"""Abstract source of the inventory snapshot.

Defined in the domain layer so the domain never depends on
infrastructure. The HTTP implementation lives in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from restock.domain.model.inventory import InventoryItem


class InventorySnapshotProvider(ABC):

    @abstractmethod
    def list_catalog(self) -> list[InventoryItem]:
        """Return every catalog item in server order."""

    @abstractmethod
    def list_low_stock(self) -> list[InventoryItem]:
        """Return the items at or below their minimum threshold."""
