"""HTTP implementation of InventorySnapshotProvider."""

from __future__ import annotations

from typing import Any

from restock.domain.exceptions import ServerRejectionError
from restock.domain.model.inventory import InventoryItem
from restock.domain.repository.inventory_provider import InventorySnapshotProvider
from restock.infrastructure.api.client import ApiClient

CATALOG_PATH = "/api/products"
LOW_STOCK_PATH = "/api/products/low-stock"


class HttpInventorySnapshotProvider(InventorySnapshotProvider):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- InventorySnapshotProvider interface ----------------------------------

    def list_catalog(self) -> list[InventoryItem]:
        return self._fetch(CATALOG_PATH)

    def list_low_stock(self) -> list[InventoryItem]:
        return self._fetch(LOW_STOCK_PATH)

    # --- Serialization --------------------------------------------------------

    def _fetch(self, path: str) -> list[InventoryItem]:
        data = self._client.get(path).data
        if data is None:
            return []
        if not isinstance(data, list):
            raise ServerRejectionError("malformed inventory record")
        return [self._to_domain(raw) for raw in data]

    @staticmethod
    def _to_domain(raw: Any) -> InventoryItem:
        try:
            min_quantity = raw.get("minQuantity")
            return InventoryItem(
                id=str(raw["id"]),
                name=str(raw["name"]),
                current_quantity=_stock_count(raw["quantity"]),
                min_quantity=_stock_count(min_quantity) if min_quantity is not None else None,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ServerRejectionError("malformed inventory record") from exc


def _stock_count(value: Any) -> int:
    """A non-negative whole number; 3.0 is accepted, 2.9 and -1 are not."""
    if isinstance(value, bool):
        raise TypeError("stock count must be a number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"stock count {value} is not whole")
        value = int(value)
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"invalid stock count {value!r}")
    return value
