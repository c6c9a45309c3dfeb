"""Application service: load the inventory snapshot for a new session."""

from __future__ import annotations

import logging

from restock.domain.exceptions import ServerRejectionError
from restock.domain.model.inventory import InventorySnapshot
from restock.domain.repository.inventory_provider import InventorySnapshotProvider

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch products. Please try again."


class OpenSessionHandler:

    def __init__(self, provider: InventorySnapshotProvider) -> None:
        self._provider = provider

    def handle(self) -> InventorySnapshot:
        """Fetch catalog and low-stock list once.

        Both reads must succeed; a partial snapshot is never returned.
        """
        try:
            catalog = self._provider.list_catalog()
            low_stock = self._provider.list_low_stock()
        except ServerRejectionError as exc:
            logger.warning("Inventory fetch rejected: %s", exc)
            raise ServerRejectionError(FETCH_FAILED, status=exc.status) from exc

        logger.info(
            "Loaded inventory snapshot: %d items, %d low on stock",
            len(catalog),
            len(low_stock),
        )
        return InventorySnapshot(catalog=tuple(catalog), low_stock=tuple(low_stock))
