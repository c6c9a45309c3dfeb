"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from typing import Callable

from restock.application.notifications import Notifier
from restock.application.workflow import RestockWorkflow
from restock.infrastructure.api.client import ApiClient
from restock.infrastructure.api.inventory_provider import HttpInventorySnapshotProvider
from restock.infrastructure.api.stock_request_gateway import HttpStockRequestGateway
from restock.infrastructure.config import Settings, load_settings
from restock.infrastructure.persistence.json_credential_store import JsonCredentialStore


def credential_store(settings: Settings | None = None) -> JsonCredentialStore:
    settings = settings or load_settings()
    return JsonCredentialStore(settings.credentials_file)


def api_client(
    settings: Settings | None = None,
    on_session_expired: Callable[[], None] | None = None,
) -> ApiClient:
    settings = settings or load_settings()
    return ApiClient(
        base_url=settings.api_url,
        credentials=credential_store(settings),
        timeout=settings.timeout,
        on_session_expired=on_session_expired,
    )


def inventory_provider(client: ApiClient | None = None) -> HttpInventorySnapshotProvider:
    return HttpInventorySnapshotProvider(client or api_client())


def restock_workflow(
    notifier: Notifier,
    on_session_expired: Callable[[], None] | None = None,
) -> RestockWorkflow:
    client = api_client(on_session_expired=on_session_expired)
    return RestockWorkflow(
        provider=HttpInventorySnapshotProvider(client),
        gateway=HttpStockRequestGateway(client),
        notifier=notifier,
    )
