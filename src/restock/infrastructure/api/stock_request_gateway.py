"""HTTP implementation of StockRequestGateway."""

from __future__ import annotations

from restock.domain.exceptions import ServerRejectionError
from restock.domain.repository.stock_request_gateway import (
    StockRequestGateway,
    StockRequestRecord,
    SubmissionReceipt,
)
from restock.infrastructure.api.client import ApiClient

SUBMIT_PATH = "/api/stock-requests"


class HttpStockRequestGateway(StockRequestGateway):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def submit_batch(self, records: list[StockRequestRecord]) -> SubmissionReceipt:
        payload = {"requests": [record.to_payload() for record in records]}
        response = self._client.post(SUBMIT_PATH, payload)

        data = response.data
        message = None
        if isinstance(data, dict):
            message = data.get("message")
            if data.get("success") is False:
                raise ServerRejectionError(
                    message or "Failed to submit requests. Please try again.",
                    status=response.status,
                )
        elif isinstance(data, str) and data.strip():
            message = data.strip()
        return SubmissionReceipt(message=message)
