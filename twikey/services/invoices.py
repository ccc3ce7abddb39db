from __future__ import annotations

from typing import Any

from .base import FeedService


class InvoiceService(FeedService):
    path = "invoice"
    data_key = "Invoices"

    def create(self, params: dict[str, Any]) -> Any:
        return self.client.post("invoice", params)

    def pdf(self, invoice_id: str) -> bytes:
        """Download the invoice document as raw PDF bytes."""
        return self.client.get_binary(f"invoice/{invoice_id}/pdf")
