from __future__ import annotations

from typing import Any

from .base import FeedService


class TransactionService(FeedService):
    path = "transaction"
    data_key = "Entries"

    def get(self, params: dict[str, Any] | None = None) -> Any:
        """Single request against the transaction endpoint, no paging."""
        return self.client.get(self.path, params)
