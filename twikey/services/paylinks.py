from __future__ import annotations

from typing import Any

from .base import FeedService


class PaylinkService(FeedService):
    path = "payment/link/feed"
    data_key = "Links"

    def create(self, params: dict[str, Any]) -> Any:
        """Create a payment link; the response carries its ``id`` and ``url``."""
        return self.client.post("payment/link", params, form=True)
