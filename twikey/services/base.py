from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from twikey.feed import Feed, Item

if TYPE_CHECKING:
    from twikey.client import TwikeyClient

logger = logging.getLogger(__name__)


class FeedService:
    """Binds a client to one feed endpoint and the response field holding its items."""

    path: str = ""
    data_key: str = ""

    def __init__(self, client: TwikeyClient) -> None:
        self.client = client

    def feed(self, params: dict[str, Any] | None = None) -> Feed:
        """Return a new :class:`~twikey.feed.Feed` over this endpoint.

        ``params`` are sent with every page request, merged with the cursor
        options supplied by the feed.
        """
        params = dict(params or {})

        def fetch_page(options: dict[str, Any]) -> list[Item]:
            payload = self.client.get(self.path, {**params, **options})
            if not isinstance(payload, dict) or self.data_key not in payload:
                logger.debug(f"{self.path}: no {self.data_key!r} in response, treating as empty page")
                return []
            return list(payload[self.data_key] or [])

        return Feed(fetch_page)
