from __future__ import annotations

from typing import Any

from .base import FeedService


class MandateService(FeedService):
    """Mandate updates feed plus the invite and sign flows."""

    path = "mandate"
    data_key = "Messages"

    def invite(self, params: dict[str, Any]) -> Any:
        """Prepare a mandate and return its invite (``mndtId``, ``url``, ...)."""
        return self.client.post("invite", params, form=True)

    def sign(self, params: dict[str, Any]) -> Any:
        """Create a mandate signed directly by the given ``method`` (e.g. ``"paper"``)."""
        return self.client.post("sign", params, form=True)
