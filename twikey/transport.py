"""Single HTTP round trips over a pooled ``requests`` session."""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from .errors import TransportError

logger = logging.getLogger(__name__)


def join_url(base: str, *parts: str) -> str:
    """Join URL parts with exactly one slash between them.

    >>> join_url("https://x.com/creditor/", "/mandate")
    'https://x.com/creditor/mandate'
    """
    segments = [base.rstrip("/")]
    for part in parts:
        part = str(part).strip("/")
        if part:
            segments.append(part)
    return "/".join(segments)


def normalize_base_url(url: str) -> str:
    return url.rstrip("/") + "/"


def _session_without_retries() -> requests.Session:
    sess = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
    sess.mount("http://", adapter)
    sess.mount("https://", adapter)
    return sess


class Transport:
    """Performs one request/response round trip; never retries.

    Success or failure by status class is decided by the caller; this layer only
    turns network-level failures into :class:`TransportError`.
    """

    def __init__(self, timeout: float | None = None, session: requests.Session | None = None) -> None:
        self.timeout = timeout
        self.session = session or _session_without_retries()

    def perform(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        json: Any = None,
    ) -> requests.Response:
        logger.debug(f"{method} {url}")
        try:
            res = self.session.request(
                method,
                url,
                headers=headers or {},
                params=params or None,
                data=data,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        logger.debug(f"{method} {url} -> {res.status_code}")
        return res

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
