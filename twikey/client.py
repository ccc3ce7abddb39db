from __future__ import annotations

import logging
from typing import Any

import requests

from .auth import DEFAULT_API_URL, Authenticator, build_auth_headers
from .config import load_config
from .errors import RequestError, TwikeyError
from .services import InvoiceService, MandateService, PaylinkService, TransactionService
from .transport import Transport, join_url, normalize_base_url
from .webhook import verify_webhook

logger = logging.getLogger(__name__)


class TwikeyClient:
    """Authenticated client for the Twikey creditor API.

    Every call logs in on demand (see :class:`~twikey.auth.Authenticator`), sends
    the session token in the ``Authorization`` header and raises
    :class:`~twikey.errors.RequestError` for any non-2xx response.

    Example:
        >>> client = TwikeyClient(api_key="...")
        >>> for message in client.mandates.feed():
        ...     print(message["Mndt"]["MndtId"])
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_API_URL,
        timeout: float | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = normalize_base_url(base_url)
        self.transport = transport or Transport(timeout=timeout)
        self.authenticator = Authenticator(api_key, self.base_url, self.transport)

        self.mandates = MandateService(self)
        self.invoices = InvoiceService(self)
        self.transactions = TransactionService(self)
        self.paylinks = PaylinkService(self)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> TwikeyClient:
        cfg = load_config(dotenv=dotenv)
        return cls(api_key=cfg.api_key, base_url=cfg.base_url, timeout=cfg.timeout)

    def ping(self) -> str:
        """Log in (if needed) and return the current session token."""
        return self.authenticator.authenticate()

    def verify_webhook(self, signature_header: str, payload: str | bytes) -> bool:
        return verify_webhook(self.api_key, signature_header, payload)

    # ------------------------------------------------------------------
    # Resource calls
    # ------------------------------------------------------------------
    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        res = self._request("GET", path, params=params)
        return self._decode(res)

    def get_binary(self, path: str, params: dict[str, Any] | None = None) -> bytes:
        res = self._request("GET", path, params=params, accept="application/pdf")
        return res.content

    def post(self, path: str, body: dict[str, Any] | None = None, form: bool = False) -> Any:
        body = body or {}
        if form:
            res = self._request("POST", path, data=body)
        else:
            res = self._request("POST", path, json=body)
        return self._decode(res)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        json: Any = None,
        accept: str = "application/json",
    ) -> requests.Response:
        url = join_url(self.base_url, path)
        headers = build_auth_headers(self.authenticator.authenticate(), accept=accept)
        if json is not None:
            headers["Content-Type"] = "application/json"

        res = self.transport.perform(method, url, headers=headers, params=params, data=data, json=json)
        if not 200 <= res.status_code < 300:
            logger.debug(f"{method} {url} failed with HTTP {res.status_code}")
            raise RequestError(res.status_code, res.reason, res.text)
        return res

    @staticmethod
    def _decode(res: requests.Response) -> Any:
        try:
            return res.json()
        except ValueError as e:
            raise TwikeyError(f"Invalid JSON returned from {res.url}") from e

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> TwikeyClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
