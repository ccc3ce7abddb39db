"""Session-token login against the Twikey creditor API.

The API key is exchanged for a session token by a form POST to the API root;
the token comes back in the ``Authorization`` response header and stays valid
for 12 hours.

Thread safety: the check-refresh-write sequence in :meth:`Authenticator.authenticate`
runs under a single lock, so concurrent callers sharing one client log in at most
once per expiry. Resource calls themselves are not serialized.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from .errors import AuthenticationError
from .transport import Transport

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.twikey.com/creditor"
SESSION_TTL = 12 * 60 * 60  # seconds


@dataclass(frozen=True)
class Session:
    token: str | None = None
    obtained_at: float = 0.0

    def is_fresh(self, now: float, ttl: float = SESSION_TTL) -> bool:
        return self.token is not None and (now - self.obtained_at) < ttl


def build_auth_headers(token: str, accept: str = "application/json") -> dict[str, str]:
    return {"Authorization": token, "Accept": accept}


class Authenticator:
    """Owns the session token and renews it when absent or stale."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str,
        transport: Transport,
        clock: Callable[[], float] = time.time,
        ttl: float = SESSION_TTL,
    ) -> None:
        self._api_key = api_key
        self.base_url = base_url
        self.transport = transport
        self.clock = clock
        self.ttl = ttl
        self._session = Session()
        self._lock = threading.Lock()

    @property
    def session(self) -> Session:
        return self._session

    def invalidate(self) -> None:
        """Forget the cached token so the next call logs in again."""
        with self._lock:
            self._session = Session()

    def authenticate(self) -> str:
        """Return a valid session token, logging in first if needed.

        Raises AuthenticationError if no API key is set or the response lacks
        an ``Authorization`` header. A failed login drops any expired session,
        so no token stays cached.
        """
        if not self._api_key:
            raise AuthenticationError("Couldn't log in: no api key set")

        with self._lock:
            if self._session.is_fresh(self.clock(), self.ttl):
                return self._session.token  # type: ignore[return-value]

            logger.info(f"Logging in to {self.base_url}")
            res = self.transport.perform("POST", self.base_url, data={"apiToken": self._api_key})
            token = res.headers.get("Authorization")
            if token is None:
                self._session = Session()
                raise AuthenticationError(f"Couldn't log in: {res.text}")

            self._session = Session(token=token, obtained_at=self.clock())
            logger.debug("Session token renewed")
            return token
