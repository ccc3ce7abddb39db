"""Exception types raised by the Twikey client."""

from __future__ import annotations


class TwikeyError(RuntimeError):
    """Base error for every failure raised by this package."""


class AuthenticationError(TwikeyError):
    """Raised when no API key is configured or the login is rejected."""


class RequestError(TwikeyError):
    """Raised for non-2xx HTTP responses.

    Keeps the status code, status message and raw body so callers can inspect
    what the server returned.
    """

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"HTTP {status_code}: {reason}\n{body}")


class TransportError(TwikeyError):
    """Raised when the HTTP round trip itself fails (connection, DNS, timeout)."""


class WebhookVerificationError(TwikeyError):
    """Raised when a webhook signature does not match or cannot be computed."""


class ConfigError(TwikeyError):
    """Raised when environment configuration is invalid."""
