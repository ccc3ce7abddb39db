"""Python client for the Twikey creditor API.

This package provides:
- Session-token login with transparent 12 hour renewal
- Authenticated JSON/binary calls with typed errors
- Lazy iteration over cursor-paginated feeds
- Mandate, invoice, transaction and payment link services
- Webhook signature verification
"""

from .auth import DEFAULT_API_URL, Authenticator, Session
from .client import TwikeyClient
from .config import TwikeyConfig, load_config
from .errors import (
    AuthenticationError,
    ConfigError,
    RequestError,
    TransportError,
    TwikeyError,
    WebhookVerificationError,
)
from .feed import Feed, FeedState
from .webhook import compute_signature, verify_webhook

__all__ = [
    "DEFAULT_API_URL",
    "Authenticator",
    "AuthenticationError",
    "ConfigError",
    "Feed",
    "FeedState",
    "RequestError",
    "Session",
    "TransportError",
    "TwikeyClient",
    "TwikeyConfig",
    "TwikeyError",
    "WebhookVerificationError",
    "compute_signature",
    "load_config",
    "verify_webhook",
]
