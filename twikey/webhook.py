"""Webhook signature verification.

Twikey signs each webhook call with an HMAC-SHA256 of the raw payload keyed by
the API key and sends it, uppercase hex encoded, in the ``X-Signature`` header.
"""

from __future__ import annotations

import hashlib
import hmac

from .errors import WebhookVerificationError


def _as_bytes(value: str | bytes) -> bytes:
    return value if isinstance(value, bytes) else value.encode("utf-8")


def compute_signature(api_key: str, payload: str | bytes) -> str:
    return hmac.new(_as_bytes(api_key), _as_bytes(payload), hashlib.sha256).hexdigest().upper()


def verify_webhook(api_key: str | None, signature_header: str, payload: str | bytes) -> bool:
    """Return True if ``signature_header`` matches the payload signature.

    Raises WebhookVerificationError on mismatch or if the signature cannot be
    computed (e.g. missing key, unsupported payload type).
    """
    try:
        if not api_key:
            raise ValueError("no api key set")
        computed = compute_signature(api_key, payload)
        matches = hmac.compare_digest(_as_bytes(signature_header), computed.encode("ascii"))
    except (TypeError, ValueError, AttributeError) as e:
        raise WebhookVerificationError(f"Failed to verify webhook: {e}") from e

    if not matches:
        raise WebhookVerificationError("Invalid webhook signature")
    return True
