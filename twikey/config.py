from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .auth import DEFAULT_API_URL
from .errors import AuthenticationError, ConfigError
from .utils.env import load_env_file_if_present

logger = logging.getLogger(__name__)

API_KEY_ENV = "TWIKEY_API_KEY"
API_URL_ENV = "TWIKEY_API_URL"
TIMEOUT_ENV = "TWIKEY_TIMEOUT"


@dataclass(frozen=True)
class TwikeyConfig:
    api_key: str
    base_url: str = DEFAULT_API_URL
    timeout: float | None = None


def load_config(dotenv: bool = True) -> TwikeyConfig:
    """Read client settings from the environment (and ``.env`` if present).

    ``TWIKEY_API_KEY`` is required; ``TWIKEY_API_URL`` defaults to the
    production creditor API; ``TWIKEY_TIMEOUT`` is an optional number of seconds.

    Raises AuthenticationError if the API key is missing and ConfigError if the
    timeout is not a number.
    """
    if dotenv:
        load_env_file_if_present()

    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        raise AuthenticationError(f"Missing API key. Set {API_KEY_ENV} in environment or .env")

    base_url = os.getenv(API_URL_ENV) or DEFAULT_API_URL

    timeout: float | None = None
    timeout_raw = (os.getenv(TIMEOUT_ENV) or "").strip()
    if timeout_raw:
        try:
            timeout = float(timeout_raw)
        except ValueError as e:
            raise ConfigError(f"{TIMEOUT_ENV} must be a number, got '{timeout_raw}'") from e

    logger.debug(f"Loaded configuration for {base_url}")
    return TwikeyConfig(api_key=api_key, base_url=base_url, timeout=timeout)
