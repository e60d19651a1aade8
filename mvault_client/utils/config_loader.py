"""
Configuration loader utility.

Automatically loads environment variables (and a local .env file) with
sensible defaults.
"""

import os

from dotenv import load_dotenv

from ..errors import ConfigurationError
from ..models.config import LIVE_URL, STAGING_URL, MvaultClientConfig

BASE_URL_SHORTCUTS = {"live": LIVE_URL, "staging": STAGING_URL}


def _required(name: str) -> str:
    value = os.environ.get(name) or ""
    if not value:
        raise ConfigurationError(f"{name} environment variable is required")
    return value


def load_config() -> MvaultClientConfig:
    """
    Load configuration from environment variables with defaults.

    Required environment variables:
    - MVAULT_KEY
    - MVAULT_SECRET
    - MVAULT_STATION_ID

    Optional environment variables:
    - MVAULT_BASE_URL (URL, or "live"/"staging"; default: live)
    - MVAULT_TIMEOUT (seconds, default: 30)
    - MVAULT_LOG_LEVEL (debug, info, warn, error)

    Returns:
        MvaultClientConfig instance

    Raises:
        ConfigurationError: If required environment variables are missing or invalid
    """
    load_dotenv()

    key = _required("MVAULT_KEY")
    secret = _required("MVAULT_SECRET")
    station_id = _required("MVAULT_STATION_ID")

    base_url = os.environ.get("MVAULT_BASE_URL") or LIVE_URL
    base_url = BASE_URL_SHORTCUTS.get(base_url.lower(), base_url)

    timeout_value = os.environ.get("MVAULT_TIMEOUT", "30")
    try:
        timeout = float(timeout_value)
    except ValueError as e:
        raise ConfigurationError(f"MVAULT_TIMEOUT must be a number, got {timeout_value!r}") from e

    log_level = os.environ.get("MVAULT_LOG_LEVEL", "info")
    if log_level not in ["debug", "info", "warn", "error"]:
        log_level = "info"

    return MvaultClientConfig(
        key=key,
        secret=secret,
        station_id=station_id,
        base_url=base_url,
        timeout=timeout,
        log_level=log_level,
    )
