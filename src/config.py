# config.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

import logging
import os

# Configuration constants loaded from environment variables

# State directory path (holds the Telethon session)
STATE_DIRECTORY: str = os.environ.get("RELAY_STATE_DIR", "state")


def _get_optional_str(env_name: str) -> str | None:
    """Return stripped environment variable value or None if unset/empty."""
    value = os.environ.get(env_name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


# API credentials
TELEGRAM_API_ID: str | None = _get_optional_str("TELEGRAM_API_ID")
TELEGRAM_API_HASH: str | None = _get_optional_str("TELEGRAM_API_HASH")
TELEGRAM_BOT_TOKEN: str | None = _get_optional_str("TELEGRAM_BOT_TOKEN")


# Parent directory for per-transfer scratch directories (None = system temp dir)
TEMP_DIRECTORY: str | None = _get_optional_str("RELAY_TEMP_DIR")


def _parse_progress_queue_size() -> int:
    """Parse RELAY_PROGRESS_QUEUE_SIZE with error handling.

    The queue must hold at least one item, otherwise every progress update
    would be dropped. Defaults to 16 if invalid.
    """
    try:
        value = int(os.environ.get("RELAY_PROGRESS_QUEUE_SIZE", "16"))
        if value < 1:
            return 16
        return value
    except ValueError:
        return 16


PROGRESS_QUEUE_SIZE: int = _parse_progress_queue_size()


def _parse_reconnect_delay() -> float:
    """Parse RELAY_RECONNECT_DELAY with error handling."""
    try:
        value = float(os.environ.get("RELAY_RECONNECT_DELAY", "10"))
        if value < 0:
            return 10.0
        return value
    except ValueError:
        return 10.0


RECONNECT_DELAY: float = _parse_reconnect_delay()


def _parse_log_level() -> int:
    """Resolve the root log level.

    DEBUG=true wins over RELAY_LOG_LEVEL so the old deployment switch keeps working.
    """
    if os.environ.get("DEBUG", "").strip().lower() == "true":
        return logging.DEBUG
    log_level_str = os.environ.get("RELAY_LOG_LEVEL", "INFO").strip().upper()
    return getattr(logging, log_level_str, logging.INFO)


LOG_LEVEL: int = _parse_log_level()
