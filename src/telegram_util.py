# telegram_util.py

# Copyright (c) 2025 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.

import logging
import os

from telethon import TelegramClient  # pyright: ignore[reportMissingImports]

from config import STATE_DIRECTORY, TELEGRAM_API_HASH, TELEGRAM_API_ID

logger = logging.getLogger(__name__)


def get_telegram_client(session_name: str = "relay") -> TelegramClient:
    logger.info(f"Creating Telegram client for session '{session_name}'")
    if session_name == "":
        raise RuntimeError("Missing session name")

    api_id = TELEGRAM_API_ID
    api_hash = TELEGRAM_API_HASH
    session_root = STATE_DIRECTORY

    if not all([api_id, api_hash, session_root]):
        raise RuntimeError(
            "Missing required environment variables: TELEGRAM_API_ID, TELEGRAM_API_HASH, RELAY_STATE_DIR"
        )

    try:
        api_id_int = int(api_id)
    except ValueError as e:
        raise RuntimeError(f"TELEGRAM_API_ID must be an integer, got {api_id!r}") from e

    session_dir = os.path.join(session_root, session_name)
    os.makedirs(session_dir, exist_ok=True)
    session_path = os.path.join(session_dir, "telegram.session")

    return TelegramClient(session_path, api_id_int, api_hash)
