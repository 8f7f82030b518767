# relay_server/main.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Relay server entry point: startup, wiring, and main event loop."""
import logging

from config import (
    LOG_LEVEL,
    TELEGRAM_API_HASH,
    TELEGRAM_API_ID,
    TELEGRAM_BOT_TOKEN,
)
from handlers import ConversionHandler
from media.transfer import TransferPipeline
from telegram_util import get_telegram_client

from .loop import run_relay_loop

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Suppress verbose telethon.client.updates messages
logging.getLogger("telethon.client.updates").setLevel(logging.WARNING)


def missing_settings() -> list[str]:
    missing = []
    if not TELEGRAM_API_ID:
        missing.append("TELEGRAM_API_ID")
    if not TELEGRAM_API_HASH:
        missing.append("TELEGRAM_API_HASH")
    if not TELEGRAM_BOT_TOKEN:
        missing.append("TELEGRAM_BOT_TOKEN")
    return missing


async def main():
    missing = missing_settings()
    if missing:
        logger.error("Startup validation failed: missing required environment variables:")
        for name in missing:
            logger.error(f"  - {name}")
        return

    client = get_telegram_client()
    handler = ConversionHandler(client, TransferPipeline(client))
    await run_relay_loop(client, handler)
