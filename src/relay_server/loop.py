# relay_server/loop.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Telegram client event loop."""
import asyncio
import logging
from typing import Any

from telethon import events  # pyright: ignore[reportMissingImports]

from config import RECONNECT_DELAY, TELEGRAM_BOT_TOKEN
from telegram_io.updates import dispatch_new_message
from utils.formatting import format_log_prefix

logger = logging.getLogger(__name__)


def register_handlers(client: Any, handler: Any) -> None:
    """Subscribe the conversion handler to new dialog and channel messages."""

    # No incoming=True filter: the handler itself ignores outgoing messages.
    @client.on(events.NewMessage())
    async def handle_new_message(event):
        await dispatch_new_message(handler, event)


async def run_relay_loop(
    client: Any,
    handler: Any,
    *,
    bot_token: str | None = TELEGRAM_BOT_TOKEN,
    reconnect_delay: float = RECONNECT_DELAY,
) -> None:
    register_handlers(client, handler)

    while True:
        try:
            await client.start(bot_token=bot_token)
            me = await client.get_me()
            if me:
                logger.info(
                    f"{format_log_prefix()} Bot ready: @{getattr(me, 'username', None) or me.id}"
                )
            logger.info(f"{format_log_prefix()} Listening for documents...")

            # Returns when the connection drops; raises on fatal client errors
            await client.run_until_disconnected()
            logger.warning(
                f"{format_log_prefix()} Telegram client disconnected. Reconnecting in {reconnect_delay} seconds..."
            )
        except asyncio.CancelledError:
            logger.info(f"{format_log_prefix()} Shutdown requested; disconnecting.")
            raise
        except Exception as e:
            logger.exception(
                f"{format_log_prefix()} Telegram client error: {e}. Reconnecting in {reconnect_delay} seconds..."
            )
        finally:
            try:
                await client.disconnect()
            except Exception:
                pass

        await asyncio.sleep(reconnect_delay)
