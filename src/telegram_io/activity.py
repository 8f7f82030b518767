# telegram_io/activity.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Peer-visible typing / uploading indicators.

Indicator updates are fire-and-forget: failures are logged at debug level and
never surface as conversion errors. Cancellation always propagates.
"""
import asyncio
import logging
from typing import Any

from telethon.tl.functions.messages import SetTypingRequest  # pyright: ignore[reportMissingImports]
from telethon.tl.types import (  # pyright: ignore[reportMissingImports]
    SendMessageCancelAction,
    SendMessageTypingAction,
    SendMessageUploadPhotoAction,
    SendMessageUploadVideoAction,
)

from media.media_types import MediaKind
from telegram_io.peers import Target

logger = logging.getLogger(__name__)


class ActivityIndicator:
    """
    Drives the typing/uploading status shown to a target peer.

    Used as an async context manager, the indicator is cancelled when the
    block exits, unless it exits because the task itself was cancelled.
    """

    def __init__(self, client: Any, target: Target):
        self.client = client
        self.target = target

    async def typing(self) -> None:
        await self._send(SendMessageTypingAction())

    async def uploading(self, kind: MediaKind, percent: int) -> None:
        if kind is MediaKind.PHOTO:
            await self._send(SendMessageUploadPhotoAction(progress=percent))
        else:
            await self._send(SendMessageUploadVideoAction(progress=percent))

    async def cancel(self) -> None:
        await self._send(SendMessageCancelAction())

    async def _send(self, action) -> None:
        try:
            await self.client(SetTypingRequest(peer=self.target.input_peer, action=action))
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.debug(
                f"Failed to set {type(action).__name__} on {self.target.describe()}: {e}"
            )

    async def __aenter__(self) -> "ActivityIndicator":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None and issubclass(exc_type, asyncio.CancelledError):
            return False
        await self.cancel()
        return False
