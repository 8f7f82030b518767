# src/handlers/conversion.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
import asyncio
import logging
from typing import Any

from exceptions import (
    ClassificationError,
    InternalError,
    PostError,
    RelayError,
    RevokeError,
)
from media.media_types import Attachment, MediaKind
from media.mime_utils import classify
from media.transfer import TransferPipeline
from telegram_io.activity import ActivityIndicator
from telegram_io.peers import Target, resolve_target
from telegram_io.updates import IncomingUpdate
from telegram_media import build_media, extract_attachment
from utils.formatting import format_caption_for_logging, format_log_prefix

logger = logging.getLogger(__name__)


class ConversionHandler:
    """
    Converts incoming document messages into native photo/video messages.

    For every eligible message the document is downloaded, uploaded again as
    a photo or video with the same caption, posted to the same peer, and the
    original message is revoked. Failures are replied to the original message.

    If posting succeeds but revoking fails, both messages remain visible. This
    is reported as a RevokeError and is not rolled back.
    """

    def __init__(self, client: Any, pipeline: TransferPipeline | None = None):
        self.client = client
        self.pipeline = pipeline or TransferPipeline(client)

    async def on_new_message(self, update: IncomingUpdate) -> RelayError | None:
        """Entry point for dialogs and basic groups."""
        return await self.document_to_media(update)

    async def on_new_channel_message(self, update: IncomingUpdate) -> RelayError | None:
        """Entry point for channels and supergroups."""
        return await self.document_to_media(update)

    async def document_to_media(self, update: IncomingUpdate) -> RelayError | None:
        """
        Run one conversion attempt for an incoming message.

        Returns None when the message was converted or ignored, otherwise the
        error that was reported to the sender. Cancellation propagates and is
        never reported.
        """
        message = update.message
        if message is None or getattr(message, "out", False):
            # ignore outgoing message
            return None

        try:
            target = resolve_target(getattr(message, "peer_id", None), update.entities)
        except Exception as e:
            # no peer to reply to
            logger.exception(f"{format_log_prefix()} Unexpected failure resolving peer of message {message.id}")
            return InternalError(f"internal error: {e}", e)
        if target is None:
            return None

        log_prefix = format_log_prefix(target)
        try:
            attachment = extract_attachment(message)
        except Exception as e:
            logger.exception(f"{log_prefix} Unexpected failure reading attachment of message {message.id}")
            error = InternalError(f"internal error: {e}", e)
            await self._reply_error(target, message, error)
            return error
        if attachment is None:
            # ignore anything that is not a document
            return None

        error: RelayError | None = None

        async with ActivityIndicator(self.client, target):
            try:
                await self._convert(message, attachment, target)
            except asyncio.CancelledError:
                logger.info(f"{log_prefix} Conversion of message {message.id} cancelled")
                raise
            except RelayError as e:
                error = e
            except Exception as e:
                logger.exception(f"{log_prefix} Unexpected failure converting message {message.id}")
                error = InternalError(f"internal error: {e}", e)

        if error is None:
            return None

        logger.error(
            f"{log_prefix} Conversion failed for {attachment.file_name or '‹unnamed›'} "
            f"({attachment.content_type}): {error}"
        )
        await self._reply_error(target, message, error)
        return error

    async def _convert(self, message: Any, attachment: Attachment, target: Target) -> None:
        log_prefix = format_log_prefix(target)

        kind = classify(attachment.content_type)
        if kind is MediaKind.UNKNOWN:
            raise ClassificationError(attachment.content_type)

        logger.info(
            f"{log_prefix} Received document: type={kind} file_name={attachment.file_name!r} "
            f"caption={format_caption_for_logging(message.message)!r}"
        )

        handle = await self.pipeline.transfer(attachment, kind, target)

        media = build_media(kind, handle, attachment)
        try:
            await self.client.send_file(
                target.input_peer,
                media,
                caption=message.message or "",
                parse_mode=None,
            )
        except Exception as e:
            raise PostError(f"failed to post {kind} to {target.describe()}: {e}", e) from e

        try:
            await self.client.delete_messages(target.input_peer, [message.id], revoke=True)
        except Exception as e:
            raise RevokeError(
                f"failed to revoke message {message.id} in {target.describe()}: {e}", e
            ) from e

        logger.info(f"{log_prefix} Replaced message {message.id} with {kind}")

    async def _reply_error(self, target: Target, message: Any, error: RelayError) -> None:
        try:
            await self.client.send_message(
                target.input_peer,
                f"failed with error: {error}",
                reply_to=message.id,
                parse_mode=None,
            )
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(
                f"{format_log_prefix(target)} Failed to reply with error to message {message.id}: {e}"
            )
