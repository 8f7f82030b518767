# src/media/transfer.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Download an attachment into scoped scratch storage and re-upload it.

Each transfer gets its own temporary directory which is removed on every exit
path. Upload progress is relayed through a ProgressChannel to a single
observer task that drives the uploading indicator; that task is joined before
transfer() returns or raises.
"""
import asyncio
import logging
import shutil
import tempfile
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from config import PROGRESS_QUEUE_SIZE, TEMP_DIRECTORY
from exceptions import DownloadError, StorageError, UploadError
from media.media_types import Attachment, MediaKind
from media.progress import ProgressChannel
from telegram_io.activity import ActivityIndicator
from telegram_io.peers import Target
from telegram_media import local_file_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferContext:
    attachment: Attachment
    kind: MediaKind
    temp_dir: Path
    file_path: Path


def _remove_tree(path: Path) -> None:
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Failed to remove transfer directory {path}: {e}")


@asynccontextmanager
async def transfer_context(
    attachment: Attachment, kind: MediaKind, temp_root: str | None = None
):
    """
    Create the scratch directory for one transfer and remove it afterwards.
    The file path is derived from the declared name inside that directory.
    """
    try:
        temp_dir = Path(tempfile.mkdtemp(prefix="relay-", dir=temp_root))
    except OSError as e:
        raise StorageError(f"failed to create tmp folder: {e}", e) from e

    try:
        file_path = temp_dir / local_file_name(attachment.file_name)
        yield TransferContext(
            attachment=attachment, kind=kind, temp_dir=temp_dir, file_path=file_path
        )
    finally:
        _remove_tree(temp_dir)


async def observe_progress(
    channel: ProgressChannel, activity: ActivityIndicator, kind: MediaKind, file_path: Path
) -> None:
    """Translate emitted percentages into uploading indicators until the channel closes."""
    async for percent in channel:
        logger.debug(f"upload progress changed: {percent}% ({file_path})")
        await activity.uploading(kind, percent)


class TransferPipeline:
    def __init__(
        self,
        client: Any,
        *,
        temp_root: str | None = TEMP_DIRECTORY,
        progress_queue_size: int = PROGRESS_QUEUE_SIZE,
    ):
        self.client = client
        self.temp_root = temp_root
        self.progress_queue_size = progress_queue_size

    async def transfer(self, attachment: Attachment, kind: MediaKind, target: Target):
        """
        Download the attachment and upload it again, returning the uploaded
        file handle. Nothing is posted yet.

        Raises StorageError, NamingError, DownloadError or UploadError.
        """
        activity = ActivityIndicator(self.client, target)

        async with transfer_context(attachment, kind, self.temp_root) as ctx:
            await activity.typing()
            await self._download(ctx)
            return await self._upload(ctx, activity)

    async def _download(self, ctx: TransferContext) -> None:
        name = ctx.file_path.name
        # Telethon appends an extension to bare path names; a file object pins
        # the download to file_path.
        try:
            with open(ctx.file_path, "wb") as out:
                result = await self.client.download_media(ctx.attachment.file_ref, file=out)
        except Exception as e:
            raise DownloadError(f"failed to download {name}: {e}", e) from e

        if result is None or not ctx.file_path.exists():
            raise DownloadError(f"failed to download {name}: nothing was downloaded")

        logger.debug(f"Downloaded {name} to {ctx.file_path}")

    async def _upload(self, ctx: TransferContext, activity: ActivityIndicator):
        name = ctx.file_path.name
        channel = ProgressChannel(maxsize=self.progress_queue_size)
        observer = asyncio.create_task(
            observe_progress(channel, activity, ctx.kind, ctx.file_path)
        )
        try:
            return await self.client.upload_file(
                str(ctx.file_path), progress_callback=channel.on_upload_progress
            )
        except asyncio.CancelledError:
            observer.cancel()
            raise
        except Exception as e:
            raise UploadError(f"failed to upload {name}: {e}", e) from e
        finally:
            channel.close()
            results = await asyncio.gather(observer, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    logger.warning(f"Progress observer for {name} failed: {result}")
            if channel.dropped:
                logger.debug(f"Dropped {channel.dropped} stale progress updates for {name}")
