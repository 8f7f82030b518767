# media/progress.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Bounded single-producer/single-consumer relay of upload percentages.

The uploader emits percentages synchronously from its progress callback; one
observer task iterates the channel with ``async for``. A channel belongs to a
single transfer and is never reused.
"""
import asyncio
import logging
from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)

_CLOSED = object()


def percent_of(current: int, total: int) -> int:
    """Integer percentage of current/total, clamped to 0..100."""
    if not total or total <= 0:
        return 0
    percent = int(current * 100 / total)
    return max(0, min(100, percent))


class ProgressChannel:
    def __init__(self, maxsize: int = 16):
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._closed = False
        self.dropped = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def emit(self, percent: int) -> bool:
        """
        Publish a percentage without blocking.

        When the queue is full the oldest pending value is dropped so the
        observer always catches up to the latest progress. Returns False if
        the channel is already closed.
        """
        if self._closed:
            return False
        self._put_dropping_oldest(int(percent))
        return True

    def on_upload_progress(self, current: int, total: int) -> None:
        """Telethon progress_callback adapter: (sent bytes, total bytes)."""
        self.emit(percent_of(current, total))

    def close(self) -> None:
        """Close the channel. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        # The end marker must always get in, even if the observer is stalled.
        self._put_dropping_oldest(_CLOSED)

    def _put_dropping_oldest(self, item) -> None:
        while True:
            try:
                self._queue.put_nowait(item)
                return
            except asyncio.QueueFull:
                try:
                    self._queue.get_nowait()
                    self.dropped += 1
                except asyncio.QueueEmpty:
                    pass

    async def __aiter__(self) -> AsyncIterator[int]:
        while True:
            item = await self._queue.get()
            if item is _CLOSED:
                return
            yield item
