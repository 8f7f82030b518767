# tests/test_progress.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
import asyncio

import pytest

from media.progress import ProgressChannel, percent_of


async def _drain(channel: ProgressChannel) -> list[int]:
    return [percent async for percent in channel]


def test_percent_of():
    assert percent_of(0, 200) == 0
    assert percent_of(50, 200) == 25
    assert percent_of(199, 200) == 99
    assert percent_of(200, 200) == 100
    assert percent_of(300, 200) == 100
    assert percent_of(-5, 200) == 0
    assert percent_of(10, 0) == 0


@pytest.mark.asyncio
async def test_channel_delivers_in_order_then_terminates():
    channel = ProgressChannel(maxsize=8)
    for percent in (10, 40, 40, 30, 100):
        assert channel.emit(percent) is True
    channel.close()

    # not deduplicated, not forced monotonic
    assert await _drain(channel) == [10, 40, 40, 30, 100]


@pytest.mark.asyncio
async def test_emit_never_blocks_and_drops_oldest_when_full():
    channel = ProgressChannel(maxsize=3)
    for percent in range(1, 11):
        channel.emit(percent)
    channel.close()

    received = await _drain(channel)

    # close() needs a slot too, so the newest values survive
    assert received == [9, 10]
    assert channel.dropped == 8


@pytest.mark.asyncio
async def test_close_is_idempotent_and_rejects_later_emits():
    channel = ProgressChannel(maxsize=2)
    channel.emit(5)
    channel.close()
    channel.close()

    assert channel.closed
    assert channel.emit(50) is False
    assert await _drain(channel) == [5]


@pytest.mark.asyncio
async def test_observer_waits_for_values_until_closed():
    channel = ProgressChannel(maxsize=4)
    observer = asyncio.create_task(_drain(channel))

    await asyncio.sleep(0)
    assert not observer.done()

    channel.on_upload_progress(1, 4)
    channel.on_upload_progress(4, 4)
    channel.close()

    assert await asyncio.wait_for(observer, timeout=1) == [25, 100]


def test_maxsize_must_be_positive():
    with pytest.raises(ValueError):
        ProgressChannel(maxsize=0)
