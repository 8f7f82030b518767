# tests/test_activity.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
import asyncio

import pytest
from fakes import FakeClient
from telethon.tl.types import InputPeerUser, PeerUser, User  # pyright: ignore[reportMissingImports]

from media.media_types import MediaKind
from telegram_io.activity import ActivityIndicator
from telegram_io.peers import Entities, resolve_target


def _target():
    return resolve_target(PeerUser(user_id=42), Entities.from_entities([User(id=42, access_hash=9)]))


@pytest.mark.asyncio
async def test_actions_are_sent_to_target_peer():
    client = FakeClient()
    activity = ActivityIndicator(client, _target())

    await activity.typing()
    await activity.uploading(MediaKind.PHOTO, 30)
    await activity.uploading(MediaKind.VIDEO, 60)
    await activity.cancel()

    assert client.actions() == [
        "SendMessageTypingAction",
        "SendMessageUploadPhotoAction",
        "SendMessageUploadVideoAction",
        "SendMessageCancelAction",
    ]
    assert client.upload_progress() == [30, 60]


@pytest.mark.asyncio
async def test_set_typing_request_uses_input_peer():
    seen = []

    class Client:
        async def __call__(self, request):
            seen.append(request)

    await ActivityIndicator(Client(), _target()).typing()

    assert seen[0].peer == InputPeerUser(user_id=42, access_hash=9)


@pytest.mark.asyncio
async def test_failures_are_swallowed():
    client = FakeClient()
    client.typing_error = ConnectionError("flood wait")
    activity = ActivityIndicator(client, _target())

    await activity.typing()
    await activity.uploading(MediaKind.VIDEO, 10)
    await activity.cancel()

    assert len(client.actions()) == 3


@pytest.mark.asyncio
async def test_context_manager_cancels_on_exit():
    client = FakeClient()

    async with ActivityIndicator(client, _target()) as activity:
        await activity.typing()

    assert client.actions() == ["SendMessageTypingAction", "SendMessageCancelAction"]


@pytest.mark.asyncio
async def test_context_manager_cancels_on_error():
    client = FakeClient()

    with pytest.raises(RuntimeError):
        async with ActivityIndicator(client, _target()):
            raise RuntimeError("boom")

    assert client.actions() == ["SendMessageCancelAction"]


@pytest.mark.asyncio
async def test_context_manager_skips_cancel_on_shutdown():
    client = FakeClient()

    with pytest.raises(asyncio.CancelledError):
        async with ActivityIndicator(client, _target()):
            raise asyncio.CancelledError()

    assert client.actions() == []
