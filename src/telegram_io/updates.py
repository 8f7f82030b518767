# telegram_io/updates.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Adapt Telethon NewMessage events to the relay's update shape."""
from dataclasses import dataclass, field
from typing import Any

from telethon.tl.types import UpdateNewChannelMessage  # pyright: ignore[reportMissingImports]

from telegram_io.peers import Entities


@dataclass
class IncomingUpdate:
    message: Any
    entities: Entities = field(default_factory=Entities)
    is_channel: bool = False

    @classmethod
    def from_event(cls, event: Any) -> "IncomingUpdate":
        message = event.message
        # Telethon has already matched the update's entities to the message.
        entities = Entities.from_entities(
            [getattr(message, "chat", None), getattr(message, "sender", None)]
        )
        is_channel = isinstance(getattr(event, "original_update", None), UpdateNewChannelMessage)
        return cls(message=message, entities=entities, is_channel=is_channel)


async def dispatch_new_message(handler: Any, event: Any):
    """Route a NewMessage event to the dialog or channel entry point."""
    update = IncomingUpdate.from_event(event)
    if update.is_channel:
        return await handler.on_new_channel_message(update)
    return await handler.on_new_message(update)
