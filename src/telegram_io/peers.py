# telegram_io/peers.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Resolve the destination of an incoming message from the entities that came
with the update.

Peers are a tagged union of user, basic group (chat) and channel. Each kind
is looked up by bare numeric id in its own table; nothing is fetched from the
network, so a peer missing from the update is simply not resolvable.
"""
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from telethon import utils  # pyright: ignore[reportMissingImports]
from telethon.tl.types import (  # pyright: ignore[reportMissingImports]
    Channel,
    ChannelForbidden,
    Chat,
    ChatForbidden,
    PeerChannel,
    PeerChat,
    PeerUser,
    User,
)

logger = logging.getLogger(__name__)


class PeerKind(Enum):
    USER = "user"
    CHAT = "chat"
    CHANNEL = "channel"


@dataclass
class Entities:
    users: dict[int, Any] = field(default_factory=dict)
    chats: dict[int, Any] = field(default_factory=dict)
    channels: dict[int, Any] = field(default_factory=dict)

    @classmethod
    def from_entities(cls, entities: Iterable[Any]) -> "Entities":
        table = cls()
        for entity in entities:
            if entity is None:
                continue
            if isinstance(entity, User):
                table.users[entity.id] = entity
            elif isinstance(entity, (Chat, ChatForbidden)):
                table.chats[entity.id] = entity
            elif isinstance(entity, (Channel, ChannelForbidden)):
                table.channels[entity.id] = entity
        return table

    def lookup(self, kind: PeerKind, peer_id: int) -> Any | None:
        if kind is PeerKind.USER:
            return self.users.get(peer_id)
        if kind is PeerKind.CHAT:
            return self.chats.get(peer_id)
        return self.channels.get(peer_id)


@dataclass(frozen=True)
class Target:
    kind: PeerKind
    id: int
    entity: Any
    input_peer: Any

    def describe(self) -> str:
        return f"{self.kind.value}:{self.id}"


def peer_kind_and_id(peer: Any) -> tuple[PeerKind, int] | None:
    if isinstance(peer, PeerUser):
        return PeerKind.USER, peer.user_id
    if isinstance(peer, PeerChat):
        return PeerKind.CHAT, peer.chat_id
    if isinstance(peer, PeerChannel):
        return PeerKind.CHANNEL, peer.channel_id
    return None


def resolve_target(peer: Any, entities: Entities) -> Target | None:
    """
    Resolve a Peer* routing value to a Target using the update's entity table.

    Returns None for unknown peer types, entities missing from the table and
    entities that cannot be addressed (e.g. min users without access hash).
    """
    resolved = peer_kind_and_id(peer)
    if resolved is None:
        return None
    kind, peer_id = resolved

    entity = entities.lookup(kind, peer_id)
    if entity is None:
        logger.debug(f"No {kind.value} entity {peer_id} in update; ignoring")
        return None

    try:
        input_peer = utils.get_input_peer(entity)
    except TypeError as e:
        logger.debug(f"Cannot address {kind.value} {peer_id}: {e}")
        return None

    return Target(kind=kind, id=peer_id, entity=entity, input_peer=input_peer)
