"""Read-only entity caches used to turn mention ids into platform objects.

Lookups never hit the network: the discord adapter only reads the client's
and guild's in-memory caches.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

import discord


@runtime_checkable
class EntityLookup(Protocol):
    def get_role(self, role_id: int) -> Optional[Any]: ...

    def get_user(self, user_id: int) -> Optional[Any]: ...

    def get_channel(self, channel_id: int) -> Optional[Any]: ...


class MessageEntityLookup:
    """Resolve mentions relative to the message a text command arrived in.

    Roles come from the message's guild; users and channels from the client
    cache, so direct messages can still reference users and channels.
    """

    def __init__(self, message: discord.Message) -> None:
        self._message = message

    def get_role(self, role_id: int) -> Optional[discord.Role]:
        guild = getattr(self._message, "guild", None)
        if guild is None:
            return None
        return guild.get_role(role_id)

    def get_user(self, user_id: int) -> Optional[discord.User]:
        return self._message.client.get_user(user_id)

    def get_channel(self, channel_id: int) -> Optional[Any]:
        return self._message.client.get_channel(channel_id)


class MappingEntityLookup:
    """Dictionary-backed lookup keyed by integer id."""

    def __init__(
        self,
        *,
        roles: Optional[Mapping[int, Any]] = None,
        users: Optional[Mapping[int, Any]] = None,
        channels: Optional[Mapping[int, Any]] = None,
    ) -> None:
        self.roles = dict(roles or {})
        self.users = dict(users or {})
        self.channels = dict(channels or {})

    def get_role(self, role_id: int) -> Optional[Any]:
        return self.roles.get(role_id)

    def get_user(self, user_id: int) -> Optional[Any]:
        return self.users.get(user_id)

    def get_channel(self, channel_id: int) -> Optional[Any]:
        return self.channels.get(channel_id)


__all__ = ["EntityLookup", "MessageEntityLookup", "MappingEntityLookup"]
