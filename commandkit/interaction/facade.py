"""Uniform reply surface over text messages and native Discord interactions.

Commands receive an InteractionLike and call reply/defer_reply/edit_reply/
follow_up/delete_reply without knowing whether they were invoked by a prefix
message or a slash command. Transport errors propagate to the caller.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

import discord

DEFAULT_THINKING_MESSAGE = "{name} is thinking..."


def _edit_options(content: Optional[str], kwargs: Dict[str, Any]) -> Dict[str, Any]:
    # discord.py treats content=None as "clear the text"; leave it out unless given
    if content is not None:
        kwargs["content"] = content
    return kwargs


class InteractionLike(ABC):
    """Common state and reply operations of an invocation.

    Attributes:
        client: The Discord client that received the invocation.
        channel: Channel the invocation happened in.
        guild: Guild, or None in direct messages.
        user: Invoking user.
        created_at: Invocation timestamp.
        replied: Whether a reply has been sent.
        deferred: Whether a deferred placeholder was sent.
    """

    client: Any
    channel: Any
    guild: Optional[Any]
    user: Any
    created_at: Optional[datetime]
    replied: bool = False
    deferred: bool = False

    @abstractmethod
    async def reply(self, content: Optional[str] = None, **kwargs: Any) -> None:
        """Send a new response."""

    @abstractmethod
    async def defer_reply(self, **kwargs: Any) -> None:
        """Send a placeholder while slow work runs."""

    @abstractmethod
    async def edit_reply(self, content: Optional[str] = None, **kwargs: Any) -> None:
        """Edit the most recent response in place; no-op if there is none."""

    @abstractmethod
    async def follow_up(self, content: Optional[str] = None, **kwargs: Any) -> None:
        """Send a further response after the first one."""

    @abstractmethod
    async def delete_reply(self) -> None:
        """Delete the most recent response; no-op if there is none."""


class MessageWrappedInteraction(InteractionLike):
    """Pretend a prefix-command message is an interaction.

    Replies are sent as message replies and the last one sent is remembered so
    it can be edited, chained or deleted later.
    """

    def __init__(self, message: discord.Message, *, thinking_message: str = DEFAULT_THINKING_MESSAGE) -> None:
        self.message = message
        self.client = message.client
        self.channel = message.channel
        self.channel_id = getattr(message.channel, "id", None)
        self.guild = message.guild
        self.guild_id = getattr(message.guild, "id", None)
        self.user = message.author
        self.member = message.author if message.guild is not None else None
        self.created_at = message.created_at
        self.replied = False
        self.deferred = False
        self.last_message: Optional[discord.Message] = None
        self._thinking_message = thinking_message

    def _thinking_text(self) -> str:
        bot_user = getattr(self.client, "user", None)
        name = getattr(bot_user, "name", None) or "Bot"
        return self._thinking_message.format(name=name)

    async def reply(self, content: Optional[str] = None, **kwargs: Any) -> None:
        self.replied = True
        self.last_message = await self.message.reply(content, **kwargs)

    async def defer_reply(self, **kwargs: Any) -> None:
        self.deferred = True
        content = kwargs.pop("content", None) or self._thinking_text()
        self.last_message = await self.message.reply(content, **kwargs)

    async def edit_reply(self, content: Optional[str] = None, **kwargs: Any) -> None:
        self.replied = True
        if self.last_message is not None:
            await self.last_message.edit(**_edit_options(content, kwargs))

    async def follow_up(self, content: Optional[str] = None, **kwargs: Any) -> None:
        if self.last_message is None:
            self.last_message = await self.message.reply(content, **kwargs)
        elif self.deferred:
            # Replace the placeholder instead of stacking a second message
            await self.last_message.edit(**_edit_options(content, kwargs))
        else:
            self.last_message = await self.last_message.reply(content, **kwargs)

    async def delete_reply(self) -> None:
        if self.last_message is not None:
            await self.last_message.delete()
        self.last_message = None


class NativeInteraction(InteractionLike):
    """Thin adapter over discord.Interaction with the same method names.

    The bot dispatches prefix messages only; this is for host code that
    registers its own slash commands and wants to reuse Command callbacks.
    """

    def __init__(self, interaction: discord.Interaction) -> None:
        self.interaction = interaction
        self.client = interaction.client
        self.channel = interaction.channel
        self.channel_id = interaction.channel_id
        self.guild = interaction.guild
        self.guild_id = interaction.guild_id
        self.user = interaction.user
        self.member = interaction.user if interaction.guild is not None else None
        self.created_at = interaction.created_at
        self.replied = False
        self.deferred = False
        self.deleted = False

    def _responded(self) -> bool:
        return self.replied or self.deferred or self.interaction.response.is_done()

    def _has_original(self) -> bool:
        return self._responded() and not self.deleted

    async def reply(self, content: Optional[str] = None, **kwargs: Any) -> None:
        await self.interaction.response.send_message(content, **kwargs)
        self.replied = True

    async def defer_reply(self, **kwargs: Any) -> None:
        kwargs.setdefault("thinking", True)
        await self.interaction.response.defer(**kwargs)
        self.deferred = True

    async def edit_reply(self, content: Optional[str] = None, **kwargs: Any) -> None:
        if not self._has_original():
            return
        await self.interaction.edit_original_response(**_edit_options(content, kwargs))
        self.replied = True

    async def follow_up(self, content: Optional[str] = None, **kwargs: Any) -> None:
        if not self._responded():
            await self.reply(content, **kwargs)
            return
        await self.interaction.followup.send(content, **kwargs)

    async def delete_reply(self) -> None:
        if not self._has_original():
            return
        await self.interaction.delete_original_response()
        self.deleted = True


__all__ = ["InteractionLike", "MessageWrappedInteraction", "NativeInteraction", "DEFAULT_THINKING_MESSAGE"]
