"""Minimal stand-ins for discord.py objects used by facade and dispatcher tests."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


class FakeSentMessage:
    _next_id = 1000

    def __init__(self, content: Optional[str], parent: Optional["FakeSentMessage"] = None) -> None:
        FakeSentMessage._next_id += 1
        self.id = FakeSentMessage._next_id
        self.content = content
        self.parent = parent
        self.deleted = False
        self.edits: list[Optional[str]] = []
        self.edit_calls: list[dict[str, Any]] = []
        self.replies: list["FakeSentMessage"] = []

    async def reply(self, content: Optional[str] = None, **kwargs: Any) -> "FakeSentMessage":
        sent = FakeSentMessage(content, parent=self)
        self.replies.append(sent)
        return sent

    async def edit(self, **kwargs: Any) -> "FakeSentMessage":
        self.edit_calls.append(kwargs)
        if "content" in kwargs:
            self.content = kwargs["content"]
            self.edits.append(kwargs["content"])
        return self

    async def delete(self) -> None:
        self.deleted = True


class FakeAuthor:
    def __init__(self, uid: int = 42, bot: bool = False) -> None:
        self.id = uid
        self.bot = bot
        self.name = f"user{uid}"


class FakeGuild:
    def __init__(self, roles: Optional[dict[int, Any]] = None) -> None:
        self.id = 9000
        self._roles = roles or {}

    def get_role(self, role_id: int) -> Any:
        return self._roles.get(role_id)


class FakeClient:
    def __init__(self, users: Optional[dict[int, Any]] = None, channels: Optional[dict[int, Any]] = None) -> None:
        self.user = FakeAuthor(uid=1, bot=True)
        self.user.name = "Botson"
        self._users = users or {}
        self._channels = channels or {}

    def get_user(self, user_id: int) -> Any:
        return self._users.get(user_id)

    def get_channel(self, channel_id: int) -> Any:
        return self._channels.get(channel_id)


class FakeChannel:
    id = 555


class FakeMessage(FakeSentMessage):
    """Incoming user message: records the replies sent to it."""

    def __init__(
        self,
        content: str,
        *,
        client: Optional[FakeClient] = None,
        guild: Optional[FakeGuild] = None,
        author: Optional[FakeAuthor] = None,
    ) -> None:
        super().__init__(content)
        self.client = client or FakeClient()
        self.guild = guild
        self.author = author or FakeAuthor()
        self.channel = FakeChannel()
        self.created_at = datetime(2025, 1, 2, tzinfo=timezone.utc)


class FakeResponse:
    def __init__(self) -> None:
        self._done = False
        self.sent: list[Optional[str]] = []
        self.defer_kwargs: Optional[dict[str, Any]] = None

    def is_done(self) -> bool:
        return self._done

    async def send_message(self, content: Optional[str] = None, **kwargs: Any) -> None:
        if self._done:
            raise RuntimeError("already responded")
        self._done = True
        self.sent.append(content)

    async def defer(self, **kwargs: Any) -> None:
        if self._done:
            raise RuntimeError("already responded")
        self._done = True
        self.defer_kwargs = kwargs


class FakeFollowup:
    def __init__(self) -> None:
        self.sent: list[Optional[str]] = []

    async def send(self, content: Optional[str] = None, **kwargs: Any) -> None:
        self.sent.append(content)


class FakeInteraction:
    def __init__(self) -> None:
        self.client = FakeClient()
        self.channel = FakeChannel()
        self.channel_id = FakeChannel.id
        self.guild = None
        self.guild_id = None
        self.user = FakeAuthor()
        self.created_at = datetime(2025, 1, 2, tzinfo=timezone.utc)
        self.response = FakeResponse()
        self.followup = FakeFollowup()
        self.original_edits: list[Optional[str]] = []
        self.original_edit_calls: list[dict[str, Any]] = []
        self.original_deleted = False

    async def edit_original_response(self, **kwargs: Any) -> None:
        if self.original_deleted:
            raise RuntimeError("404 Unknown Message")
        self.original_edit_calls.append(kwargs)
        self.original_edits.append(kwargs.get("content"))

    async def delete_original_response(self) -> None:
        if self.original_deleted:
            raise RuntimeError("404 Unknown Message")
        self.original_deleted = True
