from __future__ import annotations

import pytest

from commandkit.interaction import MessageWrappedInteraction, NativeInteraction

from fakes import FakeInteraction, FakeMessage


@pytest.mark.asyncio
async def test_message_reply_sets_replied_and_tracks_last_message() -> None:
    msg = FakeMessage("!ping")
    wrapped = MessageWrappedInteraction(msg)  # type: ignore[arg-type]
    assert wrapped.replied is False and wrapped.deferred is False

    await wrapped.reply("pong")

    assert wrapped.replied is True
    assert [r.content for r in msg.replies] == ["pong"]
    assert wrapped.last_message is msg.replies[0]
    assert wrapped.user is msg.author
    assert wrapped.created_at == msg.created_at


@pytest.mark.asyncio
async def test_message_defer_then_follow_up_edits_placeholder() -> None:
    msg = FakeMessage("!slow")
    wrapped = MessageWrappedInteraction(msg)  # type: ignore[arg-type]

    await wrapped.defer_reply()
    placeholder = wrapped.last_message
    assert wrapped.deferred is True
    assert placeholder is not None and placeholder.content == "Botson is thinking..."

    await wrapped.follow_up("done")

    assert len(msg.replies) == 1
    assert placeholder.content == "done"
    assert wrapped.last_message is placeholder


@pytest.mark.asyncio
async def test_message_custom_thinking_message() -> None:
    msg = FakeMessage("!slow")
    wrapped = MessageWrappedInteraction(msg, thinking_message="{name} réfléchit...")  # type: ignore[arg-type]
    await wrapped.defer_reply()
    assert msg.replies[0].content == "Botson réfléchit..."


@pytest.mark.asyncio
async def test_message_follow_up_chains_replies() -> None:
    msg = FakeMessage("!chat")
    wrapped = MessageWrappedInteraction(msg)  # type: ignore[arg-type]

    await wrapped.follow_up("first")
    first = wrapped.last_message
    await wrapped.follow_up("second")

    assert [r.content for r in msg.replies] == ["first"]
    assert first is not None and [r.content for r in first.replies] == ["second"]
    assert wrapped.last_message is first.replies[0]


@pytest.mark.asyncio
async def test_message_edit_and_delete_are_safe_without_reply() -> None:
    msg = FakeMessage("!noop")
    wrapped = MessageWrappedInteraction(msg)  # type: ignore[arg-type]

    await wrapped.edit_reply("nothing to edit")
    await wrapped.delete_reply()

    assert msg.replies == []
    assert wrapped.last_message is None


@pytest.mark.asyncio
async def test_message_edit_then_delete() -> None:
    msg = FakeMessage("!x")
    wrapped = MessageWrappedInteraction(msg)  # type: ignore[arg-type]
    await wrapped.reply("v1")
    sent = wrapped.last_message

    await wrapped.edit_reply("v2")
    await wrapped.delete_reply()

    assert sent is not None and sent.edits == ["v2"] and sent.deleted is True
    assert wrapped.last_message is None


@pytest.mark.asyncio
async def test_native_reply_then_follow_up_uses_followup_webhook() -> None:
    inter = FakeInteraction()
    wrapped = NativeInteraction(inter)  # type: ignore[arg-type]

    await wrapped.follow_up("first")
    await wrapped.follow_up("second")

    assert inter.response.sent == ["first"]
    assert inter.followup.sent == ["second"]
    assert wrapped.replied is True


@pytest.mark.asyncio
async def test_native_defer_edit_and_delete() -> None:
    inter = FakeInteraction()
    wrapped = NativeInteraction(inter)  # type: ignore[arg-type]

    await wrapped.defer_reply()
    await wrapped.edit_reply("ready")
    await wrapped.delete_reply()

    assert inter.response.defer_kwargs == {"thinking": True}
    assert wrapped.deferred is True
    assert inter.original_edits == ["ready"]
    assert inter.original_deleted is True


@pytest.mark.asyncio
async def test_native_edit_and_delete_before_response_are_noops() -> None:
    inter = FakeInteraction()
    wrapped = NativeInteraction(inter)  # type: ignore[arg-type]

    await wrapped.edit_reply("x")
    await wrapped.delete_reply()

    assert inter.original_edits == []
    assert inter.original_deleted is False


@pytest.mark.asyncio
async def test_native_transport_errors_propagate() -> None:
    inter = FakeInteraction()
    wrapped = NativeInteraction(inter)  # type: ignore[arg-type]
    await wrapped.reply("once")
    with pytest.raises(RuntimeError):
        await wrapped.reply("twice")


@pytest.mark.asyncio
async def test_native_delete_twice_only_deletes_once() -> None:
    inter = FakeInteraction()
    wrapped = NativeInteraction(inter)  # type: ignore[arg-type]

    await wrapped.reply("x")
    await wrapped.delete_reply()
    await wrapped.delete_reply()
    await wrapped.edit_reply("too late")

    assert wrapped.deleted is True
    assert inter.original_deleted is True
    assert inter.original_edits == []


@pytest.mark.asyncio
async def test_message_edit_without_content_keeps_text() -> None:
    msg = FakeMessage("!x")
    wrapped = MessageWrappedInteraction(msg)  # type: ignore[arg-type]
    await wrapped.reply("keep me")
    sent = wrapped.last_message
    embed = object()

    await wrapped.edit_reply(embed=embed)

    assert sent is not None
    assert sent.edit_calls == [{"embed": embed}]
    assert sent.content == "keep me"


@pytest.mark.asyncio
async def test_message_deferred_follow_up_without_content_keeps_placeholder_text() -> None:
    msg = FakeMessage("!slow")
    wrapped = MessageWrappedInteraction(msg)  # type: ignore[arg-type]
    await wrapped.defer_reply()
    embed = object()

    await wrapped.follow_up(embed=embed)

    placeholder = msg.replies[0]
    assert placeholder.edit_calls == [{"embed": embed}]
    assert placeholder.content == "Botson is thinking..."


@pytest.mark.asyncio
async def test_native_edit_without_content_omits_it() -> None:
    inter = FakeInteraction()
    wrapped = NativeInteraction(inter)  # type: ignore[arg-type]
    await wrapped.reply("keep me")
    embed = object()

    await wrapped.edit_reply(embed=embed)

    assert inter.original_edit_calls == [{"embed": embed}]
