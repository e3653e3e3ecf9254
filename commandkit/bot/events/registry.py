"""Registry for Discord client event handlers.
"""
from __future__ import annotations

import logging

import discord

from ...commands.dispatcher import TextCommandDispatcher

logger = logging.getLogger(__name__)


def register_bot_events(client: discord.Client, dispatcher: TextCommandDispatcher) -> None:
    """Attach event handlers to the provided client instance.
    """

    @client.event
    async def on_ready() -> None:
        commands = dispatcher.registry.all_commands()
        logger.info(
            "Logged in as %s; %d text commands available with prefix %r (guilds=%d)",
            client.user,
            len(commands),
            dispatcher.prefix,
            len(client.guilds),
        )

    @client.event
    async def on_message(message: discord.Message) -> None:
        await dispatcher.handle_message(client, message)
