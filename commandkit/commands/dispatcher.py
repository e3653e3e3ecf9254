"""Route prefix messages to registered commands."""
from __future__ import annotations

from typing import Any, Optional, Tuple
import logging

import discord

from ..arguments.errors import ParsingError
from ..arguments.lookup import MessageEntityLookup
from ..arguments.walker import resolve_arguments
from ..interaction.facade import DEFAULT_THINKING_MESSAGE, MessageWrappedInteraction
from .registry import CommandRegistry

logger = logging.getLogger(__name__)


def split_command(content: str, prefix: str) -> Optional[Tuple[str, str]]:
    """Split a prefixed message into (command name, argument body).

    Returns:
        None when `content` does not start with `prefix` or names no command.

    Example:
        split_command("!give 5 pizza", "!") -> ("give", "5 pizza")
    """
    if not prefix or not content.startswith(prefix):
        return None
    rest = content[len(prefix):]
    # The name must follow the prefix directly: "! help" is not a command
    if not rest or rest[0].isspace():
        return None
    parts = rest.split(None, 1)
    name = parts[0]
    body = parts[1] if len(parts) > 1 else ""
    return name, body


class TextCommandDispatcher:
    """Resolve and run commands invoked by prefixed chat messages.

    Parsing failures are answered with a single reply carrying the error
    message; the command is not run. Errors raised by commands themselves are
    logged and propagate.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        prefix: str = "!",
        thinking_message: str = DEFAULT_THINKING_MESSAGE,
    ) -> None:
        self.registry = registry
        self.prefix = prefix
        self.thinking_message = thinking_message

    async def handle_message(self, client: Any, message: discord.Message) -> bool:
        """Dispatch `message` if it invokes a known command.

        Returns:
            bool: True when a command matched (even if argument parsing failed).
        """
        if getattr(message.author, "bot", False):
            return False
        split = split_command(message.content or "", self.prefix)
        if split is None:
            return False
        name, body = split
        cmd = self.registry.get_command(name)
        if cmd is None:
            logger.debug("Unknown command %r from user %s", name, getattr(message.author, "id", None))
            return False

        interaction = MessageWrappedInteraction(message, thinking_message=self.thinking_message)
        try:
            args = resolve_arguments(cmd.args, body, MessageEntityLookup(message))
        except ParsingError as e:
            logger.info("Argument parsing failed for %s: %s", cmd.name, e.message)
            await interaction.reply(e.message)
            return True

        logger.info("Running %s%s for user %s", self.prefix, cmd.name, getattr(message.author, "id", None))
        try:
            await cmd.run(client, interaction, args)
        except Exception:
            logger.exception("Command %s failed", cmd.name)
            raise
        return True


__all__ = ["split_command", "TextCommandDispatcher"]
