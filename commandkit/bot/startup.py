"""Helpers to build and start the Discord client.

Keeps `commandkit.bot_main` small: configuration, command discovery and
event wiring all happen here.
"""
from __future__ import annotations

import logging

import discord

from ..commands.dispatcher import TextCommandDispatcher
from ..commands.registry import CommandRegistry
from ..core.config import AppConfig
from ..security import mask_token

logger = logging.getLogger(__name__)


def BuildIntents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.message_content = True
    intents.members = True
    return intents


def BuildRegistry(config: AppConfig) -> CommandRegistry:
    """Create a registry and discover every configured command package.

    Raises:
        RuntimeError: A package failed to import while `config.strict` is set.
    """
    registry = CommandRegistry(
        disabled_commands=config.disabled_commands,
        disabled_categories=config.disabled_categories,
    )
    for package in config.command_packages:
        try:
            registry.discover(package)
        except ImportError as e:
            if config.strict:
                raise RuntimeError(f"Failed to load command package '{package}': {e}") from e
            logger.error("Failed to load command package '%s': %s", package, e)
    return registry


def RegisterRuntime(client: discord.Client, config: AppConfig) -> TextCommandDispatcher:
    """Attach the registry, dispatcher and event handlers to `client`."""
    registry = BuildRegistry(config)
    dispatcher = TextCommandDispatcher(registry, prefix=config.prefix, thinking_message=config.thinking_message)
    setattr(client, "command_registry", registry)
    setattr(client, "command_prefix", config.prefix)
    setattr(client, "command_dispatcher", dispatcher)

    from .events import registry as bot_event_registry
    bot_event_registry.register_bot_events(client, dispatcher)
    return dispatcher


def Run(client: discord.Client, config: AppConfig) -> None:
    """Register runtime integrations and run `client` until it disconnects."""
    logger.info("Using token (masked): %s", mask_token(config.discord_token))
    RegisterRuntime(client, config)
    client.run(config.discord_token, log_handler=None)
