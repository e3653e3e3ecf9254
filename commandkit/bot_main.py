"""Discord bot entrypoint: wires configuration, command discovery, and event handling."""

import logging

import discord

from .bot import startup
from .core.config import LoadConfig
from .security import validate_discord_token


def Run() -> None:
    """Main entry to launch the Discord bot after environment validation.

    Raises:
        SystemExit: If the Discord token is not properly configured

    Example:
        Run()  # Launches the bot if token is valid
    """
    config = LoadConfig()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
    validate_discord_token(config.discord_token)
    client = discord.Client(intents=startup.BuildIntents())
    startup.Run(client, config)


if __name__ == "__main__":
    Run()
