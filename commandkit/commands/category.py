"""Named groups of commands used for help listings."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional
import logging

from .command import Command

logger = logging.getLogger(__name__)


class Category:
    def __init__(self, name: str, label: str, *, description: str = "", emoji: Optional[str] = None) -> None:
        self.name = name
        self.label = label
        self.description = description
        self.emoji = emoji
        self.commands: Dict[str, Command] = {}

    def add_command(self, cmd: Command) -> "Category":
        if cmd.name in self.commands:
            raise ValueError(f"Command '{cmd.name}' already registered in category '{self.name}'")
        self.commands[cmd.name] = cmd
        logger.info("Command %s loaded for category %s", cmd.name, self.name)
        return self

    def get_command(self, name: str) -> Optional[Command]:
        for cmd in self.commands.values():
            if cmd.matches(name):
                return cmd
        return None

    def command_names(self) -> List[str]:
        return list(self.commands)

    def help_text(self, hidden: Iterable[str] = ()) -> str:
        """Render a short help block for this category.

        Args:
            hidden: Command names to leave out, e.g. disabled ones.

        Returns:
            str: Markdown block, or "" when no command is left to list.
        """
        skip = {n.lower() for n in hidden}
        names = [n for n in self.commands if n.lower() not in skip]
        if not names:
            return ""
        header = f"{self.emoji} " if self.emoji else ""
        header += f"**{self.label}**"
        if self.description:
            header += f" - {self.description}"
        listing = ", ".join(names)
        return f"{header}\n> {listing}"

    def __repr__(self) -> str:
        return f"Category(name={self.name!r}, commands={self.command_names()!r})"


__all__ = ["Category"]
