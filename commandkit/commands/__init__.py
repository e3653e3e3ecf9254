"""Command definitions, categories, registry and dispatch.

Exports:
- Command, command
- Category
- CommandRegistry
- TextCommandDispatcher, split_command
"""

from .command import Command, CommandCallback, command
from .category import Category
from .registry import CommandRegistry
from .dispatcher import TextCommandDispatcher, split_command

__all__ = [
    "Command",
    "CommandCallback",
    "command",
    "Category",
    "CommandRegistry",
    "TextCommandDispatcher",
    "split_command",
]
