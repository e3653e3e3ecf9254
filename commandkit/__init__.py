"""Discord bot scaffolding with free-text argument resolution for prefix commands."""

from .arguments import ArgumentSchema, ArgumentSpec, ArgumentType, ParsingError, resolve_arguments
from .commands import Category, Command, CommandRegistry, TextCommandDispatcher, command
from .interaction import InteractionLike, MessageWrappedInteraction, NativeInteraction

__version__ = "0.1.0"

__all__ = [
    "ArgumentSchema",
    "ArgumentSpec",
    "ArgumentType",
    "ParsingError",
    "resolve_arguments",
    "Category",
    "Command",
    "CommandRegistry",
    "TextCommandDispatcher",
    "command",
    "InteractionLike",
    "MessageWrappedInteraction",
    "NativeInteraction",
]
