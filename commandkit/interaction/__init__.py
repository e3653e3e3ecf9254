"""Interaction facade shared by prefix and slash command invocations.

Exports:
- InteractionLike
- MessageWrappedInteraction, NativeInteraction
"""

from .facade import (
    DEFAULT_THINKING_MESSAGE,
    InteractionLike,
    MessageWrappedInteraction,
    NativeInteraction,
)

__all__ = [
    "DEFAULT_THINKING_MESSAGE",
    "InteractionLike",
    "MessageWrappedInteraction",
    "NativeInteraction",
]
