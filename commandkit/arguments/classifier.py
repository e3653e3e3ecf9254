"""Surface-syntax type inference for single command tokens."""
from __future__ import annotations

import re
from typing import Optional

from .schema import ArgumentType

ROLE_REGEX = re.compile(r"<@&([0-9]+)>")
USER_REGEX = re.compile(r"<@!?([0-9]+)>")
CHANNEL_REGEX = re.compile(r"<#([0-9]+)>")
# Unanchored: "abc123" classifies as NUMBER.
NUMBER_REGEX = re.compile(r"-?[0-9]+")
BOOLEAN_REGEX = re.compile(r"^(?:yes|no|oui|non|y|n|on|off)$", re.IGNORECASE)
STRING_REGEX = re.compile(r".*", re.DOTALL)

# First match wins.
_RULES: tuple[tuple[re.Pattern[str], ArgumentType], ...] = (
    (ROLE_REGEX, ArgumentType.ROLE),
    (USER_REGEX, ArgumentType.USER),
    (CHANNEL_REGEX, ArgumentType.CHANNEL),
    (NUMBER_REGEX, ArgumentType.NUMBER),
    (BOOLEAN_REGEX, ArgumentType.BOOLEAN),
    (STRING_REGEX, ArgumentType.STRING),
)


def classify_token(token: Optional[str]) -> Optional[ArgumentType]:
    """Return the most specific type a token's text looks like.

    Args:
        token: A single whitespace-free token, or None once input is exhausted.

    Returns:
        The matching ArgumentType, or None (undefined) when `token` is None.

    Example:
        >>> classify_token("<@&42>")
        <ArgumentType.ROLE: 'ROLE'>
        >>> classify_token("maybe")
        <ArgumentType.STRING: 'STRING'>
    """
    if token is None:
        return None
    for pattern, kind in _RULES:
        if pattern.search(token):
            return kind
    return ArgumentType.STRING


__all__ = [
    "ROLE_REGEX",
    "USER_REGEX",
    "CHANNEL_REGEX",
    "NUMBER_REGEX",
    "BOOLEAN_REGEX",
    "STRING_REGEX",
    "classify_token",
]
