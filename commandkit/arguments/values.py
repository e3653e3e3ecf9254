"""Convert a classified token into a concrete value of its target type."""
from __future__ import annotations

import re
from typing import Any

from .classifier import CHANNEL_REGEX, ROLE_REGEX, USER_REGEX
from .errors import EntityNotFoundError
from .lookup import EntityLookup
from .schema import ArgumentType

_LEADING_INT = re.compile(r"^\s*([-+]?[0-9]+)")
_TRUTHY_WORDS = {"oui", "on"}


def parse_boolean(token: str) -> bool:
    """Return True for affirmative words (anything starting with "y", "oui", "on")."""
    lowered = token.lower()
    return lowered.startswith("y") or lowered in _TRUTHY_WORDS


def parse_number(token: str) -> int:
    """Parse the leading base-10 integer of `token`.

    Raises:
        ValueError: If the token does not start with an integer.
    """
    match = _LEADING_INT.match(token)
    if not match:
        raise ValueError(f"{token!r} does not start with an integer")
    return int(match.group(1), 10)


def _mention_id(pattern: re.Pattern[str], token: str) -> int:
    match = pattern.search(token)
    if not match:
        raise ValueError(f"{token!r} is not a mention")
    return int(match.group(1))


def resolve_value(lookup: EntityLookup, token: str, kind: ArgumentType) -> Any:
    """Resolve one token into a value of type `kind`.

    Args:
        lookup: Entity cache used for role, user and channel mentions.
        token: Raw token text, already known to classify as `kind` (or any
            token for STRING).
        kind: Target argument type.

    Returns:
        bool, int, str, or the cached role/user/channel object.

    Raises:
        EntityNotFoundError: A mention's id is not in the lookup cache.
        ValueError: The token cannot be converted (e.g. NUMBER "abc123").
    """
    if kind is ArgumentType.BOOLEAN:
        return parse_boolean(token)
    if kind is ArgumentType.NUMBER:
        return parse_number(token)
    if kind is ArgumentType.STRING:
        return token
    if kind is ArgumentType.CHANNEL:
        channel_id = _mention_id(CHANNEL_REGEX, token)
        channel = lookup.get_channel(channel_id)
        if channel is None:
            raise EntityNotFoundError("Channel", channel_id)
        return channel
    if kind is ArgumentType.ROLE:
        role_id = _mention_id(ROLE_REGEX, token)
        role = lookup.get_role(role_id)
        if role is None:
            raise EntityNotFoundError("Role", role_id)
        return role
    if kind is ArgumentType.USER:
        user_id = _mention_id(USER_REGEX, token)
        user = lookup.get_user(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user
    raise ValueError(f"Unsupported argument type: {kind!r}")


__all__ = ["parse_boolean", "parse_number", "resolve_value"]
