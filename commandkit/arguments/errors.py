"""Errors raised while resolving free-text command arguments.

Every user-facing failure derives from ParsingError so the dispatcher can
catch a single type and reply with `str(error)`.
"""
from __future__ import annotations

from typing import Optional


class ParsingError(Exception):
    """Resolution failure carrying a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MissingArgumentError(ParsingError):
    """Input ran out where a required argument was expected."""

    def __init__(self, argument: str, expected: str) -> None:
        super().__init__(f"Missing value for `{argument}` of type {expected}")
        self.argument = argument
        self.expected = expected


class InvalidArgumentError(ParsingError):
    """A token did not classify as the type a required argument expects."""

    def __init__(self, token: str, argument: str, expected: str) -> None:
        super().__init__(f"Invalid value {token} for value `{argument}` of type {expected}")
        self.token = token
        self.argument = argument
        self.expected = expected


class EntityNotFoundError(ParsingError):
    """A well-formed mention references an id missing from the lookup cache."""

    def __init__(self, kind: str, entity_id: Optional[int] = None) -> None:
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.entity_id = entity_id


__all__ = [
    "ParsingError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "EntityNotFoundError",
]
