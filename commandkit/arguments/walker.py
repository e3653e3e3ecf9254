"""Free-text argument resolution for prefix commands.

Walks an argument schema once, left to right, shifting tokens off the front
of the command body and resolving each to a typed value.

Consumption rules:
    - A non-STRING slot takes at most one token, and only when the token
      classifies as the slot's type.
    - A STRING slot takes every remaining token and joins them with a space,
      so a STRING that is not the last argument leaves nothing for the
      arguments after it.
    - When an optional slot does not match, the token is left in place and
      resolution halts: every later optional slot stays unset, while later
      required slots are still resolved from the remaining tokens.
    - A required slot that does not match raises a ParsingError.

Example:
    schema = ArgumentSchema({
        "amount": ArgumentSpec("NUMBER"),
        "note": ArgumentSpec("STRING", optional=True),
    })
    resolve_arguments(schema, "5 for the pizza", lookup)
    # {"amount": 5, "note": "for the pizza"}
"""
from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, Optional, Sequence, Union
import logging

from .classifier import classify_token
from .errors import InvalidArgumentError, MissingArgumentError, ParsingError
from .lookup import EntityLookup, MappingEntityLookup
from .schema import ArgumentSchema, ArgumentType, SchemaLike
from .values import resolve_value

logger = logging.getLogger(__name__)

TokenInput = Union[str, Sequence[str]]


def tokenize(body: Optional[str]) -> list[str]:
    """Split a command body on runs of whitespace."""
    return (body or "").split()


def _is_valid(token: Optional[str], expected: ArgumentType) -> bool:
    if token is None:
        return False
    return expected is ArgumentType.STRING or classify_token(token) is expected


def resolve_arguments(
    schema: Optional[SchemaLike],
    tokens: TokenInput,
    lookup: Optional[EntityLookup] = None,
) -> Dict[str, Any]:
    """Resolve a command body against an argument schema.

    Args:
        schema: Ordered argument declarations (ArgumentSchema or plain mapping).
        tokens: The body with the command name stripped, either as raw text
            or already split. A sequence is copied, never mutated.
        lookup: Entity cache for mention arguments. Defaults to an empty cache.

    Returns:
        Dict of argument name to resolved value. Keys are only present for
        slots that received a value.

    Raises:
        MissingArgumentError: Input ran out before a required argument.
        InvalidArgumentError: A required argument got a token of another type.
        EntityNotFoundError: A mention references an uncached entity.
        ParsingError: Any other failure converting a matched token.
    """
    resolved_schema = ArgumentSchema.coerce(schema)
    if not resolved_schema:
        return {}

    remaining: Deque[str] = deque(tokenize(tokens) if isinstance(tokens, str) else tokens)
    entity_lookup: EntityLookup = lookup if lookup is not None else MappingEntityLookup()
    resolved: Dict[str, Any] = {}
    halted = False

    for name, spec in resolved_schema.items():
        if halted and spec.optional:
            continue

        token = remaining[0] if remaining else None
        if not _is_valid(token, spec.type):
            if spec.optional:
                logger.debug("Optional argument %s unmatched by %r; halting", name, token)
                halted = True
                continue
            if token is None:
                raise MissingArgumentError(name, spec.type.value)
            raise InvalidArgumentError(token, name, spec.type.value)

        if spec.type is ArgumentType.STRING:
            resolved[name] = " ".join(remaining)
            remaining.clear()
            logger.debug("Argument %s absorbed the rest of the input", name)
            continue

        token = remaining.popleft()
        try:
            resolved[name] = resolve_value(entity_lookup, token, spec.type)
        except ParsingError:
            raise
        except Exception as e:
            raise ParsingError(
                f"Error resolving value {token} for value `{name}` of type {spec.type.value}"
            ) from e
        logger.debug("Argument %s resolved from %r as %s", name, token, spec.type.value)

    return resolved


__all__ = ["tokenize", "resolve_arguments", "TokenInput"]
