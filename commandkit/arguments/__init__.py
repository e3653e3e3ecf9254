"""Free-text argument resolution: schemas, classification, values and the walker.

Exports:
- ArgumentType, ArgumentSpec, ArgumentSchema, Choice
- classify_token
- resolve_value
- resolve_arguments, tokenize
- EntityLookup, MessageEntityLookup, MappingEntityLookup
- ParsingError and its subclasses
"""

from .schema import ArgumentType, ArgumentSpec, ArgumentSchema, Choice
from .classifier import classify_token
from .values import resolve_value
from .walker import resolve_arguments, tokenize
from .lookup import EntityLookup, MessageEntityLookup, MappingEntityLookup
from .errors import (
    ParsingError,
    MissingArgumentError,
    InvalidArgumentError,
    EntityNotFoundError,
)

__all__ = [
    "ArgumentType",
    "ArgumentSpec",
    "ArgumentSchema",
    "Choice",
    "classify_token",
    "resolve_value",
    "resolve_arguments",
    "tokenize",
    "EntityLookup",
    "MessageEntityLookup",
    "MappingEntityLookup",
    "ParsingError",
    "MissingArgumentError",
    "InvalidArgumentError",
    "EntityNotFoundError",
]
