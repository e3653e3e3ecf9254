"""Declarative argument schemas attached to commands.

A schema is an ordered, read-only mapping of argument name to ArgumentSpec.
Order matters: the resolver consumes input tokens slot by slot in the order
the arguments were declared.

Example:
    schema = ArgumentSchema({
        "target": ArgumentSpec(ArgumentType.USER, "Who to ping"),
        "reason": ArgumentSpec("STRING", "Why", optional=True),
    })
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple, Union


class ArgumentType(str, Enum):
    BOOLEAN = "BOOLEAN"
    CHANNEL = "CHANNEL"
    NUMBER = "NUMBER"
    ROLE = "ROLE"
    STRING = "STRING"
    USER = "USER"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Choice:
    """One allowed literal value, with an optional display label."""

    value: str
    label: Optional[str] = None

    @property
    def display(self) -> str:
        return self.label or self.value


ChoiceLike = Union[str, Choice, Mapping[str, str]]


def _NormalizeChoice(raw: ChoiceLike) -> Choice:
    if isinstance(raw, Choice):
        return raw
    if isinstance(raw, str):
        return Choice(value=raw)
    if isinstance(raw, Mapping):
        if "value" not in raw:
            raise ValueError(f"Choice mapping needs a 'value' key: {raw!r}")
        return Choice(value=str(raw["value"]), label=raw.get("label"))
    raise TypeError(f"Unsupported choice: {raw!r}")


@dataclass(frozen=True, slots=True)
class ArgumentSpec:
    """Declared type, description and optionality of one argument slot.

    Attributes:
        type: Expected argument type. Plain strings such as "NUMBER" are accepted.
        description: Help text shown in usage listings.
        optional: Whether the slot may be left unset.
        choices: Allowed literal values; informational for text commands.
    """

    type: ArgumentType
    description: str = ""
    optional: bool = False
    choices: Tuple[Choice, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "type", ArgumentType(str(self.type).upper()))
        object.__setattr__(self, "choices", tuple(_NormalizeChoice(c) for c in (self.choices or ())))

    def choice_values(self) -> Tuple[str, ...]:
        return tuple(c.value for c in self.choices)


SchemaLike = Union["ArgumentSchema", Mapping[str, Union[ArgumentSpec, Mapping[str, Any]]]]


class ArgumentSchema(Mapping[str, ArgumentSpec]):
    """Immutable, ordered mapping from argument name to ArgumentSpec.

    Raw mappings like {"type": "ROLE", "optional": True} are converted into
    ArgumentSpec instances at construction time.
    """

    __slots__ = ("_specs",)

    def __init__(self, specs: Optional[Mapping[str, Union[ArgumentSpec, Mapping[str, Any]]]] = None) -> None:
        normalized: dict[str, ArgumentSpec] = {}
        for name, spec in (specs or {}).items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"Argument names must be non-empty strings, got {name!r}")
            if isinstance(spec, ArgumentSpec):
                normalized[name] = spec
            elif isinstance(spec, Mapping):
                normalized[name] = ArgumentSpec(**spec)
            else:
                raise TypeError(f"Argument '{name}' must be an ArgumentSpec or mapping, got {type(spec).__name__}")
        self._specs = normalized

    @classmethod
    def coerce(cls, value: Optional[SchemaLike]) -> "ArgumentSchema":
        """Return `value` as an ArgumentSchema (None becomes an empty schema)."""
        if isinstance(value, ArgumentSchema):
            return value
        return cls(value)

    def __getitem__(self, name: str) -> ArgumentSpec:
        return self._specs[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v.type.value}{'?' if v.optional else ''}" for k, v in self._specs.items())
        return f"ArgumentSchema({inner})"


__all__ = ["ArgumentType", "Choice", "ArgumentSpec", "ArgumentSchema", "SchemaLike"]
