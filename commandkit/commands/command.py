"""Command definitions shared by prefix and slash invocations.

A Command couples an async callback with its metadata and argument schema:

    @command(
        name="ping",
        aliases=["p"],
        description="Ping a user",
        args={"target": ArgumentSpec("USER", "Who to ping")},
    )
    async def ping(client, interaction, args):
        await interaction.reply(f"Pong {args['target'].mention}")
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Tuple

from ..arguments.schema import ArgumentSchema, SchemaLike
from ..interaction.facade import InteractionLike

CommandCallback = Callable[[Any, InteractionLike, Dict[str, Any]], Awaitable[Any]]


class Command:
    """A named, schema-bearing command.

    Attributes:
        name: Primary name, matched case-insensitively.
        aliases: Alternative names.
        description: One-line summary for help listings.
        usage: Explicit usage string; generated from the schema when None.
        examples: Example invocations without the prefix.
        args: Ordered ArgumentSchema.
    """

    def __init__(
        self,
        callback: CommandCallback,
        *,
        name: str,
        aliases: Iterable[str] = (),
        description: str = "",
        usage: Optional[str] = None,
        examples: Iterable[str] = (),
        args: Optional[SchemaLike] = None,
    ) -> None:
        if not name or any(c.isspace() for c in name):
            raise ValueError(f"Invalid command name: {name!r}")
        self.callback = callback
        self.name = name
        self.aliases: Tuple[str, ...] = tuple(aliases)
        self.description = description
        self.usage = usage
        self.examples: Tuple[str, ...] = tuple(examples)
        self.args = ArgumentSchema.coerce(args)

    def matches(self, name: str) -> bool:
        lowered = name.lower()
        return lowered == self.name.lower() or any(lowered == a.lower() for a in self.aliases)

    def usage_text(self, prefix: str = "!") -> str:
        """Return the usage line, e.g. "!give <amount> [note]"."""
        if self.usage:
            return f"{prefix}{self.name} {self.usage}".rstrip()
        parts = [f"{prefix}{self.name}"]
        for arg_name, spec in self.args.items():
            label = "|".join(spec.choice_values()) or arg_name
            parts.append(f"[{label}]" if spec.optional else f"<{label}>")
        return " ".join(parts)

    async def run(self, client: Any, interaction: InteractionLike, args: Dict[str, Any]) -> Any:
        return await self.callback(client, interaction, args)

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, args={self.args!r})"


def command(
    *,
    name: Optional[str] = None,
    aliases: Iterable[str] = (),
    description: str = "",
    usage: Optional[str] = None,
    examples: Iterable[str] = (),
    args: Optional[SchemaLike] = None,
) -> Callable[[CommandCallback], Command]:
    """Decorator turning an async function into a Command.

    The function name is used when `name` is not given; its docstring's first
    line becomes the description when `description` is empty.
    """

    def decorator(func: CommandCallback) -> Command:
        doc = (func.__doc__ or "").strip().splitlines()
        return Command(
            func,
            name=name or func.__name__,
            aliases=aliases,
            description=description or (doc[0] if doc else ""),
            usage=usage,
            examples=examples,
            args=args,
        )

    return decorator


__all__ = ["Command", "CommandCallback", "command"]
