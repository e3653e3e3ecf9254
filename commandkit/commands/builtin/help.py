"""Built-in `help` command listing categories or describing one command."""
from __future__ import annotations

from typing import Any, Dict

from ...arguments.schema import ArgumentSpec, ArgumentType
from ...interaction.facade import InteractionLike
from ..category import Category
from ..command import Command, command
from ..registry import CommandRegistry

general = Category("general", "General", description="Built-in commands")


def RenderCommandHelp(cmd: Command, prefix: str) -> str:
    """Describe one command: description, usage, arguments and examples."""
    lines = [f"**{cmd.name}**" + (f" - {cmd.description}" if cmd.description else "")]
    if cmd.aliases:
        lines.append("Aliases: " + ", ".join(cmd.aliases))
    lines.append(f"Usage: `{cmd.usage_text(prefix)}`")
    for arg_name, spec in cmd.args.items():
        line = f"- `{arg_name}` ({spec.type.value.lower()}{', optional' if spec.optional else ''})"
        if spec.description:
            line += f": {spec.description}"
        if spec.choices:
            line += " [" + ", ".join(c.display for c in spec.choices) + "]"
        lines.append(line)
    if cmd.examples:
        lines.append("Examples: " + ", ".join(f"`{prefix}{e}`" for e in cmd.examples))
    return "\n".join(lines)


def RenderOverview(registry: CommandRegistry, prefix: str) -> str:
    """List every category and the uncategorised commands, minus disabled ones."""
    blocks = [block for block in (c.help_text(registry.disabled_commands) for c in registry.categories.values()) if block]
    if registry.commands:
        blocks.append("**Other**\n> " + ", ".join(registry.commands))
    blocks.append(f"Use `{prefix}help <command>` for details.")
    return "\n\n".join(blocks)


@command(
    name="help",
    aliases=["h"],
    description="List commands or show how to use one",
    examples=["help", "help ping"],
    args={"command": ArgumentSpec(ArgumentType.STRING, "Command to describe", optional=True)},
)
async def help_command(client: Any, interaction: InteractionLike, args: Dict[str, Any]) -> None:
    registry: CommandRegistry = getattr(client, "command_registry")
    prefix: str = getattr(client, "command_prefix", "!")
    name = args.get("command")
    if not name:
        await interaction.reply(RenderOverview(registry, prefix))
        return
    target = registry.get_command(name.split()[0])
    if target is None:
        await interaction.reply(f"Unknown command `{name}`.")
        return
    await interaction.reply(RenderCommandHelp(target, prefix))


general.add_command(help_command)
