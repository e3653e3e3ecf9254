"""Command registry with package discovery.

Commands are either registered directly or grouped into categories. Lookup
checks top-level commands first, then categories in registration order, and
matches names and aliases case-insensitively.

Discovery imports every non-underscore module of a package and registers the
module-level Command and Category instances it finds. Commands that belong to
a discovered category are only reachable through that category.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple
import importlib
import logging
import pkgutil

from .category import Category
from .command import Command

# Public logger for discovery/registration diagnostics
logger = logging.getLogger(__name__)


class CommandRegistry:
    def __init__(
        self,
        *,
        disabled_commands: Iterable[str] = (),
        disabled_categories: Iterable[str] = (),
    ) -> None:
        self.commands: Dict[str, Command] = {}
        self.categories: Dict[str, Category] = {}
        self.disabled_commands = {n.lower() for n in disabled_commands}
        self.disabled_categories = {n.lower() for n in disabled_categories}

    def _is_disabled(self, cmd: Command) -> bool:
        return cmd.name.lower() in self.disabled_commands

    def add_command(self, cmd: Command) -> "CommandRegistry":
        """Register a top-level command.

        Raises:
            ValueError: If another command already uses the name.
        """
        if self._is_disabled(cmd):
            logger.info("Command %s is disabled; skipping", cmd.name)
            return self
        if cmd.name in self.commands:
            raise ValueError(f"Command '{cmd.name}' is already registered")
        self.commands[cmd.name] = cmd
        logger.info("Command %s loaded", cmd.name)
        return self

    def add_category(self, category: Category) -> "CommandRegistry":
        """Register a category of commands.

        Raises:
            ValueError: If another category already uses the name.
        """
        if category.name.lower() in self.disabled_categories:
            logger.info("Category %s is disabled; skipping", category.name)
            return self
        if category.name in self.categories:
            raise ValueError(f"Category '{category.name}' is already registered")
        self.categories[category.name] = category
        logger.info("Category %s loaded with %d commands", category.label, len(category.commands))
        return self

    def get_command(self, name: str) -> Optional[Command]:
        for cmd in self.commands.values():
            if cmd.matches(name):
                return cmd
        for category in self.categories.values():
            cmd = category.get_command(name)
            if cmd is not None and not self._is_disabled(cmd):
                return cmd
        return None

    def all_commands(self) -> List[Command]:
        found: List[Command] = list(self.commands.values())
        for category in self.categories.values():
            found.extend(c for c in category.commands.values() if not self._is_disabled(c))
        return found

    def category_of(self, cmd: Command) -> Optional[Category]:
        for category in self.categories.values():
            if category.commands.get(cmd.name) is cmd:
                return category
        return None

    @staticmethod
    def _collect_from_package(package: str) -> Tuple[List[Category], List[Command]]:
        """Import all modules in a package and gather Category/Command instances."""
        pkg = importlib.import_module(package)
        pkg_path_list = getattr(pkg, "__path__", None)
        if not pkg_path_list:
            logger.warning("Package '%s' has no __path__; nothing to discover.", package)
            return [], []

        categories: List[Category] = []
        commands: List[Command] = []
        for mod_info in sorted(pkgutil.iter_modules(pkg_path_list), key=lambda m: m.name):
            if mod_info.name.startswith("_"):
                continue
            full_name = f"{package}.{mod_info.name}"
            try:
                mod = importlib.import_module(full_name)
            except Exception as e:  # pragma: no cover - import error path
                logger.warning("Skipping module '%s' (import failed): %s", full_name, e)
                continue
            for value in vars(mod).values():
                if isinstance(value, Category) and value not in categories:
                    categories.append(value)
                elif isinstance(value, Command) and value not in commands:
                    commands.append(value)
        return categories, commands

    def discover(self, package: str) -> "CommandRegistry":
        """Register every command and category defined in `package`.

        Raises:
            ModuleNotFoundError: If the package itself cannot be imported.
        """
        categories, commands = self._collect_from_package(package)
        categorized = {id(c) for cat in categories for c in cat.commands.values()}
        for category in categories:
            self.add_category(category)
        for cmd in commands:
            if id(cmd) not in categorized:
                self.add_command(cmd)
        logger.info("Discovered %d categories and %d commands from %s", len(categories), len(commands), package)
        return self


__all__ = ["CommandRegistry"]
