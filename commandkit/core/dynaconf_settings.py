from dataclasses import dataclass
from typing import Optional, Tuple, Any
import os

from dynaconf import Dynaconf  # type: ignore

settings: Dynaconf = Dynaconf(  # type: ignore
    settings_files=["settings.toml", ".secrets.toml"],
    environments=True,           # allow [default], [development], [production], [testing]
    envvar_prefix="BOT",         # env vars like BOT_PREFIX etc.
    load_dotenv=True,            # read .env file if present
    env_switcher="DYNACONF_ENV", # switch env with DYNACONF_ENV=testing
)

DEFAULT_COMMAND_PACKAGES: Tuple[str, ...] = ("commandkit.commands.builtin",)


@dataclass(frozen=True)
class AppConfig:
    """Configuration class holding all application settings.

    Values come from settings files, environment variables, and defaults.
    """
    discord_token: str  # The Discord bot authentication token
    prefix: str = "!"  # Prefix that marks a message as a text command
    strict: bool = True  # Fail startup when a configured command package is missing
    disabled_commands: Tuple[str, ...] = tuple()  # Command names never registered
    disabled_categories: Tuple[str, ...] = tuple()  # Category names never registered
    command_packages: Tuple[str, ...] = DEFAULT_COMMAND_PACKAGES  # Packages scanned for commands
    thinking_message: str = "{name} is thinking..."  # Placeholder for deferred text replies
    log_level: str = "INFO"  # Root logging level


def _ParseNameList(value: Optional[Any]) -> Tuple[str, ...]:
    """Parse names from various input formats.

    Args:
        value: Input value that can be None, list, tuple, or CSV string.

    Returns:
        Tuple[str, ...]: Stripped, non-empty names.

    Example:
        _ParseNameList("ping, help") -> ("ping", "help")
        _ParseNameList(["ping"]) -> ("ping",)
    """
    if value is None:
        return tuple()
    if isinstance(value, (list, tuple)):
        return tuple(str(x).strip() for x in value if str(x).strip())  # type: ignore
    # allow CSV
    return tuple(x.strip() for x in str(value).split(",") if x.strip())


def GetSettings(reload: bool = False) -> AppConfig:
    """
    Return AppConfig built from Dynaconf's settings.

    Args:
        reload: Whether to reload files and environment (useful in tests). Defaults to False.

    Returns:
        AppConfig: Configuration instance with loaded values.

    Example:
        config = GetSettings()
        config = GetSettings(reload=True)  # Reload settings
    """
    try:
        if reload:
            settings.reload()  # type: ignore

        # Prefer value from settings files; if absent, fall back to unprefixed OS env DISCORD_TOKEN
        token_from_settings: Any = settings.get("DISCORD_TOKEN", None)  # type: ignore[arg-type]
        if token_from_settings in (None, ""):
            token = str(os.environ.get("DISCORD_TOKEN", ""))
        else:
            token = f"{token_from_settings}"

        packages = _ParseNameList(settings.get("COMMAND_PACKAGES", None))  # type: ignore

        return AppConfig(
            discord_token=token,
            prefix=str(settings.get("PREFIX", "!")) or "!",  # type: ignore
            strict=bool(settings.get("STRICT", True)),  # type: ignore
            disabled_commands=_ParseNameList(settings.get("DISABLED_COMMANDS", [])),  # type: ignore
            disabled_categories=_ParseNameList(settings.get("DISABLED_CATEGORIES", [])),  # type: ignore
            command_packages=packages or DEFAULT_COMMAND_PACKAGES,
            thinking_message=str(settings.get("THINKING_MESSAGE", "{name} is thinking...")),  # type: ignore
            log_level=str(settings.get("LOG_LEVEL", "INFO")).upper(),  # type: ignore
        )
    except Exception as e:
        raise RuntimeError(f"Failed to load settings: {e}") from e
