from .dynaconf_settings import AppConfig, GetSettings

__all__ = ["AppConfig", "LoadConfig"]


def LoadConfig(reload: bool = False) -> AppConfig:
    """Load the bot's prefix, command packages and token using dynaconf.

    Args:
        reload: Re-read settings files and environment first, e.g. after
            switching DYNACONF_ENV.

    Returns:
        AppConfig: Instance with loaded values from settings files and environment.

    Example:
        config = LoadConfig()
        registry = startup.BuildRegistry(config)  # scans config.command_packages
    """
    try:
        return GetSettings(reload=reload)
    except Exception as e:
        raise RuntimeError(f"Failed to load configuration: {e}") from e
