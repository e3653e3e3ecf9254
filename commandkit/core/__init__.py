"""Configuration loading."""

from .config import AppConfig, LoadConfig

__all__ = ["AppConfig", "LoadConfig"]
