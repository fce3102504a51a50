"""Utility helpers shared across the gba-romname-gen codebase."""

from .config import AppConfig, config_from_env, load_config
from .logging import configure_logging, get_logger
from .paths import normalise_path

__all__ = [
    "AppConfig",
    "config_from_env",
    "load_config",
    "configure_logging",
    "get_logger",
    "normalise_path",
]
