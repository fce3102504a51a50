"""Configuration helpers for gba-romname-gen."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "GBA_ROMNAME_CONFIG"
LOG_LEVEL_ENV_VAR = "GBA_ROMNAME_LOG_LEVEL"
DEFAULT_CONFIG_PATH = Path("gba-romname.yml")
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppConfig(BaseModel):
    """Application level configuration."""

    extension: str = Field(default="gba", min_length=1)
    log_level: str = Field(default="WARNING")
    workers: int = Field(default=1, ge=1)
    sort_paths: bool = True

    @field_validator("extension")
    @classmethod
    def strip_leading_dot(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("extension must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}; got {value!r}")
        return value


def load_config(path: Path) -> AppConfig:
    """Load configuration from a YAML file."""

    data: Dict[str, Any] = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Resolve the config file and log level override from the environment."""

    env = os.environ if environ is None else environ
    path = Path(env.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)
    config = load_config(path)
    level = env.get(LOG_LEVEL_ENV_VAR)
    if level:
        config = AppConfig(**{**config.model_dump(), "log_level": level})
    return config
