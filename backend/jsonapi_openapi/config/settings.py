"""Process settings read from the environment (and a local ``.env``)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..errors import ConfigError

DEFAULT_CONFIG_PATH = "generator-config.yaml"
DEFAULT_BASE_URL = "https://api.example.com/{version}"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    config_path: str
    base_url: Optional[str]
    log_level: str

    def resolve_base_url(self, version: str) -> str:
        return self.base_url or DEFAULT_BASE_URL.format(version=version)


def load_settings() -> Settings:
    load_dotenv()
    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")
    return Settings(
        config_path=os.getenv("GENERATOR_CONFIG", DEFAULT_CONFIG_PATH),
        base_url=os.getenv("GENERATOR_BASE_URL") or None,
        log_level=log_level,
    )


__all__ = ["Settings", "load_settings", "DEFAULT_CONFIG_PATH", "DEFAULT_BASE_URL", "LOG_LEVELS"]
