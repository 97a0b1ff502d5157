"""Generator config: models, file loader and environment settings."""
from .loader import load_config, parse_config  # noqa: F401
from .models import Config, Relationship, Resource  # noqa: F401
from .settings import Settings, load_settings  # noqa: F401

__all__ = ["Config", "Resource", "Relationship", "load_config", "parse_config", "Settings", "load_settings"]
