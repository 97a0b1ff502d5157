"""Read, validate and default the generator config file.

The core trusts whatever comes out of here: unique resource names, closed-set
operation tokens, filled-in plurals and attribute selections that only name
known attributes.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Union

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import Config

logger = logging.getLogger(__name__)

SELECTION_FIELDS = ("getAttributes", "postAttributes", "patchAttributes", "requiredPostAttributes")


def _format_errors(exc: ValidationError) -> str:
    lines = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        lines.append(f"  {loc}: {err['msg']}")
    return "\n".join(lines)


def _strip_attribute_required(config: Config) -> None:
    for resource_name, resource in config.resources.items():
        for attribute_name, attribute in resource.attributes.items():
            if "required" in attribute:
                logger.warning(
                    "Ignoring property 'required' in '%s' attribute: '%s'. "
                    "Add this property to requiredPostAttributes instead",
                    resource_name, attribute_name,
                )
                attribute.pop("required")


def _check_selections(config: Config) -> None:
    problems: List[str] = []
    for resource_name, resource in config.resources.items():
        for field in SELECTION_FIELDS:
            selection = getattr(resource, field)
            if selection == "all":
                continue
            unknown = [name for name in selection if name not in resource.attributes]
            if unknown:
                problems.append(f"  resources.{resource_name}.{field}: unknown attribute(s) {', '.join(unknown)}")
    if problems:
        raise ConfigError("Invalid config file:\n" + "\n".join(problems))


def _warn_about_unused(config: Config) -> None:
    for resource_name, resource in config.resources.items():
        if "get" in resource.operations:
            continue
        if resource.paginate:
            logger.warning("Resource '%s' paginates but has no 'get' operation", resource_name)
        if resource.filterParams:
            logger.warning("Resource '%s' has filterParams but no 'get' operation", resource_name)
    for resource_name, resource in config.resources.items():
        for relationship_name, relationship in resource.relationships.items():
            if relationship.type not in config.resources:
                logger.info(
                    "Relationship '%s.%s' targets '%s', defined outside this config",
                    resource_name, relationship_name, relationship.type,
                )
        if resource.subResources:
            logger.debug("Resource '%s' declares subResources; they are not rendered", resource_name)


def parse_config(data: Any) -> Config:
    """Validate an already-parsed config mapping."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file: expected a mapping, got {type(data).__name__}")
    try:
        config = Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError("Invalid config file:\n" + _format_errors(exc)) from exc
    _strip_attribute_required(config)
    _check_selections(config)
    _warn_about_unused(config)
    return config


def load_config(path: Union[str, Path]) -> Config:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc.strerror or exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
    logger.debug("Loaded config file %s", path)
    return parse_config(data)


__all__ = ["parse_config", "load_config"]
