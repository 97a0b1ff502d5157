"""Deterministic JSON:API OpenAPI document builder.

Scope:
- one skeleton per document (security, error schemas, shared responses and,
  when any resource paginates, the pagination schemas/parameters)
- per resource: component schemas, then path items and relationship endpoints

This is the canonical builder module; ``jsonapi_openapi.openapi`` re-exports
from here.
"""
import logging
from typing import Any, Dict

from .openapi_parts.document import DocumentFeatures, init_document
from .openapi_parts.endpoints import build_endpoints
from .openapi_parts.resources import build_resource_schemas

__all__ = ["generate"]

logger = logging.getLogger(__name__)


def generate(config, base_url: str) -> Dict[str, Any]:
    """Build the OpenAPI document for ``config``.

    ``base_url`` becomes the server URL and the prefix of the relationship link
    examples. The result is a plain dict; nothing is written anywhere. Any
    error aborts the whole pass.
    """
    base_url = base_url.rstrip("/")
    features = DocumentFeatures.scan(config)
    document = init_document(config, base_url, features)

    for resource_name, resource in config.resources.items():
        build_resource_schemas(document, resource_name, resource)

    for resource_name in config.resources:
        build_endpoints(document, config.resources, resource_name, base_url)

    tree = document.to_dict()
    tree["tags"] = [
        {"name": resource.plural, "description": f"{resource_name} resource endpoints"}
        for resource_name, resource in config.resources.items()
    ]
    logger.info(
        "Generated document with %d paths and %d schemas",
        len(tree["paths"]), len(tree["components"]["schemas"]),
    )
    return tree
