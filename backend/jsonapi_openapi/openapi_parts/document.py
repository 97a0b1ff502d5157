"""The output document and its invariant skeleton.

``OpenAPIDocument`` owns the tree for the whole generation pass. Builders only
touch it through the narrow ``add_*`` methods, which refuse to silently
overwrite an existing key with different content.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Set, Tuple
from urllib.parse import urljoin

from ..errors import DuplicateComponentError
from .constants import (
    ERROR_RESPONSES,
    ERROR_SCHEMAS,
    OPENAPI_VERSION,
    PAGINATION_PARAMETERS,
    PAGINATION_SCHEMAS,
    SECURITY_SCHEME_NAME,
    SECURITY_SCOPE,
    SELF_LINK_SCHEMA,
)

COMPONENT_SECTIONS = ("schemas", "parameters", "responses", "requestBodies")


@dataclass(frozen=True)
class DocumentFeatures:
    """Document-level switches computed once before any builder runs."""

    pagination: bool = False

    @classmethod
    def scan(cls, config) -> "DocumentFeatures":
        return cls(pagination=any(r.paginate for r in config.resources.values()))


class OpenAPIDocument:
    def __init__(self, tree: Dict[str, Any]):
        self._tree = tree
        # (section, key) -> whoever inserted a first-one-wins entry
        self._origins: Dict[Tuple[str, str], Hashable] = {}
        self._operation_ids: Set[str] = set()
        tree.setdefault("paths", {})
        components = tree.setdefault("components", {})
        for section in COMPONENT_SECTIONS:
            components.setdefault(section, {})

    # -- read access -------------------------------------------------------
    def section(self, name: str) -> Dict[str, Any]:
        return self._tree["components"][name]

    @property
    def schemas(self) -> Dict[str, Any]:
        return self.section("schemas")

    @property
    def paths(self) -> Dict[str, Any]:
        return self._tree["paths"]

    # -- insertion ---------------------------------------------------------
    def _insert(self, section: str, key: str, value: Any, once: bool = False, origin: Hashable = None) -> Any:
        """Insert ``value`` under ``key``.

        A plain insert accepts an existing key only with equal content. A
        ``once`` insert keeps the first entry, but only for the same ``origin``;
        a different origin means two sources derived the same key.
        """
        target = self.section(section)
        if key in target:
            if once:
                if self._origins.get((section, key)) == origin:
                    return target[key]
            elif target[key] == value:
                return target[key]
            raise DuplicateComponentError(section, key)
        target[key] = value
        if once:
            self._origins[(section, key)] = origin
        return value

    def add_schema(self, name: str, schema: Dict[str, Any]) -> Dict[str, Any]:
        return self._insert("schemas", name, schema)

    def add_schema_once(self, name: str, schema: Dict[str, Any], origin: Hashable = None) -> Dict[str, Any]:
        return self._insert("schemas", name, schema, once=True, origin=origin)

    def add_parameter(self, name: str, parameter: Dict[str, Any]) -> Dict[str, Any]:
        return self._insert("parameters", name, parameter)

    def add_response(
        self, name: str, response: Dict[str, Any], once: bool = False, origin: Hashable = None
    ) -> Dict[str, Any]:
        return self._insert("responses", name, response, once=once, origin=origin)

    def add_request_body(
        self, name: str, body: Dict[str, Any], once: bool = False, origin: Hashable = None
    ) -> Dict[str, Any]:
        return self._insert("requestBodies", name, body, once=once, origin=origin)

    def add_operation(self, path: str, method: str, operation: Dict[str, Any]) -> Dict[str, Any]:
        item = self.paths.setdefault(path, {})
        if method in item:
            if item[method] != operation:
                raise DuplicateComponentError("paths", f"{method.upper()} {path}")
            return item[method]
        op_id = operation.get("operationId")
        if op_id is not None:
            # operationIds are unique across the whole document
            if op_id in self._operation_ids:
                raise DuplicateComponentError("operationIds", op_id)
            self._operation_ids.add(op_id)
        item[method] = operation
        return operation

    def to_dict(self) -> Dict[str, Any]:
        return self._tree


def _info(config) -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "title": config.title,
        "description": config.description,
        "version": config.version,
    }
    if config.license is not None:
        info["license"] = config.license.model_dump(exclude_none=True)
    if config.contact is not None:
        info["contact"] = config.contact.model_dump(exclude_none=True)
    return info


def init_document(config, base_url: str, features: DocumentFeatures) -> OpenAPIDocument:
    """Create the skeleton every generated document starts from."""
    schemas: Dict[str, Any] = {"SelfLink": copy.deepcopy(SELF_LINK_SCHEMA)}
    parameters: Dict[str, Any] = {}
    if features.pagination:
        schemas.update(copy.deepcopy(PAGINATION_SCHEMAS))
        parameters.update(copy.deepcopy(PAGINATION_PARAMETERS))
    schemas.update(copy.deepcopy(ERROR_SCHEMAS))

    tree: Dict[str, Any] = {
        "openapi": OPENAPI_VERSION,
        "info": _info(config),
        "externalDocs": {"description": "GitHub Repository", "url": config.externalDocsUrl},
        "servers": [{"url": base_url}],
        "security": [{SECURITY_SCHEME_NAME: [SECURITY_SCOPE]}],
        "tags": [],
        "paths": {},
        "components": {
            "securitySchemes": {
                SECURITY_SCHEME_NAME: {
                    "type": "oauth2",
                    "flows": {
                        "clientCredentials": {
                            "tokenUrl": config.tokenUrl or urljoin(base_url, "/oauth2/token"),
                            "scopes": {SECURITY_SCOPE: "Full access to the API"},
                        },
                    },
                },
            },
            "parameters": parameters,
            "responses": {k: copy.deepcopy(v) for k, v in ERROR_RESPONSES.items()},
            "requestBodies": {},
            "schemas": schemas,
        },
    }
    return OpenAPIDocument(tree)


__all__ = ["DocumentFeatures", "OpenAPIDocument", "init_document", "COMPONENT_SECTIONS"]
