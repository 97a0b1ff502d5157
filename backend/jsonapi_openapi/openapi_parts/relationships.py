"""Relationship linkage schemas and the payloads of relationship endpoints.

Keys are namespaced by owner and target (``PetOwnerRelationship``), so two
owners pointing at the same type never collide. The same (owner, target,
cardinality) triple may come from several relationships; only the first one
defines the shared entries. Two different pairs whose names run together
(``user``/``groupMember`` and ``userGroup``/``member``) derive the same key and
are refused with DuplicateComponentError.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, NamedTuple

from .document import OpenAPIDocument
from .helpers import PLACEHOLDER, json_content, schema_ref
from .naming import relationship_schema_prefix, schema_prefix

logger = logging.getLogger(__name__)


class RelationshipNames(NamedTuple):
    linkage: str  # {type, id} schema, shared by both cardinalities
    payload: str  # response / request body key and the data schema of the result
    result: str


def is_to_many(relationship) -> bool:
    return relationship.relationshipType == "toMany"


def relationship_names(resource_name: str, relationship) -> RelationshipNames:
    linkage = relationship_schema_prefix(resource_name, relationship.type)
    payload = f"{linkage}Set" if is_to_many(relationship) else linkage
    return RelationshipNames(linkage, payload, f"{payload}Result")


def relationship_ref(resource_name: str, relationship) -> Dict[str, Any]:
    return schema_ref(relationship_names(resource_name, relationship).result)


def relationship_schema(relationship, target_known: bool = True) -> Dict[str, Any]:
    """Linkage object ``{type, id}`` of the related resource."""
    if target_known:
        target_prefix = schema_prefix(relationship.type)
        type_schema = schema_ref(f"{target_prefix}Type")
        id_schema = schema_ref(f"{target_prefix}Id")
    else:
        type_schema = {"type": "string", "enum": [relationship.type]}
        id_schema = {"type": "string", "description": f"Unique ID of {relationship.type} resource"}
    return {"type": "object", "properties": {"type": type_schema, "id": id_schema}}


def relationship_set_schema(linkage_name: str) -> Dict[str, Any]:
    return {"type": "array", "items": schema_ref(linkage_name)}


def _links(resource, relationship_name: str, base_url: str) -> Dict[str, Any]:
    resource_url = f"{base_url}/{resource.plural}/1"
    return {
        "type": "object",
        "properties": {
            "self": {
                "type": "string",
                "example": f"{resource_url}/relationships/{relationship_name}",
            },
            "related": {"type": "string", "example": f"{resource_url}/{relationship_name}"},
        },
    }


def relationship_result_schema(resource, relationship_name: str, base_url: str, relationship_key: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "data": {
                "type": "object",
                "allOf": [{"type": "object", "nullable": True}, schema_ref(relationship_key)],
            },
            "links": _links(resource, relationship_name, base_url),
        },
    }


def relationship_set_result_schema(resource, relationship_name: str, base_url: str, relationship_key: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "data": schema_ref(f"{relationship_key}Set"),
            "links": _links(resource, relationship_name, base_url),
        },
    }


def relationship_request_body(names: RelationshipNames, to_many: bool) -> Dict[str, Any]:
    if to_many:
        data = schema_ref(names.payload)
    else:
        data = {"type": "object", "allOf": [{"nullable": True}, schema_ref(names.linkage)]}
    return {
        "description": PLACEHOLDER,
        "required": True,
        "content": json_content({"type": "object", "required": ["data"], "properties": {"data": data}}),
    }


def relationship_response(names: RelationshipNames) -> Dict[str, Any]:
    return {"description": PLACEHOLDER, "content": json_content(schema_ref(names.result))}


def build_relationship_schemas(
    document: OpenAPIDocument,
    resources: Dict[str, Any],
    resource_name: str,
    relationship_name: str,
    relationship,
    base_url: str,
) -> RelationshipNames:
    """Insert every component a relationship endpoint refers to."""
    resource = resources[resource_name]
    names = relationship_names(resource_name, relationship)
    to_many = is_to_many(relationship)

    target_known = relationship.type in resources
    if not target_known:
        logger.warning(
            "Relationship %s.%s targets %r which is not defined in this config; using placeholders",
            resource_name, relationship_name, relationship.type,
        )
    document.add_schema(names.linkage, relationship_schema(relationship, target_known))

    # the result, response and request body are shared by every relationship
    # of the same (owner, target) pair; the first one defines them
    pair = (resource_name, relationship.type)
    if to_many:
        document.add_schema(names.payload, relationship_set_schema(names.linkage))
        result = relationship_set_result_schema(resource, relationship_name, base_url, names.linkage)
    else:
        result = relationship_result_schema(resource, relationship_name, base_url, names.linkage)
    document.add_schema_once(names.result, result, origin=pair)
    document.add_response(names.payload, relationship_response(names), once=True, origin=pair)
    document.add_request_body(names.payload, relationship_request_body(names, to_many), once=True, origin=pair)
    return names


__all__ = [
    "RelationshipNames",
    "is_to_many",
    "relationship_names",
    "relationship_ref",
    "relationship_schema",
    "relationship_set_schema",
    "relationship_result_schema",
    "relationship_set_result_schema",
    "relationship_request_body",
    "relationship_response",
    "build_relationship_schemas",
]
