"""Component schemas for a single resource.

For a resource ``pet`` this writes ``PetId``, ``PetType``, ``PetAttributes``,
``PetGetResource``, ``PetResult``, ``PetSetResult`` and, when the matching
operation is declared, ``PetPostResource``/``PetPostBody`` and
``PetPatchResource``/``PetPatchBody`` (the bodies also land in
``components.requestBodies``).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..errors import InvalidBodyTypeError
from .document import OpenAPIDocument
from .helpers import PLACEHOLDER, json_content, property_ref, schema_ref
from .naming import schema_prefix
from .relationships import relationship_ref

logger = logging.getLogger(__name__)

# resource variant -> config field listing the attributes it exposes
_ALLOWED_ATTRIBUTES = {
    "get": "getAttributes",
    "post": "postAttributes",
    "patch": "patchAttributes",
}
# body type -> operation that needs it
BODY_OPERATIONS = {"post": "post", "patch": "patchById"}


def required_post_attributes(resource) -> List[str]:
    if resource.requiredPostAttributes == "all":
        return list(resource.attributes)
    return list(resource.requiredPostAttributes)


def project_attributes(variant: str, resource, prefix: str) -> Dict[str, Any]:
    """Restrict the attributes schema to what ``variant`` may expose or accept.

    Names missing from ``resource.attributes`` are dropped, not reported.
    """
    attributes_name = f"{prefix}Attributes"
    allowed = getattr(resource, _ALLOWED_ATTRIBUTES[variant])
    required = required_post_attributes(resource) if variant == "post" else []

    if allowed == "all":
        if not required:
            return schema_ref(attributes_name)
        names = list(resource.attributes)
    else:
        names = [name for name in resource.attributes if name in allowed]

    projection: Dict[str, Any] = {"type": "object"}
    required = [name for name in required if name in names]
    if required:
        projection["required"] = required
    projection["properties"] = {name: property_ref(attributes_name, name) for name in names}
    if variant != "get":
        projection["additionalProperties"] = False
    return projection


def resource_schema(variant: str, resource_name: str, resource) -> Dict[str, Any]:
    if variant not in _ALLOWED_ATTRIBUTES:
        raise InvalidBodyTypeError(variant)
    prefix = schema_prefix(resource_name)

    properties: Dict[str, Any] = {"type": schema_ref(f"{prefix}Type")}
    if variant != "post":
        properties["id"] = schema_ref(f"{prefix}Id")
    properties["attributes"] = project_attributes(variant, resource, prefix)

    schema: Dict[str, Any] = {"type": "object"}
    if variant == "post":
        schema["required"] = ["type", "attributes"]
    elif variant == "patch":
        schema["required"] = ["type", "id"]
    schema["properties"] = properties

    if variant == "get":
        if resource.relationships:
            properties["relationships"] = {
                "type": "object",
                "properties": {
                    name: relationship_ref(resource_name, relationship)
                    for name, relationship in resource.relationships.items()
                },
            }
        if resource.selfLinks:
            properties["links"] = schema_ref("SelfLink")
    return schema


def result_schema(get_resource_name: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "links": schema_ref("SelfLink"),
            "data": schema_ref(get_resource_name),
        },
    }


def set_result_schema(resource, get_resource_name: str) -> Dict[str, Any]:
    properties: Dict[str, Any] = {}
    if resource.paginate:
        properties["links"] = {
            "type": "object",
            "allOf": [schema_ref("SelfLink"), schema_ref("PaginationLinks")],
        }
        properties["meta"] = schema_ref("Meta")
    else:
        properties["links"] = schema_ref("SelfLink")
    properties["data"] = {"type": "array", "items": schema_ref(get_resource_name)}
    return {"type": "object", "properties": properties}


def body_schema_name(body_type: str, prefix: str) -> str:
    if body_type not in BODY_OPERATIONS:
        raise InvalidBodyTypeError(body_type)
    return f"{prefix}{body_type.capitalize()}Body"


def request_body_schema(body_type: str, prefix: str) -> Dict[str, Any]:
    if body_type not in BODY_OPERATIONS:
        raise InvalidBodyTypeError(body_type)
    return {
        "type": "object",
        "required": ["data"],
        "properties": {"data": schema_ref(f"{prefix}{body_type.capitalize()}Resource")},
        "additionalProperties": False,
    }


def request_body_component(body_schema: str) -> Dict[str, Any]:
    return {
        "description": PLACEHOLDER,
        "required": True,
        "content": json_content(schema_ref(body_schema)),
    }


def build_resource_schemas(document: OpenAPIDocument, resource_name: str, resource) -> None:
    prefix = schema_prefix(resource_name)

    document.add_schema(
        f"{prefix}Id",
        {"type": "string", "description": f"Unique ID of {resource_name} resource"},
    )
    document.add_schema(f"{prefix}Type", {"type": "string", "enum": [resource_name]})
    # properties is the config's own mapping, not a copy
    document.add_schema(
        f"{prefix}Attributes",
        {"type": "object", "properties": resource.attributes, "additionalProperties": False},
    )

    get_resource_name = f"{prefix}GetResource"
    document.add_schema(get_resource_name, resource_schema("get", resource_name, resource))

    for body_type, operation in BODY_OPERATIONS.items():
        if operation not in resource.operations:
            continue
        document.add_schema(
            f"{prefix}{body_type.capitalize()}Resource",
            resource_schema(body_type, resource_name, resource),
        )
        body_name = body_schema_name(body_type, prefix)
        document.add_schema(body_name, request_body_schema(body_type, prefix))
        document.add_request_body(body_name, request_body_component(body_name))

    document.add_schema(f"{prefix}Result", result_schema(get_resource_name))
    document.add_schema(f"{prefix}SetResult", set_result_schema(resource, get_resource_name))
    logger.debug("Built component schemas for resource %s", resource_name)


__all__ = [
    "BODY_OPERATIONS",
    "required_post_attributes",
    "project_attributes",
    "resource_schema",
    "result_schema",
    "set_result_schema",
    "body_schema_name",
    "request_body_schema",
    "request_body_component",
    "build_resource_schemas",
]
