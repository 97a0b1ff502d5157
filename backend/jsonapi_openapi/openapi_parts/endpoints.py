"""Path items for a single resource.

Build per-resource path fragments in a deterministic order:
- the id path parameter component (when anything uses it)
- one operation per declared operation, in config order
- the relationship sub-endpoints, in config order
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..errors import UnexpectedOperationError
from .constants import (
    DELETE_RESPONSE,
    NOT_FOUND_RESPONSE,
    PATCH_CONFLICT_RESPONSE,
    POST_CONFLICT_RESPONSE,
    RELATIONSHIP_UPDATE_RESPONSE,
    SERVER_ERROR_RESPONSE,
)
from .document import OpenAPIDocument
from .helpers import PLACEHOLDER, json_content, parameter_ref, request_body_ref, response_ref, schema_ref
from .naming import (
    COLLECTION_OPERATIONS,
    id_parameter_name,
    is_id_operation,
    operation_id,
    operation_method,
    relationship_operation_id,
    schema_prefix,
)
from .relationships import build_relationship_schemas, is_to_many
from .resources import BODY_OPERATIONS

logger = logging.getLogger(__name__)

READ_OPERATIONS = ("get", "getById")
UPDATE_METHODS = ("patch", "post", "delete")


def path(operation: str, plural: str, resource_name: str) -> str:
    if operation in COLLECTION_OPERATIONS:
        return f"/{plural}"
    if is_id_operation(operation):
        return f"/{plural}/{{{id_parameter_name(resource_name)}}}"
    raise UnexpectedOperationError(operation)


def responses(operation: str, prefix: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if operation == "deleteById":
        out["204"] = response_ref(DELETE_RESPONSE)
    else:
        suffix = "SetResult" if operation == "get" else "Result"
        code = "201" if operation == "post" else "200"
        out[code] = {
            "description": PLACEHOLDER,
            "content": json_content(schema_ref(f"{prefix}{suffix}")),
        }
    if is_id_operation(operation):
        out["404"] = response_ref(NOT_FOUND_RESPONSE)
    if operation == "post":
        out["409"] = response_ref(POST_CONFLICT_RESPONSE)
    elif operation == "patchById":
        out["409"] = response_ref(PATCH_CONFLICT_RESPONSE)
    out["500"] = response_ref(SERVER_ERROR_RESPONSE)
    return out


def filter_parameter(attribute_name: str, operator: str, attribute: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    suffix = "" if operator == "eq" else f"[{operator}]"
    schema: Dict[str, Any] = {}
    # type and format follow the attribute with the same name, if any
    for key in ("type", "format"):
        if attribute and attribute.get(key):
            schema[key] = attribute[key]
    return {
        "name": f"filter[{attribute_name}]{suffix}",
        "in": "query",
        "schema": schema,
        "required": False,
    }


def include_parameter() -> Dict[str, Any]:
    return {
        "name": "include",
        "in": "query",
        "required": False,
        "description": "Comma-separated list of relationship paths to include in the response",
        "schema": {"type": "string"},
    }


def fields_parameter(resource_name: str) -> Dict[str, Any]:
    return {
        "name": f"fields[{resource_name}]",
        "in": "query",
        "required": False,
        "description": f"Comma-separated list of {resource_name} fields to return",
        "schema": {"type": "string"},
    }


def parameters(operation: str, resource_name: str, resource) -> List[Dict[str, Any]]:
    params: List[Dict[str, Any]] = []
    if operation == "get":
        if resource.paginate:
            params += [parameter_ref("pageNumber"), parameter_ref("pageSize")]
        for attribute_name, operators in resource.filterParams.items():
            attribute = resource.attributes.get(attribute_name)
            params += [filter_parameter(attribute_name, op, attribute) for op in operators]
    if operation in READ_OPERATIONS:
        if resource.compoundDocuments:
            params.append(include_parameter())
        if resource.sparseFieldsets:
            params.append(fields_parameter(resource_name))
    if is_id_operation(operation):
        params.append(parameter_ref(id_parameter_name(resource_name)))
    return params


def id_parameter(resource_name: str) -> Dict[str, Any]:
    return {
        "name": id_parameter_name(resource_name),
        "in": "path",
        "description": PLACEHOLDER,
        "required": True,
        "schema": {"type": "string"},
    }


def resource_operation(operation: str, resource_name: str, resource) -> Dict[str, Any]:
    method = operation_method(operation)
    prefix = schema_prefix(resource_name)
    op: Dict[str, Any] = {
        "summary": PLACEHOLDER,
        "tags": [resource.plural],
        "description": PLACEHOLDER,
        "operationId": operation_id(operation, resource_name, resource),
    }
    params = parameters(operation, resource_name, resource)
    if params:
        op["parameters"] = params
    if method in BODY_OPERATIONS:
        op["requestBody"] = request_body_ref(f"{prefix}{method.capitalize()}Body")
    op["responses"] = responses(operation, prefix)
    return op


def relationship_operation(
    method: str,
    resource_name: str,
    resource,
    relationship_name: str,
    target_plural: str,
    payload_name: str,
) -> Dict[str, Any]:
    is_update = method in UPDATE_METHODS
    op: Dict[str, Any] = {
        "summary": PLACEHOLDER,
        "tags": [resource.plural, target_plural],
        "description": PLACEHOLDER,
        "operationId": relationship_operation_id(method, resource_name, relationship_name),
        "parameters": [parameter_ref(id_parameter_name(resource_name))],
    }
    if is_update:
        op["requestBody"] = request_body_ref(payload_name)
    out: Dict[str, Any] = {"200": response_ref(payload_name)}
    if is_update:
        out["204"] = response_ref(RELATIONSHIP_UPDATE_RESPONSE)
    out["404"] = response_ref(NOT_FOUND_RESPONSE)
    out["500"] = response_ref(SERVER_ERROR_RESPONSE)
    op["responses"] = out
    return op


def relationship_methods(relationship) -> List[str]:
    return ["get", "patch"] + (["post", "delete"] if is_to_many(relationship) else [])


def target_plural(resources: Dict[str, Any], target_name: str) -> str:
    target = resources.get(target_name)
    return target.plural if target is not None else f"[plural of {target_name}]"


def build_endpoints(document: OpenAPIDocument, resources: Dict[str, Any], resource_name: str, base_url: str) -> None:
    resource = resources[resource_name]
    operations = list(dict.fromkeys(resource.operations))

    if resource.relationships or any(is_id_operation(op) for op in operations):
        document.add_parameter(id_parameter_name(resource_name), id_parameter(resource_name))

    for operation in operations:
        method = operation_method(operation)
        op_path = path(operation, resource.plural, resource_name)
        document.add_operation(op_path, method, resource_operation(operation, resource_name, resource))

    item_path = path("getById", resource.plural, resource_name)
    for relationship_name, relationship in resource.relationships.items():
        names = build_relationship_schemas(
            document, resources, resource_name, relationship_name, relationship, base_url,
        )
        rel_path = f"{item_path}/relationships/{relationship_name}"
        plural = target_plural(resources, relationship.type)
        for method in relationship_methods(relationship):
            document.add_operation(
                rel_path,
                method,
                relationship_operation(method, resource_name, resource, relationship_name, plural, names.payload),
            )
    logger.debug("Built endpoints for resource %s (%d operations)", resource_name, len(operations))


__all__ = [
    "path",
    "responses",
    "filter_parameter",
    "include_parameter",
    "fields_parameter",
    "parameters",
    "id_parameter",
    "resource_operation",
    "relationship_operation",
    "relationship_methods",
    "target_plural",
    "build_endpoints",
]
