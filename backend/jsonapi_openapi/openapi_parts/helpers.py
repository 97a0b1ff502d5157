"""Helper functions for the OpenAPI builder.

These are deliberately tiny; every ``$ref`` the generator emits goes through
one of them so the component paths are spelled in one place.
"""
from typing import Any, Dict

JSON_MEDIA_TYPE = "application/json"
PLACEHOLDER = "REPLACEME"


def schema_ref(name: str) -> Dict[str, Any]:
    return {"$ref": f"#/components/schemas/{name}"}


def property_ref(schema_name: str, *path: str) -> Dict[str, Any]:
    return {"$ref": "/".join([f"#/components/schemas/{schema_name}", "properties", *path])}


def parameter_ref(name: str) -> Dict[str, Any]:
    return {"$ref": f"#/components/parameters/{name}"}


def response_ref(name: str) -> Dict[str, Any]:
    return {"$ref": f"#/components/responses/{name}"}


def request_body_ref(name: str) -> Dict[str, Any]:
    return {"$ref": f"#/components/requestBodies/{name}"}


def json_content(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {JSON_MEDIA_TYPE: {"schema": schema}}


__all__ = [
    "JSON_MEDIA_TYPE",
    "PLACEHOLDER",
    "schema_ref",
    "property_ref",
    "parameter_ref",
    "response_ref",
    "request_body_ref",
    "json_content",
]
