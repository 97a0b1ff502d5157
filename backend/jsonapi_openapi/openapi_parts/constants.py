"""Centralized constants for the OpenAPI document skeleton.

Builders deep-copy these before inserting them so two generation passes never
share mutable state. Tests depend on deterministic ordering and content.
"""
from typing import Any, Dict

OPENAPI_VERSION = "3.0.0"

# Response component keys
DELETE_RESPONSE = "204Delete"
RELATIONSHIP_UPDATE_RESPONSE = "204RelationshipUpdate"
BAD_REQUEST_RESPONSE = "400"
NOT_FOUND_RESPONSE = "404"
POST_CONFLICT_RESPONSE = "409Post"
PATCH_CONFLICT_RESPONSE = "409Patch"
SERVER_ERROR_RESPONSE = "500"

SECURITY_SCHEME_NAME = "OAuth2"
SECURITY_SCOPE = "full"

_ERROR_CONTENT = {"application/json": {"schema": {"$ref": "#/components/schemas/ErrorResult"}}}

ERROR_RESPONSES: Dict[str, Any] = {
    DELETE_RESPONSE: {"description": "The resource was successfully deleted"},
    RELATIONSHIP_UPDATE_RESPONSE: {
        "description": "The relationship(s) already match the requested state",
    },
    BAD_REQUEST_RESPONSE: {"description": "Bad request", "content": _ERROR_CONTENT},
    NOT_FOUND_RESPONSE: {"description": "Resource not found", "content": _ERROR_CONTENT},
    POST_CONFLICT_RESPONSE: {
        "description": (
            "The request body resource object's type was invalid or, if a client-generated ID "
            "was used, a resource already exists with this id"
        ),
        "content": _ERROR_CONTENT,
    },
    PATCH_CONFLICT_RESPONSE: {
        "description": (
            "The request body resource object had an invalid type, invalid ID, "
            "or violated a uniqueness constraint"
        ),
        "content": _ERROR_CONTENT,
    },
    SERVER_ERROR_RESPONSE: {"description": "Internal server error", "content": _ERROR_CONTENT},
}

SELF_LINK_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "self": {"type": "string", "format": "uri", "description": "Self-link of current resource"},
    },
}

ERROR_SCHEMAS: Dict[str, Any] = {
    "ErrorObject": {
        "type": "object",
        "properties": {
            "status": {"type": "string", "description": "HTTP status code", "example": "123"},
            "title": {
                "type": "string",
                "description": "A short, user readable summary of the error",
                "example": "Not Found",
            },
            "code": {"type": "string", "description": "An application-specific error code", "example": "1234"},
            "detail": {
                "type": "string",
                "description": "A long description of the error that may contain instance-specific details",
            },
            "links": {
                "type": "object",
                "properties": {
                    "about": {
                        "type": "string",
                        "format": "uri",
                        "description": "A link to further information about the error",
                    },
                },
            },
        },
    },
    "ErrorResult": {
        "type": "object",
        "properties": {
            "errors": {"type": "array", "items": {"$ref": "#/components/schemas/ErrorObject"}},
        },
    },
}

# Only present when at least one resource paginates
PAGINATION_SCHEMAS: Dict[str, Any] = {
    "Meta": {
        "type": "object",
        "properties": {
            "totalResults": {"type": "integer", "description": "Total number of results", "example": 10},
            "totalPages": {"type": "integer", "description": "Total number of pages", "example": 10},
            "currentPageNumber": {
                "type": "integer",
                "description": "Page number of the returned results",
                "example": 1,
            },
            "currentPageSize": {"type": "integer", "description": "Number of results per page", "example": 25},
        },
    },
    "PaginationLinks": {
        "type": "object",
        "properties": {
            "first": {"type": "string", "format": "uri", "description": "The first page of data"},
            "last": {"type": "string", "format": "uri", "description": "The last page of data"},
            "prev": {"type": "string", "format": "uri", "description": "The previous page of data"},
            "next": {"type": "string", "format": "uri", "description": "The next page of data"},
        },
    },
}

PAGINATION_PARAMETERS: Dict[str, Any] = {
    "pageNumber": {
        "name": "page[number]",
        "in": "query",
        "required": False,
        "description": "Page number of results",
        "schema": {"type": "integer", "minimum": 1, "default": 1},
    },
    "pageSize": {
        "name": "page[size]",
        "in": "query",
        "required": False,
        "description": "Number of results to return",
        "schema": {"type": "integer", "minimum": 1, "maximum": 500, "default": 25},
    },
}

__all__ = [
    "OPENAPI_VERSION",
    "DELETE_RESPONSE",
    "RELATIONSHIP_UPDATE_RESPONSE",
    "BAD_REQUEST_RESPONSE",
    "NOT_FOUND_RESPONSE",
    "POST_CONFLICT_RESPONSE",
    "PATCH_CONFLICT_RESPONSE",
    "SERVER_ERROR_RESPONSE",
    "SECURITY_SCHEME_NAME",
    "SECURITY_SCOPE",
    "ERROR_RESPONSES",
    "SELF_LINK_SCHEMA",
    "ERROR_SCHEMAS",
    "PAGINATION_SCHEMAS",
    "PAGINATION_PARAMETERS",
]
