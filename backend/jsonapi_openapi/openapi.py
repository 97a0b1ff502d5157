"""Public import for the OpenAPI builder.

Keeps a stable import path while the implementation lives in
`openapi_builder.py`.
"""
from .openapi_builder import generate  # noqa: F401

__all__ = ["generate"]
