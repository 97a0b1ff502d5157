"""Modular pieces for the programmatic OpenAPI builder.

``naming`` derives every key and operationId, ``document`` owns the output
tree, ``resources``/``relationships`` write component schemas and
``endpoints`` writes the path items. ``openapi_builder.generate`` runs them.
"""

__all__ = [
    "constants",
    "document",
    "endpoints",
    "helpers",
    "naming",
    "relationships",
    "resources",
]
