"""Error taxonomy for the generator.

Every error is fatal to a generation pass. The core raises at the point of
detection and never recovers; the CLI and the preview app translate them into
a diagnostic at their boundary.
"""
from __future__ import annotations


class GeneratorError(Exception):
    """Base class for everything the generator raises on purpose."""


class ConfigError(GeneratorError):
    """The generator config file could not be read or is invalid."""


class SynthesisError(GeneratorError):
    """The core could not derive the document from the given config."""


class InvalidOperationError(SynthesisError, ValueError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Invalid operation {operation!r}: expected a leading lowercase verb")


class UnexpectedOperationError(SynthesisError, ValueError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Unexpected operation {operation!r}")


class InvalidBodyTypeError(SynthesisError, ValueError):
    def __init__(self, body_type: str):
        self.body_type = body_type
        super().__init__(f"Invalid request body type {body_type!r}: expected 'post' or 'patch'")


class DuplicateComponentError(SynthesisError):
    def __init__(self, section: str, key: str):
        self.section = section
        self.key = key
        super().__init__(f"{section} entry {key!r} already defined with different content")


__all__ = [
    "GeneratorError",
    "ConfigError",
    "SynthesisError",
    "InvalidOperationError",
    "UnexpectedOperationError",
    "InvalidBodyTypeError",
    "DuplicateComponentError",
]
