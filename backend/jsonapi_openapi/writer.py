"""Serialize a generated document.

Attribute fragments are shared by reference inside the tree; the YAML dumper
writes every occurrence out in full instead of emitting anchors.
"""
from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

FORMATS = ("yaml", "json")


class NoAliasDumper(yaml.SafeDumper):
    def ignore_aliases(self, data):
        return True


def dump_document(document: Dict[str, Any], fmt: str = "yaml") -> str:
    if fmt == "yaml":
        return yaml.dump(document, Dumper=NoAliasDumper, sort_keys=False, width=100, allow_unicode=True)
    if fmt == "json":
        return json.dumps(document, indent=2) + "\n"
    raise ValueError(f"Unsupported output format {fmt!r}; expected one of {', '.join(FORMATS)}")


def document_hash(document: Dict[str, Any]) -> str:
    blob = json.dumps(document, sort_keys=True, separators=(",", ":")).encode()
    return hashlib.sha256(blob).hexdigest()


def format_for_path(path: Union[str, Path]) -> str:
    return "json" if str(path).endswith(".json") else "yaml"


def write_document(document: Dict[str, Any], path: Union[str, Path], fmt: Optional[str] = None) -> Path:
    """Write ``document`` to ``path``; the text is fully rendered before the file is opened."""
    out_path = Path(path)
    text = dump_document(document, fmt or format_for_path(out_path))
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", out_path, len(text))
    return out_path


__all__ = ["FORMATS", "NoAliasDumper", "dump_document", "document_hash", "format_for_path", "write_document"]
