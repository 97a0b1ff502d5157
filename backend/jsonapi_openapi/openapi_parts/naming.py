"""Naming rules shared by every builder.

All keys the generator writes (schemas, parameters, responses, request bodies)
and every operationId are derived here. Different names can still run together
(``petOwner`` + ``siblings`` and ``pet`` + ``ownerSiblings``); the document
builder refuses such collisions.
"""
from __future__ import annotations

import re
from typing import List, Tuple

from ..errors import InvalidOperationError

ID_OPERATIONS = ("getById", "patchById", "deleteById")
COLLECTION_OPERATIONS = ("get", "post")

_VERB_RE = re.compile(r"^[a-z]+")
_SUFFIX_WORD_RE = re.compile(r"[A-Z][a-z]*")


def schema_prefix(resource_name: str) -> str:
    return resource_name[:1].upper() + resource_name[1:]


def is_id_operation(operation: str) -> bool:
    return operation in ID_OPERATIONS


def id_parameter_name(resource_name: str) -> str:
    return f"{resource_name}Id"


def relationship_schema_prefix(resource_name: str, target_name: str) -> str:
    return f"{schema_prefix(resource_name)}{schema_prefix(target_name)}Relationship"


def split_operation(operation: str) -> Tuple[str, List[str]]:
    """Split an operation token into its verb and the remaining camel-case words.

    ``patchById`` -> ``("patch", ["By", "Id"])``; ``get`` -> ``("get", [])``.
    Raises InvalidOperationError when the token has no leading lowercase verb.
    """
    match = _VERB_RE.match(operation or "")
    if not match:
        raise InvalidOperationError(operation)
    verb = match.group(0)
    return verb, _SUFFIX_WORD_RE.findall(operation[match.end():])


def operation_method(operation: str) -> str:
    return split_operation(operation)[0]


def split_words(text: str) -> List[str]:
    """Split an identifier into acronym runs, capitalised words, lowercase runs
    and digit runs.

    Any Unicode letter counts (``cafés`` stays one word); everything that is
    not a letter or digit separates words.
    """
    out: List[str] = []
    current = ""
    for ch in text:
        if not ch.isalnum():
            if current:
                out.append(current)
            current = ""
            continue
        if current:
            prev = current[-1]
            if ch.isdigit() != prev.isdigit() or (ch.isupper() and not prev.isupper()):
                out.append(current)
                current = ""
            elif ch.islower() and len(current) > 1 and current.isupper():
                # URLThing: the last capital starts the next word
                out.append(current[:-1])
                current = prev
        current += ch
    if current:
        out.append(current)
    return out


def camel_case(*parts: str) -> str:
    words = [w for part in parts for w in split_words(part)]
    if not words:
        return ""
    head, tail = words[0].lower(), words[1:]
    return head + "".join(w[:1].upper() + w[1:].lower() for w in tail)


def operation_id(operation: str, resource_name: str, resource) -> str:
    """Build the operationId for a resource operation.

    The plain collection read uses the plural (``getPets``); every other
    operation puts the singular name right after the verb (``getPetById``).
    """
    verb, suffix = split_operation(operation)
    if operation == "get":
        return camel_case(verb, resource.plural)
    return camel_case(verb, resource_name, *suffix)


def relationship_operation_id(method: str, resource_name: str, relationship_name: str) -> str:
    return camel_case(method, resource_name, relationship_name, "Relationship")


__all__ = [
    "ID_OPERATIONS",
    "COLLECTION_OPERATIONS",
    "schema_prefix",
    "is_id_operation",
    "id_parameter_name",
    "relationship_schema_prefix",
    "split_operation",
    "operation_method",
    "split_words",
    "camel_case",
    "operation_id",
    "relationship_operation_id",
]
