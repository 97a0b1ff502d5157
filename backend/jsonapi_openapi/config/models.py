"""Pydantic models for the generator config file.

Field names follow the config file (camelCase). Validation covers structure,
the closed operation/operator/relationship vocabularies and the defaults; the
cross-field checks live in ``loader.py``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

Operation = Literal["get", "getById", "post", "patchById", "deleteById"]
FilterOperator = Literal[
    "eq", "neq", "gt", "gte", "lt", "lte",
    "oneOf", "noneOf", "hasSome", "hasAll", "hasNone", "fuzzy",
]
AttributeSelection = Union[Literal["all"], List[str]]


class Relationship(BaseModel):
    model_config = ConfigDict(extra="forbid")

    relationshipType: Literal["toOne", "toMany"]
    type: str


class SubResource(BaseModel):
    """Reserved for nested paths; carried through, never rendered."""

    model_config = ConfigDict(extra="forbid")

    resource: str
    many: bool = False


class Resource(BaseModel):
    model_config = ConfigDict(extra="forbid")

    plural: str = ""
    selfLinks: bool = True
    paginate: bool = False
    compoundDocuments: bool = False
    sparseFieldsets: bool = False
    operations: List[Operation] = Field(default_factory=list)
    filterParams: Dict[str, List[FilterOperator]] = Field(default_factory=dict)
    getAttributes: AttributeSelection = "all"
    postAttributes: AttributeSelection = "all"
    patchAttributes: AttributeSelection = "all"
    requiredPostAttributes: AttributeSelection = "all"
    attributes: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    relationships: Dict[str, Relationship] = Field(default_factory=dict)
    subResources: Dict[str, SubResource] = Field(default_factory=dict)

    @field_validator("operations")
    @classmethod
    def _dedupe_operations(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))


class License(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    url: Optional[str] = None


class Contact(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None


class Config(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = "REPLACEME"
    description: str = "REPLACEME"
    version: str = "v1"
    externalDocsUrl: str = Field(
        default="REPLACEME",
        validation_alias=AliasChoices("externalDocsUrl", "githubUrl"),
    )
    tokenUrl: Optional[str] = None
    license: Optional[License] = None
    contact: Optional[Contact] = None
    resources: Dict[str, Resource] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _default_plurals(self) -> "Config":
        for name, resource in self.resources.items():
            if not resource.plural:
                resource.plural = f"{name}s"
        return self


__all__ = [
    "Operation",
    "FilterOperator",
    "Relationship",
    "SubResource",
    "Resource",
    "License",
    "Contact",
    "Config",
]
