from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class SchemaError(ValueError):
    """A schema file or rule reference that cannot be turned into rules."""


@dataclass(frozen=True)
class RuleRef:
    name: str
    params: dict[str, Any] = field(default_factory=dict)
    # validateObject children
    fields: list[FieldDef] = field(default_factory=list)
    # validateArray item rules
    rules: list[RuleRef] = field(default_factory=list)


@dataclass(frozen=True)
class FieldDef:
    name: str
    rules: list[RuleRef] = field(default_factory=list)
    description: str | None = None


@dataclass(frozen=True)
class SchemaDef:
    schema_id: str
    version: int
    description: str | None = None
    fields: list[FieldDef] = field(default_factory=list)
    messages: dict[str, str] = field(default_factory=dict)
    attributes: dict[str, str] = field(default_factory=dict)
