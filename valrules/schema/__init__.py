"""Declarative schemas (rules as data, checks as code)."""

from .load import load_schema, parse_schema
from .registry import RULE_FACTORIES, build_rules
from .schema import FieldDef, RuleRef, SchemaDef, SchemaError

__all__ = [
    "load_schema",
    "parse_schema",
    "build_rules",
    "RULE_FACTORIES",
    "FieldDef",
    "RuleRef",
    "SchemaDef",
    "SchemaError",
]
