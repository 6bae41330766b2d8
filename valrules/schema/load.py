from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from .schema import FieldDef, RuleRef, SchemaDef, SchemaError

logger = logging.getLogger(__name__)


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _str_map(value: Any) -> dict[str, str]:
    return {str(k): str(v) for k, v in _coerce_dict(value).items() if isinstance(v, str)}


def _parse_rule(raw: Any, where: str) -> RuleRef:
    # "required" is shorthand for { name = "required" }
    if isinstance(raw, str):
        name = raw.strip()
        if not name:
            raise SchemaError(f"{where}: empty rule name")
        return RuleRef(name=name)

    if not isinstance(raw, dict):
        raise SchemaError(f"{where}: rule must be a string or a table, got {type(raw).__name__}")

    name = str(raw.get("name", "")).strip()
    if not name:
        raise SchemaError(f"{where}: rule is missing a name")

    return RuleRef(
        name=name,
        params=_coerce_dict(raw.get("params")),
        fields=_parse_fields(raw.get("fields", []), f"{where}.{name}"),
        rules=[_parse_rule(r, f"{where}.{name}") for r in raw.get("rules", []) or []],
    )


def _parse_fields(raw_fields: Any, where: str) -> list[FieldDef]:
    if not isinstance(raw_fields, list):
        raise SchemaError(f"{where}: fields must be an array of tables")

    fields: list[FieldDef] = []
    seen: set[str] = set()
    for raw in raw_fields:
        if not isinstance(raw, dict):
            continue

        name = str(raw.get("name", "")).strip()
        if not name:
            raise SchemaError(f"{where}: field is missing a name")
        if name in seen:
            raise SchemaError(f"{where}: duplicate field {name!r}")
        seen.add(name)

        rules_raw = raw.get("rules", [])
        if not isinstance(rules_raw, list):
            rules_raw = [rules_raw]

        description = raw.get("description")
        fields.append(
            FieldDef(
                name=name,
                rules=[_parse_rule(r, f"{where}.{name}") for r in rules_raw],
                description=description if isinstance(description, str) else None,
            )
        )
    return fields


def parse_schema(data: dict[str, Any]) -> SchemaDef:
    schema_id = str(data.get("schema_id", "")).strip()
    if not schema_id:
        raise SchemaError("schema_id is required")

    try:
        version = int(data.get("version", 0))
    except (TypeError, ValueError):
        version = 0
    if version <= 0:
        raise SchemaError("version must be a positive integer")

    description = data.get("description")

    return SchemaDef(
        schema_id=schema_id,
        version=version,
        description=description if isinstance(description, str) else None,
        fields=_parse_fields(data.get("fields", []), schema_id),
        messages=_str_map(data.get("messages")),
        attributes=_str_map(data.get("attributes")),
    )


def load_schema(path: Path) -> SchemaDef:
    """
    Load a validation schema from TOML.

    Fields list rule references by name; building the actual rules is left
    to `build_rules`, so unknown rule names surface there.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise SchemaError(f"{path}: {exc}") from exc

    schema = parse_schema(data)
    logger.debug("loaded schema %s v%d with %d field(s) from %s", schema.schema_id, schema.version, len(schema.fields), path)
    return schema
