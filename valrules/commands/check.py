"""Check command implementation."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console

from ..messages import first_messages
from ..schema import build_rules, load_schema
from ..validate import validate

logger = logging.getLogger(__name__)


def load_records(path: Path) -> list[Any]:
    """Read JSON or YAML data; a top-level list is a batch of records."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"{path}: {exc}") from exc
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}: {exc}") from exc

    if isinstance(data, list):
        return data
    return [data]


def run_check(
    schema_path: Path,
    data_path: Path,
    output_json: bool = False,
    first: bool = False,
) -> int:
    """Validate every record in a data file against a schema.

    Args:
        schema_path: Schema TOML file
        data_path: JSON or YAML file holding one record or a list of records
        output_json: Output results as JSON instead of human-readable
        first: Report only the first message per field

    Returns:
        Exit code (0 = all records pass, 1 = failures found)
    """
    schema = load_schema(schema_path)
    rules = build_rules(schema)
    records = load_records(data_path)

    results: list[dict[str, Any]] = []
    for index, record in enumerate(records):
        passes, errors = validate(record, rules, messages=schema.messages, attributes=schema.attributes)
        results.append({"index": index, "passes": passes, "errors": errors})

    failed = sum(1 for res in results if not res["passes"])
    logger.debug("%s: %d record(s), %d failed", data_path, len(results), failed)

    if output_json:
        _output_json(schema, results, first)
    else:
        _print_human_output(Console(), schema, results, first)

    return 1 if failed else 0


def _output_json(schema, results: list[dict[str, Any]], first: bool) -> None:
    failed = sum(1 for res in results if not res["passes"])
    output = {
        "schema": {"schema_id": schema.schema_id, "version": schema.version},
        "records": [
            {
                "index": res["index"],
                "passes": res["passes"],
                "errors": first_messages(res["errors"]) if first else res["errors"],
            }
            for res in results
        ],
        "summary": {"records": len(results), "passed": len(results) - failed, "failed": failed},
    }
    print(json.dumps(output, indent=2, default=str))


def _iter_messages(errors: dict[str, Any], prefix: str = ""):
    for key, entry in errors.items():
        path = f"{prefix}{key}"
        for name, item in entry.items():
            if isinstance(item, dict):
                yield from _iter_messages({name: item}, f"{path}.")
            else:
                yield path, name, item


def _print_human_output(console: Console, schema, results: list[dict[str, Any]], first: bool) -> None:
    console.print(f"Schema {schema.schema_id} (v{schema.version})", style="dim")

    for res in results:
        label = f"record {res['index']}"
        if res["passes"]:
            console.print(f"✓ {label}", style="bold green")
            continue

        console.print(f"✗ {label}", style="bold red")
        if first:
            for path, msg in first_messages(res["errors"]).items():
                console.print(f"    {path}: {msg}", style="red", markup=False, emoji=False)
        else:
            for path, rule, msg in _iter_messages(res["errors"]):
                console.print(f"    {path} [{rule}]: {msg}", style="red", markup=False, emoji=False)

    failed = sum(1 for res in results if not res["passes"])
    console.print()
    if failed:
        console.print(f"{failed} of {len(results)} record(s) failed", style="bold red")
    else:
        console.print(f"All {len(results)} record(s) passed", style="bold green")
