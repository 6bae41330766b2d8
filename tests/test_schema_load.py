from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from valrules import validate
from valrules.schema import RULE_FACTORIES, SchemaError, build_rules, load_schema, parse_schema


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_load_fixture_schema(chores_schema):
    assert chores_schema.schema_id == "schema/chores"
    assert chores_schema.version == 1
    assert [f.name for f in chores_schema.fields] == [
        "title",
        "description",
        "chorecoins",
        "due_date",
        "assignee",
        "tags",
    ]
    assert chores_schema.attributes["due_date"] == "due date"
    assert chores_schema.messages["title.required"] == "Give the chore a title"

    due = next(f for f in chores_schema.fields if f.name == "due_date")
    assert due.rules[-1].params == {"date": date(2020, 1, 1)}

    assignee = next(f for f in chores_schema.fields if f.name == "assignee")
    assert [f.name for f in assignee.rules[0].fields] == ["username", "email"]


def test_build_rules_from_fixture(chores_schema, chores_rules):
    assert [r.name for r in chores_rules["title"]] == ["required", "isString", "lengthBetween"]
    assert [r.name for r in chores_rules["assignee"]] == ["validateObject"]

    passes, errors = validate(
        {"title": "", "chorecoins": 0, "due_date": "2019-06-01", "tags": ["x"]},
        chores_rules,
        messages=chores_schema.messages,
        attributes=chores_schema.attributes,
    )
    assert passes is False
    assert errors["title"] == {"required": "Give the chore a title"}
    assert errors["chorecoins"] == {"numberBetween": "chore coins must be between 1 and 100"}
    assert errors["due_date"] == {"dateAfterOrEqual": "due date must be a date after or equal to 2020-01-01"}
    assert errors["tags"] == {"0": {"minLength": "0 cannot be shorter than 2 characters"}}


def test_schema_requires_id_and_version():
    with pytest.raises(SchemaError, match="schema_id"):
        parse_schema({"version": 1})
    with pytest.raises(SchemaError, match="version"):
        parse_schema({"schema_id": "s", "version": 0})
    with pytest.raises(SchemaError, match="version"):
        parse_schema({"schema_id": "s", "version": "one"})


def test_schema_rejects_duplicate_and_unnamed_fields():
    with pytest.raises(SchemaError, match="duplicate"):
        parse_schema({"schema_id": "s", "version": 1, "fields": [{"name": "a"}, {"name": "a"}]})
    with pytest.raises(SchemaError, match="missing a name"):
        parse_schema({"schema_id": "s", "version": 1, "fields": [{"rules": ["required"]}]})


def test_unknown_rule_fails_at_build_time():
    schema = parse_schema({"schema_id": "s", "version": 1, "fields": [{"name": "a", "rules": ["isPalindrome"]}]})
    with pytest.raises(SchemaError, match="isPalindrome"):
        build_rules(schema)


def test_missing_and_bad_params_raise_schema_error():
    missing = parse_schema({"schema_id": "s", "version": 1, "fields": [{"name": "a", "rules": [{"name": "maxNumber"}]}]})
    with pytest.raises(SchemaError, match="maxValue"):
        build_rules(missing)

    bad = parse_schema(
        {
            "schema_id": "s",
            "version": 1,
            "fields": [{"name": "a", "rules": [{"name": "dateBefore", "params": {"date": "soon"}}]}],
        }
    )
    with pytest.raises(SchemaError, match="dateBefore"):
        build_rules(bad)


@pytest.mark.parametrize("min_length", ["2", -1, 1.5, True])
def test_array_lengths_are_checked_at_build_time(min_length):
    schema = parse_schema(
        {
            "schema_id": "s",
            "version": 1,
            "fields": [
                {
                    "name": "tags",
                    "rules": [{"name": "validateArray", "params": {"minLength": min_length}, "rules": ["isString"]}],
                }
            ],
        }
    )
    with pytest.raises(SchemaError, match="minLength"):
        build_rules(schema)


def test_invalid_toml_raises_schema_error(tmp_path: Path):
    path = tmp_path / "broken.toml"
    _write(path, "schema_id = \n")
    with pytest.raises(SchemaError):
        load_schema(path)


def test_non_utf8_schema_raises_schema_error(tmp_path: Path):
    path = tmp_path / "latin1.toml"
    path.write_bytes(b'schema_id = "caf\xe9"\nversion = 1\n')
    with pytest.raises(SchemaError, match="latin1.toml"):
        load_schema(path)


def test_schema_error_is_a_value_error():
    assert issubclass(SchemaError, ValueError)


def test_conditional_rules_from_toml(tmp_path: Path):
    path = tmp_path / "billing.toml"
    _write(
        path,
        """
schema_id = "schema/billing"
version = 2

[[fields]]
name = "plan"
rules = ["required", { name = "isIn", params = { allowed = ["free", "paid"] } }]

[[fields]]
name = "card"
rules = [{ name = "requiredIf", params = { field = "plan", fieldValue = "paid" } }, { name = "match", params = { pattern = "^[0-9]{4}$" } }]
""",
    )
    rules = build_rules(load_schema(path))

    assert validate({"plan": "free"}, rules) == (True, {})
    passes, errors = validate({"plan": "paid"}, rules)
    assert passes is False
    assert errors == {"card": {"requiredIf": "card is required when plan is paid"}}
    assert validate({"plan": "paid", "card": "1234"}, rules) == (True, {})


def test_registry_covers_default_messages():
    from valrules.messages import DEFAULT_MESSAGES

    for name in RULE_FACTORIES:
        if name == "nullable":
            continue
        assert name in DEFAULT_MESSAGES, name
