"""Rule factories addressable by name from schema files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .. import rules as r
from ..rules.base import Rule
from .schema import FieldDef, RuleRef, SchemaDef, SchemaError

BuildFn = Callable[[RuleRef], list[Rule]]


@dataclass(frozen=True)
class RuleEntry:
    name: str
    description: str
    build: BuildFn
    params: tuple[str, ...] = ()
    optional_params: tuple[str, ...] = ()


def _param(ref: RuleRef, key: str) -> Any:
    if key not in ref.params:
        raise SchemaError(f"rule {ref.name!r} needs param {key!r}")
    return ref.params[key]


def _fixed(rule: Rule) -> BuildFn:
    return lambda ref: [rule]


def _one(factory: Callable[..., Rule], *keys: str) -> BuildFn:
    return lambda ref: [factory(*(_param(ref, k) for k in keys))]


def _build_object(ref: RuleRef) -> list[Rule]:
    return r.validate_object(bool(ref.params.get("required", False)), build_field_rules(ref.fields))


def _build_array(ref: RuleRef) -> list[Rule]:
    return r.validate_array(
        bool(ref.params.get("required", False)),
        build_rule_list(ref.rules),
        min_length=ref.params.get("minLength", 0),
        max_length=ref.params.get("maxLength"),
    )


def _build_match(ref: RuleRef) -> list[Rule]:
    return [r.match(_param(ref, "pattern"), trim=bool(ref.params.get("trim", False)))]


_ENTRIES = [
    RuleEntry("required", "Value must be present (not null, not empty string). Stops the field's remaining rules.", _fixed(r.required)),
    RuleEntry("nullable", "A null value passes every other rule of the field.", _fixed(r.nullable)),
    RuleEntry("notNull", "Value must not be null. Stops the field's remaining rules.", _fixed(r.not_null)),
    RuleEntry(
        "requiredIf",
        "Required when another field equals a given value; otherwise an absent value passes.",
        _one(r.required_if, "field", "fieldValue"),
        ("field", "fieldValue"),
    ),
    RuleEntry(
        "requiredUnless",
        "Required unless another field equals a given value.",
        _one(r.required_unless, "field", "fieldValue"),
        ("field", "fieldValue"),
    ),
    RuleEntry("isString", "Value must be a string.", _fixed(r.is_string)),
    RuleEntry("isNumber", "Value must be a real number such as int, float or Decimal (not a bool).", _fixed(r.is_number)),
    RuleEntry("isInt", "Value must be an integer (integral floats pass).", _fixed(r.is_int)),
    RuleEntry("isFloat", "Value must be a float.", _fixed(r.is_float)),
    RuleEntry("isBool", "Value must be a boolean.", _fixed(r.is_bool)),
    RuleEntry("isArray", "Value must be a list.", _fixed(r.is_array)),
    RuleEntry("isNumeric", "Value must be a number or a string of digits.", _fixed(r.is_numeric)),
    RuleEntry("startsWith", "String must begin with `str` (case-sensitive).", _one(r.starts_with, "str"), ("str",)),
    RuleEntry("endsWith", "String must end with `str` (case-sensitive).", _one(r.ends_with, "str"), ("str",)),
    RuleEntry("minLength", "String must have at least `minValue` characters.", _one(r.min_length, "minValue"), ("minValue",)),
    RuleEntry("maxLength", "String must have at most `maxValue` characters.", _one(r.max_length, "maxValue"), ("maxValue",)),
    RuleEntry(
        "lengthBetween",
        "String length must be within [minLength, maxLength].",
        _one(r.length_between, "minLength", "maxLength"),
        ("minLength", "maxLength"),
    ),
    RuleEntry("match", "String must contain a match for the regular expression `pattern`.", _build_match, ("pattern",), ("trim",)),
    RuleEntry("isEmail", "String must be an email address.", _fixed(r.is_email)),
    RuleEntry("isIPv4", "String must be a dotted IPv4 address.", _fixed(r.is_ipv4)),
    RuleEntry("isIPv6", "String must be an IPv6 address.", _fixed(r.is_ipv6)),
    RuleEntry("isIP", "String must be an IPv4 or IPv6 address.", _fixed(r.is_ip)),
    RuleEntry("maxNumber", "Number must not be greater than `maxValue`.", _one(r.max_number, "maxValue"), ("maxValue",)),
    RuleEntry("minNumber", "Number must not be less than `minValue`.", _one(r.min_number, "minValue"), ("minValue",)),
    RuleEntry(
        "numberBetween",
        "Number must be within [minValue, maxValue].",
        _one(r.number_between, "minValue", "maxValue"),
        ("minValue", "maxValue"),
    ),
    RuleEntry("isIn", "Value must be one of `allowed`.", _one(r.is_in, "allowed"), ("allowed",)),
    RuleEntry("notIn", "Value must not be one of `disallowed`.", _one(r.not_in, "disallowed"), ("disallowed",)),
    RuleEntry("isDate", "Value must be a date, datetime or ISO-8601 string.", _fixed(r.is_date)),
    RuleEntry("dateBefore", "Calendar date must be before `date`.", _one(r.date_before, "date"), ("date",)),
    RuleEntry(
        "dateBeforeOrEqual",
        "Calendar date must be on or before `date`; time of day is ignored.",
        _one(r.date_before_or_equal, "date"),
        ("date",),
    ),
    RuleEntry("dateAfter", "Calendar date must be after `date`.", _one(r.date_after, "date"), ("date",)),
    RuleEntry("dateAfterOrEqual", "Calendar date must be on or after `date`.", _one(r.date_after_or_equal, "date"), ("date",)),
    RuleEntry(
        "dateBetween",
        "Calendar date must be within [minDate, maxDate].",
        _one(r.date_between, "minDate", "maxDate"),
        ("minDate", "maxDate"),
    ),
    RuleEntry(
        "validateObject",
        "Value must be a table; its nested `fields` are validated in turn.",
        _build_object,
        optional_params=("required",),
    ),
    RuleEntry(
        "validateArray",
        "Value must be a list; every item is checked against the nested `rules`.",
        _build_array,
        optional_params=("required", "minLength", "maxLength"),
    ),
]

RULE_FACTORIES: dict[str, RuleEntry] = {e.name: e for e in _ENTRIES}


def build_rule_list(refs: list[RuleRef]) -> list[Rule]:
    built: list[Rule] = []
    for ref in refs:
        entry = RULE_FACTORIES.get(ref.name)
        if entry is None:
            raise SchemaError(f"unknown rule {ref.name!r}")
        try:
            built.extend(entry.build(ref))
        except SchemaError:
            raise
        except (TypeError, ValueError) as exc:
            raise SchemaError(f"rule {ref.name!r}: {exc}") from exc
    return built


def build_field_rules(fields: list[FieldDef]) -> dict[str, list[Rule]]:
    return {f.name: build_rule_list(f.rules) for f in fields}


def build_rules(schema: SchemaDef) -> dict[str, list[Rule]]:
    """Build the {field: [Rule, ...]} mapping `validate` expects."""
    try:
        return build_field_rules(schema.fields)
    except SchemaError as exc:
        raise SchemaError(f"{schema.schema_id}: {exc}") from exc
