"""Tests for composing rules over values and records."""

from __future__ import annotations

import copy
from datetime import date

import pytest

from valrules import SKIP, Invalid, ValidationUtils, validate, validate_data, validate_value
from valrules.rules import (
    is_email,
    is_int,
    is_string,
    length_between,
    max_number,
    min_length,
    not_null,
    nullable,
    number_between,
    required,
    required_if,
    required_unless,
    required_when,
    starts_with,
    validate_array,
    validate_object,
)


def test_required_is_implicit():
    assert required("") == Invalid("required", {"value": ""}, implicit=True)
    assert required(None).implicit is True
    assert required(0) is None
    assert required(False) is None


def test_validate_value_collects_every_non_implicit_failure():
    errors = validate_value(7, [is_string, starts_with("x"), max_number(5)])
    assert [e.rule for e in errors] == ["isString", "startsWith", "maxNumber"]


def test_validate_value_stops_after_implicit_failure():
    errors = validate_value(None, [required, is_string, min_length(3)])
    assert [e.rule for e in errors] == ["required"]


def test_optional_value_skips_rules_without_required():
    assert validate_value(None, [is_string, min_length(3)]) == []
    assert validate_value("", [is_email]) == []


def test_not_null_stops_chain():
    errors = validate_value(None, [required, not_null, is_string])
    assert [e.rule for e in errors] == ["required"]
    errors = validate_value(None, [not_null, is_string])
    assert errors == []


def test_nullable_lets_none_through_even_when_required():
    assert validate_value(None, [required, nullable, is_string]) == []
    assert [e.rule for e in validate_value(5, [required, nullable, is_string])] == ["isString"]


def test_nested_rule_lists_are_flattened():
    errors = validate_value("abc", [[is_string, [min_length(5)]], starts_with("x")])
    assert [e.rule for e in errors] == ["minLength", "startsWith"]


def test_required_when_uses_callback():
    rule = required_when(lambda value, ctx: ctx.get_value("kind") == "paid")
    assert rule(None, ValidationUtils({"kind": "free"})) is SKIP
    assert rule(None, ValidationUtils({"kind": "paid"})).rule == "requiredWhen"
    assert rule("x", ValidationUtils({"kind": "paid"})) is None


def test_required_if_only_applies_when_other_field_matches():
    rules = {"price": [required_if("kind", "paid"), is_int]}
    assert validate_data({"kind": "free"}, rules) == {}
    errors = validate_data({"kind": "paid"}, rules)
    assert errors["price"] == [
        Invalid("requiredIf", {"value": None, "field": "kind", "fieldValue": "paid"}, implicit=True)
    ]
    errors = validate_data({"kind": "paid", "price": "ten"}, rules)
    assert [e.rule for e in errors["price"]] == ["isInt"]


def test_required_unless():
    rules = {"reason": [required_unless("status", "ok")]}
    assert validate_data({"status": "ok"}, rules) == {}
    assert list(validate_data({"status": "failed"}, rules)) == ["reason"]


def test_skip_ignores_remaining_rules():
    rules = {"price": [required_if("kind", "paid"), is_int, max_number(3)]}
    assert validate_data({"kind": "free", "price": ""}, rules) == {}


def test_validate_data_uses_dotted_paths_for_lookups():
    data = {"owner": {"name": "u_sam"}, "count": 3}
    rules = {"owner.name": [starts_with("u_")], "count": [required_if("owner.name", "u_sam")]}
    assert validate_data(data, rules) == {}


def test_validate_data_omits_passing_fields():
    rules = {"title": [required, is_string], "coins": [required, number_between(1, 10)]}
    errors = validate_data({"title": "Dishes", "coins": 20}, rules)
    assert list(errors) == ["coins"]


def test_validate_object_reports_nested_errors():
    rules = {"assignee": validate_object(True, {"email": [required, is_email], "name": [required]})}

    errors = validate_data({"assignee": {"email": "nope", "name": "Sam"}}, rules)
    (failure,) = errors["assignee"]
    assert failure.rule == "validateObject"
    assert failure.implicit is True
    assert list(failure.params["errors"]) == ["email"]

    errors = validate_data({}, rules)
    assert [e.rule for e in errors["assignee"]] == ["required"]

    errors = validate_data({"assignee": "Sam"}, rules)
    assert errors["assignee"] == [Invalid("validateObject", {"value": "Sam"}, implicit=True)]


def test_optional_object_may_be_absent():
    rules = {"assignee": validate_object(False, {"email": [required]})}
    assert validate_data({}, rules) == {}


def test_validate_array_checks_items_and_length():
    rules = {"tags": validate_array(True, [is_string, min_length(2)], min_length=1, max_length=3)}

    assert validate_data({"tags": ["ab", "cd"]}, rules) == {}

    (failure,) = validate_data({"tags": ["ab", 5, "x"]}, rules)["tags"]
    assert failure.rule == "validateArray"
    assert set(failure.params["errors"]) == {"1", "2"}
    assert [e.rule for e in failure.params["errors"]["1"]] == ["isString", "minLength"]

    (failure,) = validate_data({"tags": []}, rules)["tags"]
    assert failure.rule == "validateArray:minLengthCheck"

    (failure,) = validate_data({"tags": ["ab"] * 4}, rules)["tags"]
    assert failure.rule == "validateArray:maxLengthCheck"

    (failure,) = validate_data({"tags": "ab"}, rules)["tags"]
    assert failure.rule == "validateArray:arrayCheck"


def test_validate_returns_resolved_messages():
    rules = {"title": [required, length_between(3, 10)], "coins": [max_number(5)]}
    passes, errors = validate({"title": "", "coins": 9}, rules)
    assert passes is False
    assert errors == {
        "title": {"required": "title is required"},
        "coins": {"maxNumber": "coins cannot be greater than 5"},
    }

    assert validate({"title": "Dishes", "coins": 1}, rules) == (True, {})


def test_validation_does_not_mutate_input_or_rules():
    data = {"title": "x", "due": date(2024, 1, 1), "tags": ["a"], "assignee": {"email": "bad"}}
    snapshot = copy.deepcopy(data)
    rule = max_number(5)
    rules = {
        "title": [required, length_between(3, 10)],
        "tags": validate_array(False, [min_length(2)]),
        "assignee": validate_object(False, {"email": [is_email]}),
    }

    validate(data, rules)
    validate(data, rules)
    rule(9)

    assert data == snapshot
    assert dict(rule.params) == {"maxValue": 5}


def test_repeated_calls_give_equal_results():
    rule = starts_with("ab")
    assert rule("zz") == rule("zz")
    assert rule("zz") is not rule("zz")
    rules = {"title": [required, is_string]}
    assert validate_data({"title": 3}, rules) == validate_data({"title": 3}, rules)


def test_validate_array_rejects_bad_lengths():
    with pytest.raises(ValueError, match="minLength"):
        validate_array(False, [is_string], min_length=-1)
    with pytest.raises(ValueError, match="maxLength"):
        validate_array(False, [is_string], max_length="3")
    with pytest.raises(ValueError, match="greater than"):
        validate_array(False, [is_string], min_length=4, max_length=2)

    (rule,) = validate_array(False, [is_string], min_length=None)
    assert rule.params["minLength"] is None


@pytest.mark.parametrize("spec", ["required", b"required", {"a": required}, 5])
def test_rule_specs_must_be_rules_or_lists(spec):
    with pytest.raises(TypeError, match="list of rules"):
        validate_value("x", spec)
