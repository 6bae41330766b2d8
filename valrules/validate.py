"""Run rule lists against values and records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from .messages import Message, resolve_error_messages
from .result import SKIP, Invalid
from .rules.base import Rule
from .utils import ValidationUtils, get_value, is_optional_value

logger = logging.getLogger(__name__)

REQUIRED_RULE = "required"
NULLABLE_RULE = "nullable"
CONDITIONAL_RULES = frozenset({"requiredWhen", "requiredIf", "requiredUnless"})

RuleSpec = Union[Rule, Iterable["RuleSpec"]]
RawErrors = dict[str, list[Invalid]]


def flatten_rules(spec: RuleSpec) -> list[Rule]:
    """A single rule, or arbitrarily nested lists of rules, as a flat list."""
    if isinstance(spec, Rule):
        return [spec]
    if isinstance(spec, (str, bytes, Mapping)) or not isinstance(spec, Iterable):
        raise TypeError(f"expected a Rule or a list of rules, got {spec!r}")
    flat: list[Rule] = []
    for item in spec:
        flat.extend(flatten_rules(item))
    return flat


def validate_value(value: Any, rules: RuleSpec, ctx: ValidationUtils | None = None) -> list[Invalid]:
    """Collect every failure for one value.

    Stops after the first implicit failure. Optional values (None, "") are
    only checked by conditional requirement rules unless `required` is present;
    None passes outright when `nullable` is present.
    """
    ctx = ctx if ctx is not None else ValidationUtils()
    chain = flatten_rules(rules)
    results: list[Invalid] = []

    if is_optional_value(value) and not any(r.name == REQUIRED_RULE for r in chain):
        conditional = [r for r in chain if r.name in CONDITIONAL_RULES]
        if not conditional:
            return []
        for r in conditional:
            res = r(value, ctx)
            if res is SKIP:
                return []
            if isinstance(res, Invalid):
                results.append(res)
                if res.implicit:
                    return results
        chain = [r for r in chain if r.name not in CONDITIONAL_RULES]

    if value is None and any(r.name == NULLABLE_RULE for r in chain):
        return []

    for r in chain:
        res = r(value, ctx)
        if isinstance(res, Invalid):
            results.append(res)
            if res.implicit:
                break
    return results


def validate_data(data: Any, rules: Mapping[str, RuleSpec]) -> RawErrors:
    """Validate each field of `data`; fields without failures are left out."""
    ctx = ValidationUtils(data)
    errors: RawErrors = {}
    for key, spec in rules.items():
        found = validate_value(get_value(data, key), spec, ctx)
        if found:
            logger.debug("field %r failed: %s", key, ", ".join(e.rule for e in found))
            errors[key] = found
    return errors


def validate(
    data: Any,
    rules: Mapping[str, RuleSpec],
    *,
    messages: Mapping[str, Message] | None = None,
    attributes: Mapping[str, str] | None = None,
) -> tuple[bool, dict[str, Any]]:
    """Validate a record and resolve failures to messages.

    Returns (passes, errors) where errors is {field: {rule: message}}.
    """
    raw = validate_data(data, rules)
    if not raw:
        return True, {}
    return False, resolve_error_messages(raw, messages=messages, attributes=attributes)
