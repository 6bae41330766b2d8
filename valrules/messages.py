"""Turn raw rule failures into readable messages.

Templates use ":attr" for the field's display name and ":<param>" for any
entry of the failure's params (":value", ":maxValue", ":date", ...).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Callable, Union

from .result import Invalid

Message = Union[str, Callable[[Mapping[str, Any]], str]]

FALLBACK_MESSAGE = ":attr is invalid"

DEFAULT_MESSAGES: dict[str, str] = {
    "required": ":attr is required",
    "requiredWhen": ":attr is required",
    "requiredIf": ":attr is required when :field is :fieldValue",
    "requiredUnless": ":attr is required unless :field is :fieldValue",
    "notNull": ":attr cannot be null",
    "isString": ":attr must be a string",
    "isNumber": ":attr must be a number",
    "isInt": ":attr must be an integer",
    "isFloat": ":attr must be a float number",
    "isBool": ":attr must be a boolean",
    "isArray": ":attr must be an array",
    "isNumeric": ":attr must be numeric",
    "startsWith": ":attr must start with :str",
    "endsWith": ":attr must end with :str",
    "minLength": ":attr cannot be shorter than :minValue characters",
    "maxLength": ":attr cannot be longer than :maxValue characters",
    "lengthBetween": ":attr must be between :minLength and :maxLength characters",
    "match": ":attr format is incorrect",
    "isEmail": ":attr is not a valid email address",
    "isIPv4": ":attr is not a valid IPv4 address",
    "isIPv6": ":attr is not a valid IPv6 address",
    "isIP": ":attr is not a valid IP address",
    "maxNumber": ":attr cannot be greater than :maxValue",
    "minNumber": ":attr cannot be less than :minValue",
    "numberBetween": ":attr must be between :minValue and :maxValue",
    "isIn": ":value is not allowed",
    "notIn": ":value is not allowed",
    "isDate": ":attr is not a valid date",
    "dateBefore": ":attr must be a date before :date",
    "dateBeforeOrEqual": ":attr must be a date before or equal to :date",
    "dateAfter": ":attr must be a date after :date",
    "dateAfterOrEqual": ":attr must be a date after or equal to :date",
    "dateBetween": ":attr must be a date between :minDate and :maxDate",
    "validateObject": ":attr must be an object",
    "validateArray": ":attr has invalid items",
    "validateArray:arrayCheck": ":attr must be an array",
    "validateArray:minLengthCheck": ":attr must have at least :minLength items",
    "validateArray:maxLengthCheck": ":attr cannot have more than :maxLength items",
}

_NESTED_RULES = frozenset({"validateObject", "validateArray"})
_PLACEHOLDER_RE = re.compile(r":(\w+)")


def format_param(value: Any) -> str:
    if isinstance(value, datetime):
        if (value.hour, value.minute, value.second, value.microsecond) == (0, 0, 0, 0):
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(format_param(v) for v in value)
    if value is None:
        return "null"
    return str(value)


def render_message(template: Message, params: Mapping[str, Any], attr: str) -> str:
    if callable(template):
        return template(params)

    def repl(m: re.Match[str]) -> str:
        name = m.group(1)
        if name == "attr":
            return attr
        if name in params:
            return format_param(params[name])
        return m.group(0)

    return _PLACEHOLDER_RE.sub(repl, template)


def _pick_message(rule: str, path: str, key: str, messages: Mapping[str, Message]) -> Message:
    for candidate in (f"{path}.{rule}", f"{key}.{rule}", rule):
        if candidate in messages:
            return messages[candidate]
    if rule in DEFAULT_MESSAGES:
        return DEFAULT_MESSAGES[rule]
    return messages.get("default", FALLBACK_MESSAGE)


def resolve_error_messages(
    raw_errors: Mapping[str, list[Invalid]],
    *,
    messages: Mapping[str, Message] | None = None,
    attributes: Mapping[str, str] | None = None,
    _prefix: str = "",
) -> dict[str, Any]:
    """Resolve raw failures to {field: {rule: message}}.

    Nested object and array failures become {field: {subfield: {...}}}.
    Message keys are tried as "<path>.<rule>", "<field>.<rule>", "<rule>".
    """
    messages = messages or {}
    attributes = attributes or {}
    resolved: dict[str, Any] = {}

    for key, errs in raw_errors.items():
        path = f"{_prefix}{key}"
        attr = attributes.get(path) or attributes.get(key) or key
        entry: dict[str, Any] = {}
        for err in errs:
            nested = err.params.get("errors") if err.rule in _NESTED_RULES else None
            if nested:
                entry.update(
                    resolve_error_messages(nested, messages=messages, attributes=attributes, _prefix=f"{path}.")
                )
                continue
            template = _pick_message(err.rule, path, key, messages)
            entry[err.rule] = render_message(template, err.params, attr)
        resolved[key] = entry

    return resolved


def _walk(path: str, entry: Mapping[str, Any], out: dict[str, str], *, with_rules: bool) -> None:
    for name, item in entry.items():
        if isinstance(item, Mapping):
            _walk(f"{path}.{name}", item, out, with_rules=with_rules)
            continue
        if with_rules:
            out[f"{path}.{name}"] = item
        out.setdefault(path, item)


def first_messages(errors: Mapping[str, Any]) -> dict[str, str]:
    """First message per field; nested fields use dotted paths."""
    out: dict[str, str] = {}
    for key, entry in errors.items():
        _walk(key, entry, out, with_rules=False)
    return out


def flatten_messages(errors: Mapping[str, Any]) -> dict[str, str]:
    """Every message under "<path>.<rule>", plus the first one under "<path>"."""
    out: dict[str, str] = {}
    for key, entry in errors.items():
        _walk(key, entry, out, with_rules=True)
    return out
