"""String rules: prefixes, lengths, patterns and address formats."""

from __future__ import annotations

import re
from typing import Any

from ..result import Invalid, invalid
from ..utils import ValidationUtils, is_string
from .base import Rule, rule


def _require_str(value: Any, param: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{param} must be a string, got {value!r}")
    return value


def _require_length(value: Any, param: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{param} must be a non-negative integer, got {value!r}")
    return value


def starts_with(prefix: str) -> Rule:
    prefix = _require_str(prefix, "str")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_string(value) or not value.startswith(prefix):
            return invalid("startsWith", {"value": value, "str": prefix})
        return None

    return Rule(name="startsWith", check=check, params={"str": prefix})


def ends_with(suffix: str) -> Rule:
    suffix = _require_str(suffix, "str")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_string(value) or not value.endswith(suffix):
            return invalid("endsWith", {"value": value, "str": suffix})
        return None

    return Rule(name="endsWith", check=check, params={"str": suffix})


def min_length(min_value: int) -> Rule:
    min_value = _require_length(min_value, "minValue")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_string(value) or len(value) < min_value:
            return invalid("minLength", {"value": value, "minValue": min_value})
        return None

    return Rule(name="minLength", check=check, params={"minValue": min_value})


def max_length(max_value: int) -> Rule:
    max_value = _require_length(max_value, "maxValue")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_string(value) or len(value) > max_value:
            return invalid("maxLength", {"value": value, "maxValue": max_value})
        return None

    return Rule(name="maxLength", check=check, params={"maxValue": max_value})


def length_between(min_len: int, max_len: int) -> Rule:
    min_len = _require_length(min_len, "minLength")
    max_len = _require_length(max_len, "maxLength")
    if min_len > max_len:
        raise ValueError(f"minLength ({min_len}) is greater than maxLength ({max_len})")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_string(value) or not (min_len <= len(value) <= max_len):
            return invalid("lengthBetween", {"value": value, "minLength": min_len, "maxLength": max_len})
        return None

    return Rule(name="lengthBetween", check=check, params={"minLength": min_len, "maxLength": max_len})


def match(pattern: str | re.Pattern[str], trim: bool = False) -> Rule:
    """Value must contain a match for `pattern` (search semantics, anchor it to match whole)."""
    try:
        compiled = re.compile(pattern)
    except (re.error, TypeError) as exc:
        raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_string(value):
            return invalid("match", {"value": value, "pattern": compiled.pattern})
        candidate = value.strip() if trim else value
        if compiled.search(candidate) is None:
            return invalid("match", {"value": value, "pattern": compiled.pattern})
        return None

    return Rule(name="match", check=check, params={"pattern": compiled.pattern, "trim": trim})


_EMAIL_RE = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)


@rule("isEmail")
def is_email(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not is_string(value) or _EMAIL_RE.match(value) is None:
        return invalid("isEmail", {"value": value})
    return None


_IPV4_SEGMENT_RE = re.compile(r"^\d{1,3}$")
_IPV6_SEGMENT_RE = re.compile(r"^(|[0-9a-f]{1,4})$", flags=re.IGNORECASE)


def _valid_ipv4(value: str) -> bool:
    segments = value.split(".")
    if len(segments) != 4:
        return False
    return all(_IPV4_SEGMENT_RE.match(s) and int(s) <= 255 for s in segments)


def _valid_ipv6(value: str) -> bool:
    segments = value.split(":")
    if len(segments) < 3 or any(_IPV6_SEGMENT_RE.match(s) is None for s in segments):
        return False

    empty_segments = sum(1 for s in segments if s == "")
    leading = value.startswith("::")
    trailing = value.endswith("::")
    # a lone colon at either end is never valid
    if (value.startswith(":") and not leading) or (value.endswith(":") and not trailing):
        return False

    max_segments = 9 if (leading or trailing) else 8
    max_empty = 1 + int(leading) + int(trailing)
    return len(segments) <= max_segments and empty_segments <= max_empty


@rule("isIPv4")
def is_ipv4(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not is_string(value) or not _valid_ipv4(value):
        return invalid("isIPv4", {"value": value})
    return None


@rule("isIPv6")
def is_ipv6(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not is_string(value) or not _valid_ipv6(value):
        return invalid("isIPv6", {"value": value})
    return None


@rule("isIP")
def is_ip(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not is_string(value) or not (_valid_ipv4(value) or _valid_ipv6(value)):
        return invalid("isIP", {"value": value})
    return None
