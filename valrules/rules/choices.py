from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..result import Invalid, invalid
from ..utils import ValidationUtils
from .base import Rule


def _as_tuple(values: Iterable[Any], param: str) -> tuple[Any, ...]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ValueError(f"{param} must be a list of values, got {values!r}")
    return tuple(values)


def _contains(options: tuple[Any, ...], value: Any) -> bool:
    # True == 1 in Python; keep bools and numbers apart
    return any(value == opt and isinstance(value, bool) == isinstance(opt, bool) for opt in options)


def is_in(allowed: Iterable[Any]) -> Rule:
    options = _as_tuple(allowed, "allowed")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not _contains(options, value):
            return invalid("isIn", {"value": value, "allowed": list(options)})
        return None

    return Rule(name="isIn", check=check, params={"allowed": options})


def not_in(disallowed: Iterable[Any]) -> Rule:
    options = _as_tuple(disallowed, "disallowed")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if _contains(options, value):
            return invalid("notIn", {"value": value, "disallowed": list(options)})
        return None

    return Rule(name="notIn", check=check, params={"disallowed": options})
