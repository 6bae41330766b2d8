from __future__ import annotations

from typing import Any

from ..result import Invalid, invalid
from ..utils import ValidationUtils, is_number
from .base import Rule


def _require_number(value: Any, param: str) -> int | float:
    if not is_number(value):
        raise ValueError(f"{param} must be a number, got {value!r}")
    return value


def max_number(max_value: int | float) -> Rule:
    max_value = _require_number(max_value, "maxValue")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_number(value) or value > max_value:
            return invalid("maxNumber", {"value": value, "maxValue": max_value})
        return None

    return Rule(name="maxNumber", check=check, params={"maxValue": max_value})


def min_number(min_value: int | float) -> Rule:
    min_value = _require_number(min_value, "minValue")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_number(value) or value < min_value:
            return invalid("minNumber", {"value": value, "minValue": min_value})
        return None

    return Rule(name="minNumber", check=check, params={"minValue": min_value})


def number_between(min_value: int | float, max_value: int | float) -> Rule:
    min_value = _require_number(min_value, "minValue")
    max_value = _require_number(max_value, "maxValue")
    if min_value > max_value:
        raise ValueError(f"minValue ({min_value}) is greater than maxValue ({max_value})")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        if not is_number(value) or value < min_value or value > max_value:
            return invalid("numberBetween", {"value": value, "minValue": min_value, "maxValue": max_value})
        return None

    return Rule(name="numberBetween", check=check, params={"minValue": min_value, "maxValue": max_value})
