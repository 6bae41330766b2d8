"""Shared helpers for rules and the validation layer."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from numbers import Real
from typing import Any

from .result import Invalid, invalid


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """True for real numbers (int, float, Decimal, Fraction); bool is not a number here."""
    if isinstance(value, Decimal):
        # NaN decimals raise on ordering comparisons
        return not value.is_nan()
    return isinstance(value, Real) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_optional_value(value: Any) -> bool:
    """Values treated as "not provided": None and the empty string."""
    return value is None or value == ""


def parse_date(value: Any) -> datetime | None:
    """Read a candidate as a datetime, or None when it is not a date."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def clear_times(value: date | datetime) -> datetime:
    """Midnight of the same calendar date, time zone dropped."""
    return datetime(value.year, value.month, value.day)


def reference_date(value: Any, *, param: str = "date") -> datetime:
    """Coerce a rule parameter to a cleared date; raises ValueError if it is not one."""
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"{param} must be a date, datetime or ISO-8601 string, got {value!r}")
    return clear_times(parsed)


def date_checks(
    value: Any,
    rule: str,
    params: Mapping[str, Any],
    check: Callable[[datetime], bool],
) -> Invalid | None:
    """Run `check` on the cleared candidate date; report non-dates as invalid."""
    parsed = parse_date(value)
    if parsed is None or not check(clear_times(parsed)):
        return invalid(rule, {"value": value, **params})
    return None


_MISSING = object()


def get_value(data: Any, key: str) -> Any:
    """Look up `key` in `data`; dotted keys walk nested mappings and sequences.

    Missing keys resolve to None.
    """
    if isinstance(data, Mapping) and key in data:
        return data[key]

    current = data
    for part in key.split("."):
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        elif isinstance(current, Sequence) and not isinstance(current, str) and part.isdigit():
            index = int(part)
            current = current[index] if index < len(current) else _MISSING
        else:
            current = _MISSING
        if current is _MISSING:
            return None
    return current


@dataclass(frozen=True)
class ValidationUtils:
    """Read access to the whole record for rules that depend on other fields."""

    data: Any = field(default_factory=dict)

    def get_value(self, key: str) -> Any:
        return get_value(self.data, key)
