"""Date rules.

Candidates may be `date`, `datetime` or ISO-8601 strings. Both sides of every
comparison have their time of day cleared first, so only calendar dates count.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..result import Invalid
from ..utils import ValidationUtils, date_checks, reference_date
from .base import Rule, rule


@rule("isDate")
def is_date(value: Any, ctx: ValidationUtils) -> Invalid | None:
    return date_checks(value, "isDate", {}, lambda _: True)


def date_before(ref: date | datetime | str) -> Rule:
    cleared = reference_date(ref)

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        return date_checks(value, "dateBefore", {"date": ref}, lambda d: d < cleared)

    return Rule(name="dateBefore", check=check, params={"date": ref})


def date_before_or_equal(ref: date | datetime | str) -> Rule:
    cleared = reference_date(ref)

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        return date_checks(value, "dateBeforeOrEqual", {"date": ref}, lambda d: d <= cleared)

    return Rule(name="dateBeforeOrEqual", check=check, params={"date": ref})


def date_after(ref: date | datetime | str) -> Rule:
    cleared = reference_date(ref)

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        return date_checks(value, "dateAfter", {"date": ref}, lambda d: d > cleared)

    return Rule(name="dateAfter", check=check, params={"date": ref})


def date_after_or_equal(ref: date | datetime | str) -> Rule:
    cleared = reference_date(ref)

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        return date_checks(value, "dateAfterOrEqual", {"date": ref}, lambda d: d >= cleared)

    return Rule(name="dateAfterOrEqual", check=check, params={"date": ref})


def date_between(min_date: date | datetime | str, max_date: date | datetime | str) -> Rule:
    low = reference_date(min_date, param="minDate")
    high = reference_date(max_date, param="maxDate")
    if low > high:
        raise ValueError(f"minDate ({min_date}) is after maxDate ({max_date})")
    params = {"minDate": min_date, "maxDate": max_date}

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        return date_checks(value, "dateBetween", params, lambda d: low <= d <= high)

    return Rule(name="dateBetween", check=check, params=params)
