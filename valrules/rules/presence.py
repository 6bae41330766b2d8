"""Presence rules: required, nullable and the conditional requirements."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..result import SKIP, Invalid, _Skip, invalid
from ..utils import ValidationUtils, is_optional_value
from .base import Rule, rule


@rule("required")
def required(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if is_optional_value(value):
        return invalid("required", {"value": value}, implicit=True)
    return None


@rule("nullable")
def nullable(value: Any, ctx: ValidationUtils) -> None:
    # Marker only; validate_value ends the chain early for None values.
    return None


@rule("notNull")
def not_null(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if value is None:
        return invalid("notNull", {"value": value}, implicit=True)
    return None


def _conditional(name: str, is_required: bool, value: Any, params: dict[str, Any]) -> Invalid | _Skip | None:
    if not is_optional_value(value):
        return None
    if not is_required:
        return SKIP
    return invalid(name, {"value": value, **params}, implicit=True)


def required_when(callback: Callable[[Any, ValidationUtils], bool]) -> Rule:
    """Required when `callback(value, ctx)` returns true."""
    if not callable(callback):
        raise ValueError("requiredWhen needs a callable")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | _Skip | None:
        return _conditional("requiredWhen", bool(callback(value, ctx)), value, {})

    return Rule(name="requiredWhen", check=check)


def required_if(field: str, field_value: Any) -> Rule:
    """Required when the field at `field` equals `field_value`."""

    def check(value: Any, ctx: ValidationUtils) -> Invalid | _Skip | None:
        is_required = ctx.get_value(field) == field_value
        return _conditional("requiredIf", is_required, value, {"field": field, "fieldValue": field_value})

    return Rule(name="requiredIf", check=check, params={"field": field, "fieldValue": field_value})


def required_unless(field: str, field_value: Any) -> Rule:
    """Required unless the field at `field` equals `field_value`."""

    def check(value: Any, ctx: ValidationUtils) -> Invalid | _Skip | None:
        is_required = ctx.get_value(field) != field_value
        return _conditional("requiredUnless", is_required, value, {"field": field, "fieldValue": field_value})

    return Rule(name="requiredUnless", check=check, params={"field": field, "fieldValue": field_value})
