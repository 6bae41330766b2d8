"""Runtime type rules."""

from __future__ import annotations

import math
import re
from typing import Any

from .. import utils
from ..result import Invalid, invalid
from ..utils import ValidationUtils
from .base import rule


@rule("isString")
def is_string(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not utils.is_string(value):
        return invalid("isString", {"value": value})
    return None


@rule("isNumber")
def is_number(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not utils.is_number(value):
        return invalid("isNumber", {"value": value})
    return None


@rule("isInt")
def is_int(value: Any, ctx: ValidationUtils) -> Invalid | None:
    # 3.0 read from JSON still counts as an integer
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return None
    if not utils.is_number(value) or not isinstance(value, int):
        return invalid("isInt", {"value": value})
    return None


@rule("isFloat")
def is_float(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not isinstance(value, float):
        return invalid("isFloat", {"value": value})
    return None


@rule("isBool")
def is_bool(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not isinstance(value, bool):
        return invalid("isBool", {"value": value})
    return None


@rule("isArray")
def is_array(value: Any, ctx: ValidationUtils) -> Invalid | None:
    if not utils.is_array(value):
        return invalid("isArray", {"value": value})
    return None


_NUMERIC_RE = re.compile(r"[-+]?\d+(\.\d+)?")


@rule("isNumeric")
def is_numeric(value: Any, ctx: ValidationUtils) -> Invalid | None:
    """Numbers, or strings spelling one ("42", "-3.5")."""
    if utils.is_number(value):
        return None
    if utils.is_string(value) and _NUMERIC_RE.fullmatch(value.strip()):
        return None
    return invalid("isNumeric", {"value": value})
