"""Rules that validate nested objects and arrays.

Both factories return a rule list (with `required` prepended when asked) so
they can be used directly as a field's rules. Nested failures are kept raw
under params["errors"] and resolved to messages by path later.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..result import Invalid, invalid
from ..utils import ValidationUtils, is_array, is_optional_value
from .base import Rule
from .presence import required
from .strings import _require_length


def validate_object(is_required: bool, rules: Mapping[str, Any]) -> list[Rule]:
    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        from ..validate import validate_data

        if is_optional_value(value):
            return None
        if not isinstance(value, Mapping):
            return invalid("validateObject", {"value": value}, implicit=True)

        errors = validate_data(value, rules)
        if errors:
            return invalid("validateObject", {"value": value, "errors": errors}, implicit=True)
        return None

    chain = [required] if is_required else []
    chain.append(Rule(name="validateObject", check=check, params={"required": is_required}))
    return chain


def validate_array(
    is_required: bool,
    rules: Any,
    *,
    min_length: int | None = 0,
    max_length: int | None = None,
) -> list[Rule]:
    if min_length is not None:
        min_length = _require_length(min_length, "minLength")
    if max_length is not None:
        max_length = _require_length(max_length, "maxLength")
    if min_length is not None and max_length is not None and min_length > max_length:
        raise ValueError(f"minLength ({min_length}) is greater than maxLength ({max_length})")

    def check(value: Any, ctx: ValidationUtils) -> Invalid | None:
        from ..validate import validate_value

        if is_optional_value(value):
            return None
        if not is_array(value):
            return invalid("validateArray:arrayCheck", {"value": value}, implicit=True)
        if min_length is not None and len(value) < min_length:
            return invalid("validateArray:minLengthCheck", {"value": value, "minLength": min_length})
        if max_length is not None and len(value) > max_length:
            return invalid("validateArray:maxLengthCheck", {"value": value, "maxLength": max_length})

        errors: dict[str, list[Invalid]] = {}
        for index, item in enumerate(value):
            found = validate_value(item, rules, ctx)
            if found:
                errors[str(index)] = found
        if errors:
            return invalid("validateArray", {"value": value, "errors": errors}, implicit=True)
        return None

    params = {"required": is_required, "minLength": min_length, "maxLength": max_length}
    chain = [required] if is_required else []
    chain.append(Rule(name="validateArray", check=check, params=params))
    return chain
