"""Built-in validation rules."""

from .base import Rule, rule
from .choices import is_in, not_in
from .dates import (
    date_after,
    date_after_or_equal,
    date_before,
    date_before_or_equal,
    date_between,
    is_date,
)
from .nested import validate_array, validate_object
from .numbers import max_number, min_number, number_between
from .presence import not_null, nullable, required, required_if, required_unless, required_when
from .strings import (
    ends_with,
    is_email,
    is_ip,
    is_ipv4,
    is_ipv6,
    length_between,
    match,
    max_length,
    min_length,
    starts_with,
)
from .types import is_array, is_bool, is_float, is_int, is_number, is_numeric, is_string

__all__ = [
    "Rule",
    "rule",
    "required",
    "nullable",
    "not_null",
    "required_when",
    "required_if",
    "required_unless",
    "is_string",
    "is_number",
    "is_int",
    "is_float",
    "is_bool",
    "is_array",
    "is_numeric",
    "starts_with",
    "ends_with",
    "min_length",
    "max_length",
    "length_between",
    "match",
    "is_email",
    "is_ipv4",
    "is_ipv6",
    "is_ip",
    "max_number",
    "min_number",
    "number_between",
    "is_in",
    "not_in",
    "is_date",
    "date_before",
    "date_before_or_equal",
    "date_after",
    "date_after_or_equal",
    "date_between",
    "validate_object",
    "validate_array",
]
