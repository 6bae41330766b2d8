"""valrules - pure validation rules and the layer that composes them."""

__version__ = "0.1.0"

from .messages import first_messages, flatten_messages, resolve_error_messages
from .result import SKIP, Invalid, invalid
from .utils import ValidationUtils
from .validate import validate, validate_data, validate_value

__all__ = [
    "__version__",
    "Invalid",
    "SKIP",
    "invalid",
    "ValidationUtils",
    "validate",
    "validate_data",
    "validate_value",
    "resolve_error_messages",
    "first_messages",
    "flatten_messages",
]
