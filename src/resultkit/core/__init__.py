"""Result core: the two-variant container, its constructors and contract errors."""

from .errors import NO_VALUE_PRESENT, NoValuePresentError, NullArgumentError, ResultError, require
from .result import (
    Failure,
    Result,
    Success,
    failure,
    from_bool,
    from_optional,
    from_predicate,
    success,
)

__all__ = [
    # Core type
    "Result", "Success", "Failure", "success", "failure",
    # Derived constructors
    "from_optional", "from_predicate", "from_bool",
    # Contract violations
    "ResultError", "NoValuePresentError", "NullArgumentError", "NO_VALUE_PRESENT", "require",
]
