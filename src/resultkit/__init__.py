"""Result algebra with applicative and monadic traversal.

Provides a closed Success/Failure type for error handling without exceptions:
- Functor/Bifunctor/Monad combinators with eager argument checks
- Point-free operators for `result.then(op)` pipelines
- traverse/sequence that either accumulate all failures or stop at the first
- An async bridge for Result-producing coroutines

Example:
    >>> from resultkit import Failure, Result, Success, operators as op
    >>>
    >>> def parse(s: str) -> Result[int, str]:
    ...     return Success(int(s)) if s.isdigit() else Failure(f"'{s}' is not a number")
    >>>
    >>> result = (
    ...     Success("41")
    ...     .bind(parse)
    ...     .then(op.map(lambda x: x + 1))
    ... )
    >>> assert result.value() == 42
"""

from . import operators
from .bridge import bind_async, bind_failure_async
from .core import (
    Failure,
    NoValuePresentError,
    NullArgumentError,
    Result,
    ResultError,
    Success,
    failure,
    from_bool,
    from_optional,
    from_predicate,
    success,
)
from .traversal import applicative, monadic

__version__ = "0.1.0"

__all__ = [
    # Core type
    "Result", "Success", "Failure", "success", "failure",
    # Derived constructors
    "from_optional", "from_predicate", "from_bool",
    # Errors
    "ResultError", "NoValuePresentError", "NullArgumentError",
    # Operator library
    "operators",
    # Traversal
    "applicative", "monadic",
    # Async bridge
    "bind_async", "bind_failure_async",
]
