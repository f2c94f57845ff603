"""Traversal engine: fold collections of Results under two failure semantics.

- applicative: evaluate everything, accumulate every failure
- monadic: stop at the first failure

Both offer traverse/sequence over lists, lazy iterables and optional values:

    >>> from resultkit import Failure, Success
    >>> from resultkit.traversal import applicative, monadic
    >>> applicative.sequence_list([Success(1), Failure("a"), Failure("b")])
    Failure(['a', 'b'])
    >>> monadic.sequence_list([Success(1), Failure("a"), Failure("b")])
    Failure('a')
"""

from . import applicative, monadic

__all__ = ["applicative", "monadic"]
