"""Monadic traversal: fold many Results into one, stopping at the first failure.

Same success path as the applicative fold, but the first Failure ends the
fold. Nothing after it is pulled from the input, so with a lazy input the
mapping is never called on the remaining elements. The failure payload is the
bare F, not a list.

Example:
    >>> from resultkit import Failure, Success
    >>> def parse(s: str):
    ...     return Success(int(s)) if s.isdigit() else Failure(f"'{s}' is not a number")
    >>> traverse_list(["1", "2", "X", "Y"], parse)
    Failure("'X' is not a number")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from ..core.errors import NullArgumentError, require
from ..core.result import Result, _FAILURE, _SUCCESS
from ..observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

V = TypeVar("V")
S = TypeVar("S")
F = TypeVar("F")

log = get_logger("resultkit.traversal", mode="monadic")


def _fold(results: Iterable[Result[S, F]]) -> Result[list[S], F]:
    """Fail-fast reducer with early bailout."""
    values: list[S] = []
    for index, r in enumerate(results):
        if not isinstance(r, Result):
            raise TypeError(f"expected Result, got {type(r).__name__}")
        if not r._is_success:
            log.debug("traversal.short_circuit", index=index)
            return Result(r._payload, _FAILURE)
        values.append(r._payload)  # type: ignore[arg-type]
    return Result(values, _SUCCESS)


def _check_items(items: object, name: str) -> None:
    if items is None:
        raise NullArgumentError(name)


# ─── List ────────────────────────────────────────────────────────────────────


def sequence_list(results: Iterable[Result[S, F]]) -> Result[list[S], F]:
    """[Result[S,F]] → Result[[S], F]. First failure wins."""
    _check_items(results, "results")
    return _fold(results)


def traverse_list(items: Iterable[V], mapping: Callable[[V], Result[S, F]]) -> Result[list[S], F]:
    """Map mapping over items and sequence, without mapping past the first failure."""
    _check_items(items, "items")
    require(mapping, "mapping")
    return _fold(mapping(item) for item in items)


# ─── Lazy Iterable ───────────────────────────────────────────────────────────


def sequence_iter(results: Iterable[Result[S, F]]) -> Result[Iterator[S], F]:
    """Lazy-input form of sequence_list.

    Pulls until the first Failure and leaves the rest of the input untouched,
    so an unbounded input terminates as soon as one element fails.
    """
    _check_items(results, "results")
    folded = _fold(results)
    return Result(iter(folded._payload), _SUCCESS) if folded._is_success else folded  # type: ignore[return-value,call-overload]


def traverse_iter(items: Iterable[V], mapping: Callable[[V], Result[S, F]]) -> Result[Iterator[S], F]:
    """Map mapping lazily over items, then sequence_iter."""
    _check_items(items, "items")
    require(mapping, "mapping")
    return sequence_iter(mapping(item) for item in items)


# ─── Optional ────────────────────────────────────────────────────────────────


def sequence_optional(result: Result[S, F] | None) -> Result[S | None, F]:
    """None → Success(None); a present Result passes through unchanged."""
    if result is None:
        return Result(None, _SUCCESS)
    if not isinstance(result, Result):
        raise TypeError(f"expected Result or None, got {type(result).__name__}")
    return result  # type: ignore[return-value]


def traverse_optional(item: V | None, mapping: Callable[[V], Result[S, F]]) -> Result[S | None, F]:
    """Apply mapping to item when present, then sequence_optional."""
    require(mapping, "mapping")
    return sequence_optional(None if item is None else mapping(item))
