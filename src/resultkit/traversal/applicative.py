"""Applicative traversal: fold many Results into one, accumulating every failure.

The fold runs left to right with an accumulator seeded at Success([]):

    acc \\ elem      Success(x)            Failure(f)
    Success(xs)     Success(xs + [x])     Failure([f])
    Failure(fs)     Failure(fs)           Failure(fs + [f])

So the outcome is Success(all values, in order) iff every element succeeded,
otherwise Failure(all failures, in input order). Every element is evaluated.

Shapes:
- list:     finite iterable in, lists out
- iter:     lazy iterable consumed single-pass, iterators out
- optional: a single value or None; None is Success(None), never a Failure

Example:
    >>> from resultkit import Failure, Success
    >>> def parse(s: str):
    ...     return Success(int(s)) if s.isdigit() else Failure(f"'{s}' is not a number")
    >>> traverse_list(["1", "2", "X", "Y"], parse)
    Failure(["'X' is not a number", "'Y' is not a number"])
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

log = get_logger("resultkit.traversal", mode="applicative")


def _fold(results: Iterable[Result[S, F]]) -> Result[list[S], list[F]]:
    """Accumulating reducer. Pulls the input single-pass.

    Successes are kept only until the first failure; after that they are
    counted and dropped.
    """
    values: list[S] = []
    failures: list[F] = []
    dropped = 0
    for r in results:
        if not isinstance(r, Result):
            raise TypeError(f"expected Result, got {type(r).__name__}")
        if r._is_success:
            if failures:
                dropped += 1
            else:
                values.append(r._payload)  # type: ignore[arg-type]
        else:
            failures.append(r._payload)  # type: ignore[arg-type]
    if failures:
        log.debug("traversal.accumulated", failures=len(failures), discarded=len(values) + dropped)
        return Result(failures, _FAILURE)
    return Result(values, _SUCCESS)


def _check_items(items: object, name: str) -> None:
    if items is None:
        raise NullArgumentError(name)


# ─── List ────────────────────────────────────────────────────────────────────


def sequence_list(results: Iterable[Result[S, F]]) -> Result[list[S], list[F]]:
    """[Result[S,F]] → Result[[S], [F]]. Collects every failure."""
    _check_items(results, "results")
    return _fold(results)


def traverse_list(items: Iterable[V], mapping: Callable[[V], Result[S, F]]) -> Result[list[S], list[F]]:
    """Map mapping over items, then sequence_list."""
    _check_items(items, "items")
    require(mapping, "mapping")
    return _fold(mapping(item) for item in items)


# ─── Lazy Iterable ───────────────────────────────────────────────────────────


def sequence_iter(results: Iterable[Result[S, F]]) -> Result[Iterator[S], Iterator[F]]:
    """Lazy-input form of sequence_list; payloads come back as iterators.

    The input is pulled once, element by element. Deciding the variant still
    needs every element, so an infinite input never returns.
    """
    _check_items(results, "results")
    folded = _fold(results)
    return Result(iter(folded._payload), folded._is_success)  # type: ignore[call-overload]


def traverse_iter(items: Iterable[V], mapping: Callable[[V], Result[S, F]]) -> Result[Iterator[S], Iterator[F]]:
    """Map mapping lazily over items, then sequence_iter."""
    _check_items(items, "items")
    require(mapping, "mapping")
    return sequence_iter(mapping(item) for item in items)


# ─── Optional ────────────────────────────────────────────────────────────────


def sequence_optional(result: Result[S, F] | None) -> Result[S | None, F | None]:
    """None → Success(None); a present Result passes through unchanged."""
    if result is None:
        return Result(None, _SUCCESS)
    if not isinstance(result, Result):
        raise TypeError(f"expected Result or None, got {type(result).__name__}")
    return result  # type: ignore[return-value]


def traverse_optional(item: V | None, mapping: Callable[[V], Result[S, F]]) -> Result[S | None, F | None]:
    """Apply mapping to item when present, then sequence_optional."""
    require(mapping, "mapping")
    return sequence_optional(None if item is None else mapping(item))
