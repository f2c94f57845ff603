"""Point-free operators mirroring every Result combinator.

Each function takes the auxiliary arguments of the matching Result method and
returns a unary callable over Result, so steps compose without nesting:

    >>> from resultkit import Success, operators as op
    >>> Success(20).then(op.map(lambda x: x + 1)).then(op.bind(lambda x: Success(x * 2))).value()
    42
    >>> op.pipe(Success(20), op.map(lambda x: x + 1), op.count)
    1

Arguments are validated when the operator is built, not when it is applied.
Terminal operators (or_raise, or_else, to_list, count, ...) return plain values.
"""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, Callable, TypeVar

from .core.errors import require

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TypeAlias

    from .core.result import Result

S = TypeVar("S")
F = TypeVar("F")
S2 = TypeVar("S2")
F2 = TypeVar("F2")
R = TypeVar("R")

if TYPE_CHECKING:
    Operator: TypeAlias = Callable[[Result[S, F]], R]


# ─── Functor / Bifunctor ─────────────────────────────────────────────────────


def map(mapper: Callable[[S], S2]) -> Operator[S, F, Result[S2, F]]:  # noqa: A001
    require(mapper, "mapper")
    return lambda r: r.map(mapper)


def map_failure(mapper: Callable[[F], F2]) -> Operator[S, F, Result[S, F2]]:
    require(mapper, "mapper")
    return lambda r: r.map_failure(mapper)


def map_either(mapper: Callable[[S], S2], failure_mapper: Callable[[F], F2]) -> Operator[S, F, Result[S2, F2]]:
    require(mapper, "mapper")
    require(failure_mapper, "failure_mapper")
    return lambda r: r.map_either(mapper, failure_mapper)


def swap(r: Result[S, F]) -> Result[F, S]:
    """Success(v) ↔ Failure(v). Already unary, use as `r.then(swap)`."""
    return r.swap()


flip = swap


# ─── Monad ───────────────────────────────────────────────────────────────────


def bind(binding: Callable[[S], Result[S2, F]]) -> Operator[S, F, Result[S2, F]]:
    require(binding, "binding")
    return lambda r: r.bind(binding)


flat_map = bind


def bind_failure(binding: Callable[[F], Result[S, F2]]) -> Operator[S, F, Result[S, F2]]:
    require(binding, "binding")
    return lambda r: r.bind_failure(binding)


def bind_either(
    binding: Callable[[S], Result[S2, F2]],
    failure_binding: Callable[[F], Result[S2, F2]],
) -> Operator[S, F, Result[S2, F2]]:
    require(binding, "binding")
    require(failure_binding, "failure_binding")
    return lambda r: r.bind_either(binding, failure_binding)


def recover(recovery: Callable[[F], S]) -> Operator[S, F, Result[S, None]]:
    require(recovery, "recovery")
    return lambda r: r.recover(recovery)


# ─── Inspection ──────────────────────────────────────────────────────────────


def peek(consumer: Callable[[S], object]) -> Operator[S, F, Result[S, F]]:
    require(consumer, "consumer")
    return lambda r: r.peek(consumer)


def peek_failure(consumer: Callable[[F], object]) -> Operator[S, F, Result[S, F]]:
    require(consumer, "consumer")
    return lambda r: r.peek_failure(consumer)


def peek_either(consumer: Callable[[S], object], failure_consumer: Callable[[F], object]) -> Operator[S, F, Result[S, F]]:
    require(consumer, "consumer")
    require(failure_consumer, "failure_consumer")
    return lambda r: r.peek_either(consumer, failure_consumer)


if_success = peek
if_failure = peek_failure


# ─── Terminal Operators ──────────────────────────────────────────────────────


def or_raise(exception_builder: Callable[[F], BaseException] | None = None) -> Operator[S, F, S]:
    """Success payload, or raise NoValuePresentError / exception_builder(failure)."""
    if exception_builder is None:
        return lambda r: r.or_raise()
    require(exception_builder, "exception_builder")
    return lambda r: r.or_raise(exception_builder)


def or_else(failure_mapping: Callable[[F], S]) -> Operator[S, F, S]:
    require(failure_mapping, "failure_mapping")
    return lambda r: r.or_else(failure_mapping)


def defaults_to(default: S) -> Operator[S, F, S]:
    return lambda r: r.defaults_to(default)


def defaults_to_lazy(supplier: Callable[[], S]) -> Operator[S, F, S]:
    require(supplier, "supplier")
    return lambda r: r.defaults_to_lazy(supplier)


def any_match(predicate: Callable[[S], bool]) -> Operator[S, F, bool]:
    require(predicate, "predicate")
    return lambda r: r.any_match(predicate)


def all_match(predicate: Callable[[S], bool]) -> Operator[S, F, bool]:
    require(predicate, "predicate")
    return lambda r: r.all_match(predicate)


def either(on_success: Callable[[S], R], on_failure: Callable[[F], R]) -> Operator[S, F, R]:
    require(on_success, "on_success")
    require(on_failure, "on_failure")
    return lambda r: r.either(on_success, on_failure)


# Unary already: pass them directly, e.g. `r.then(count)`.

def to_optional(r: Result[S, F]) -> S | None:
    return r.to_optional()


def to_list(r: Result[S, F]) -> list[S]:
    return r.to_list()


def to_iter(r: Result[S, F]) -> Iterator[S]:
    return r.to_iter()


def count(r: Result[S, F]) -> int:
    return r.count()


def is_success(r: Result[S, F]) -> bool:
    return r.is_success()


def is_failure(r: Result[S, F]) -> bool:
    return r.is_failure()


# ─── Composition ─────────────────────────────────────────────────────────────


def pipe(result: Result[S, F], *operators: Callable[[object], object]) -> object:
    """Thread result through operators left to right.

    Equivalent to result.then(op1).then(op2)... except that later operators
    may receive plain values once a terminal operator has run.
    """
    for i, fn in enumerate(operators):
        require(fn, f"operators[{i}]")
    return reduce(lambda acc, fn: fn(acc), operators, result)
