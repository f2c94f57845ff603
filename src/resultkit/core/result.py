"""Result: a closed two-variant container for success or failure.

Implements a discriminated union with the full combinator surface:
- Functor: map, map_failure
- Bifunctor: map_either, swap
- Monad: bind (flat_map), bind_failure, bind_either
- Inspection: peek, peek_failure, peek_either
- Exit points: or_raise, or_else, defaults_to, recover, to_optional/to_list/to_iter

Every callable argument is checked before the variant is looked at, so a None
mapper fails the same way on Success and on Failure.

Performance notes:
- Uses __slots__ for minimal memory footprint
- No-op combinators return self instead of allocating a new Result
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeVar, final

from .errors import NoValuePresentError, require

if TYPE_CHECKING:
    from collections.abc import Iterator

S = TypeVar("S")  # Success type
F = TypeVar("F")  # Failure type
S2 = TypeVar("S2")  # Mapped success type
F2 = TypeVar("F2")  # Mapped failure type
R = TypeVar("R")

# Variant tags. Package-internal: the traversal folds read these, _payload and
# _is_success directly instead of going through the public methods.
_SUCCESS = True
_FAILURE = False


@final
class Result(Generic[S, F]):
    """Discriminated union holding exactly one Success or one Failure payload.

    There is no third variant and no subclassing: build instances with
    Success()/Failure() (or the derived constructors) and take them apart with
    either()/match(), or is_success() plus value()/failure().

    Examples:
        >>> Success(21).map(lambda x: x * 2).value()
        42
        >>> Failure("boom").map(lambda x: x * 2).failure()
        'boom'
        >>> Success(5).bind(lambda x: Success(x) if x > 0 else Failure("neg")).value()
        5
    """

    __slots__ = ("_payload", "_is_success")
    __match_args__ = ("_payload",)

    def __init__(self, payload: S | F, is_success: bool) -> None:
        """Private constructor. Use Success() or Failure() instead."""
        self._payload = payload
        self._is_success = is_success

    # ─── Variant ───────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    # ─── Extraction ────────────────────────────────────────────────────

    def value(self) -> S:
        """Success payload. Raises NoValuePresentError on Failure."""
        if self._is_success:
            return self._payload  # type: ignore[return-value]
        raise NoValuePresentError()

    def failure(self) -> F:
        """Failure payload. Raises NoValuePresentError on Success."""
        if not self._is_success:
            return self._payload  # type: ignore[return-value]
        raise NoValuePresentError()

    def or_raise(self, exception_builder: Callable[[F], BaseException] | None = None) -> S:
        """Exit the algebra: success payload, or raise.

        Without a builder a Failure raises NoValuePresentError. With one, the
        exception it builds from the failure payload is raised instead.
        """
        if exception_builder is not None:
            require(exception_builder, "exception_builder")
        if self._is_success:
            return self._payload  # type: ignore[return-value]
        if exception_builder is None:
            raise NoValuePresentError()
        raise exception_builder(self._payload)  # type: ignore[arg-type]

    def or_else(self, failure_mapping: Callable[[F], S]) -> S:
        """Success payload, or a substitute computed from the failure payload."""
        require(failure_mapping, "failure_mapping")
        return self._payload if self._is_success else failure_mapping(self._payload)  # type: ignore[return-value,arg-type]

    def defaults_to(self, default: S) -> S:
        """Success payload, or default."""
        return self._payload if self._is_success else default  # type: ignore[return-value]

    def defaults_to_lazy(self, supplier: Callable[[], S]) -> S:
        """Success payload, or supplier(). The supplier only runs on Failure."""
        require(supplier, "supplier")
        return self._payload if self._is_success else supplier()  # type: ignore[return-value]

    # ─── Functor / Bifunctor ───────────────────────────────────────────

    def map(self, mapper: Callable[[S], S2]) -> Result[S2, F]:
        """Apply mapper to the success payload. Result[S,F] → (S→S2) → Result[S2,F]"""
        require(mapper, "mapper")
        return Result(mapper(self._payload), _SUCCESS) if self._is_success else self  # type: ignore[arg-type,return-value]

    def map_failure(self, mapper: Callable[[F], F2]) -> Result[S, F2]:
        """Apply mapper to the failure payload. Result[S,F] → (F→F2) → Result[S,F2]"""
        require(mapper, "mapper")
        return self if self._is_success else Result(mapper(self._payload), _FAILURE)  # type: ignore[arg-type,return-value]

    def map_either(self, mapper: Callable[[S], S2], failure_mapper: Callable[[F], F2]) -> Result[S2, F2]:
        """Retag both sides at once: mapper on Success, failure_mapper on Failure."""
        require(mapper, "mapper")
        require(failure_mapper, "failure_mapper")
        if self._is_success:
            return Result(mapper(self._payload), _SUCCESS)  # type: ignore[arg-type]
        return Result(failure_mapper(self._payload), _FAILURE)  # type: ignore[arg-type]

    def swap(self) -> Result[F, S]:
        """Success(v) ↔ Failure(v)."""
        return Result(self._payload, not self._is_success)

    flip = swap

    # ─── Monad ─────────────────────────────────────────────────────────

    def bind(self, binding: Callable[[S], Result[S2, F]]) -> Result[S2, F]:
        """Monadic bind (>>=). Chain a step that can fail.

        Example:
            >>> def parse(s: str) -> Result[int, str]:
            ...     return Success(int(s)) if s.isdigit() else Failure(f"'{s}' is not a number")
            >>> Success("42").bind(parse).bind(lambda n: Success(n + 1)).value()
            43
        """
        require(binding, "binding")
        return binding(self._payload) if self._is_success else self  # type: ignore[arg-type,return-value]

    def flat_map(self, binding: Callable[[S], Result[S2, F]]) -> Result[S2, F]:
        """Alias for bind."""
        return self.bind(binding)

    def bind_failure(self, binding: Callable[[F], Result[S, F2]]) -> Result[S, F2]:
        """Dual of bind: chain a step on the failure payload, Success passes through."""
        require(binding, "binding")
        return self if self._is_success else binding(self._payload)  # type: ignore[arg-type,return-value]

    def bind_either(
        self,
        binding: Callable[[S], Result[S2, F2]],
        failure_binding: Callable[[F], Result[S2, F2]],
    ) -> Result[S2, F2]:
        """Dispatch to binding or failure_binding by variant, flattening."""
        require(binding, "binding")
        require(failure_binding, "failure_binding")
        return binding(self._payload) if self._is_success else failure_binding(self._payload)  # type: ignore[arg-type]

    def recover(self, recovery: Callable[[F], S]) -> Result[S, None]:
        """Turn a Failure into a Success via recovery; the failure side becomes None."""
        require(recovery, "recovery")
        return self if self._is_success else Result(recovery(self._payload), _SUCCESS)  # type: ignore[arg-type,return-value]

    # ─── Inspection ────────────────────────────────────────────────────

    def peek(self, consumer: Callable[[S], object]) -> Result[S, F]:
        """Call consumer with the success payload for side effects, return self."""
        require(consumer, "consumer")
        if self._is_success:
            consumer(self._payload)  # type: ignore[arg-type]
        return self

    def peek_failure(self, consumer: Callable[[F], object]) -> Result[S, F]:
        """Call consumer with the failure payload for side effects, return self."""
        require(consumer, "consumer")
        if not self._is_success:
            consumer(self._payload)  # type: ignore[arg-type]
        return self

    def peek_either(self, consumer: Callable[[S], object], failure_consumer: Callable[[F], object]) -> Result[S, F]:
        """Call the consumer matching the variant, return self."""
        require(consumer, "consumer")
        require(failure_consumer, "failure_consumer")
        (consumer if self._is_success else failure_consumer)(self._payload)  # type: ignore[arg-type,operator]
        return self

    if_success = peek
    if_failure = peek_failure

    # ─── Predicates ────────────────────────────────────────────────────

    def any_match(self, predicate: Callable[[S], bool]) -> bool:
        """predicate(value) on Success, False on Failure."""
        require(predicate, "predicate")
        return bool(predicate(self._payload)) if self._is_success else False  # type: ignore[arg-type]

    def all_match(self, predicate: Callable[[S], bool]) -> bool:
        """predicate(value) on Success, True on Failure (vacuous truth)."""
        require(predicate, "predicate")
        return bool(predicate(self._payload)) if self._is_success else True  # type: ignore[arg-type]

    def count(self) -> int:
        return 1 if self._is_success else 0

    # ─── Projection ────────────────────────────────────────────────────

    def to_optional(self) -> S | None:
        """Success payload, or None on Failure."""
        return self._payload if self._is_success else None  # type: ignore[return-value]

    def to_list(self) -> list[S]:
        return [self._payload] if self._is_success else []  # type: ignore[list-item]

    def to_iter(self) -> Iterator[S]:
        """Iterator over zero or one success payload."""
        return iter(self.to_list())

    # ─── Pattern Matching ──────────────────────────────────────────────

    def either(self, on_success: Callable[[S], R], on_failure: Callable[[F], R]) -> R:
        """Exhaustive fold into a plain value."""
        require(on_success, "on_success")
        require(on_failure, "on_failure")
        return on_success(self._payload) if self._is_success else on_failure(self._payload)  # type: ignore[arg-type]

    def match(self, *, success: Callable[[S], R], failure: Callable[[F], R]) -> R:
        """Keyword form of either(). Forces handling both variants.

        Example:
            >>> Success(42).match(success=lambda v: f"got {v}", failure=lambda f: f"failed: {f}")
            'got 42'
        """
        return self.either(success, failure)

    def then(self, fn: Callable[[Result[S, F]], R]) -> R:
        """Apply fn to this Result and continue the pipeline with its output."""
        return require(fn, "fn")(self)

    # ─── Dunder Methods ────────────────────────────────────────────────

    __bool__ = is_success
    __iter__ = to_iter
    __hash__ = lambda self: hash((self._is_success, self._payload))  # noqa: E731
    __repr__ = lambda self: f"{'Success' if self._is_success else 'Failure'}({self._payload!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_success == other._is_success and self._payload == other._payload


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Success(value: S) -> Result[S, F]:  # noqa: N802
    """Construct the Success variant."""
    return Result(value, _SUCCESS)


def Failure(failure: F) -> Result[S, F]:  # noqa: N802
    """Construct the Failure variant."""
    return Result(failure, _FAILURE)


success = Success
failure = Failure


def from_optional(value: S | None, if_absent: Callable[[], F] | None = None) -> Result[S, F | None]:
    """Success(value) unless value is None, else Failure(if_absent()).

    Without if_absent the failure payload is None.
    """
    if if_absent is not None:
        require(if_absent, "if_absent")
    if value is not None:
        return Result(value, _SUCCESS)
    return Result(if_absent() if if_absent is not None else None, _FAILURE)


def from_predicate(
    value: S,
    predicate: Callable[[S], bool],
    if_rejected: Callable[[], F] | None = None,
) -> Result[S, F | None]:
    """Success(value) if predicate(value) holds, else Failure(if_rejected())."""
    require(predicate, "predicate")
    if if_rejected is not None:
        require(if_rejected, "if_rejected")
    if predicate(value):
        return Result(value, _SUCCESS)
    return Result(if_rejected() if if_rejected is not None else None, _FAILURE)


def from_bool(flag: bool, on_success: Callable[[], S], on_failure: Callable[[], F]) -> Result[S, F]:
    """Success(on_success()) if flag, else Failure(on_failure()). Only one supplier runs."""
    require(on_success, "on_success")
    require(on_failure, "on_failure")
    return Result(on_success(), _SUCCESS) if flag else Result(on_failure(), _FAILURE)
