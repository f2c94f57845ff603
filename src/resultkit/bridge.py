"""Async bridge: lift a Result into an awaitable pipeline step.

    >>> async def fetch(user_id: int) -> Result[dict, str]:
    ...     ...
    >>> user = await Success(42).then(bind_async(fetch))

- bind_async: on Success, await binding(value); on Failure, resolve at once to the same Failure
- bind_failure_async: the dual, on the failure payload

Each application returns exactly one awaitable that resolves once. There is no
cancellation, timeout or retry here; those belong to the event loop running it.
Arguments are validated when the operator is built and when it is applied,
never deferred until the awaitable is awaited.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Generator
from typing import Any, Callable, TypeVar

from .core.errors import require
from .core.result import Result
from .observability import get_logger

S = TypeVar("S")
F = TypeVar("F")
S2 = TypeVar("S2")
F2 = TypeVar("F2")

log = get_logger("resultkit.bridge")


class _Resolved(Awaitable[Result[S, F]]):
    """Already-completed handle. Can be awaited any number of times, or dropped unawaited."""

    __slots__ = ("result",)

    def __init__(self, result: Result[S, F]) -> None:
        self.result = result

    def __await__(self) -> Generator[Any, None, Result[S, F]]:
        yield from ()
        return self.result

    def __repr__(self) -> str:
        return f"<resolved {self.result!r}>"


async def _checked(pending: Awaitable[Result[S, F]]) -> Result[S, F]:
    result = await pending
    if not isinstance(result, Result):
        raise TypeError(f"async binding must resolve to a Result, got {type(result).__name__}")
    return result


def _dispatch(binding: Callable[[object], object], payload: object, side: str) -> Awaitable[Result]:  # type: ignore[type-arg]
    log.debug("bridge.dispatch", side=side)
    out = binding(payload)
    if isinstance(out, Result):
        return _Resolved(out)
    if not inspect.isawaitable(out):
        raise TypeError(f"binding must return an awaitable or a Result, got {type(out).__name__}")
    return _checked(out)


def _ensure_result(r: object) -> Result:  # type: ignore[type-arg]
    if not isinstance(r, Result):
        raise TypeError(f"expected Result, got {type(r).__name__}")
    return r


def bind_async(binding: Callable[[S], Awaitable[Result[S2, F]]]) -> Callable[[Result[S, F]], Awaitable[Result[S2, F]]]:
    """Async bind on the success payload. Failure passes through, already resolved."""
    require(binding, "binding")

    def apply(r: Result[S, F]) -> Awaitable[Result[S2, F]]:
        r = _ensure_result(r)
        if r._is_success:
            return _dispatch(binding, r._payload, "success")  # type: ignore[arg-type]
        log.debug("bridge.pass_through", side="failure")
        return _Resolved(r)  # type: ignore[arg-type]

    return apply


def bind_failure_async(binding: Callable[[F], Awaitable[Result[S, F2]]]) -> Callable[[Result[S, F]], Awaitable[Result[S, F2]]]:
    """Async bind on the failure payload. Success passes through, already resolved."""
    require(binding, "binding")

    def apply(r: Result[S, F]) -> Awaitable[Result[S, F2]]:
        r = _ensure_result(r)
        if not r._is_success:
            return _dispatch(binding, r._payload, "failure")  # type: ignore[arg-type]
        log.debug("bridge.pass_through", side="success")
        return _Resolved(r)  # type: ignore[arg-type]

    return apply
