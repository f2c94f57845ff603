"""Tests for the Result core.

Validates:
- Functor and monad laws
- Swap involution
- Every combinator on both variants
- Derived constructors and supplier laziness
- Variant-aware equality and hashing
- Eager argument checks regardless of variant
"""

from __future__ import annotations

from typing import Callable

import pytest

from resultkit import (
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


# ═════════════════════════════════════════════════════════════════════════════
# Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """fmap id = id, on both sides"""
    assert Success(42).map(lambda x: x) == Success(42)
    assert Failure("fail").map_failure(lambda x: x) == Failure("fail")


def test_functor_composition() -> None:
    """fmap (g . f) = fmap g . fmap f"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    for r in (Success(5), Failure("fail")):
        assert r.map(f).map(g) == r.map(lambda x: g(f(x)))


def test_monad_left_identity() -> None:
    """return a >>= f = f a"""
    f: Callable[[int], Result[int, str]] = lambda x: Success(x * 2)
    assert Success(21).bind(f) == f(21)


def test_monad_right_identity() -> None:
    """m >>= return = m"""
    for m in (Success(42), Failure("fail")):
        assert m.bind(Success) == m


def test_monad_associativity() -> None:
    """(m >>= f) >>= g = m >>= (\\x -> f x >>= g)"""
    f: Callable[[int], Result[int, str]] = lambda x: Success(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Success(x * 2) if x < 10 else Failure("too big")

    for m in (Success(5), Success(20), Failure("fail")):
        assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


def test_swap_involution() -> None:
    for r in (Success(1), Failure("x")):
        assert r.swap().swap() == r


# ═════════════════════════════════════════════════════════════════════════════
# Variant & Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_success_construction() -> None:
    r: Result[int, str] = Success(42)

    assert r.is_success()
    assert not r.is_failure()
    assert r.value() == 42
    assert success(42) == r


def test_failure_construction() -> None:
    r: Result[int, str] = Failure("failed")

    assert r.is_failure()
    assert not r.is_success()
    assert r.failure() == "failed"
    assert failure("failed") == r


def test_value_on_failure_raises() -> None:
    with pytest.raises(NoValuePresentError, match="No value present"):
        Failure("fail").value()


def test_failure_on_success_raises() -> None:
    with pytest.raises(NoValuePresentError, match="No value present"):
        Success(1).failure()


def test_no_value_present_is_lookup_error() -> None:
    err = NoValuePresentError()
    assert isinstance(err, LookupError)
    assert isinstance(err, ResultError)


def test_none_is_a_valid_payload() -> None:
    assert Success(None).is_success()
    assert Success(None).value() is None
    assert Failure(None).failure() is None


# ═════════════════════════════════════════════════════════════════════════════
# Functor / Bifunctor
# ═════════════════════════════════════════════════════════════════════════════


def test_map_success() -> None:
    assert Success(5).map(lambda x: x * 2) == Success(10)


def test_map_failure_is_noop_on_same_instance() -> None:
    r: Result[int, str] = Failure("fail")
    assert r.map(lambda x: x * 2) is r


def test_map_failure_on_failure() -> None:
    assert Failure("fail").map_failure(lambda e: f"Error: {e}") == Failure("Error: fail")


def test_map_failure_on_success_is_noop() -> None:
    r: Result[int, str] = Success(42)
    assert r.map_failure(lambda e: f"Error: {e}") is r


def test_map_either() -> None:
    double: Callable[[int], int] = lambda x: x * 2
    shout: Callable[[str], str] = lambda e: e.upper()

    assert Success(5).map_either(double, shout) == Success(10)
    assert Failure("fail").map_either(double, shout) == Failure("FAIL")


def test_swap() -> None:
    assert Success(1).swap() == Failure(1)
    assert Failure("x").swap() == Success("x")
    assert Success(1).flip() == Failure(1)


# ═════════════════════════════════════════════════════════════════════════════
# Monad
# ═════════════════════════════════════════════════════════════════════════════


def test_bind_success_to_success() -> None:
    assert Success(5).bind(lambda x: Success(x * 2)) == Success(10)


def test_bind_success_to_failure() -> None:
    assert Success(5).bind(lambda x: Failure("failed")) == Failure("failed")


def test_bind_failure_passes_through() -> None:
    called = False

    def binding(x: int) -> Result[int, str]:
        nonlocal called
        called = True
        return Success(x)

    r: Result[int, str] = Failure("fail")
    assert r.bind(binding) is r
    assert not called


def test_flat_map_alias() -> None:
    assert Success(5).flat_map(lambda x: Success(x + 1)) == Success(5).bind(lambda x: Success(x + 1))


def test_bind_failure() -> None:
    assert Failure("fail").bind_failure(lambda e: Success(len(e))) == Success(4)
    assert Failure("fail").bind_failure(lambda e: Failure(e * 2)) == Failure("failfail")

    r: Result[int, str] = Success(1)
    assert r.bind_failure(lambda e: Success(0)) is r


def test_bind_either() -> None:
    on_success: Callable[[int], Result[str, str]] = lambda v: Success(f"ok:{v}")
    on_failure: Callable[[str], Result[str, str]] = lambda f: Failure(f"err:{f}")

    assert Success(1).bind_either(on_success, on_failure) == Success("ok:1")
    assert Failure("x").bind_either(on_success, on_failure) == Failure("err:x")


def test_recover() -> None:
    assert Failure("fail").recover(len) == Success(4)

    r: Result[int, str] = Success(7)
    assert r.recover(len) is r


# ═════════════════════════════════════════════════════════════════════════════
# Inspection
# ═════════════════════════════════════════════════════════════════════════════


def test_peek() -> None:
    seen: list[int] = []
    r: Result[int, str] = Success(42)

    assert r.peek(seen.append) is r
    assert Failure("fail").peek(seen.append) == Failure("fail")
    assert seen == [42]


def test_peek_failure() -> None:
    seen: list[str] = []
    r: Result[int, str] = Failure("fail")

    assert r.peek_failure(seen.append) is r
    Success(1).peek_failure(seen.append)
    assert seen == ["fail"]


def test_peek_either() -> None:
    successes: list[int] = []
    failures: list[str] = []

    Success(1).peek_either(successes.append, failures.append)
    Failure("x").peek_either(successes.append, failures.append)

    assert successes == [1]
    assert failures == ["x"]


def test_if_success_and_if_failure_aliases() -> None:
    seen: list[object] = []
    Success(1).if_success(seen.append).if_failure(seen.append)
    Failure("x").if_success(seen.append).if_failure(seen.append)
    assert seen == [1, "x"]


# ═════════════════════════════════════════════════════════════════════════════
# Exit Points
# ═════════════════════════════════════════════════════════════════════════════


def test_or_raise_success() -> None:
    assert Success(42).or_raise() == 42
    assert Success(42).or_raise(ValueError) == 42


def test_or_raise_default() -> None:
    with pytest.raises(NoValuePresentError, match="No value present"):
        Failure("fail").or_raise()


def test_or_raise_with_builder() -> None:
    with pytest.raises(ValueError, match="bad input"):
        Failure("bad input").or_raise(ValueError)


def test_or_else() -> None:
    assert Success(5).or_else(len) == 5
    assert Failure("fail").or_else(len) == 4


def test_defaults_to() -> None:
    assert Success(5).defaults_to(10) == 5
    assert Failure("fail").defaults_to(10) == 10


def test_defaults_to_lazy_only_runs_on_failure() -> None:
    calls: list[int] = []

    def supplier() -> int:
        calls.append(1)
        return 10

    assert Success(5).defaults_to_lazy(supplier) == 5
    assert calls == []
    assert Failure("fail").defaults_to_lazy(supplier) == 10
    assert calls == [1]


# ═════════════════════════════════════════════════════════════════════════════
# Predicates & Projection
# ═════════════════════════════════════════════════════════════════════════════


def test_any_match() -> None:
    assert Success(4).any_match(lambda x: x % 2 == 0)
    assert not Success(3).any_match(lambda x: x % 2 == 0)
    assert not Failure("x").any_match(lambda x: True)


def test_all_match() -> None:
    assert Success(4).all_match(lambda x: x % 2 == 0)
    assert not Success(3).all_match(lambda x: x % 2 == 0)
    assert Failure("x").all_match(lambda x: False)


def test_count() -> None:
    assert Success(1).count() == 1
    assert Failure("x").count() == 0


def test_to_optional() -> None:
    assert Success(1).to_optional() == 1
    assert Failure("x").to_optional() is None


def test_to_list() -> None:
    assert Success(1).to_list() == [1]
    assert Failure("x").to_list() == []


def test_to_iter() -> None:
    assert list(Success(1).to_iter()) == [1]
    assert list(Failure("x").to_iter()) == []
    assert list(Success(1)) == [1]


def test_either_and_match() -> None:
    assert Success(42).either(lambda v: f"success: {v}", lambda e: f"failed: {e}") == "success: 42"
    assert Failure("x").match(success=lambda v: f"success: {v}", failure=lambda e: f"failed: {e}") == "failed: x"


def test_then_applies_function_to_result() -> None:
    assert Success(2).then(lambda r: r.map(lambda x: x + 1)) == Success(3)
    assert Failure("x").then(lambda r: r.is_failure()) is True


# ═════════════════════════════════════════════════════════════════════════════
# Equality, Hashing, Dunders
# ═════════════════════════════════════════════════════════════════════════════


def test_equality_is_variant_exclusive() -> None:
    assert Success(1) == Success(1)
    assert Success(1) != Failure(1)
    assert Failure(1) != Failure(2)
    assert Success(1) != Success(2)
    assert Success(1) != 1


def test_hashing() -> None:
    assert hash(Success(1)) == hash(Success(1))
    assert len({Success(1), Success(1), Failure(1)}) == 2


def test_repr() -> None:
    assert repr(Success(1)) == "Success(1)"
    assert repr(Failure("x")) == "Failure('x')"
    assert str(Failure("x")) == "Failure('x')"


def test_truthiness() -> None:
    assert bool(Success(0)) is True
    assert bool(Failure("x")) is False


# ═════════════════════════════════════════════════════════════════════════════
# Derived Constructors
# ═════════════════════════════════════════════════════════════════════════════


def test_from_optional_present() -> None:
    assert from_optional(5, lambda: "missing") == Success(5)


def test_from_optional_absent() -> None:
    assert from_optional(None, lambda: "missing") == Failure("missing")


def test_from_optional_without_supplier_has_empty_failure() -> None:
    r = from_optional(None)
    assert r.is_failure()
    assert r.failure() is None


def test_from_optional_supplier_is_lazy() -> None:
    calls: list[int] = []
    from_optional(1, lambda: calls.append(1))
    assert calls == []


def test_from_predicate() -> None:
    is_even: Callable[[int], bool] = lambda x: x % 2 == 0

    assert from_predicate(4, is_even, lambda: "odd") == Success(4)
    assert from_predicate(3, is_even, lambda: "odd") == Failure("odd")
    assert from_predicate(3, is_even) == Failure(None)


def test_from_predicate_supplier_is_lazy() -> None:
    calls: list[int] = []
    from_predicate(4, lambda x: True, lambda: calls.append(1))
    assert calls == []


def test_from_bool_runs_only_one_supplier() -> None:
    calls: list[str] = []

    def ok() -> int:
        calls.append("ok")
        return 1

    def bad() -> str:
        calls.append("bad")
        return "nope"

    assert from_bool(True, ok, bad) == Success(1)
    assert calls == ["ok"]
    assert from_bool(False, ok, bad) == Failure("nope")
    assert calls == ["ok", "bad"]


# ═════════════════════════════════════════════════════════════════════════════
# Eager Argument Checks
# ═════════════════════════════════════════════════════════════════════════════

_ok = lambda v: Success(v)  # noqa: E731

_NULL_CASES: list[tuple[Callable[[Result[int, int]], object], str]] = [
    (lambda r: r.map(None), "mapper"),
    (lambda r: r.map_failure(None), "mapper"),
    (lambda r: r.map_either(None, _ok), "mapper"),
    (lambda r: r.map_either(_ok, None), "failure_mapper"),
    (lambda r: r.bind(None), "binding"),
    (lambda r: r.flat_map(None), "binding"),
    (lambda r: r.bind_failure(None), "binding"),
    (lambda r: r.bind_either(None, _ok), "binding"),
    (lambda r: r.bind_either(_ok, None), "failure_binding"),
    (lambda r: r.peek(None), "consumer"),
    (lambda r: r.peek_failure(None), "consumer"),
    (lambda r: r.peek_either(None, _ok), "consumer"),
    (lambda r: r.peek_either(_ok, None), "failure_consumer"),
    (lambda r: r.if_success(None), "consumer"),
    (lambda r: r.if_failure(None), "consumer"),
    (lambda r: r.recover(None), "recovery"),
    (lambda r: r.or_else(None), "failure_mapping"),
    (lambda r: r.defaults_to_lazy(None), "supplier"),
    (lambda r: r.any_match(None), "predicate"),
    (lambda r: r.all_match(None), "predicate"),
    (lambda r: r.either(None, _ok), "on_success"),
    (lambda r: r.either(_ok, None), "on_failure"),
    (lambda r: r.then(None), "fn"),
]


@pytest.mark.parametrize("receiver", [Success(42), Failure(42)], ids=["success", "failure"])
@pytest.mark.parametrize(("call", "param"), _NULL_CASES, ids=[f"{i}-{p}" for i, (_, p) in enumerate(_NULL_CASES)])
def test_none_argument_fails_fast(
    receiver: Result[int, int], call: Callable[[Result[int, int]], object], param: str
) -> None:
    with pytest.raises(NullArgumentError, match=f"^{param} must not be None$") as exc_info:
        call(receiver)
    assert exc_info.value.param == param
    assert isinstance(exc_info.value, TypeError)


def test_non_callable_argument_is_rejected() -> None:
    with pytest.raises(NullArgumentError, match="mapper must be callable, got int"):
        Failure("x").map(3)  # type: ignore[arg-type]


def test_constructors_check_arguments_eagerly() -> None:
    with pytest.raises(NullArgumentError, match="predicate"):
        from_predicate(1, None)  # type: ignore[arg-type]
    with pytest.raises(NullArgumentError, match="on_success"):
        from_bool(False, None, lambda: "x")  # type: ignore[arg-type]
    with pytest.raises(NullArgumentError, match="on_failure"):
        from_bool(True, lambda: 1, None)  # type: ignore[arg-type]


# ═════════════════════════════════════════════════════════════════════════════
# Railway-Oriented Pipelines
# ═════════════════════════════════════════════════════════════════════════════


def test_railway_error_path() -> None:
    def parse_int(s: str) -> Result[int, str]:
        return Success(int(s)) if s.lstrip("-").isdigit() else Failure(f"invalid: {s}")

    def validate_positive(n: int) -> Result[int, str]:
        return Success(n) if n > 0 else Failure("must be positive")

    assert Success("42").bind(parse_int).bind(validate_positive).map(lambda n: n * 2) == Success(84)
    assert Success("bad").bind(parse_int).bind(validate_positive) == Failure("invalid: bad")
    assert Success("-5").bind(parse_int).bind(validate_positive) == Failure("must be positive")


def test_fallback_chain() -> None:
    result = (
        Failure("primary unavailable")
        .bind_failure(lambda _: Failure("backup unavailable"))
        .bind_failure(lambda _: Success("cached data"))
    )
    assert result == Success("cached data")
