"""
Verification suite for the sequence algebra and unary arithmetic.

Checks every operation against Python's native integer arithmetic.
"""

from __future__ import annotations

import sys

from fixpoint.errors import (
    DivisionByZero, EmptySequence, EvaluationBudgetExceeded, FixpointError,
)
from fixpoint.fuel import Fuel
from fixpoint.sequence import (
    append, concat, head_or, head_tail, init_last, last_or, length, pop, prepend,
)
from fixpoint.arithmetic import (
    add, divide, divides, is_even, is_prime, less_than, multiply, pad, subtract,
)

SMALL = range(0, 13)


def _naive_prime(n: int) -> bool:
    return n >= 2 and all(n % d for d in range(2, int(n ** 0.5) + 1))


# ---------------------------------------------------------------------------
# Sequence algebra
# ---------------------------------------------------------------------------

def test_sequence_primitives():
    s = (1, 0, 1)
    assert length(s) == 3
    assert append(s, 0) == (1, 0, 1, 0)
    assert prepend(s, 0) == (0, 1, 0, 1)
    assert head_tail(s) == (1, (0, 1))
    assert init_last(s) == ((1, 0), 1)
    assert concat((1, 1), (0, 1)) == (1, 1, 0, 1)
    assert concat((), ()) == ()
    # inputs untouched
    assert s == (1, 0, 1)


def test_empty_decomposition():
    for op in (head_tail, init_last):
        try:
            op(())
        except EmptySequence as e:
            assert isinstance(e, IndexError)
            assert isinstance(e, FixpointError)
        else:
            raise AssertionError(f"{op.__name__}(()) should raise EmptySequence")
    assert pop(()) == ()
    assert pop((1, 0)) == (1,)
    assert head_or((), 0) == (0, ())
    assert last_or((), 0) == ((), 0)
    assert last_or((1, 1, 0), 0) == ((1, 1), 0)


def test_concat_burns_fuel_per_element():
    fuel = Fuel(10)
    concat((1,) * 50, (0,) * 4, fuel)
    assert fuel.spent == 4


def test_pad_length_roundtrip():
    for s in [(), (1,), (0, 1, 1), (1,) * 17]:
        p = pad(length(s))
        assert length(p) == length(s)
    assert pad(0) == ()


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def test_add():
    for a in SMALL:
        for b in SMALL:
            assert add(a, b) == a + b
            assert add(a, b) == add(b, a)
    assert add(5, 17) == 22
    assert add(add(2, 3), 4) == add(2, add(3, 4))


def test_subtract_floors_at_zero():
    for a in SMALL:
        for b in SMALL:
            assert subtract(a, b) == max(a - b, 0)
        assert subtract(a, 0) == a
        assert subtract(0, a) == 0
    assert subtract(15, 8) == 7
    assert subtract(2, 4) == 0


def test_less_than():
    for a in SMALL:
        for b in SMALL:
            assert less_than(a, b) == (a < b)


def test_multiply():
    for a in SMALL:
        for b in SMALL:
            assert multiply(a, b) == a * b
        assert multiply(a, 0) == 0
        assert multiply(0, a) == 0
    assert multiply(7, 13) == 91
    assert multiply(1, 1) == 1


def test_divide():
    for a in range(0, 25):
        for b in range(1, 8):
            assert divide(a, b) == a // b, (a, b)
    assert divide(21, 3) == 7
    assert divide(20, 3) == 6


def test_divide_by_zero():
    for op in (divide, divides):
        try:
            op(5, 0) if op is divide else op(0, 5)
        except DivisionByZero as e:
            assert isinstance(e, ZeroDivisionError)
        else:
            raise AssertionError(f"{op.__name__} should reject a zero divisor")


def test_divides():
    assert divides(3, 21) is True
    assert divides(3, 22) is False
    assert divides(7, 3) is False
    assert divides(4, 4) is True
    assert divides(5, 0) is True
    for a in range(1, 8):
        for b in range(0, 30):
            assert divides(a, b) == (b % a == 0), (a, b)
    assert is_even(482) is True
    assert is_even(7) is False


def test_is_prime():
    expected = {0: False, 1: False, 2: True, 3: True, 7: True, 91: False, 257: True}
    for n, want in expected.items():
        assert is_prime(n) is want, n
    for n in range(0, 80):
        assert is_prime(n) == _naive_prime(n), n


def test_rejects_non_naturals():
    for bad in (-1, -10):
        try:
            add(bad, 1)
        except ValueError:
            pass
        else:
            raise AssertionError("negative operand should be rejected")
    for bad in (1.5, "3", True):
        try:
            multiply(bad, 2)
        except TypeError:
            pass
        else:
            raise AssertionError(f"{bad!r} should be rejected")


def test_fuel_exhaustion():
    try:
        multiply(10, 10, fuel=Fuel(5))
    except EvaluationBudgetExceeded as e:
        assert e.limit == 5
        assert e.spent > 5
    else:
        raise AssertionError("multiply should run out of fuel")

    fuel = Fuel(1000)
    assert add(3, 4, fuel) == 7
    assert fuel.spent == 3 + 4 + 4
    assert fuel.remaining == 1000 - fuel.spent

    try:
        Fuel(-1)
    except ValueError:
        pass
    else:
        raise AssertionError("negative fuel limit should be rejected")


def test_shared_fuel_is_cumulative():
    fuel = Fuel(1_000_000)
    is_prime(97, fuel)
    first = fuel.spent
    is_prime(97, fuel)
    assert fuel.spent == 2 * first


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

TESTS = [
    test_sequence_primitives, test_empty_decomposition,
    test_concat_burns_fuel_per_element, test_pad_length_roundtrip,
    test_add, test_subtract_floors_at_zero, test_less_than, test_multiply,
    test_divide, test_divide_by_zero, test_divides, test_is_prime,
    test_rejects_non_naturals, test_fuel_exhaustion,
    test_shared_fuel_is_cumulative,
]


def main():
    print("=" * 60)
    print("Unary Arithmetic — Verification Suite")
    print("=" * 60)

    failed = 0
    for test in TESTS:
        try:
            test()
        except AssertionError as e:
            failed += 1
            print(f"  FAIL: {test.__name__} {e}")
        else:
            print(f"  ok:   {test.__name__}")

    print("\n" + "=" * 60)
    if failed:
        print(f"{failed} TEST(S) FAILED")
        sys.exit(1)
    print("ALL TESTS PASSED")


if __name__ == "__main__":
    main()
