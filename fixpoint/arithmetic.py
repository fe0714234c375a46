"""
Unary arithmetic — naturals as sequence lengths.

A number N is represented by pad(N), a sequence of N placeholder cells.
Addition is concatenation, subtraction is repeated popping, and everything
else is built from those two by counting loop iterations.

Negative results are not representable: subtract floors at zero (2 - 4 = 0).
All operations take an optional ``fuel`` tank; one is created per call when
omitted.
"""

from __future__ import annotations

from .errors import DivisionByZero
from .fuel import Fuel, tank
from .sequence import append, concat, length, pop


def check_natural(op: str, n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{op}: expected a natural number, got {n!r}")
    if n < 0:
        raise ValueError(f"{op}: negative numbers are not representable, got {n}")
    return n


# ---------------------------------------------------------------------------
# Representation
# ---------------------------------------------------------------------------

def pad(n: int, fuel: Fuel | None = None) -> tuple:
    """Sequence of length exactly ``n``, grown one append at a time."""
    check_natural("pad", n)
    fuel = tank(fuel)
    s: tuple = ()
    while length(s) != n:
        fuel.burn()
        s = append(s, 0)
    return s


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def add(a: int, b: int, fuel: Fuel | None = None) -> int:
    check_natural("add", a)
    check_natural("add", b)
    fuel = tank(fuel)
    return length(concat(pad(a, fuel), pad(b, fuel), fuel))


def subtract(a: int, b: int, fuel: Fuel | None = None) -> int:
    """``max(a - b, 0)``: pop pad(a) exactly b times; pops past empty do nothing."""
    check_natural("subtract", a)
    check_natural("subtract", b)
    fuel = tank(fuel)
    s = pad(a, fuel)
    counter = 0
    while counter != b:
        fuel.burn()
        s = pop(s)
        counter += 1
    return length(s)


def less_than(a: int, b: int, fuel: Fuel | None = None) -> bool:
    return subtract(b, a, fuel) != 0


def multiply(a: int, b: int, fuel: Fuel | None = None) -> int:
    check_natural("multiply", a)
    check_natural("multiply", b)
    if a == 0 or b == 0:
        return 0
    fuel = tank(fuel)
    # accumulator starts at one contribution of a, so count from 1
    total = a
    counter = 1
    while counter != b:
        fuel.burn()
        total = add(a, total, fuel)
        counter += 1
    return total


def divide(a: int, b: int, fuel: Fuel | None = None) -> int:
    """Floor division by repeated subtraction."""
    check_natural("divide", a)
    check_natural("divide", b)
    if b == 0:
        raise DivisionByZero("divide")
    fuel = tank(fuel)
    remainder = a
    count = 0
    while True:
        fuel.burn()
        if remainder == b:
            return count + 1
        if less_than(remainder, b, fuel):
            return count
        remainder = subtract(remainder, b, fuel)
        count += 1


def divides(a: int, b: int, fuel: Fuel | None = None) -> bool:
    """True iff ``a`` evenly divides ``b``."""
    check_natural("divides", a)
    check_natural("divides", b)
    if a == 0:
        raise DivisionByZero("divides")
    if b == 0:
        return True
    fuel = tank(fuel)
    remainder = b
    while True:
        fuel.burn()
        if remainder == a:
            return True
        if less_than(remainder, a, fuel):
            return False
        remainder = subtract(remainder, a, fuel)


def is_even(n: int, fuel: Fuel | None = None) -> bool:
    return divides(2, n, fuel)


def is_prime(n: int, fuel: Fuel | None = None) -> bool:
    """
    Primality by trial division.

    Special-cases 0..3 and even numbers, then tries every odd divisor d
    starting at 3 while d*d <= n.
    """
    check_natural("is_prime", n)
    if n in (0, 1):
        return False
    if n in (2, 3):
        return True
    fuel = tank(fuel)
    if is_even(n, fuel):
        return False
    d = 3
    while True:
        fuel.burn()
        if less_than(n, multiply(d, d, fuel), fuel):
            return True
        if divides(d, n, fuel):
            return False
        d = add(d, 2, fuel)
