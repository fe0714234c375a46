"""
Error kinds raised by the fixpoint engine.

Every error is deterministic given its inputs, so none of them is retried
internally. Each class also derives from the closest builtin so callers can
catch ``IndexError`` / ``ZeroDivisionError`` etc. without importing this module.
"""

from __future__ import annotations


class FixpointError(Exception):
    """Base class for all engine errors."""


class EmptySequence(FixpointError, IndexError):
    """Structural decomposition of an empty sequence."""

    def __init__(self, op: str = "decompose"):
        self.op = op
        super().__init__(f"{op}: sequence is empty")


class UndefinedTransition(FixpointError, LookupError):
    """A state/head combination with no table entry, or a malformed table."""

    def __init__(self, message: str, state: int | None = None,
                 bit: int | None = None):
        self.state = state
        self.bit = bit
        super().__init__(message)


class DivisionByZero(FixpointError, ZeroDivisionError):
    """Zero divisor passed to divide/divides."""

    def __init__(self, op: str):
        self.op = op
        super().__init__(f"{op}: divisor must be nonzero")


class EvaluationBudgetExceeded(FixpointError, RuntimeError):
    """Recursion or step ceiling reached before the derivation terminated.

    Retrying with a larger budget may succeed; retrying unchanged never will.
    """

    def __init__(self, limit: int, spent: int, what: str = "evaluation"):
        self.limit = limit
        self.spent = spent
        self.what = what
        super().__init__(f"{what} exceeded budget of {limit} (spent {spent})")
