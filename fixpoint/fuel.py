"""
Evaluation budget for the fixpoint engine.

Every derivation step burns one unit of fuel. When the ceiling is passed the
derivation stops with EvaluationBudgetExceeded instead of looping forever.
"""

from __future__ import annotations

import os

from .errors import EvaluationBudgetExceeded

# ---------------------------------------------------------------------------
# Ceilings (overridable per call, or process-wide via the environment)
# ---------------------------------------------------------------------------

MAX_FUEL = int(os.environ.get("FIXPOINT_MAX_FUEL", "1000000"))
MAX_STEPS = int(os.environ.get("FIXPOINT_MAX_STEPS", "100000"))


class Fuel:
    """Step counter with a hard ceiling.

    One Fuel is shared by every helper taking part in a single query, so
    nested derivations (multiply -> add -> concat) draw from the same tank.
    """

    def __init__(self, limit: int | None = None, what: str = "evaluation"):
        if limit is None:
            limit = MAX_FUEL
        if limit < 0:
            raise ValueError(f"Fuel limit must be non-negative, got {limit}")
        self.limit = limit
        self.what = what
        self.spent = 0

    @property
    def remaining(self) -> int:
        return self.limit - self.spent

    def burn(self, n: int = 1):
        self.spent += n
        if self.spent > self.limit:
            raise EvaluationBudgetExceeded(self.limit, self.spent, self.what)

    def __repr__(self) -> str:
        return f"Fuel({self.spent}/{self.limit})"


def tank(fuel: Fuel | None) -> Fuel:
    """Return ``fuel``, or a fresh default tank when none was given."""
    return fuel if fuel is not None else Fuel()
