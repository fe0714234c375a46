"""
fixpoint — a bounded recursive-derivation engine.

Unary arithmetic, an elementary cellular automaton (Rule 110) and a
two-symbol Turing machine, all evaluated under one fuel ceiling and one
error model.
"""

from .errors import (
    FixpointError, EmptySequence, UndefinedTransition,
    DivisionByZero, EvaluationBudgetExceeded,
)
from .fuel import Fuel, MAX_FUEL, MAX_STEPS
from .arithmetic import (
    pad, add, subtract, multiply, divide, divides,
    less_than, is_even, is_prime,
)
from .automaton import ElementaryRule, RULE_110, next_row, iterate, spacetime
from .turing import (
    HALT, EMPTY_TAPE, Tape, Direction, Transition, TuringMachine,
    make_table, run,
)
from .beavers import BUSY_BEAVER_3_2, BUSY_BEAVER_4_2

__all__ = [
    "FixpointError", "EmptySequence", "UndefinedTransition",
    "DivisionByZero", "EvaluationBudgetExceeded",
    "Fuel", "MAX_FUEL", "MAX_STEPS",
    "pad", "add", "subtract", "multiply", "divide", "divides",
    "less_than", "is_even", "is_prime",
    "ElementaryRule", "RULE_110", "next_row", "iterate", "spacetime",
    "HALT", "EMPTY_TAPE", "Tape", "Direction", "Transition", "TuringMachine",
    "make_table", "run",
    "BUSY_BEAVER_3_2", "BUSY_BEAVER_4_2",
]
