"""
Busy-beaver fixtures: published champion machines known to halt.

https://en.wikipedia.org/wiki/Busy_beaver
"""

from __future__ import annotations

from .turing import HALT, Tape

A, B, C, D = 0, 1, 2, 3

BUSY_BEAVER_3_2 = (
    {0: (1, "R", B), 1: (1, "R", HALT)},   # A
    {0: (0, "R", C), 1: (1, "R", B)},      # B
    {0: (1, "L", C), 1: (1, "L", A)},      # C
)

BUSY_BEAVER_4_2 = (
    {0: (1, "R", B), 1: (1, "L", B)},      # A
    {0: (1, "L", A), 1: (0, "L", C)},      # B
    {0: (1, "R", HALT), 1: (1, "L", D)},   # C
    {0: (1, "R", D), 1: (0, "R", A)},      # D
)

# name -> (table, halting tape, steps to halt)
FIXTURES: dict[str, tuple[tuple, Tape, int]] = {
    "bb-3-2": (BUSY_BEAVER_3_2, Tape((1, 1, 1), 1, (1, 1)), 14),
    "bb-4-2": (BUSY_BEAVER_4_2, Tape((1,), 0, (1,) * 12), 107),
}
