"""
Elementary cellular automaton — Rule 110 by default.

A row is a tuple of bits. Cells beyond the recorded row are implicitly 0.
Rule 110 only grows to the left, so each generation gains exactly one cell
on the left edge; the existing cells keep their positions.
"""

from __future__ import annotations

import numpy as np

from .arithmetic import check_natural
from .fuel import Fuel, tank
from .sequence import append, head_tail, prepend


def check_bits(op: str, row) -> tuple:
    bad = [b for b in row if isinstance(b, bool) or b not in (0, 1)]
    if bad:
        raise ValueError(f"{op}: row cells must be bits, got {bad[0]!r}")
    return row

# Neighbourhoods in Wolfram order: bit i of the rule number is the output
# for the neighbourhood whose binary value is i.
NEIGHBOURHOODS = [
    (1, 1, 1), (1, 1, 0), (1, 0, 1), (1, 0, 0),
    (0, 1, 1), (0, 1, 0), (0, 0, 1), (0, 0, 0),
]


class ElementaryRule:
    """Fixed 8-entry lookup table for a Wolfram elementary rule."""

    def __init__(self, number: int):
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"Rule number must be an int, got {number!r}")
        if not 0 <= number <= 255:
            raise ValueError(f"Rule number must be in 0..255, got {number!r}")
        if number & 1:
            # 000 -> 1 would flip the implicit zero background
            raise ValueError(f"Rule {number} maps 000 to 1; "
                             "an infinite zero background is not representable")
        self.number = number
        self.table: dict[tuple[int, int, int], int] = {
            n: (number >> (n[0] << 2 | n[1] << 1 | n[2])) & 1
            for n in NEIGHBOURHOODS
        }

    @property
    def grows_left(self) -> bool:
        return self.table[(0, 0, 1)] == 1

    @property
    def grows_right(self) -> bool:
        return self.table[(1, 0, 0)] == 1

    def __call__(self, prev: int, cur: int, nxt: int) -> int:
        try:
            return self.table[(prev, cur, nxt)]
        except KeyError:
            raise ValueError(f"Neighbourhood cells must be bits, "
                             f"got {(prev, cur, nxt)!r}") from None

    def __repr__(self) -> str:
        return f"ElementaryRule({self.number})"


RULE_110 = ElementaryRule(110)


def apply(prev: int, cur: int, nxt: int, rule: ElementaryRule = RULE_110) -> int:
    return rule(prev, cur, nxt)


def row_iterator(prev: int, cur: int, rest: tuple,
                 rule: ElementaryRule = RULE_110,
                 fuel: Fuel | None = None) -> tuple:
    """
    New value for ``cur`` and every cell of ``rest``, left to right.

    Each cell is computed from its (previous, current, next) triple; the cell
    past the right edge is taken as 0.
    """
    fuel = tank(fuel)
    out: tuple = ()
    while rest:
        fuel.burn()
        nxt, rest = head_tail(rest)
        out = append(out, rule(prev, cur, nxt))
        prev, cur = cur, nxt
    fuel.burn()
    return append(out, rule(prev, cur, 0))


def next_row(row: tuple, rule: ElementaryRule = RULE_110,
             fuel: Fuel | None = None) -> tuple:
    """Next generation: one new cell on the left, then each existing cell."""
    check_bits("next_row", row)
    if not row:
        return ()
    fuel = tank(fuel)
    first, tail = head_tail(row)
    out = prepend(row_iterator(0, first, tail, rule, fuel), rule(0, 0, first))
    if rule.grows_right:
        out = append(out, rule(row[-1], 0, 0))
    return out


def iterate(start: tuple, n: int, rule: ElementaryRule = RULE_110,
            fuel: Fuel | None = None) -> tuple[tuple, ...]:
    """History of ``n`` generations, oldest first, beginning with ``start``."""
    check_natural("iterate", n)
    check_bits("iterate", start)
    fuel = tank(fuel)
    row = tuple(start)
    history: tuple = ()
    while len(history) != n:
        fuel.burn()
        history = append(history, row)
        row = next_row(row, rule, fuel)
    return history


def offsets(history: tuple[tuple, ...]) -> list[int]:
    """
    Left offset of each row of an ``iterate`` history.

    next_row adds exactly one cell on the left per generation, so the seed's
    first cell sits at index i of row i; shifting row i right by
    ``len(history) - 1 - i`` puts every seed cell in one column, whichever
    way the rule grows.
    """
    last = len(history) - 1
    return [last - i for i in range(len(history))]


def spacetime(history: tuple[tuple, ...]) -> np.ndarray:
    """2-D array of a history (generations x cells), seed cells in one column."""
    shift = offsets(history)
    width = max((s + len(r) for s, r in zip(shift, history)), default=0)
    grid = np.zeros((len(history), width), dtype=np.uint8)
    for i, row in enumerate(history):
        if row:
            grid[i, shift[i]:shift[i] + len(row)] = row
    return grid
