"""
Two-symbol Turing machine simulator.

The tape is (left, head, right): ``left[-1]`` is the cell just left of the
head and ``right[0]`` the cell just right of it. Everything beyond the
recorded cells is 0, so the tape is extended on demand by synthesizing zeros
at either boundary.

States are identified by their index in the state table; HALT (-1) is never
an entry. Every state must define a transition for both head values.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .errors import EvaluationBudgetExceeded, UndefinedTransition
from .fuel import MAX_STEPS, Fuel
from .sequence import append, head_or, last_or, prepend

HALT = -1
BITS = (0, 1)


# ---------------------------------------------------------------------------
# Tape
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Tape:
    left: tuple[int, ...]
    head: int
    right: tuple[int, ...]

    @property
    def position(self) -> int:
        return len(self.left)

    def cells(self) -> tuple[int, ...]:
        return self.left + (self.head,) + self.right

    def ones(self) -> int:
        return sum(self.cells())


EMPTY_TAPE = Tape((), 0, ())


def write_and_move_left(tape: Tape, to_write: int) -> Tape:
    left, head = last_or(tape.left, 0)
    return Tape(left, head, prepend(tape.right, to_write))


def write_and_move_right(tape: Tape, to_write: int) -> Tape:
    head, right = head_or(tape.right, 0)
    return Tape(append(tape.left, to_write), head, right)


# ---------------------------------------------------------------------------
# State table
# ---------------------------------------------------------------------------

class Direction(enum.Enum):
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def parse(cls, value: Any) -> "Direction":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in ("L", "LEFT"):
                return cls.LEFT
            if key in ("R", "RIGHT"):
                return cls.RIGHT
        raise ValueError(f"Not a direction: {value!r}")


@dataclass(frozen=True)
class Transition:
    write: int
    move: Direction
    next_state: int


State = Mapping[int, Transition]
StateTable = tuple[State, ...]


def _transition(raw: Any, state: int, bit: int, num_states: int) -> Transition:
    if isinstance(raw, Transition):
        write, move, nxt = raw.write, raw.move, raw.next_state
    else:
        try:
            write, move, nxt = raw
        except (TypeError, ValueError):
            raise UndefinedTransition(
                f"state {state}, bit {bit}: expected (write, move, next), got {raw!r}",
                state, bit) from None
    if isinstance(write, bool) or not isinstance(write, int) or write not in BITS:
        raise UndefinedTransition(
            f"state {state}, bit {bit}: cannot write {write!r}", state, bit)
    try:
        move = Direction.parse(move)
    except ValueError as e:
        raise UndefinedTransition(f"state {state}, bit {bit}: {e}", state, bit) from None
    if isinstance(nxt, bool) or not isinstance(nxt, int) \
            or (nxt != HALT and not 0 <= nxt < num_states):
        raise UndefinedTransition(
            f"state {state}, bit {bit}: next state {nxt!r} is not in "
            f"0..{num_states - 1} or HALT", state, bit)
    return Transition(write, move, nxt)


def make_table(states: Sequence[Any]) -> StateTable:
    """
    Normalize literal state data into a validated StateTable.

    Each state is either a mapping ``{0: (write, move, next), 1: (...)}`` or a
    pair indexed by head value. Raises UndefinedTransition if any state is
    missing a branch or points outside the table.
    """
    num_states = len(states)
    if num_states == 0:
        raise UndefinedTransition("state table is empty; state 0 is undefined", 0)
    table = []
    for i, raw_state in enumerate(states):
        entry: dict[int, Transition] = {}
        for bit in BITS:
            try:
                raw = raw_state[bit]
            except (KeyError, IndexError, TypeError):
                raise UndefinedTransition(
                    f"state {i} has no transition for bit {bit}", i, bit) from None
            entry[bit] = _transition(raw, i, bit, num_states)
        table.append(entry)
    return tuple(table)


def lookup(table: StateTable, state: int, bit: int) -> Transition:
    if not 0 <= state < len(table):
        raise UndefinedTransition(f"state {state} is not in the table", state, bit)
    try:
        t = table[state][bit]
    except (KeyError, IndexError, TypeError):
        raise UndefinedTransition(
            f"state {state} has no transition for bit {bit}", state, bit) from None
    if not isinstance(t, Transition):
        raise UndefinedTransition(
            f"state {state}, bit {bit}: unvalidated entry {t!r}; "
            "build the table with make_table", state, bit)
    return t


def as_table(table: Sequence[Any]) -> StateTable:
    """Return ``table`` unchanged if already normalized, else make_table(table)."""
    if isinstance(table, tuple) and all(
            isinstance(s, Mapping) and all(isinstance(t, Transition) for t in s.values())
            for s in table):
        return table
    return make_table(table)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def _apply(tape: Tape, t: Transition) -> Tape:
    if t.move is Direction.LEFT:
        return write_and_move_left(tape, t.write)
    return write_and_move_right(tape, t.write)


def transition(table: Sequence[Any], tape: Tape, state: int) -> tuple[Tape, int]:
    """Apply a single transition; returns (tape, next_state)."""
    t = lookup(as_table(table), state, tape.head)
    return _apply(tape, t), t.next_state


def step(table: Sequence[Any], tape: Tape, state: int,
         fuel: Fuel | None = None) -> Tape:
    """Run transitions from ``state`` until HALT; returns the final tape."""
    table = as_table(table)
    if fuel is None:
        fuel = Fuel(MAX_STEPS, what="turing machine")
    while state != HALT:
        fuel.burn()
        t = lookup(table, state, tape.head)
        tape, state = _apply(tape, t), t.next_state
    return tape


def run(table: Sequence[Any], max_steps: int | None = None) -> Tape:
    """Run ``table`` from the empty tape in state 0 until HALT."""
    return TuringMachine(table).run(max_steps)


# ---------------------------------------------------------------------------
# Machine
# ---------------------------------------------------------------------------

class TuringMachine:
    """Stepping driver with counters, for inspection and tracing."""

    def __init__(self, table: Sequence[Any], tape: Tape = EMPTY_TAPE,
                 state: int = 0):
        self.table = make_table(table)
        self.tape = tape
        self.state = state

        # --- Counters ---
        self.steps = 0
        self.left_moves = 0
        self.right_moves = 0
        self.extent = len(tape.cells())

    @property
    def halted(self) -> bool:
        return self.state == HALT

    def tick(self) -> bool:
        """One transition. Returns True if still running."""
        if self.halted:
            return False
        t = lookup(self.table, self.state, self.tape.head)
        self.tape = _apply(self.tape, t)
        self.state = t.next_state
        self.steps += 1
        if t.move is Direction.LEFT:
            self.left_moves += 1
        else:
            self.right_moves += 1
        self.extent = max(self.extent, len(self.tape.cells()))
        return not self.halted

    def run(self, max_steps: int | None = None, verbose: bool = False) -> Tape:
        """
        Run until HALT.

        Raises EvaluationBudgetExceeded if HALT is not reached within
        ``max_steps`` transitions (counting the one into HALT).
        """
        if max_steps is None:
            max_steps = MAX_STEPS
        if verbose:
            from .render import format_tape
        budget = self.steps + max_steps
        while not self.halted:
            if self.steps >= budget:
                raise EvaluationBudgetExceeded(max_steps, self.steps + 1,
                                               "turing machine")
            self.tick()
            if verbose:
                print(f"step {self.steps:5d}  {format_tape(self.tape, self.state)}",
                      file=sys.stderr, flush=True)
        return self.tape

    def stats(self) -> dict[str, int]:
        return {
            "steps": self.steps,
            "left_moves": self.left_moves,
            "right_moves": self.right_moves,
            "extent": self.extent,
            "ones": self.tape.ones(),
        }
