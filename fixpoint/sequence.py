"""
Sequence algebra — the primitives every other component is built from.

Sequences are plain tuples. Nothing here mutates its input; every operation
returns a fresh tuple.
"""

from __future__ import annotations

from typing import Any

from .errors import EmptySequence
from .fuel import Fuel


def length(s: tuple) -> int:
    return len(s)


def append(s: tuple, x: Any) -> tuple:
    return s + (x,)


def prepend(s: tuple, x: Any) -> tuple:
    return (x,) + s


def head_tail(s: tuple) -> tuple[Any, tuple]:
    """Split ``s`` into its first element and the rest."""
    if not s:
        raise EmptySequence("head_tail")
    return s[0], s[1:]


def init_last(s: tuple) -> tuple[tuple, Any]:
    """Split ``s`` into everything but the last element, and the last element."""
    if not s:
        raise EmptySequence("init_last")
    return s[:-1], s[-1]


def pop(s: tuple) -> tuple:
    """Drop the last element; popping ``()`` gives ``()``."""
    return s[:-1]


def head_or(s: tuple, default: Any) -> tuple[Any, tuple]:
    """head_tail, synthesizing ``default`` for an empty sequence."""
    if not s:
        return default, ()
    return head_tail(s)


def last_or(s: tuple, default: Any) -> tuple[tuple, Any]:
    """init_last, synthesizing ``default`` for an empty sequence."""
    if not s:
        return (), default
    return init_last(s)


def concat(a: tuple, b: tuple, fuel: Fuel | None = None) -> tuple:
    """
    Concatenate ``a`` and ``b``.

    Moves b's head onto the end of a one element at a time, burning one unit
    of fuel per element moved.
    """
    out = list(a)
    for x in b:
        if fuel is not None:
            fuel.burn()
        out.append(x)
    return tuple(out)
