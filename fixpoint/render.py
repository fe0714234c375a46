"""
Text rendering for automaton histories and Turing machine tapes.

Colour output uses colorama escape codes; call colorama.just_fix_windows_console()
(or colorama.init) in the calling program if the terminal needs it.
"""

from __future__ import annotations

from colorama import Back, Fore, Style

from .automaton import offsets
from .turing import HALT, Tape

CELL_GLYPHS = {0: " ", 1: "█"}

CELL_STYLES = {
    0: Fore.LIGHTBLACK_EX,
    1: Fore.YELLOW + Style.BRIGHT,
}

HEAD_STYLE = Back.BLUE + Fore.WHITE + Style.BRIGHT
HALT_STYLE = Back.RED + Fore.WHITE + Style.BRIGHT


def _styled(text: str, style: str, color: bool) -> str:
    return f"{style}{text}{Style.RESET_ALL}" if color else text


def format_row(row: tuple, width: int | None = None, color: bool = False) -> str:
    """One automaton row, right-aligned to ``width`` cells."""
    if width is None:
        width = len(row)
    pad = " " * max(width - len(row), 0)
    cells = "".join(_styled(CELL_GLYPHS[b], CELL_STYLES[b], color) for b in row)
    return pad + cells


def format_history(history: tuple[tuple, ...], color: bool = False) -> str:
    """Spacetime picture of an ``iterate`` history, seed cells in one column."""
    shift = offsets(history)
    width = max((s + len(r) for s, r in zip(shift, history)), default=0)
    lines = []
    for s, row in zip(shift, history):
        line = format_row(row, s + len(row), color)
        lines.append(line + " " * (width - s - len(row)))
    return "\n".join(lines)


def format_tape(tape: Tape, state: int | None = None, color: bool = False) -> str:
    """Tape cells with the head bracketed, optionally prefixed by the state."""
    parts = [str(b) for b in tape.left]
    head = f"[{tape.head}]"
    if color:
        head = _styled(head, HALT_STYLE if state == HALT else HEAD_STYLE, True)
    parts.append(head)
    parts.extend(str(b) for b in tape.right)
    text = " ".join(parts)
    if state is None:
        return text
    label = "HALT" if state == HALT else f"q{state}"
    return f"{label}: {text}"
