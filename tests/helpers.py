from __future__ import annotations

from typing import Iterable

from tictactoe.components.cell import Cell
from tictactoe.components.timeline import Snapshot, Timeline
from tictactoe.timeline import apply_move, new_game

_SYMBOLS = {".": Cell.EMPTY, "X": Cell.X, "O": Cell.O}


def snapshot_from(rows: str) -> Snapshot:
    """Build a snapshot from a whitespace separated picture such as "XO. .X. ..O"."""
    return tuple(_SYMBOLS[ch] for ch in rows if not ch.isspace())


def play(moves: Iterable[int], side: int = 3, timeline: Timeline | None = None) -> Timeline:
    """Apply moves in order, failing loudly if any of them is ignored."""
    if timeline is None:
        timeline = new_game(side)
    for index in moves:
        assert apply_move(timeline, index), f"move {index} was ignored"
    return timeline
