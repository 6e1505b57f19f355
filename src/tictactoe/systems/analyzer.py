"""Pure helpers that inspect board snapshots.

Nothing here touches the world or the event bus; systems and the timeline call
these to decide wins, draws and what changed between two snapshots.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from math import isqrt
from typing import FrozenSet, List, Optional, Sequence, Tuple

from tictactoe.components.cell import Cell

Line = Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class WinResult:
    decided: bool
    winner: Optional[Cell] = None
    cells: FrozenSet[int] = frozenset()


UNDECIDED = WinResult(decided=False)
DRAW = WinResult(decided=True)


@dataclass(frozen=True, slots=True)
class MoveDiff:
    """One square that differs between two snapshots, with its new value."""
    index: int
    col: int
    row: int
    value: Cell

    @property
    def pos(self) -> str:
        return f"({self.col},{self.row})"


def side_for(cell_count: int) -> int:
    if cell_count <= 0:
        raise ValueError(f"Board must have at least one cell, got {cell_count}")
    side = isqrt(cell_count)
    if side * side != cell_count:
        raise ValueError(f"Board of {cell_count} cells is not square")
    return side


@lru_cache(maxsize=None)
def generate_lines(cell_count: int) -> Tuple[Line, ...]:
    """Return every candidate winning line: rows, columns, then both diagonals."""
    side = side_for(cell_count)
    rows = [tuple(i * side + j for j in range(side)) for i in range(side)]
    cols = [tuple(i + j * side for j in range(side)) for i in range(side)]
    diagonal = tuple(i * side + i for i in range(side))
    anti_diagonal = tuple(i * side + (side - 1 - i) for i in range(side))
    return tuple(rows + cols + [diagonal, anti_diagonal])


def evaluate(snapshot: Sequence[Cell]) -> WinResult:
    for line in generate_lines(len(snapshot)):
        first = snapshot[line[0]]
        if first is Cell.EMPTY:
            continue
        if all(snapshot[i] is first for i in line):
            return WinResult(decided=True, winner=first, cells=frozenset(line))
    if all(cell is not Cell.EMPTY for cell in snapshot):
        return DRAW
    return UNDECIDED


def diff(current: Sequence[Cell], previous: Sequence[Cell]) -> List[MoveDiff]:
    """List squares whose value differs, in ascending index order.

    Each entry carries the value found in ``current``.
    """
    if len(current) != len(previous):
        raise ValueError(
            f"Cannot diff snapshots of different sizes ({len(current)} vs {len(previous)})"
        )
    side = side_for(len(current))
    changes: List[MoveDiff] = []
    for index, (new, old) in enumerate(zip(current, previous)):
        if new is not old:
            changes.append(MoveDiff(index=index, col=index % side, row=index // side, value=new))
    return changes
