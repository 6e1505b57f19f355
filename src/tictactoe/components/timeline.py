from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from tictactoe.components.cell import Cell

Snapshot = Tuple[Cell, ...]


def empty_snapshot(side: int) -> Snapshot:
    return (Cell.EMPTY,) * (side * side)


@dataclass(slots=True)
class Timeline:
    """Ordered history of board snapshots plus the playback cursor.

    history[0] is always the empty board; each later snapshot differs from its
    predecessor by exactly one square. next_mover is derived from the cursor
    parity and never stored.
    """
    side: int
    history: List[Snapshot] = field(default_factory=list)
    current_step: int = 0
    display_ascending: bool = True

    def __post_init__(self):
        if not self.history:
            self.history.append(empty_snapshot(self.side))

    @property
    def next_mover(self) -> Cell:
        return Cell.X if self.current_step % 2 == 0 else Cell.O

    @property
    def current(self) -> Snapshot:
        return self.history[self.current_step]

    def __len__(self) -> int:
        return len(self.history)
