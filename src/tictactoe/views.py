"""Render-ready view models handed to the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from tictactoe.components.cell import Cell
from tictactoe.components.timeline import Snapshot, Timeline
from tictactoe.constants import (
    DRAW_STATUS,
    NEXT_PLAYER_STATUS,
    SORT_DECREASING_LABEL,
    SORT_INCREASING_LABEL,
    WINNER_STATUS,
)
from tictactoe.systems.analyzer import MoveDiff, WinResult


@dataclass(frozen=True, slots=True)
class CurrentView:
    """The board at the playback cursor and its outcome."""
    side: int
    board: Snapshot
    result: WinResult
    next_mover: Cell

    def is_highlighted(self, index: int) -> bool:
        return index in self.result.cells

    def rows(self) -> List[Snapshot]:
        return [self.board[r * self.side:(r + 1) * self.side] for r in range(self.side)]


@dataclass(frozen=True, slots=True)
class TimelineEntry:
    """One row of the history list.

    presentation_index is the absolute step the row jumps to, whichever order
    the list is displayed in.
    """
    presentation_index: int
    label: str
    last_move: Optional[MoveDiff]
    is_current: bool

    @property
    def move_text(self) -> str:
        if self.last_move is None:
            return ""
        return f"[{self.last_move.value} at {self.last_move.pos}]"


def status_text(view: CurrentView) -> str:
    if view.result.decided:
        if view.result.winner is not None:
            return WINNER_STATUS.format(winner=view.result.winner)
        return DRAW_STATUS
    return NEXT_PLAYER_STATUS.format(player=view.next_mover)


def order_toggle_label(timeline: Timeline) -> str:
    return SORT_DECREASING_LABEL if timeline.display_ascending else SORT_INCREASING_LABEL


def list_start(timeline: Timeline, entries: Sequence[TimelineEntry]) -> int:
    """Number shown next to the first row of an ordered history list."""
    return 0 if timeline.display_ascending else len(entries) - 1
