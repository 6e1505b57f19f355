"""Commands and queries over a Timeline component.

Commands mutate the exclusively owned Timeline in place. Queries recompute
their view models on every call so they always reflect the latest jump or
order toggle.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from tictactoe.components.cell import Cell
from tictactoe.components.timeline import Timeline
from tictactoe.constants import GAME_START_LABEL, IGNORED_DECIDED, IGNORED_OCCUPIED, MOVE_LABEL
from tictactoe.systems.analyzer import diff, evaluate
from tictactoe.views import CurrentView, TimelineEntry

logger = logging.getLogger(__name__)


def new_game(side: int) -> Timeline:
    if isinstance(side, bool) or not isinstance(side, int) or side <= 0:
        raise ValueError(f"Board side must be a positive integer, got {side!r}")
    return Timeline(side=side)


def move_rejection(timeline: Timeline, index: int) -> Optional[str]:
    """Return why a move at ``index`` would be ignored, or None if it is playable."""
    board = timeline.current
    if not 0 <= index < len(board):
        raise IndexError(f"Cell {index} is outside a board of {len(board)} cells")
    if evaluate(board).decided:
        return IGNORED_DECIDED
    if board[index] is not Cell.EMPTY:
        return IGNORED_OCCUPIED
    return None


def apply_move(timeline: Timeline, index: int) -> bool:
    """Place the next mover's marker at ``index``; False when the move is ignored."""
    reason = move_rejection(timeline, index)
    if reason is not None:
        logger.debug("Ignoring move at %d (%s) on step %d", index, reason, timeline.current_step)
        return False
    mover = timeline.next_mover
    squares = list(timeline.current)
    squares[index] = mover
    # Playing after a jump discards the abandoned future.
    del timeline.history[timeline.current_step + 1:]
    timeline.history.append(tuple(squares))
    timeline.current_step = len(timeline.history) - 1
    logger.debug("%s played %d, now at step %d", mover, index, timeline.current_step)
    return True


def jump_to(timeline: Timeline, step: int) -> None:
    if not 0 <= step < len(timeline.history):
        raise IndexError(f"Step {step} is outside history of {len(timeline.history)} entries")
    timeline.current_step = step
    logger.debug("Jumped to step %d, %s to move", step, timeline.next_mover)


def toggle_order(timeline: Timeline) -> None:
    timeline.display_ascending = not timeline.display_ascending


def current_view(timeline: Timeline) -> CurrentView:
    board = timeline.current
    return CurrentView(
        side=timeline.side,
        board=board,
        result=evaluate(board),
        next_mover=timeline.next_mover,
    )


def _label(presentation_index: int) -> str:
    if presentation_index == 0:
        return GAME_START_LABEL
    return MOVE_LABEL.format(step=presentation_index)


def render_timeline(timeline: Timeline) -> List[TimelineEntry]:
    """Describe every history entry in the selected display order.

    Descending rows keep their absolute step as presentation_index and diff
    against the following row, which is their predecessor in play order, so
    last_move is the same whichever way the list is shown.
    """
    count = len(timeline.history)
    entries: List[TimelineEntry] = []
    if timeline.display_ascending:
        ordered = timeline.history
        current_position = timeline.current_step
    else:
        ordered = timeline.history[::-1]
        current_position = count - 1 - timeline.current_step

    for position, snapshot in enumerate(ordered):
        last_move = None
        if timeline.display_ascending:
            presentation_index = position
            if position > 0:
                changes = diff(snapshot, ordered[position - 1])
                last_move = changes[0] if changes else None
        else:
            presentation_index = count - 1 - position
            if position < count - 1:
                changes = diff(snapshot, ordered[position + 1])
                last_move = changes[0] if changes else None
        entries.append(
            TimelineEntry(
                presentation_index=presentation_index,
                label=_label(presentation_index),
                last_move=last_move,
                is_current=position == current_position,
            )
        )
    return entries
