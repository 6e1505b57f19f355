"""N×N tic-tac-toe game state with move history and time travel."""

from tictactoe.components.cell import Cell
from tictactoe.components.timeline import Timeline
from tictactoe.systems.analyzer import MoveDiff, WinResult, diff, evaluate, generate_lines
from tictactoe.timeline import (
    apply_move,
    current_view,
    jump_to,
    new_game,
    render_timeline,
    toggle_order,
)
from tictactoe.views import CurrentView, TimelineEntry, status_text

__all__ = [
    "Cell",
    "CurrentView",
    "MoveDiff",
    "Timeline",
    "TimelineEntry",
    "WinResult",
    "apply_move",
    "current_view",
    "diff",
    "evaluate",
    "generate_lines",
    "jump_to",
    "new_game",
    "render_timeline",
    "status_text",
    "toggle_order",
]
