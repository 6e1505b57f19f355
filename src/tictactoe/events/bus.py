from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so lambdas and unbound helpers keep receiving events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT
# ============================================================================
EVENT_CELL_CLICK = "cell_click"              # payload: index=int
EVENT_HISTORY_JUMP = "history_jump"          # payload: step=int
EVENT_ORDER_TOGGLE = "order_toggle"          # payload: None
EVENT_NEW_GAME_REQUEST = "new_game_request"  # payload: side=int|None


# ============================================================================
# MOVES & OUTCOME
# ============================================================================
EVENT_MOVE_APPLIED = "move_applied"      # payload: index=int, value=Cell, step=int
EVENT_MOVE_IGNORED = "move_ignored"      # payload: index=int, reason=str ("decided"|"occupied")
EVENT_GAME_DECIDED = "game_decided"      # payload: winner=Cell|None, cells=frozenset[int], step=int


# ============================================================================
# HISTORY & DISPLAY
# ============================================================================
EVENT_GAME_STARTED = "game_started"          # payload: side=int
EVENT_STEP_CHANGED = "step_changed"          # payload: previous_step=int, step=int, next_mover=Cell
EVENT_ORDER_CHANGED = "order_changed"        # payload: ascending=bool
EVENT_VIEW_INVALIDATED = "view_invalidated"  # payload: reason=str
