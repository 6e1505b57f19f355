import logging
from typing import Optional

from esper import World

from tictactoe.components.timeline import Timeline
from tictactoe.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_GAME_DECIDED,
    EVENT_GAME_STARTED,
    EVENT_HISTORY_JUMP,
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_IGNORED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_ORDER_CHANGED,
    EVENT_ORDER_TOGGLE,
    EVENT_STEP_CHANGED,
    EVENT_VIEW_INVALIDATED,
)
from tictactoe.systems.analyzer import evaluate
from tictactoe.systems.game_utils import get_or_create_game, reset_game
from tictactoe.timeline import (
    apply_move,
    current_view,
    jump_to,
    move_rejection,
    render_timeline,
    toggle_order,
)

logger = logging.getLogger(__name__)


class TimelineSystem:
    """Routes presentation input to the game's Timeline and announces the results.

    Flow:
      - EVENT_CELL_CLICK plays the next mover's marker, or reports why it was ignored.
      - EVENT_HISTORY_JUMP moves the playback cursor.
      - EVENT_ORDER_TOGGLE flips the history display order.
    Every state change ends with EVENT_VIEW_INVALIDATED so the presentation
    layer knows to redraw. Contract violations raised by the timeline
    propagate to whoever emitted the input event.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.game_entity, _ = get_or_create_game(world)
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_HISTORY_JUMP, self.on_history_jump)
        self.event_bus.subscribe(EVENT_ORDER_TOGGLE, self.on_order_toggle)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)

    @property
    def timeline(self) -> Timeline:
        return self.world.component_for_entity(self.game_entity, Timeline)

    def current_view(self):
        return current_view(self.timeline)

    def render_timeline(self):
        return render_timeline(self.timeline)

    def new_game(self, side: Optional[int] = None) -> Timeline:
        if side is None:
            side = self.timeline.side
        timeline = reset_game(self.world, self.game_entity, side)
        logger.info("Started new %dx%d game", side, side)
        self.event_bus.emit(EVENT_GAME_STARTED, side=side)
        self.event_bus.emit(EVENT_VIEW_INVALIDATED, reason="new_game")
        return timeline

    def on_new_game_request(self, sender, **payload):
        self.new_game(payload.get("side"))

    def on_cell_click(self, sender, **payload):
        index = payload.get("index")
        if index is None:
            return
        timeline = self.timeline
        reason = move_rejection(timeline, index)
        if reason is not None:
            self.event_bus.emit(EVENT_MOVE_IGNORED, index=index, reason=reason)
            return
        mover = timeline.next_mover
        apply_move(timeline, index)
        step = timeline.current_step
        self.event_bus.emit(EVENT_MOVE_APPLIED, index=index, value=mover, step=step)
        result = evaluate(timeline.current)
        if result.decided:
            if result.winner is not None:
                logger.info("%s wins on step %d with cells %s", result.winner, step, sorted(result.cells))
            else:
                logger.info("Draw on step %d", step)
            self.event_bus.emit(
                EVENT_GAME_DECIDED,
                winner=result.winner,
                cells=result.cells,
                step=step,
            )
        self.event_bus.emit(EVENT_VIEW_INVALIDATED, reason="move")

    def on_history_jump(self, sender, **payload):
        step = payload.get("step")
        if step is None:
            return
        timeline = self.timeline
        previous_step = timeline.current_step
        jump_to(timeline, step)
        self.event_bus.emit(
            EVENT_STEP_CHANGED,
            previous_step=previous_step,
            step=step,
            next_mover=timeline.next_mover,
        )
        self.event_bus.emit(EVENT_VIEW_INVALIDATED, reason="jump")

    def on_order_toggle(self, sender, **payload):
        timeline = self.timeline
        toggle_order(timeline)
        self.event_bus.emit(EVENT_ORDER_CHANGED, ascending=timeline.display_ascending)
        self.event_bus.emit(EVENT_VIEW_INVALIDATED, reason="order")
