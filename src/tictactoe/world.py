from esper import World

from tictactoe.components.board import Board
from tictactoe.constants import DEFAULT_SIDE
from tictactoe.events.bus import EventBus
from tictactoe.timeline import new_game


def create_world(event_bus: EventBus, side: int = DEFAULT_SIDE) -> World:
    """Build a world holding a single game entity with Board and Timeline.

    Creating the world emits nothing on the bus.
    """
    world = World()
    timeline = new_game(side)
    world.create_entity(Board(side=side), timeline)
    return world
