from typing import Tuple

from esper import World

from tictactoe.components.board import Board
from tictactoe.components.timeline import Timeline
from tictactoe.constants import DEFAULT_SIDE
from tictactoe.timeline import new_game


def get_or_create_game(world: World, side: int = DEFAULT_SIDE) -> Tuple[int, Timeline]:
    """Return the game entity and its Timeline, creating them if absent."""
    existing = list(world.get_component(Timeline))
    if existing:
        return existing[0]
    timeline = new_game(side)
    entity = world.create_entity(Board(side=side), timeline)
    return entity, timeline


def reset_game(world: World, entity: int, side: int) -> Timeline:
    """Replace the entity's Board and Timeline with a fresh game of ``side``."""
    timeline = new_game(side)
    world.add_component(entity, Board(side=side))
    world.add_component(entity, timeline)
    return timeline
