"""Public maze package interface: room/corridor model, graph and traversal."""

from .corridors import DEFAULT_EVENT_DESCRIPTION, EFFECT_MAGNITUDES, Corridor, Effect, Item, RandomEvent
from .maze import DEAD_END_EXITS, NO_ROOM_EXITS, Maze
from .rooms import Riddle, Room, RoomType
from .traversal import (
    PathResult,
    ValidationReport,
    all_paths,
    find_path,
    is_reachable,
    reachable_rooms,
    shortest_path,
    validate_maze,
)

__all__ = [
    "Maze",
    "Room",
    "RoomType",
    "Riddle",
    "Corridor",
    "RandomEvent",
    "Item",
    "Effect",
    "EFFECT_MAGNITUDES",
    "DEFAULT_EVENT_DESCRIPTION",
    "NO_ROOM_EXITS",
    "DEAD_END_EXITS",
    "PathResult",
    "ValidationReport",
    "reachable_rooms",
    "is_reachable",
    "find_path",
    "all_paths",
    "shortest_path",
    "validate_maze",
]
