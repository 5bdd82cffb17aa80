"""
project: Labyrinth of Glory
module: __init__.py
License: MIT

Maze game built on a small linear-collection library.

Rooms are vertices and corridors are weighted undirected edges that may carry
a one-shot event. ``labyrinth.structures`` holds the stacks, queue and list the
graph and the game session are built on; ``labyrinth.services`` reads and
writes map, riddle, report and log files; ``labyrinth.ui`` holds the console
menus.
"""

from dotenv import load_dotenv

# Load .env if present so LABYRINTH_* settings can live next to the maps.
load_dotenv()

from .config import GameConfig, load_config  # noqa: E402
from .errors import (  # noqa: E402
    DuplicateRoomError,
    ElementNotFoundError,
    EmptyCollectionError,
    InvalidCorridorError,
    LabyrinthError,
    MapFormatError,
    MazeStructureError,
    UnknownRoomError,
)
from .maze import Corridor, Effect, Item, Maze, RandomEvent, Riddle, Room, RoomType  # noqa: E402
from .player import Player  # noqa: E402

__all__ = [
    "GameConfig",
    "load_config",
    "Maze",
    "Room",
    "RoomType",
    "Riddle",
    "Corridor",
    "RandomEvent",
    "Item",
    "Effect",
    "Player",
    "LabyrinthError",
    "EmptyCollectionError",
    "ElementNotFoundError",
    "MazeStructureError",
    "DuplicateRoomError",
    "UnknownRoomError",
    "InvalidCorridorError",
    "MapFormatError",
]
