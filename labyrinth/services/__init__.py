"""File I/O and game session services built on the maze package."""

from .effects import EventOutcome, apply_event
from .game_engine import GameEngine
from .game_logger import GameLogger
from .map_loader import list_maps, load_maze, maze_to_dict, save_maze
from .report_exporter import export_match_summary, export_mission_report, report_filename
from .riddle_loader import load_riddles

__all__ = [
    "EventOutcome",
    "apply_event",
    "GameEngine",
    "GameLogger",
    "load_maze",
    "save_maze",
    "maze_to_dict",
    "list_maps",
    "load_riddles",
    "export_mission_report",
    "export_match_summary",
    "report_filename",
]
