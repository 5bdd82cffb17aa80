"""Console front end: main menu and map editor."""

from .map_editor import MapEditor
from .text_menu import main_menu, new_game

__all__ = ["MapEditor", "main_menu", "new_game"]
