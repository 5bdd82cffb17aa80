"""Exception hierarchy shared by the collections, the maze graph and the loaders.

Collection misuse (``EmptyCollectionError``, ``ElementNotFoundError``) is a
programmer error and always propagates. Structural errors raised while a maze
is being built derive from ``MazeStructureError`` so loaders and the editor can
catch them per entry and keep going.
"""

from __future__ import annotations


class LabyrinthError(Exception):
    """Base class for every error raised by this package."""


class EmptyCollectionError(LabyrinthError):
    def __init__(self, collection: str):
        super().__init__(f"The {collection} is empty.")
        self.collection = collection


class ElementNotFoundError(LabyrinthError):
    def __init__(self, collection: str, element=None):
        super().__init__(f"Element {element!r} not found in {collection}.")
        self.collection = collection
        self.element = element


class MazeStructureError(LabyrinthError):
    """Raised when an operation would leave the maze graph inconsistent."""


class DuplicateRoomError(MazeStructureError):
    def __init__(self, room_id: str):
        super().__init__(f"Room '{room_id}' already exists in the maze.")
        self.room_id = room_id


class UnknownRoomError(MazeStructureError):
    def __init__(self, room_id: str):
        super().__init__(f"Room '{room_id}' does not exist in the maze.")
        self.room_id = room_id


class InvalidCorridorError(MazeStructureError):
    pass


class MapFormatError(LabyrinthError):
    """A map or riddle document has the wrong shape."""


__all__ = [
    "LabyrinthError",
    "EmptyCollectionError",
    "ElementNotFoundError",
    "MazeStructureError",
    "DuplicateRoomError",
    "UnknownRoomError",
    "InvalidCorridorError",
    "MapFormatError",
]
