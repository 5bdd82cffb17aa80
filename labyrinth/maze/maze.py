"""
project: Labyrinth of Glory
module: maze.py
License: MIT

Maze graph: rooms are vertices, corridors are undirected weighted edges.

Rooms are kept in a dict keyed by id (insertion ordered) and every room owns an
``UnorderedList`` of the corridors touching it, in the order they were added.
That order is the tie-break for everything that walks the graph, so identical
map files always produce identical neighbor sequences and traversal results.

Public contract:
    Maze(name="...")
    add_room(room)                               DuplicateRoomError on repeated id
    add_corridor(from_id, to_id, weight, event)  UnknownRoomError / InvalidCorridorError
    get_neighbors(room) -> restartable iterable of Room
    get_corridor_between(a, b) -> Corridor | None
    get_entrance() / get_treasure_room() -> Room | None
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Union

from labyrinth.errors import DuplicateRoomError, UnknownRoomError
from labyrinth.structures import UnorderedList

from .corridors import Corridor, RandomEvent
from .rooms import Room, RoomType

RoomRef = Union[Room, str]

NO_ROOM_EXITS = "Nenhuma"
DEAD_END_EXITS = "Sem saídas (Beco sem saída)"


def _room_id(room: Optional[RoomRef]) -> Optional[str]:
    if room is None:
        return None
    return room.id if isinstance(room, Room) else str(room)


class _Neighbors:
    """Neighbor view for one room; every ``iter()`` starts again from the first corridor."""

    __slots__ = ("_corridors", "_room_id")

    def __init__(self, corridors: Optional[UnorderedList], room_id: Optional[str]):
        self._corridors = corridors
        self._room_id = room_id

    def __iter__(self) -> Iterator[Room]:
        if self._corridors is None:
            return
        for corridor in self._corridors:
            yield corridor.other(self._room_id)

    def __repr__(self):
        return f"<neighbors of {self._room_id}: {[r.id for r in self]}>"


class Maze:
    def __init__(self, name: str = "Mapa Desconhecido"):
        self.name = name
        self._rooms: Dict[str, Room] = {}
        self._adjacency: Dict[str, UnorderedList[Corridor]] = {}
        self._corridors: UnorderedList[Corridor] = UnorderedList()

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add_room(self, room: Room) -> Room:
        if room.id in self._rooms:
            raise DuplicateRoomError(room.id)
        self._rooms[room.id] = room
        self._adjacency[room.id] = UnorderedList()
        return room

    def add_corridor(
        self,
        from_id: RoomRef,
        to_id: RoomRef,
        weight: float = 1.0,
        event: Optional[RandomEvent] = None,
    ) -> Corridor:
        """Connect two existing rooms; the corridor is traversable both ways."""
        source_id, target_id = _room_id(from_id), _room_id(to_id)
        for rid in (source_id, target_id):
            if rid not in self._rooms:
                raise UnknownRoomError(rid)
        corridor = Corridor(self._rooms[source_id], self._rooms[target_id], weight, event)
        self._adjacency[source_id].add_to_rear(corridor)
        if target_id != source_id:
            self._adjacency[target_id].add_to_rear(corridor)
        self._corridors.add_to_rear(corridor)
        return corridor

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_room(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def get_neighbors(self, room: RoomRef) -> _Neighbors:
        rid = _room_id(room)
        return _Neighbors(self._adjacency.get(rid), rid)

    def get_corridors(self, room: RoomRef) -> List[Corridor]:
        """Corridors touching ``room`` in insertion order (empty for unknown rooms)."""
        corridors = self._adjacency.get(_room_id(room))
        return list(corridors) if corridors is not None else []

    def get_corridor_between(self, a: RoomRef, b: RoomRef) -> Optional[Corridor]:
        a_id, b_id = _room_id(a), _room_id(b)
        corridors = self._adjacency.get(a_id)
        if corridors is None or b_id not in self._rooms:
            return None
        for corridor in corridors:
            if corridor.connects(a_id, b_id):
                return corridor
        return None

    def _first_of_type(self, room_type: RoomType) -> Optional[Room]:
        for room in self._rooms.values():
            if room.room_type is room_type:
                return room
        return None

    def get_entrance(self) -> Optional[Room]:
        return self._first_of_type(RoomType.ENTRANCE)

    def get_treasure_room(self) -> Optional[Room]:
        return self._first_of_type(RoomType.TREASURE)

    def rooms(self) -> List[Room]:
        return list(self._rooms.values())

    def corridors(self) -> List[Corridor]:
        return list(self._corridors)

    @property
    def room_count(self) -> int:
        return len(self._rooms)

    @property
    def corridor_count(self) -> int:
        return self._corridors.size()

    def is_empty(self) -> bool:
        return not self._rooms

    def available_exits(self, room: Optional[RoomRef]) -> str:
        """Console line listing the ids reachable in one move from ``room``."""
        if room is None:
            return NO_ROOM_EXITS
        ids = [neighbor.id for neighbor in self.get_neighbors(room)]
        if not ids:
            return DEAD_END_EXITS
        return " | ".join(ids)

    def __contains__(self, room):
        return _room_id(room) in self._rooms

    def __len__(self):
        return len(self._rooms)

    def __str__(self):
        lines = [f"Maze Structure: {self.name}"]
        for room in self._rooms.values():
            links = ", ".join(
                f"{c.other(room.id).id}({c.weight}{', evento' if c.event else ''})" for c in self._adjacency[room.id]
            )
            lines.append(f"  {room.id} [{room.room_type.label}] -> {links or '-'}")
        return "\n".join(lines)


__all__ = ["Maze", "NO_ROOM_EXITS", "DEAD_END_EXITS"]
