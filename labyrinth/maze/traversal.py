"""Connectivity, path finding and solvability checks over a Maze.

All walks visit neighbors in corridor insertion order; there is no random
tie-break, so identical maps give identical results.

    is_reachable      BFS with a LinkedQueue frontier (entrance -> treasure by default)
    reachable_rooms   ids visited by that BFS, in visit order
    find_path         DFS holding the current path on a stack, popping back on dead ends
    all_paths         every simple path, same order, optional limit
    shortest_path     minimum total weight (Dijkstra, O(V^2) scan)
    validate_maze     bundles the above into a ValidationReport
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from labyrinth.structures import ArrayStack, LinkedQueue, LinkedStack

from .corridors import Corridor
from .maze import Maze, RoomRef
from .rooms import Room


@dataclass
class PathResult:
    rooms: List[Room]
    corridors: List[Corridor] = field(default_factory=list)

    @property
    def cost(self) -> float:
        return sum(c.weight for c in self.corridors)

    @property
    def ids(self) -> List[str]:
        return [r.id for r in self.rooms]

    def __len__(self):
        return len(self.rooms)

    def __str__(self):
        return " -> ".join(self.ids) + f" (custo {self.cost:g})"


@dataclass
class ValidationReport:
    has_entrance: bool = False
    has_treasure: bool = False
    reachable: bool = False
    unreachable_rooms: List[str] = field(default_factory=list)
    path: Optional[PathResult] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.has_entrance and self.has_treasure and self.reachable


def _resolve(maze: Maze, room: Optional[RoomRef], fallback: Callable[[], Optional[Room]]) -> Optional[Room]:
    if room is None:
        return fallback()
    return maze.get_room(room.id if isinstance(room, Room) else room)


def _endpoints(maze: Maze, start, goal) -> Tuple[Optional[Room], Optional[Room]]:
    return _resolve(maze, start, maze.get_entrance), _resolve(maze, goal, maze.get_treasure_room)


def reachable_rooms(maze: Maze, start: Optional[RoomRef] = None, stop_at: Optional[str] = None) -> List[str]:
    """Room ids reachable from ``start`` (default: the entrance) in BFS visit order.

    When ``stop_at`` is given the search ends as soon as that id is discovered.
    """
    origin = _resolve(maze, start, maze.get_entrance)
    if origin is None:
        return []
    order = [origin.id]
    visited = {origin.id}
    frontier: LinkedQueue[Room] = LinkedQueue()
    frontier.enqueue(origin)
    while not frontier.is_empty() and stop_at not in visited:
        current = frontier.dequeue()
        for neighbor in maze.get_neighbors(current):
            if neighbor.id in visited:
                continue
            visited.add(neighbor.id)
            order.append(neighbor.id)
            frontier.enqueue(neighbor)
    return order


def is_reachable(maze: Maze, start: Optional[RoomRef] = None, goal: Optional[RoomRef] = None) -> bool:
    origin, target = _endpoints(maze, start, goal)
    if origin is None or target is None:
        return False
    return target.id in reachable_rooms(maze, origin, stop_at=target.id)


def _to_result(path) -> PathResult:
    # stack iterates top -> bottom; each entry is (room, corridor used to enter it)
    steps = list(path)[::-1]
    return PathResult([room for room, _ in steps], [c for _, c in steps if c is not None])


def find_path(maze: Maze, start: Optional[RoomRef] = None, goal: Optional[RoomRef] = None, stack_cls=ArrayStack):
    """Depth-first search for one path; returns a PathResult or None.

    The stack holds the current path. When a room has no unvisited neighbor left
    it is popped and the walk resumes from the previous branching room.
    """
    origin, target = _endpoints(maze, start, goal)
    if origin is None or target is None:
        return None
    path = stack_cls()
    path.push((origin, None))
    visited = {origin.id}
    pending: Dict[str, Iterator[Corridor]] = {origin.id: iter(maze.get_corridors(origin))}
    while not path.is_empty():
        current, _ = path.peek()
        if current.id == target.id:
            return _to_result(path)
        for corridor in pending[current.id]:
            nxt = corridor.other(current)
            if nxt.id not in visited:
                visited.add(nxt.id)
                pending[nxt.id] = iter(maze.get_corridors(nxt))
                path.push((nxt, corridor))
                break
        else:
            path.pop()
    return None


def all_paths(
    maze: Maze,
    start: Optional[RoomRef] = None,
    goal: Optional[RoomRef] = None,
    limit: Optional[int] = None,
    stack_cls=LinkedStack,
) -> Iterator[PathResult]:
    """Yield every simple path from ``start`` to ``goal`` in deterministic order."""
    origin, target = _endpoints(maze, start, goal)
    if origin is None or target is None:
        return
    found = 0
    path = stack_cls()
    path.push((origin, None))
    on_path = {origin.id}
    pending: Dict[str, Iterator[Corridor]] = {origin.id: iter(maze.get_corridors(origin))}
    while not path.is_empty():
        current, _ = path.peek()
        if current.id == target.id:
            yield _to_result(path)
            found += 1
            if limit is not None and found >= limit:
                return
            path.pop()
            on_path.discard(current.id)
            continue
        for corridor in pending[current.id]:
            nxt = corridor.other(current)
            if nxt.id not in on_path:
                on_path.add(nxt.id)
                pending[nxt.id] = iter(maze.get_corridors(nxt))
                path.push((nxt, corridor))
                break
        else:
            path.pop()
            on_path.discard(current.id)


def shortest_path(maze: Maze, start: Optional[RoomRef] = None, goal: Optional[RoomRef] = None):
    """Minimum-weight path (Dijkstra); None when the goal cannot be reached."""
    origin, target = _endpoints(maze, start, goal)
    if origin is None or target is None:
        return None
    ids = [room.id for room in maze.rooms()]
    dist = {rid: float("inf") for rid in ids}
    via: Dict[str, Tuple[str, Corridor]] = {}
    done = set()
    dist[origin.id] = 0.0
    for _ in range(len(ids)):
        current = None
        for rid in ids:
            if rid not in done and (current is None or dist[rid] < dist[current]):
                current = rid
        if current is None or dist[current] == float("inf"):
            break
        done.add(current)
        if current == target.id:
            break
        for corridor in maze.get_corridors(current):
            nxt = corridor.other(current).id
            candidate = dist[current] + corridor.weight
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                via[nxt] = (current, corridor)
    if dist[target.id] == float("inf"):
        return None
    # walk predecessors back from the goal; the stack hands them out start-first
    trail: LinkedStack[Tuple[Room, Optional[Corridor]]] = LinkedStack()
    rid = target.id
    while rid != origin.id:
        prev, corridor = via[rid]
        trail.push((maze.get_room(rid), corridor))
        rid = prev
    trail.push((origin, None))
    rooms, corridors = [], []
    while not trail.is_empty():
        room, corridor = trail.pop()
        rooms.append(room)
        if corridor is not None:
            corridors.append(corridor)
    return PathResult(rooms, corridors)


def validate_maze(maze: Maze) -> ValidationReport:
    """Certify that a maze is playable: it has both endpoints and the treasure is reachable."""
    report = ValidationReport()
    entrance = maze.get_entrance()
    treasure = maze.get_treasure_room()
    report.has_entrance = entrance is not None
    report.has_treasure = treasure is not None
    if maze.is_empty():
        report.errors.append("maze has no rooms")
    if entrance is None:
        report.errors.append("no entrance room (ENTRADA)")
    if treasure is None:
        report.errors.append("no treasure room (TESOURO)")
    if entrance is None:
        report.unreachable_rooms = [room.id for room in maze.rooms()]
        return report
    seen = set(reachable_rooms(maze, entrance))
    report.unreachable_rooms = [room.id for room in maze.rooms() if room.id not in seen]
    if treasure is not None:
        report.reachable = treasure.id in seen
        if report.reachable:
            report.path = find_path(maze, entrance, treasure)
        else:
            report.errors.append(f"treasure room '{treasure.id}' is not reachable from '{entrance.id}'")
    return report


__all__ = [
    "PathResult",
    "ValidationReport",
    "reachable_rooms",
    "is_reachable",
    "find_path",
    "all_paths",
    "shortest_path",
    "validate_maze",
]
