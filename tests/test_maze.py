import pytest

from labyrinth.errors import DuplicateRoomError, InvalidCorridorError, UnknownRoomError
from labyrinth.maze import DEAD_END_EXITS, NO_ROOM_EXITS, Maze, Room


def ids(rooms):
    return [r.id for r in rooms]


def test_simple_maze_lookups(simple_maze):
    assert simple_maze.get_entrance().id == "E1"
    assert simple_maze.get_treasure_room().id == "C1"
    assert ids(simple_maze.get_neighbors("E1")) == ["S1"]
    corridor = simple_maze.get_corridor_between("E1", "S1")
    assert corridor.weight == 2.0
    assert corridor.event.description == "Pocao"


def test_corridors_are_undirected(simple_maze):
    assert ids(simple_maze.get_neighbors("S1")) == ["E1", "C1"]
    assert simple_maze.get_corridor_between("S1", "E1") is simple_maze.get_corridor_between("E1", "S1")


def test_neighbors_follow_insertion_order():
    maze = Maze()
    for rid in ("A", "B", "C", "D"):
        maze.add_room(Room(rid))
    maze.add_corridor("A", "D")
    maze.add_corridor("A", "B")
    maze.add_corridor("C", "A")
    assert ids(maze.get_neighbors("A")) == ["D", "B", "C"]


def test_neighbor_view_restarts(simple_maze):
    view = simple_maze.get_neighbors("S1")
    assert ids(view) == ids(view) == ["E1", "C1"]


def test_unknown_room_queries_are_empty(simple_maze):
    assert list(simple_maze.get_neighbors("ZZ")) == []
    assert simple_maze.get_corridors("ZZ") == []
    assert simple_maze.get_corridor_between("E1", "ZZ") is None
    assert simple_maze.get_corridor_between("E1", "C1") is None
    assert simple_maze.get_room("ZZ") is None


def test_duplicate_room_rejected(simple_maze):
    with pytest.raises(DuplicateRoomError):
        simple_maze.add_room(Room("E1"))
    assert simple_maze.room_count == 3


def test_corridor_to_unknown_room_rejected(simple_maze):
    with pytest.raises(UnknownRoomError) as exc:
        simple_maze.add_corridor("E1", "X9")
    assert exc.value.room_id == "X9"
    assert simple_maze.corridor_count == 2


def test_negative_weight_rejected(simple_maze):
    with pytest.raises(InvalidCorridorError):
        simple_maze.add_corridor("E1", "C1", -3)
    assert simple_maze.get_corridor_between("E1", "C1") is None


def test_parallel_corridors_first_wins():
    maze = Maze()
    maze.add_room(Room("A"))
    maze.add_room(Room("B"))
    first = maze.add_corridor("A", "B", 5)
    maze.add_corridor("B", "A", 1)
    assert maze.get_corridor_between("A", "B") is first
    assert ids(maze.get_neighbors("A")) == ["B", "B"]


def test_self_loop_listed_once():
    maze = Maze()
    maze.add_room(Room("A"))
    maze.add_corridor("A", "A", 1)
    assert ids(maze.get_neighbors("A")) == ["A"]


def test_missing_entrance_or_treasure():
    maze = Maze()
    maze.add_room(Room.standard("S1"))
    assert maze.get_entrance() is None
    assert maze.get_treasure_room() is None


def test_first_entrance_in_insertion_order():
    maze = Maze()
    maze.add_room(Room.entrance("E2"))
    maze.add_room(Room.entrance("E1"))
    assert maze.get_entrance().id == "E2"


def test_available_exits(simple_maze):
    assert simple_maze.available_exits("S1") == "E1 | C1"
    assert simple_maze.available_exits(None) == NO_ROOM_EXITS
    simple_maze.add_room(Room("Lonely"))
    assert simple_maze.available_exits("Lonely") == DEAD_END_EXITS


def test_counts_and_membership(simple_maze):
    assert len(simple_maze) == 3
    assert simple_maze.corridor_count == 2
    assert "C1" in simple_maze
    assert Room("S1") in simple_maze
    assert not Maze().rooms()
    assert Maze().is_empty()
    text = str(simple_maze)
    assert text.startswith("Maze Structure: Labirinto Simples")
    assert "E1 [ENTRADA] -> S1(2.0, evento)" in text
