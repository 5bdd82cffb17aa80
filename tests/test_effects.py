import pytest

from labyrinth.maze import Effect, Item, Maze, RandomEvent, Room
from labyrinth.player import Player
from labyrinth.services.effects import apply_event, recede


def line_maze():
    maze = Maze()
    for rid in ("A", "B", "C", "D"):
        maze.add_room(Room(rid))
    maze.add_corridor("A", "B")
    maze.add_corridor("B", "C")
    maze.add_corridor("C", "D")
    return maze


def walk(player, maze, *ids):
    player.place(maze.get_room(ids[0]))
    for rid in ids[1:]:
        player.move_to(maze.get_room(rid))


@pytest.mark.parametrize(
    "effect,expected",
    [
        (Effect.HEAL, 70),
        (Effect.BONUS_POWER, 65),
        (Effect.DAMAGE, 25),
        (Effect.TRAP, 20),
        (Effect.NONE, 50),
    ],
)
def test_power_effects(effect, expected):
    p = Player("Ana", power=50)
    outcome = apply_event(p, RandomEvent("x", effect))
    assert p.power == expected
    assert outcome.power_delta == expected - 50
    assert outcome.effect is effect


def test_power_never_negative():
    p = Player("Ana", power=10)
    outcome = apply_event(p, RandomEvent("Espinhos", Effect.TRAP))
    assert p.power == 0
    assert outcome.power_delta == -10
    assert outcome.died
    assert not p.alive


def test_item_granted_and_records_kept():
    p = Player("Ana")
    potion = Item("Pocao", Effect.HEAL)
    outcome = apply_event(p, RandomEvent("Pocao", Effect.HEAL, potion))
    assert outcome.item == potion
    assert list(p.inventory) == [potion]
    assert list(p.applied_effects) == ["HEAL"]
    assert list(p.encountered_events) == ["Pocao"]


def test_descriptive_event_records_only_event():
    p = Player("Ana")
    apply_event(p, RandomEvent("Um eco distante"))
    assert list(p.encountered_events) == ["Um eco distante"]
    assert p.applied_effects.is_empty()


def test_skip_and_extra_turn():
    p = Player("Ana")
    apply_event(p, RandomEvent("Tontura", Effect.SKIP_TURN))
    assert p.skip_next_turn
    outcome = apply_event(p, RandomEvent("Vento", Effect.EXTRA_TURN))
    assert outcome.extra_turn


def test_none_event_is_noop():
    p = Player("Ana")
    outcome = apply_event(p, None)
    assert outcome.effect is Effect.NONE
    assert p.encountered_events.is_empty()


def test_recede_walks_history_back():
    maze = line_maze()
    p = Player("Ana")
    walk(p, maze, "A", "B", "C", "D")
    outcome = apply_event(p, RandomEvent("Escorregas", Effect.RECEDE), maze)
    # RECEDE magnitude is 2 rooms
    assert outcome.receded_to == "B"
    assert p.current_room.id == "B"
    assert p.path_taken() == ["A", "B"]


def test_recede_stops_at_start_of_history():
    maze = line_maze()
    p = Player("Ana")
    walk(p, maze, "A", "B")
    assert recede(p, 5, maze) == "A"
    assert p.current_room.id == "A"


def test_recede_without_history_or_maze():
    maze = line_maze()
    p = Player("Ana")
    walk(p, maze, "A")
    assert recede(p, 2, maze) is None
    assert recede(p, 2, None) is None
    assert p.current_room.id == "A"


def test_event_object_untouched(simple_maze):
    corridor = simple_maze.get_corridor_between("E1", "S1")
    before = corridor.event
    apply_event(Player("Ana"), corridor.event, simple_maze)
    assert corridor.event is before
    assert corridor.event.direct_effect is Effect.HEAL


def test_swap_position_trades_rooms_with_first_other_player():
    maze = line_maze()
    ana, rui, eva = Player("Ana"), Player("Rui"), Player("Eva")
    walk(ana, maze, "A", "B")
    walk(rui, maze, "D")
    walk(eva, maze, "C")
    outcome = apply_event(ana, RandomEvent("Espelho", Effect.SWAP_POSITION), maze, [ana, rui, eva])
    assert ana.current_room.id == "D"
    assert rui.current_room.id == "B"
    assert eva.current_room.id == "C"
    assert outcome.displaced == [rui]
    # a swap is not a move but it is part of the path
    assert ana.moves == 1
    assert ana.path_taken() == ["A", "B", "D"]
    assert list(ana.applied_effects) == ["SWAP_POSITION"]
    assert "Ana trocou de lugar com Rui" in outcome.messages


def test_swap_position_uses_chooser():
    maze = line_maze()
    ana, rui, eva = Player("Ana"), Player("Rui"), Player("Eva")
    walk(ana, maze, "A")
    walk(rui, maze, "B")
    walk(eva, maze, "C")
    seen = []

    def pick_last(active, candidates):
        seen.append((active.name, [p.name for p in candidates]))
        return candidates[-1]

    apply_event(ana, RandomEvent("Espelho", Effect.SWAP_POSITION), maze, [ana, rui, eva], pick_last)
    assert seen == [("Ana", ["Rui", "Eva"])]
    assert ana.current_room.id == "C"
    assert eva.current_room.id == "A"
    assert rui.current_room.id == "B"


def test_swap_position_cancelled_or_alone():
    maze = line_maze()
    ana, rui = Player("Ana"), Player("Rui")
    walk(ana, maze, "A")
    walk(rui, maze, "B")
    outcome = apply_event(ana, RandomEvent("x", Effect.SWAP_POSITION), maze, [ana, rui], lambda a, c: None)
    assert "Troca cancelada." in outcome.messages
    assert ana.current_room.id == "A"
    assert outcome.displaced == []

    outcome = apply_event(ana, RandomEvent("x", Effect.SWAP_POSITION), maze, [ana])
    assert "Não há mais ninguém com quem trocar!" in outcome.messages
    assert ana.current_room.id == "A"


def test_swap_all_rotates_players_in_play():
    maze = line_maze()
    ana, rui, eva, out = Player("Ana"), Player("Rui"), Player("Eva"), Player("Out", power=0)
    walk(ana, maze, "A")
    walk(rui, maze, "B")
    walk(eva, maze, "C")
    walk(out, maze, "D")
    outcome = apply_event(ana, RandomEvent("Vortice", Effect.SWAP_ALL), maze, [ana, rui, eva, out])
    assert [p.current_room.id for p in (ana, rui, eva)] == ["B", "C", "A"]
    assert out.current_room.id == "D"
    assert outcome.displaced == [rui, eva]
    assert outcome.messages[1] == "Todos os jogadores trocam de posição!"


def test_swap_all_needs_two_players():
    maze = line_maze()
    ana = Player("Ana")
    walk(ana, maze, "A")
    outcome = apply_event(ana, RandomEvent("Vortice", Effect.SWAP_ALL), maze, [ana])
    assert "Não há jogadores suficientes para trocar." in outcome.messages
    assert ana.current_room.id == "A"


def test_recede_stops_at_swapped_room():
    maze = line_maze()
    ana, rui = Player("Ana"), Player("Rui")
    walk(ana, maze, "A", "B")
    walk(rui, maze, "D")
    apply_event(ana, RandomEvent("Espelho", Effect.SWAP_POSITION), maze, [ana, rui])
    ana.move_to(maze.get_room("C"))
    assert recede(ana, 2, maze) == "D"
    assert ana.current_room.id == "D"
