"""Player state tracked by the game session.

The maze never touches a Player; the session moves players and applies corridor
events to them (see ``labyrinth.services.effects``).
"""

from __future__ import annotations

from typing import List, Optional

from labyrinth.maze import Item, Room
from labyrinth.structures import LinkedStack, UnorderedList

DEFAULT_POWER = 100


class Player:
    def __init__(self, name: str, power: int = DEFAULT_POWER):
        if not name or not name.strip():
            raise ValueError("player name must not be empty")
        self.name = name
        self.power = max(0, int(power))
        self.current_room: Optional[Room] = None
        self.skip_next_turn = False
        self.moves = 0
        # ids of visited rooms, most recent on top (RECEDE walks this back)
        self.history: LinkedStack[str] = LinkedStack()
        # room a swap last put the player in; RECEDE does not walk back past it
        self.swap_anchor: Optional[str] = None
        self.inventory: UnorderedList[Item] = UnorderedList()
        self.solved_riddles: UnorderedList[str] = UnorderedList()
        self.applied_effects: UnorderedList[str] = UnorderedList()
        self.encountered_events: UnorderedList[str] = UnorderedList()

    @property
    def alive(self) -> bool:
        return self.power > 0

    def place(self, room: Room) -> None:
        """Put the player in ``room`` and record it in the movement history."""
        self.current_room = room
        self.history.push(room.id)

    def swap_to(self, room: Room) -> None:
        """Teleport into ``room`` after a position swap (not counted as a move)."""
        self.place(room)
        self.swap_anchor = room.id

    def move_to(self, room: Room) -> None:
        self.place(room)
        self.moves += 1

    def update_power(self, amount: int) -> int:
        """Add ``amount`` (may be negative); power never drops below zero. Returns the applied delta."""
        before = self.power
        self.power = max(0, self.power + int(amount))
        return self.power - before

    def add_item(self, item: Item) -> None:
        self.inventory.add_to_rear(item)

    def record_solved_riddle(self, question: str) -> None:
        self.solved_riddles.add_to_rear(question)

    def record_applied_effect(self, effect_name: str) -> None:
        self.applied_effects.add_to_rear(effect_name)

    def record_encountered_event(self, description: str) -> None:
        self.encountered_events.add_to_rear(description)

    def path_taken(self) -> List[str]:
        """Visited room ids, oldest first."""
        return list(self.history)[::-1]

    def history_string(self) -> str:
        return str(self.history)

    def __repr__(self):
        where = self.current_room.id if self.current_room else "None"
        return f"Player({self.name!r}, room={where}, power={self.power})"
