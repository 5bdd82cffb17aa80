"""Weighted corridor edges and the events/items they may carry.

A corridor never applies its own event. ``Corridor.event`` is handed back
unchanged and the game session decides when (first traversal) and how
(``labyrinth.services.effects``) to apply it to a player.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from labyrinth.errors import InvalidCorridorError

from .rooms import Room

DEFAULT_EVENT_DESCRIPTION = "Evento misterioso"


class Effect(str, Enum):
    HEAL = "HEAL"
    DAMAGE = "DAMAGE"
    BONUS_POWER = "BONUS_POWER"
    TRAP = "TRAP"
    SKIP_TURN = "SKIP_TURN"
    EXTRA_TURN = "EXTRA_TURN"
    RECEDE = "RECEDE"
    SWAP_POSITION = "SWAP_POSITION"
    SWAP_ALL = "SWAP_ALL"
    NONE = "NONE"

    @property
    def magnitude(self) -> int:
        return EFFECT_MAGNITUDES[self]

    @classmethod
    def from_label(cls, label: Optional[str]) -> "Effect":
        """Parse an effect label; empty means NONE, unknown raises ValueError."""
        if label is None or not str(label).strip():
            return cls.NONE
        try:
            return cls[str(label).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown effect: {label!r}") from None


# Power points for power effects, rooms walked back for RECEDE.
EFFECT_MAGNITUDES = {
    Effect.HEAL: 20,
    Effect.DAMAGE: 25,
    Effect.BONUS_POWER: 15,
    Effect.TRAP: -30,
    Effect.SKIP_TURN: 0,
    Effect.EXTRA_TURN: 0,
    Effect.RECEDE: 2,
    Effect.SWAP_POSITION: 0,
    Effect.SWAP_ALL: 0,
    Effect.NONE: 0,
}


@dataclass(frozen=True)
class Item:
    name: str
    effect: Effect = Effect.NONE

    def __str__(self):
        return f"{self.name} ({self.effect.value})"


@dataclass(frozen=True)
class RandomEvent:
    description: str = DEFAULT_EVENT_DESCRIPTION
    direct_effect: Effect = Effect.NONE
    item: Optional[Item] = None

    def __str__(self):
        extra = f" + {self.item}" if self.item else ""
        return f"{self.description} [{self.direct_effect.value}{extra}]"


@dataclass(frozen=True, eq=False)
class Corridor:
    """Undirected weighted edge; ``source``/``target`` only record insertion order."""

    source: Room
    target: Room
    weight: float = 1.0
    event: Optional[RandomEvent] = None

    def __post_init__(self):
        try:
            weight = float(self.weight)
        except (TypeError, ValueError):
            raise InvalidCorridorError(f"corridor weight must be a number, got {self.weight!r}") from None
        if math.isnan(weight) or weight < 0:
            raise InvalidCorridorError(
                f"corridor {self.source.id} -> {self.target.id} has negative or invalid weight {self.weight!r}"
            )
        object.__setattr__(self, "weight", weight)

    def connects(self, a_id: str, b_id: str) -> bool:
        ends = (self.source.id, self.target.id)
        return ends == (a_id, b_id) or ends == (b_id, a_id)

    def other(self, room) -> Room:
        room_id = room.id if isinstance(room, Room) else room
        if room_id == self.source.id:
            return self.target
        if room_id == self.target.id:
            return self.source
        raise ValueError(f"room '{room_id}' is not an endpoint of {self}")

    def __str__(self):
        return f"{self.source.id} --({self.weight})--> {self.target.id}" + (" [EVENTO]" if self.event else "")


__all__ = ["Effect", "EFFECT_MAGNITUDES", "Item", "RandomEvent", "Corridor", "DEFAULT_EVENT_DESCRIPTION"]
