"""Room vertices and the riddles that gate ENIGMA rooms.

Rooms are a single dataclass tagged with ``RoomType`` instead of a class per
kind; code that needs room-specific behaviour branches on ``room.room_type``.
The enum values are the labels used in map files (ENTRADA, TESOURO, ENIGMA,
NORMAL).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Union

Answer = Union[str, int, float]


class RoomType(str, Enum):
    ENTRANCE = "ENTRADA"
    TREASURE = "TESOURO"
    RIDDLE = "ENIGMA"
    STANDARD = "NORMAL"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: Optional[str]) -> "RoomType":
        """Map a file label (or enum name) to a RoomType; unknown labels are STANDARD."""
        if not label:
            return cls.STANDARD
        key = str(label).strip().upper()
        if key == "CENTER":
            return cls.TREASURE
        for member in cls:
            if key in (member.value, member.name):
                return member
        return cls.STANDARD


def _normalize(value) -> Union[str, float]:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    try:
        return float(text.replace(",", "."))
    except ValueError:
        return text.casefold()


class Riddle:
    """A question with a concealed answer.

    Free-text riddles compare the candidate with the answer after trimming and
    case folding; numeric answers compare numerically ("4", "4.0" and 4 all
    match 4). Multiple-choice riddles keep ``options`` and a 0-based answer
    index; an ``int`` candidate is compared with that index only and any
    other candidate with the text of the correct option.
    """

    __slots__ = ("question", "options", "_answer")

    def __init__(self, question: str, answer: Answer, options: Optional[Sequence[str]] = None):
        if not question:
            raise ValueError("riddle question must not be empty")
        if answer is None or (isinstance(answer, str) and not answer.strip()):
            raise ValueError("riddle answer must not be empty")
        self.question = question
        self.options: List[str] = list(options) if options else []
        if self.options:
            if not isinstance(answer, int) or isinstance(answer, bool) or not 0 <= answer < len(self.options):
                raise ValueError(f"answer index {answer!r} outside the {len(self.options)} options")
        self._answer = answer

    @property
    def is_multiple_choice(self) -> bool:
        return bool(self.options)

    def check_answer(self, candidate) -> bool:
        if candidate is None:
            return False
        if self.options:
            if isinstance(candidate, int) and not isinstance(candidate, bool):
                return candidate == self._answer
            return _normalize(candidate) == _normalize(self.options[self._answer])
        return _normalize(candidate) == _normalize(self._answer)

    def __repr__(self):
        return f"Riddle({self.question!r})"


@dataclass(eq=False)
class Room:
    id: str
    description: str = ""
    room_type: RoomType = RoomType.STANDARD
    riddle: Optional[Riddle] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("room id must be a non-empty string")
        if self.description is None:
            self.description = ""
        if self.riddle is not None and self.room_type is not RoomType.RIDDLE:
            raise ValueError(f"room '{self.id}' is {self.room_type.name}; only RIDDLE rooms hold a riddle")

    @classmethod
    def entrance(cls, room_id: str, description: str = "") -> "Room":
        return cls(room_id, description, RoomType.ENTRANCE)

    @classmethod
    def treasure(cls, room_id: str, description: str = "") -> "Room":
        return cls(room_id, description, RoomType.TREASURE)

    @classmethod
    def riddle_room(cls, room_id: str, description: str = "", riddle: Optional[Riddle] = None) -> "Room":
        return cls(room_id, description, RoomType.RIDDLE, riddle)

    @classmethod
    def standard(cls, room_id: str, description: str = "") -> "Room":
        return cls(room_id, description, RoomType.STANDARD)

    @property
    def is_entrance(self) -> bool:
        return self.room_type is RoomType.ENTRANCE

    @property
    def is_treasure(self) -> bool:
        return self.room_type is RoomType.TREASURE

    @property
    def is_riddle(self) -> bool:
        return self.room_type is RoomType.RIDDLE

    def assign_riddle(self, riddle: Riddle) -> None:
        if not self.is_riddle:
            raise ValueError(f"room '{self.id}' is {self.room_type.name}; only RIDDLE rooms hold a riddle")
        self.riddle = riddle

    def __eq__(self, other):
        if not isinstance(other, Room):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __str__(self):
        return f"[{self.id}: {self.description}]"


__all__ = ["RoomType", "Room", "Riddle"]
