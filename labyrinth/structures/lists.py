from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

from labyrinth.errors import ElementNotFoundError, EmptyCollectionError

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class UnorderedList(Generic[T]):
    """Insertion-ordered list over a doubling array.

    Holds riddle pools, per-room corridor adjacency and the player's
    inventory/record lists. Elements are compared with ``==``.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY):
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        self._rear = 0
        self._items: List[Optional[T]] = [None] * initial_capacity

    # ---------------- insertion -------------------------------------------------
    def add_to_front(self, element: T) -> None:
        self._ensure_room()
        for i in range(self._rear, 0, -1):
            self._items[i] = self._items[i - 1]
        self._items[0] = element
        self._rear += 1

    def add_to_rear(self, element: T) -> None:
        self._ensure_room()
        self._items[self._rear] = element
        self._rear += 1

    def add_after(self, element: T, target: T) -> None:
        index = self._find(target)
        if index < 0:
            raise ElementNotFoundError("list", target)
        self._ensure_room()
        for i in range(self._rear, index + 1, -1):
            self._items[i] = self._items[i - 1]
        self._items[index + 1] = element
        self._rear += 1

    # ---------------- removal ---------------------------------------------------
    def remove_first(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("list")
        return self._remove_at(0)

    def remove_last(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("list")
        return self._remove_at(self._rear - 1)

    def remove(self, element: T) -> T:
        if self.is_empty():
            raise EmptyCollectionError("list")
        index = self._find(element)
        if index < 0:
            raise ElementNotFoundError("list", element)
        return self._remove_at(index)

    # ---------------- queries ---------------------------------------------------
    def first(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("list")
        return self._items[0]

    def last(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("list")
        return self._items[self._rear - 1]

    def contains(self, target: T) -> bool:
        return self._find(target) >= 0

    def is_empty(self) -> bool:
        return self._rear == 0

    def size(self) -> int:
        return self._rear

    def __contains__(self, target):
        return self.contains(target)

    def __len__(self):
        return self._rear

    def __iter__(self) -> Iterator[T]:
        for i in range(self._rear):
            yield self._items[i]

    def __str__(self):
        return "[" + ", ".join(str(e) for e in self) + "]"

    # ---------------- internals -------------------------------------------------
    def _find(self, target) -> int:
        for i in range(self._rear):
            if self._items[i] == target:
                return i
        return -1

    def _remove_at(self, index: int) -> T:
        result = self._items[index]
        for i in range(index, self._rear - 1):
            self._items[i] = self._items[i + 1]
        self._rear -= 1
        self._items[self._rear] = None
        return result

    def _ensure_room(self):
        if self._rear == len(self._items):
            larger: List[Optional[T]] = [None] * (len(self._items) * 2)
            larger[: self._rear] = self._items[: self._rear]
            self._items = larger


__all__ = ["UnorderedList"]
