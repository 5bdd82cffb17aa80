from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

from labyrinth.errors import EmptyCollectionError

from .nodes import LinearNode

T = TypeVar("T")


class LinkedQueue(Generic[T]):
    """FIFO queue over singly-linked nodes with front and rear references.

    enqueue and dequeue are both O(1). The BFS connectivity check uses this as
    its frontier and the game session uses it for turn order.
    """

    def __init__(self):
        self._count = 0
        self._front: Optional[LinearNode] = None
        self._rear: Optional[LinearNode] = None

    def enqueue(self, element: T) -> None:
        node = LinearNode(element)
        if self.is_empty():
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._count += 1

    def dequeue(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("queue")
        result = self._front.element
        self._front = self._front.next
        self._count -= 1
        if self.is_empty():
            self._rear = None
        return result

    def first(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("queue")
        return self._front.element

    def is_empty(self) -> bool:
        return self._count == 0

    def size(self) -> int:
        return self._count

    def __len__(self):
        return self._count

    def __iter__(self) -> Iterator[T]:
        current = self._front
        while current is not None:
            yield current.element
            current = current.next

    def __str__(self):
        return "[" + ", ".join(str(e) for e in self) + "]"


__all__ = ["LinkedQueue"]
