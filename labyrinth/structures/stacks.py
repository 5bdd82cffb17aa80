"""LIFO stacks: one over a doubling array, one over linked nodes.

Both expose the same surface (push, pop, peek, is_empty, size) and iterate
from top to bottom. The maze traversal code accepts either one, which is how
path enumeration can run on the array or the linked variant.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

from labyrinth.errors import EmptyCollectionError

from .nodes import LinearNode

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class ArrayStack(Generic[T]):
    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY):
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        # _top is both the next free slot and the element count
        self._top = 0
        self._stack: List[Optional[T]] = [None] * initial_capacity

    def push(self, element: T) -> None:
        if self._top == len(self._stack):
            self._expand_capacity()
        self._stack[self._top] = element
        self._top += 1

    def pop(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("stack")
        self._top -= 1
        result = self._stack[self._top]
        self._stack[self._top] = None
        return result

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("stack")
        return self._stack[self._top - 1]

    def is_empty(self) -> bool:
        return self._top == 0

    def size(self) -> int:
        return self._top

    def __len__(self):
        return self._top

    def __iter__(self) -> Iterator[T]:
        for i in range(self._top - 1, -1, -1):
            yield self._stack[i]

    def __str__(self):
        return "Stack (top -> bottom): [" + ", ".join(str(e) for e in self) + "]"

    def _expand_capacity(self):
        larger: List[Optional[T]] = [None] * (len(self._stack) * 2)
        larger[: self._top] = self._stack[: self._top]
        self._stack = larger


class LinkedStack(Generic[T]):
    def __init__(self):
        self._count = 0
        self._top: Optional[LinearNode] = None

    def push(self, element: T) -> None:
        self._top = LinearNode(element, self._top)
        self._count += 1

    def pop(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("stack")
        result = self._top.element
        self._top = self._top.next
        self._count -= 1
        return result

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyCollectionError("stack")
        return self._top.element

    def is_empty(self) -> bool:
        return self._count == 0

    def size(self) -> int:
        return self._count

    def __len__(self):
        return self._count

    def __iter__(self) -> Iterator[T]:
        current = self._top
        while current is not None:
            yield current.element
            current = current.next

    def __str__(self):
        return "Stack (top -> bottom): [" + ", ".join(str(e) for e in self) + "]"


__all__ = ["ArrayStack", "LinkedStack", "DEFAULT_CAPACITY"]
