from typing import Any, Optional


class LinearNode:
    """Singly-linked node shared by the linked stack and the linked queue."""

    __slots__ = ("element", "next")

    def __init__(self, element: Any = None, next: Optional["LinearNode"] = None):
        self.element = element
        self.next = next

    def __repr__(self):
        return f"LinearNode({self.element!r})"
