"""Linear collection library used by the maze graph and the game session."""

from .lists import UnorderedList
from .nodes import LinearNode
from .queues import LinkedQueue
from .stacks import ArrayStack, LinkedStack

__all__ = [
    "ArrayStack",
    "LinkedStack",
    "LinkedQueue",
    "UnorderedList",
    "LinearNode",
]
