# history/array.py
from typing import List

from maze import Direction
from .base import History


class ArrayHistory(History):
    """History on a Python list (a growable array); the top is the last slot."""
    name = "Array"

    def __init__(self) -> None:
        self._items: List[Direction] = []
        self.push_count = 0
        self.pop_count = 0

    def reset_stats(self) -> None:
        self.push_count = 0
        self.pop_count = 0

    def push(self, direction: Direction) -> None:
        self._items.append(direction)
        self.push_count += 1

    def pop(self) -> Direction:
        if not self._items:
            raise IndexError("pop from empty history")
        self.pop_count += 1
        return self._items.pop()

    def peek(self) -> Direction:
        if not self._items:
            raise IndexError("peek at empty history")
        return self._items[-1]

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))


HISTORY = ArrayHistory
