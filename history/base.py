# history/base.py
from typing import Protocol

from maze import Direction


class History(Protocol):
    """
    LIFO record of the directions taken from the start cell.

    Implementations differ only in storage. pop() and peek() on an empty
    history raise IndexError; callers check count() first.
    """
    name: str

    # operation counters, for benchmarks
    push_count: int
    pop_count: int

    def push(self, direction: Direction) -> None:
        ...

    def pop(self) -> Direction:
        ...

    def peek(self) -> Direction:
        ...

    def count(self) -> int:
        ...

    def reset_stats(self) -> None:
        ...
