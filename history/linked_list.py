# history/linked_list.py
from __future__ import annotations

from typing import Optional

from maze import Direction
from .base import History


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Direction) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class LinkedListHistory(History):
    """History on a doubly linked list; the top of the stack is the tail node."""
    name = "LinkedList"

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        self.push_count = 0
        self.pop_count = 0

    def reset_stats(self) -> None:
        self.push_count = 0
        self.pop_count = 0

    def push(self, direction: Direction) -> None:
        node = _Node(direction)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1
        self.push_count += 1

    def pop(self) -> Direction:
        node = self._tail
        if node is None:
            raise IndexError("pop from empty history")

        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        node.prev = None

        self._size -= 1
        self.pop_count += 1
        return node.value

    def peek(self) -> Direction:
        if self._tail is None:
            raise IndexError("peek at empty history")
        return self._tail.value

    def count(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __iter__(self):
        # oldest first
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


HISTORY = LinkedListHistory
