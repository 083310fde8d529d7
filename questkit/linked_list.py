"""A doubly linked list with O(1) operations at both ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None
    prev: Optional["_Node"] = None


class LinkedList(Generic[T]):
    """Doubly linked list of values.

    Positions are zero-based and may be negative, counting from the end.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        position = index + self._size if index < 0 else index
        if not 0 <= position < self._size:
            raise IndexError(f"list index {index} out of range")
        if position <= self._size // 2:
            node = self._head
            for _ in range(position):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - position):
                node = node.prev
        return node

    def push_front(self, value: T) -> None:
        """Add ``value`` before the first element."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Add ``value`` after the last element."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink(self, node: _Node) -> T:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        return node.value

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._head)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._tail)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before the existing element at ``index``."""
        after = self._node_at(index)
        node = _Node(value, next=after, prev=after.prev)
        if after.prev is None:
            self._head = node
        else:
            after.prev.next = node
        after.prev = node
        self._size += 1

    def erase(self, index: int) -> T:
        """Remove and return the element at ``index``."""
        return self._unlink(self._node_at(index))