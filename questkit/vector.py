"""A growable array that tracks its own capacity."""

from __future__ import annotations

from operator import index as as_index
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Vector(Generic[T]):
    """Dynamic array whose capacity grows by half when it fills up."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[self._position(index)]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def _position(self, index: int) -> int:
        index = as_index(index)
        size = len(self._items)
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise IndexError(f"vector index {index} out of range")
        return position

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            half = self._capacity // 2
            self._capacity += half if half else 1

    def capacity(self) -> int:
        """Number of elements the vector can hold before it grows."""
        return self._capacity

    def push_back(self, value: T) -> None:
        """Append ``value``."""
        self._grow_if_full()
        self._items.append(value)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty vector")
        return self._items.pop()

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before ``index``; an index equal to the length appends."""
        if as_index(index) == len(self._items):
            self.push_back(value)
            return
        position = self._position(index)
        self._grow_if_full()
        self._items.insert(position, value)

    def erase(self, index: int) -> T:
        """Remove and return the element at ``index``."""
        return self._items.pop(self._position(index))

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def swap(self, other: "Vector[T]") -> None:
        """Exchange contents and capacity with ``other``."""
        self._items, other._items = other._items, self._items
        self._capacity, other._capacity = other._capacity, self._capacity

    def front(self) -> T:
        """The first element."""
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self) -> T:
        """The last element."""
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]