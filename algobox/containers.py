"""Bounded circular queue, bounded stack and an insertion-ordered set."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator
from typing import Any


class QueueFull(Exception):
    """Raised when adding to a full queue."""


class QueueEmpty(Exception):
    """Raised when removing from an empty queue."""


class CircularQueue:
    """A first-in first-out queue holding at most *capacity* items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self._items)!r}, capacity={self.capacity})"

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, item: Any) -> None:
        """Add *item* at the rear; raise QueueFull if there is no room."""
        if self.is_full():
            raise QueueFull("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise QueueEmpty if there is none."""
        if self.is_empty():
            raise QueueEmpty("queue is empty")
        return self._items.popleft()


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when reading from an empty stack."""


class Stack:
    """A last-in first-out stack holding at most *capacity* items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self.capacity})"

    def push(self, item: Any) -> None:
        """Put *item* on top; raise StackOverflow if the stack is full."""
        if len(self._items) >= self.capacity:
            raise StackOverflow("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackUnderflow if empty."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise StackUnderflow if empty."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items


class OrderedSet:
    """A set of unique members that remembers insertion order."""

    def __init__(self, members: Iterable[Hashable] = ()) -> None:
        self._members: dict[Hashable, None] = dict.fromkeys(members)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member: object) -> bool:
        return member in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self)!r})"

    def add(self, member: Hashable) -> None:
        """Add *member* if it is not already present."""
        self._members.setdefault(member, None)

    def is_empty(self) -> bool:
        return not self._members

    def union(self, other: OrderedSet) -> OrderedSet:
        """Members of this set, then members of *other* not already seen."""
        result = OrderedSet(self)
        for member in other:
            result.add(member)
        return result

    def intersection(self, other: OrderedSet) -> OrderedSet:
        """Members of this set that are also in *other*, in this set's order."""
        return OrderedSet(m for m in self if m in other)

    def difference(self, other: OrderedSet) -> OrderedSet:
        """Members of this set that are not in *other*, in this set's order."""
        return OrderedSet(m for m in self if m not in other)