"""Singly linked lists: a small list class and classic node-level operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a chain of nodes holding *values* in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of the chain starting at *head*, in order."""
    return [node.val for node in _nodes(head)]


class LinkedList:
    """A singly linked list that keeps a reference to its head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = from_iterable(values)

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in _nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __contains__(self, key: object) -> bool:
        return self.search(key)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def insert_at_beginning(self, value: Any) -> ListNode:
        """Put *value* in front of the list and return its new node."""
        self.head = ListNode(value, self.head)
        return self.head

    def insert_after(self, node: ListNode | None, value: Any) -> ListNode:
        """Insert *value* right after *node* and return its new node."""
        if node is None:
            raise ValueError("the given previous node cannot be None")
        new_node = ListNode(value, node.next)
        node.next = new_node
        return new_node

    def insert_at_end(self, value: Any) -> ListNode:
        """Append *value* to the list and return its new node."""
        new_node = ListNode(value)
        if self.head is None:
            self.head = new_node
            return new_node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = new_node
        return new_node

    def delete(self, key: Any) -> bool:
        """Remove the first node holding *key*; return whether one was found."""
        previous: ListNode | None = None
        for node in _nodes(self.head):
            if node.val == key:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return True
            previous = node
        return False

    def search(self, key: Any) -> bool:
        """Return True if some node holds *key*."""
        return any(node.val == key for node in _nodes(self.head))

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        ordered = sorted(self)
        for node, value in zip(_nodes(self.head), ordered):
            node.val = value


def delete_node(node: ListNode) -> None:
    """Remove *node* from its list, given only the node itself (not the tail)."""
    following = node.next
    if following is None:
        raise ValueError("cannot delete the last node without its predecessor")
    node.val = following.val
    node.next = following.next


def partition(head: ListNode | None, x: Any) -> ListNode | None:
    """Reorder so nodes below *x* precede the rest, keeping relative order."""
    low_dummy, high_dummy = ListNode(), ListNode()
    low, high = low_dummy, high_dummy
    node = head
    while node is not None:
        following = node.next
        node.next = None
        if node.val < x:
            low.next = node
            low = node
        else:
            high.next = node
            high = node
        node = following
    low.next = high_dummy.next
    return low_dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the chain in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the chain *k* places to the right and return its new head."""
    if head is None or head.next is None:
        return head
    tail = head
    length = 1
    while tail.next is not None:
        tail = tail.next
        length += 1
    tail.next = head
    new_tail = tail
    for _ in range(length - k % length):
        new_tail = new_tail.next  # type: ignore[assignment]
    new_head = new_tail.next
    new_tail.next = None
    return new_head