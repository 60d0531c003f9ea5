"""Singly linked list, stack and queue built from chained nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A single link holding a value and a reference to the next link."""

    data: Any = None
    next: Optional["Node"] = None


def _walk(node: Optional[Node]) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A singly linked list of values."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None

    def insert_first(self, value: Any) -> None:
        """Insert a value at the front of the list."""
        self._head = Node(value, self._head)

    def insert_last(self, value: Any) -> None:
        """Append a value at the end of the list."""
        node = Node(value)
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def remove_first(self) -> None:
        """Drop the first value; does nothing on an empty list."""
        if self._head is not None:
            self._head = self._head.next

    def remove(self, value: Any) -> None:
        """Remove every occurrence of a value."""
        while self._head is not None and self._head.data == value:
            self._head = self._head.next
        previous = self._head
        while previous is not None and previous.next is not None:
            if previous.next.data == value:
                previous.next = previous.next.next
            else:
                previous = previous.next

    def clear(self) -> None:
        """Remove all values."""
        self._head = None

    def find(self, value: Any) -> Optional[Node]:
        """Return the first node holding the value, or None."""
        return next((node for node in _walk(self._head) if node.data == value), None)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._head))

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self._head))

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self)


class Stack:
    """A last-in, first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._head = Node(value, self._head)

    def pop(self) -> Any:
        """Remove the top value and return it; None when the stack is empty."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        return node.data

    def top(self) -> Any:
        """Return the top value without removing it; None when empty."""
        return None if self._head is None else self._head.data

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        self._head = None

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self._head))

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack downwards."""
        return (node.data for node in _walk(self._head))


class Queue:
    """A first-in, first-out queue of linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None

    def push(self, value: Any) -> None:
        """Append a value at the back of the queue."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def pop(self) -> Any:
        """Remove the front value and return it; None when the queue is empty."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        return node.data

    def top(self) -> Any:
        """Return the front value without removing it; None when empty."""
        return None if self._head is None else self._head.data

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        self._head = None
        self._tail = None

    def __len__(self) -> int:
        return sum(1 for _ in _walk(self._head))

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        return (node.data for node in _walk(self._head))