"""Stacks, a queue built from two stacks, and a singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "StackOverflowError",
    "StackUnderflowError",
    "QueueFullError",
    "QueueEmptyError",
    "ArrayStack",
    "LinkedStack",
    "TwoStackQueue",
    "LinkedList",
]


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from or peeking at an empty stack."""


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from top to bottom."""
        return reversed(self._items)


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedStack:
    """An unbounded stack made of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next


class TwoStackQueue:
    """A bounded FIFO queue kept in an inbox and an outbox stack."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def enqueue(self, value: Any) -> None:
        if len(self) >= self.capacity:
            raise QueueFullError("queue is full")
        self._inbox.append(value)

    def dequeue(self) -> Any:
        if not self._outbox:
            if not self._inbox:
                raise QueueEmptyError("queue is empty")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from front to back."""
        yield from reversed(self._outbox)
        yield from self._inbox


class LinkedList:
    """A singly linked list that grows at its tail."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values or ():
            self.append(value)

    def append(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)