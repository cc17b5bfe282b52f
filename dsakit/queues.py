"""Fixed-capacity linear and circular queues."""

from __future__ import annotations

from typing import Any, Iterator, Optional

DEFAULT_CAPACITY = 6


class _BoundedQueue:
    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Optional[Any]] = [None] * capacity
        self._front = -1
        self._rear = -1

    def is_empty(self) -> bool:
        return self._front == -1

    def _reset_if_last(self) -> bool:
        if self._front == self._rear:
            self._front = self._rear = -1
            return True
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


class LinearQueue(_BoundedQueue):
    """A queue over a fixed array whose slots are reused only once it drains.

    Once the rear reaches the last slot the queue reports itself full, even
    if values have been dequeued from the front since.
    """

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; OverflowError when full."""
        if self.is_full():
            raise OverflowError("queue is full")
        if self._front == -1:
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the front value; IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if not self._reset_if_last():
            self._front += 1
        return value

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return self._rear == self.capacity - 1

    def __iter__(self) -> Iterator[Any]:
        if self.is_empty():
            return iter(())
        return iter(self._slots[self._front : self._rear + 1])

    def __len__(self) -> int:
        return 0 if self.is_empty() else self._rear - self._front + 1


class CircularQueue(_BoundedQueue):
    """A queue over a fixed array whose rear wraps around to reuse slots."""

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear; OverflowError when full."""
        if self.is_full():
            raise OverflowError("queue is full")
        if self._front == -1:
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the front value; IndexError when empty."""
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if not self._reset_if_last():
            self._front = (self._front + 1) % self.capacity
        return value

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        if self.is_empty():
            return False
        return (self._rear + 1) % self.capacity == self._front

    def __iter__(self) -> Iterator[Any]:
        count = len(self)
        for offset in range(count):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        return (self._rear - self._front) % self.capacity + 1