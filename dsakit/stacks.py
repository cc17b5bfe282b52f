"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

DEFAULT_CAPACITY = 100


class ArrayStack:
    """A stack with a fixed capacity, stored in a Python list.

    Iteration runs from the bottom of the stack to the top.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self.capacity})"


class _Link:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_link: Optional["_Link"]) -> None:
        self.value = value
        self.next = next_link


class LinkedStack:
    """An unbounded stack made of linked nodes.

    Iteration runs from the top of the stack down to the bottom.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; IndexError when empty."""
        if self._top is None:
            raise IndexError("stack is empty")
        link = self._top
        self._top = link.next
        self._size -= 1
        return link.value

    def peek(self) -> Any:
        """Return the top value without removing it; IndexError when empty."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        link = self._top
        while link is not None:
            yield link.value
            link = link.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack(top_first={list(self)!r})"