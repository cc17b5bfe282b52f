"""Singly, doubly and circular linked lists of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class _LinkedBase:
    """Shared construction, length and representation for the list classes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._size = 0
        self._setup()
        for value in values:
            self.push_back(value)

    def _setup(self) -> None:
        raise NotImplementedError  # pragma: no cover - overridden by every subclass

    def push_back(self, value: Any) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __iter__(self) -> Iterator[Any]:  # pragma: no cover - overridden
        raise NotImplementedError

    def _require_items(self) -> None:
        if not self._size:
            raise IndexError("list is already empty")


class SinglyLinkedList(_LinkedBase):
    """A null-terminated singly linked list."""

    def _setup(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class DoublyLinkedList(_LinkedBase):
    """A null-terminated doubly linked list."""

    def _setup(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element; IndexError when empty."""
        self._require_items()
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last element; IndexError when empty."""
        self._require_items()
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


class CircularSinglyLinkedList(_LinkedBase):
    """A singly linked list whose last node points back at the first."""

    def _setup(self) -> None:
        # The head is always ``self._tail.next``.
        self._tail: Optional[_Node] = None

    @property
    def _head(self) -> Optional[_Node]:
        return None if self._tail is None else self._tail.next

    def _link_first(self, node: _Node) -> None:
        node.next = node
        self._tail = node
        self._size = 1

    def push_front(self, value: Any) -> None:
        """Insert ``value`` so that it becomes the head."""
        node = _Node(value)
        if self._tail is None:
            self._link_first(node)
            return
        node.next = self._tail.next
        self._tail.next = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Insert ``value`` just before the head, closing the circle."""
        self.push_front(value)
        self._tail = self._tail.next

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` at ``position`` counted from the head.

        Valid positions run from 0 to ``len(self)``; anything else raises
        IndexError and leaves the list unchanged.
        """
        if position == 0:
            self.push_front(value)
            return
        if not 0 < position <= self._size:
            raise IndexError(f"invalid position: {position}")
        if position == self._size:
            self.push_back(value)
            return
        before = self._head
        for _ in range(position - 1):
            before = before.next
        node = _Node(value)
        node.next = before.next
        before.next = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the head; IndexError when empty."""
        self._require_items()
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            yield node.value
            node = node.next
            if node is head:
                break

    def __len__(self) -> int:
        return self._size


class CircularDoublyLinkedList(_LinkedBase):
    """A doubly linked list whose ends are joined into a ring."""

    def _setup(self) -> None:
        self._head: Optional[_Node] = None

    def _append_node(self, value: Any) -> _Node:
        node = _Node(value)
        if self._head is None:
            node.next = node.prev = node
            self._head = node
        else:
            last = self._head.prev
            node.next = self._head
            node.prev = last
            last.next = node
            self._head.prev = node
        self._size += 1
        return node

    def push_front(self, value: Any) -> None:
        """Insert ``value`` so that it becomes the head."""
        self._head = self._append_node(value)

    def push_back(self, value: Any) -> None:
        """Insert ``value`` just before the head."""
        self._append_node(value)

    def _unlink(self, node: _Node) -> Any:
        if node.next is node:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        """Remove and return the head; IndexError when empty."""
        self._require_items()
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the element before the head; IndexError when empty."""
        self._require_items()
        return self._unlink(self._head.prev)

    def __iter__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head
        while True:
            yield node.value
            node = node.next
            if node is self._head:
                break

    def __reversed__(self) -> Iterator[Any]:
        if self._head is None:
            return
        last = self._head.prev
        node = last
        while True:
            yield node.value
            node = node.prev
            if node is last:
                break

    def __len__(self) -> int:
        return self._size


@dataclass(eq=False)
class ListNode:
    """A bare singly linked node, as handed around by node-level helpers."""

    val: Any
    next: Optional["ListNode"] = None


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Chain ``values`` into ListNodes and return the head, or None if empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: Optional[ListNode]) -> list:
    """Return the values reachable from ``head`` in order."""
    values = []
    node = head
    while node is not None:
        values.append(node.val)
        node = node.next
    return values


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list given only the node itself.

    The successor's value is copied in and the successor unlinked. The last
    node of a list cannot be removed this way, so that raises ValueError.
    """
    if node.next is None:
        raise ValueError("cannot delete the last node without its predecessor")
    successor = node.next
    node.val = successor.val
    node.next = successor.next