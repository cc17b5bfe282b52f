"""An unbalanced binary search tree of distinct values."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _TreeNode:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_TreeNode] = None
        self.right: Optional[_TreeNode] = None


class BinarySearchTree:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_TreeNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already in the tree."""
        parent: Optional[_TreeNode] = None
        node = self._root
        while node is not None:
            if value == node.value:
                return
            parent = node
            node = node.left if value < node.value else node.right
        new = _TreeNode(value)
        if parent is None:
            self._root = new
        elif value < parent.value:
            parent.left = new
        else:
            parent.right = new
        self._size += 1

    def delete(self, value: Any) -> bool:
        """Remove ``value``; return whether it was present.

        A node with two children takes the value of its in-order successor,
        which is then removed from the right subtree.
        """
        parent: Optional[_TreeNode] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return True

    def minimum(self) -> Any:
        """Return the smallest value; ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def _walk_inorder(self) -> Iterator[Any]:
        stack: list[_TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def inorder(self) -> list:
        """Values in left, node, right order (ascending)."""
        return list(self._walk_inorder())

    def preorder(self) -> list:
        """Values in node, left, right order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self) -> list:
        """Values in left, right, node order."""
        reversed_order = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed_order[::-1]

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return self._walk_inorder()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.preorder()!r})"