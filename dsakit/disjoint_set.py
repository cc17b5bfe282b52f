"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations

from typing import Hashable


class DisjointSet:
    """Tracks a partition of items into disjoint sets."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}

    def make_set(self, item: Hashable) -> None:
        """Place ``item`` in a set of its own, replacing any earlier entry."""
        self._parent[item] = item
        self._rank[item] = 0

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``.

        Raises KeyError for an item never passed to ``make_set``.
        """
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: Hashable, second: Hashable) -> bool:
        """Merge the sets of ``first`` and ``second``.

        Returns False when they already share a set, True otherwise.
        """
        root_first = self.find(first)
        root_second = self.find(second)
        if root_first == root_second:
            return False
        if self._rank[root_first] > self._rank[root_second]:
            self._parent[root_second] = root_first
        else:
            self._parent[root_first] = root_second
            if self._rank[root_first] == self._rank[root_second]:
                self._rank[root_second] += 1
        return True

    def __contains__(self, item: object) -> bool:
        return item in self._parent