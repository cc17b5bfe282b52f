"""Graph traversals, shortest paths, spanning trees and grid spreading."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from typing import Iterable, Optional, Sequence

Edge = tuple[int, int]


def adjacency_list(node_count: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Build an undirected adjacency list for vertices ``0..node_count``.

    The list has ``node_count + 1`` entries so that vertices may be numbered
    from 1. Each edge is recorded on both endpoints in the order given.
    """
    if node_count < 0:
        raise ValueError("node_count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(node_count + 1)]
    for u, v in edges:
        if not (0 <= u <= node_count and 0 <= v <= node_count):
            raise ValueError(f"edge ({u}, {v}) is outside 0..{node_count}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def bfs_order(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``."""
    visited = {start}
    queue = deque([start])
    order = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in adjacency[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs_order(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in stack-driven depth-first order from ``start``.

    A vertex is marked as seen when pushed, so each one is emitted once;
    neighbours are pushed in list order and therefore popped in reverse.
    """
    visited = {start}
    stack = [start]
    order = []
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for neighbour in adjacency[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
    return order


def bfs_distances(
    adjacency: Sequence[Sequence[int]], source: int
) -> list[Optional[int]]:
    """Return the edge count from ``source`` to every vertex, None if unreachable."""
    distances: list[Optional[int]] = [None] * len(adjacency)
    distances[source] = 0
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        step = distances[vertex] + 1
        for neighbour in adjacency[vertex]:
            if distances[neighbour] is None or distances[neighbour] > step:
                distances[neighbour] = step
                queue.append(neighbour)
    return distances


def nearest_meeting_node(
    edges: Sequence[int], first: int, second: int
) -> Optional[int]:
    """Find the vertex reachable from both starts with the least total distance.

    ``edges[i]`` is the single vertex that ``i`` points to, or -1 for none.
    Ties go to the lowest index; None is returned when no vertex is reachable
    from both.
    """
    count = len(edges)
    for start in (first, second):
        if not 0 <= start < count:
            raise ValueError(f"start vertex {start} is outside 0..{count - 1}")
    adjacency: list[list[int]] = [[] for _ in range(count)]
    for vertex, target in enumerate(edges):
        if target == -1:
            continue
        if not 0 <= target < count:
            raise ValueError(f"edge target {target} is outside 0..{count - 1}")
        adjacency[vertex].append(target)

    from_first = bfs_distances(adjacency, first)
    from_second = bfs_distances(adjacency, second)
    best: Optional[int] = None
    best_total = math.inf
    for vertex, (a, b) in enumerate(zip(from_first, from_second)):
        if a is None or b is None:
            continue
        if a + b < best_total:
            best_total = a + b
            best = vertex
    return best


def compromised_neighbours(
    nodes: Iterable[int], edges: Iterable[Edge], enemy: int, person: int
) -> list[int]:
    """List the direct contacts of ``person`` through which ``enemy`` is reached.

    Vertex ids run from 0 to the largest id in ``nodes``. An edge ``(u, v)``
    makes ``u`` a contact of ``v``. A depth-first search from ``person`` marks
    every vertex whose search subtree contains ``enemy``; the marked contacts
    of ``person`` are returned in the order their edges were given.
    """
    size = max(nodes, default=-1) + 1
    contacts: list[list[int]] = [[] for _ in range(size)]
    for u, v in edges:
        if not (0 <= u < size and 0 <= v < size):
            raise ValueError(f"edge ({u}, {v}) is outside 0..{size - 1}")
        contacts[v].append(u)
    for vertex in (enemy, person):
        if not 0 <= vertex < size:
            raise ValueError(f"vertex {vertex} is outside 0..{size - 1}")

    visited = [False] * size
    dirty = [False] * size
    dirty[enemy] = True
    visited[person] = True
    stack = [(person, None, iter(contacts[person]))]
    while stack:
        vertex, parent, children = stack[-1]
        descended = False
        for child in children:
            if not visited[child]:
                visited[child] = True
                stack.append((child, vertex, iter(contacts[child])))
                descended = True
                break
        if not descended:
            stack.pop()
            if parent is not None:
                dirty[parent] = dirty[parent] or dirty[vertex]

    return [child for child in contacts[person] if dirty[child]]


def is_reachable(edges: Iterable[Edge], sender: int, recipient: int) -> bool:
    """Tell whether ``recipient`` can be reached from ``sender`` over undirected edges."""
    graph: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)
    visited = {sender}
    queue = deque([sender])
    while queue:
        vertex = queue.popleft()
        if vertex == recipient:
            return True
        for neighbour in graph[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return False


def prim_mst(graph: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Build a minimum spanning tree from an adjacency matrix.

    A zero entry means no edge. The result holds ``(parent, vertex, weight)``
    for every vertex but the root 0, in vertex order. A disconnected graph
    raises ValueError.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []

    key = [math.inf] * size
    parent: list[Optional[int]] = [None] * size
    in_tree = [False] * size
    key[0] = 0

    for _ in range(size - 1):
        chosen: Optional[int] = None
        smallest = math.inf
        for vertex in range(size):
            if not in_tree[vertex] and key[vertex] < smallest:
                smallest = key[vertex]
                chosen = vertex
        if chosen is None:
            raise ValueError("graph is not connected")
        in_tree[chosen] = True
        for vertex, weight in enumerate(graph[chosen]):
            if weight and not in_tree[vertex] and weight < key[vertex]:
                parent[vertex] = chosen
                key[vertex] = weight

    if any(parent[vertex] is None for vertex in range(1, size)):
        raise ValueError("graph is not connected")
    return [(parent[v], v, graph[v][parent[v]]) for v in range(1, size)]


_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def rotting_time(grid: Sequence[Sequence[int]]) -> Optional[int]:
    """Minutes until every fresh cell (1) is reached by rot spreading from 2s.

    Rot moves one step up, down, left or right per minute; 0 is empty.
    Returns None when some fresh cell can never be reached.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")

    seen = [[False] * cols for _ in range(rows)]
    queue: deque[tuple[int, int, int]] = deque()
    fresh = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 2:
                queue.append((r, c, 0))
                seen[r][c] = True
            elif cell == 1:
                fresh += 1

    elapsed = 0
    while queue:
        r, c, minute = queue.popleft()
        elapsed = max(elapsed, minute)
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and not seen[nr][nc] and grid[nr][nc] == 1:
                seen[nr][nc] = True
                fresh -= 1
                queue.append((nr, nc, minute + 1))

    return None if fresh else elapsed