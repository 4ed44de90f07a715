"""Breadth-first and depth-first traversals and unweighted shortest paths."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence


def bfs_traversal(n: int, adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the breadth-first visiting order of nodes reachable from node 0."""
    if n <= 0:
        raise ValueError("bfs_traversal() requires at least one node")
    visited = [False] * n
    visited[0] = True
    queue = deque([0])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not 0 <= neighbour < n:
                raise ValueError(f"node {neighbour} is outside the range 0..{n - 1}")
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def _undirected(n: int, edges: Iterable[Sequence[int]], first: int) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + first)]
    for u, v in edges:
        for node in (u, v):
            if not first <= node < n + first:
                raise ValueError(
                    f"node {node} is outside the range {first}..{n + first - 1}"
                )
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def depth_first_search(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the depth-first visiting order of each connected component.

    Nodes are ``0..n-1``; components are started from the lowest unvisited node.
    """
    adjacency = _undirected(n, edges, 0)
    visited = [False] * n
    components: list[list[int]] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        order = [start]
        stack = [iter(adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
        components.append(order)
    return components


def shortest_path_unweighted(
    edges: Iterable[Sequence[int]], n: int, source: int, target: int
) -> list[int]:
    """Return a shortest path from ``source`` to ``target`` in an undirected graph.

    Nodes are ``1..n``. Raises ValueError when ``target`` cannot be reached.
    """
    adjacency = _undirected(n, edges, 1)
    for node in (source, target):
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside the range 1..{n}")
    parent: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                queue.append(neighbour)
    if target not in parent:
        raise ValueError(f"node {target} is not reachable from node {source}")
    path: list[int] = []
    current: int | None = target
    while current is not None:
        path.append(current)
        current = parent[current]
    path.reverse()
    return path