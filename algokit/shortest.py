"""Weighted shortest paths: Dijkstra, network delay and DAG relaxation."""

from __future__ import annotations

import heapq
from typing import Iterable, Sequence

from .toposort import topological_sort_dfs

UNREACHABLE = 2**31 - 1
"""Distance reported by :func:`dijkstra` for nodes that cannot be reached."""


def _check_node(node: int, low: int, high: int) -> None:
    if not low <= node <= high:
        raise ValueError(f"node {node} is outside the range {low}..{high}")


def dijkstra(edges: Iterable[Sequence[int]], n: int, source: int) -> list[int]:
    """Return the distance from ``source`` to every node of an undirected graph.

    Nodes are ``0..n-1`` and each edge is ``(u, v, weight)``. Nodes that cannot
    be reached get the distance :data:`UNREACHABLE`.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        _check_node(u, 0, n - 1)
        _check_node(v, 0, n - 1)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    _check_node(source, 0, n - 1)

    distance = [UNREACHABLE] * n
    distance[source] = 0
    heap = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance


def network_delay_time(times: Iterable[Sequence[int]], n: int, source: int) -> int:
    """Time for a signal from ``source`` to reach all ``n`` nodes, or -1 if some never do.

    Nodes are ``1..n`` and each entry of ``times`` is a directed ``(u, v, delay)``.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, delay in times:
        _check_node(u, 1, n)
        _check_node(v, 1, n)
        adjacency[u - 1].append((v - 1, delay))
    _check_node(source, 1, n)

    distance: list[int | None] = [None] * n
    distance[source - 1] = 0
    heap = [(0, source - 1)]
    while heap:
        dist, node = heapq.heappop(heap)
        current = distance[node]
        if current is not None and dist > current:
            continue
        for neighbour, delay in adjacency[node]:
            candidate = dist + delay
            known = distance[neighbour]
            if known is None or candidate < known:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))

    if any(d is None for d in distance):
        return -1
    return max(d for d in distance if d is not None)


class _WeightedAdjacency:
    """Directed weighted graph on nodes ``0..n-1`` stored as adjacency lists."""

    def __init__(self, n: int, edges: Iterable[Sequence[int]] = ()) -> None:
        if n < 0:
            raise ValueError("the number of nodes cannot be negative")
        self.n = n
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
        for edge in edges:
            self._insert(edge)

    def _check(self, node: int) -> None:
        _check_node(node, 0, self.n - 1)

    def _insert(self, edge: Sequence[int]) -> None:
        u, v, weight = edge
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))

    def _render(self) -> str:
        lines = "".join(
            f"{node} -> "
            + "".join(f"{{{target}, {weight}}}, " for target, weight in targets)
            + "\n"
            for node, targets in enumerate(self._adjacency)
        )
        return lines + "\n"


class DagGraph(_WeightedAdjacency):
    """Weighted directed acyclic graph answering shortest-path queries by relaxation."""

    def add_edge(self, edge: Sequence[int]) -> None:
        """Add a directed edge given as ``(u, v, weight)``."""
        self._insert(edge)

    def format(self) -> str:
        """Render each node as ``node -> {v, w}, `` followed by a blank line."""
        return self._render()

    def topological_sort(self) -> list[int]:
        """Return the nodes in reversed depth-first finishing order."""
        arcs = (
            (node, target)
            for node, targets in enumerate(self._adjacency)
            for target, _ in targets
        )
        return topological_sort_dfs(arcs, self.n)

    def shortest_path(self, source: int, target: int) -> int:
        """Return the cheapest cost from ``source`` to ``target``, or -1 if unreachable."""
        self._check(source)
        self._check(target)
        distance: list[int | None] = [None] * self.n
        distance[source] = 0
        for node in self.topological_sort():
            current = distance[node]
            if current is None:
                continue
            for neighbour, weight in self._adjacency[node]:
                candidate = current + weight
                known = distance[neighbour]
                if known is None or candidate < known:
                    distance[neighbour] = candidate
        result = distance[target]
        return -1 if result is None else result


class WeightedDigraph(_WeightedAdjacency):
    """Weighted directed graph answering shortest-path queries with Dijkstra."""

    def add_edge(self, edge: Sequence[int]) -> None:
        """Add a directed edge given as ``(u, v, weight)``."""
        self._insert(edge)

    def format(self) -> str:
        """Render each node as ``node -> {v, w}, `` followed by a blank line."""
        return self._render()

    def shortest_path(self, source: int, target: int) -> int:
        """Return the cheapest cost from ``source`` to ``target``, or -1 if unreachable."""
        self._check(source)
        self._check(target)
        distance: list[int | None] = [None] * self.n
        distance[source] = 0
        heap = [(0, source)]
        while heap:
            dist, node = heapq.heappop(heap)
            current = distance[node]
            if current is not None and dist > current:
                continue
            if node == target:
                return dist
            for neighbour, weight in self._adjacency[node]:
                candidate = dist + weight
                known = distance[neighbour]
                if known is None or candidate < known:
                    distance[neighbour] = candidate
                    heapq.heappush(heap, (candidate, neighbour))
        result = distance[target]
        return -1 if result is None else result