"""Minimum spanning trees: Kruskal, Prim and connecting points on a plane."""

from __future__ import annotations

import heapq
import math
from itertools import combinations
from typing import Iterable, Sequence


def _check_node(node: int, low: int, high: int) -> None:
    if not low <= node <= high:
        raise ValueError(f"node {node} is outside the range {low}..{high}")


class DisjointSet:
    """Union-find over ``0..n-1`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of elements cannot be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        _check_node(node, 0, len(self._parent) - 1)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets holding ``u`` and ``v``; return False if already joined."""
        u = self.find(u)
        v = self.find(v)
        if u == v:
            return False
        if self._rank[u] < self._rank[v]:
            self._parent[u] = v
        elif self._rank[u] > self._rank[v]:
            self._parent[v] = u
        else:
            self._parent[v] = u
            self._rank[u] += 1
        return True


def _kruskal(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    components = DisjointSet(n)
    total = 0
    for u, v, weight in sorted(edges, key=lambda edge: edge[2]):
        if components.union(u, v):
            total += weight
    return total


def minimum_spanning_tree(edges: Iterable[Sequence[int]], n: int) -> int:
    """Total weight of a minimum spanning forest of nodes ``0..n-1``.

    Each edge is ``(u, v, weight)``; the input is left unchanged.
    """
    checked: list[tuple[int, int, int]] = []
    for u, v, weight in edges:
        _check_node(u, 0, n - 1)
        _check_node(v, 0, n - 1)
        checked.append((u, v, weight))
    return _kruskal(n, checked)


def prims_mst(
    n: int, edges: Iterable[tuple[Sequence[int], int]]
) -> list[tuple[tuple[int, int], int]]:
    """Return the edges of a minimum spanning tree grown from node 1.

    Nodes are ``1..n`` and each edge is ``((u, v), weight)``. The result holds
    ``((parent, node), weight)`` for every node from 2 to ``n`` in turn.
    Raises ValueError if the graph is not connected.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for (u, v), weight in edges:
        _check_node(u, 1, n)
        _check_node(v, 1, n)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    if n <= 0:
        return []

    parent = [-1] * (n + 1)
    distance: list[float] = [math.inf] * (n + 1)
    in_tree = [False] * (n + 1)
    distance[1] = 0
    heap: list[tuple[float, int]] = [(0, 1)]
    while heap:
        _, node = heapq.heappop(heap)
        if in_tree[node]:
            continue
        in_tree[node] = True
        for neighbour, weight in adjacency[node]:
            if not in_tree[neighbour] and weight < distance[neighbour]:
                distance[neighbour] = weight
                parent[neighbour] = node
                heapq.heappush(heap, (weight, neighbour))

    missing = [node for node in range(1, n + 1) if not in_tree[node]]
    if missing:
        raise ValueError(f"node {missing[0]} is not connected to node 1")
    return [((parent[node], node), int(distance[node])) for node in range(2, n + 1)]


def manhattan_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Return ``|x2 - x1| + |y2 - y1|``."""
    return abs(x2 - x1) + abs(y2 - y1)


def min_cost_connect_points(points: Sequence[Sequence[int]]) -> int:
    """Cheapest total Manhattan length joining all points, found with Kruskal."""
    edges = (
        (u, v, manhattan_distance(*points[u], *points[v]))
        for u, v in combinations(range(len(points)), 2)
    )
    return _kruskal(len(points), edges)


def min_cost_connect_points_prims(points: Sequence[Sequence[int]]) -> int:
    """Cheapest total Manhattan length joining all points, found with dense Prim."""
    n = len(points)
    distance: list[float] = [math.inf] * n
    in_tree = [False] * n
    if n:
        distance[0] = 0
    total = 0
    for _ in range(n):
        node = min(
            (candidate for candidate in range(n) if not in_tree[candidate]),
            key=distance.__getitem__,
        )
        in_tree[node] = True
        total += int(distance[node])
        x, y = points[node]
        for other in range(n):
            if not in_tree[other]:
                d = manhattan_distance(x, y, *points[other])
                if d < distance[other]:
                    distance[other] = d
    return total