"""Cycle detection in undirected and directed graphs with nodes ``1..n``."""

from __future__ import annotations

from typing import Iterable, Sequence


def _adjacency(
    edges: Iterable[Sequence[int]], n: int, *, directed: bool
) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        for node in (u, v):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside the range 1..{n}")
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def has_cycle_undirected(edges: Iterable[Sequence[int]], n: int) -> bool:
    """Return True if the undirected graph on nodes ``1..n`` contains a cycle."""
    adjacency = _adjacency(edges, n, directed=False)
    visited = [False] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, None, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_directed(edges: Iterable[Sequence[int]], n: int) -> bool:
    """Return True if the directed graph on nodes ``1..n`` contains a cycle."""
    adjacency = _adjacency(edges, n, directed=True)
    visited = [False] * (n + 1)
    on_path = [False] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = on_path[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if on_path[neighbour]:
                    return True
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                on_path[node] = False
                stack.pop()
    return False