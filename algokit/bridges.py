"""Bridges (critical connections) in undirected graphs."""

from __future__ import annotations

from typing import Iterable, Sequence


def _bridges(n: int, edges: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node < n:
                raise ValueError(f"node {node} is outside the range 0..{n - 1}")
        adjacency[u].append(v)
        adjacency[v].append(u)

    discovered = [-1] * n
    low = [-1] * n
    timer = 0
    result: list[tuple[int, int]] = []
    for root in range(n):
        if discovered[root] != -1:
            continue
        discovered[root] = low[root] = timer
        timer += 1
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if discovered[neighbour] == -1:
                    discovered[neighbour] = low[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                low[node] = min(low[node], discovered[neighbour])
            else:
                stack.pop()
                if stack:
                    above = stack[-1][0]
                    low[above] = min(low[above], low[node])
                    if low[node] > discovered[above]:
                        result.append((above, node))
    return result


def find_bridges(edges: Iterable[Sequence[int]], n: int) -> list[tuple[int, int]]:
    """Return every bridge of the undirected graph on nodes ``0..n-1``.

    Each bridge is ``(u, v)`` with ``u`` the endpoint visited first.
    """
    return _bridges(n, edges)


def critical_connections(
    n: int, connections: Iterable[Sequence[int]]
) -> list[tuple[int, int]]:
    """Return the connections whose removal splits the network of ``n`` servers."""
    return _bridges(n, connections)