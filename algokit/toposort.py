"""Topological ordering of directed graphs and course scheduling."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence


def _adjacency(
    edges: Iterable[Sequence[int]], n: int, *, reverse: bool = False
) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node < n:
                raise ValueError(f"node {node} is outside the range 0..{n - 1}")
        if reverse:
            adjacency[v].append(u)
        else:
            adjacency[u].append(v)
    return adjacency


def _kahn(adjacency: list[list[int]]) -> list[int]:
    indegree = [0] * len(adjacency)
    for targets in adjacency:
        for target in targets:
            indegree[target] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adjacency[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def topological_sort_dfs(edges: Iterable[Sequence[int]], n: int) -> list[int]:
    """Order nodes ``0..n-1`` by reversed depth-first finishing time."""
    adjacency = _adjacency(edges, n)
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, targets = stack[-1]
            for target in targets:
                if not visited[target]:
                    visited[target] = True
                    stack.append((target, iter(adjacency[target])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished


def topological_sort_kahn(edges: Iterable[Sequence[int]], n: int) -> list[int]:
    """Order nodes ``0..n-1`` by repeatedly removing nodes of in-degree zero.

    Nodes on a cycle never reach in-degree zero and are left out.
    """
    return _kahn(_adjacency(edges, n))


def can_finish(n: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return True if the dependency pairs among ``n`` courses contain no cycle."""
    return len(_kahn(_adjacency(prerequisites, n))) == n


def find_order(n: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order to take ``n`` courses, or an empty list if none exists.

    A pair ``[a, b]`` means course ``b`` must be taken before course ``a``.
    """
    order = _kahn(_adjacency(prerequisites, n, reverse=True))
    return order if len(order) == n else []