"""Adjacency-list graph structures and their text rendering."""

from __future__ import annotations

from typing import Iterable, Sequence


def _check_node(node: int, n: int) -> None:
    if not 0 <= node < n:
        raise ValueError(f"node {node} is outside the range 0..{n - 1}")


class Graph:
    """A graph stored as a mapping from node to its list of neighbours.

    Nodes appear in the order in which they were first given an entry.
    """

    def __init__(self) -> None:
        self._adjacency: dict[int, list[int]] = {}

    def add_edge(self, u: int, v: int, directed: bool) -> None:
        """Add an edge from ``u`` to ``v``; undirected edges are stored both ways."""
        self._adjacency.setdefault(u, []).append(v)
        if not directed:
            self._adjacency.setdefault(v, []).append(u)

    def neighbours(self, node: int) -> list[int]:
        """Return the neighbours of ``node`` in insertion order (empty if it has none)."""
        return list(self._adjacency.get(node, ()))

    def format(self) -> str:
        """Render every node with an entry as ``node -> a, b, `` lines."""
        return "".join(
            f"{node} -> " + "".join(f"{target}, " for target in targets) + "\n"
            for node, targets in self._adjacency.items()
        )


def build_adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Build undirected adjacency rows for nodes ``0..n-1``.

    Each row starts with the node itself, followed by its neighbours in edge order.
    """
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        neighbours[u].append(v)
        neighbours[v].append(u)
    return [[node, *row] for node, row in enumerate(neighbours)]


def format_adjacency(adjacency: Sequence[Sequence[int]]) -> str:
    """Render adjacency rows as ``index -> a, b, `` lines."""
    return "".join(
        f"{index} -> " + "".join(f"{value}, " for value in row) + "\n"
        for index, row in enumerate(adjacency)
    )