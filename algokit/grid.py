"""Earliest arrival at the last room of a grid whose rooms open at given times."""

from __future__ import annotations

import heapq
import math
from typing import Callable, Sequence

_MOVES = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _earliest_arrival(
    move_time: Sequence[Sequence[int]], step_cost: Callable[[int, int], int]
) -> int:
    if not move_time or not move_time[0]:
        raise ValueError("the grid must have at least one room")
    rows = len(move_time)
    cols = len(move_time[0])
    if any(len(row) != cols for row in move_time):
        raise ValueError("every row of the grid must have the same length")

    best = [[math.inf] * cols for _ in range(rows)]
    best[0][0] = 0
    heap = [(0, 0, 0)]
    target = (rows - 1, cols - 1)
    while heap:
        time, row, col = heapq.heappop(heap)
        if (row, col) == target:
            return time
        if time > best[row][col]:
            continue
        for d_row, d_col in _MOVES:
            n_row, n_col = row + d_row, col + d_col
            if 0 <= n_row < rows and 0 <= n_col < cols:
                arrival = max(time, move_time[n_row][n_col]) + step_cost(n_row, n_col)
                if arrival < best[n_row][n_col]:
                    best[n_row][n_col] = arrival
                    heapq.heappush(heap, (arrival, n_row, n_col))
    return -1


def min_time_to_reach(move_time: Sequence[Sequence[int]]) -> int:
    """Earliest time to reach the bottom-right room when every move takes one second.

    A room can be entered only once its opening time has passed.
    """
    return _earliest_arrival(move_time, lambda row, col: 1)


def min_time_to_reach_alternating(move_time: Sequence[Sequence[int]]) -> int:
    """Earliest time to reach the bottom-right room when moves take 1 and 2 seconds in turn."""
    return _earliest_arrival(move_time, lambda row, col: 2 if (row + col) % 2 == 0 else 1)