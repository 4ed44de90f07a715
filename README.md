# algokit

A collection of classic algorithms for integer arrays and graphs. It is written
in plain Python and depends only on the standard library.

Graphs are passed as plain lists. Edges are pairs `(u, v)` or weighted triples
`(u, v, weight)`, and nodes are integers. Some functions number nodes from 0
and others from 1. Each section below says which numbering a function uses.
A node outside its range raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `algokit.arrays`

- `is_sorted(nums)`: returns True if `nums` is non-decreasing.
- `is_sorted_rotated(nums)`: returns True if `nums` is a rotation of a
  non-decreasing sequence.
- `sorted_intersection(first, second)`: returns the common elements of two
  sorted sequences. Repeated values are kept as many times as both inputs
  contain them.
- `sorted_union(first, second)`: returns the distinct elements of two sorted
  sequences, in sorted order.
- `largest_element(nums)`.
- `second_largest(nums)`: returns the second largest distinct value, or `-1`
  if there is none.
- `second_smallest(nums)`: returns the second smallest distinct value, or
  `2**31 - 1` if there is none.
- `move_zeroes(nums)`: moves the zeros to the end in place. The other elements
  keep their order.
- `remove_duplicates(nums)`: compacts a sorted list in place and returns `k`,
  the number of distinct values, which now fill its first `k` slots.
- `rotate(nums, k)`: rotates the list right by `k` positions, in place.

`is_sorted_rotated`, `largest_element`, `second_largest`, `second_smallest`
and `rotate` raise `ValueError` when given an empty sequence.

```python
from algokit.arrays import sorted_union, rotate

sorted_union([3, 4, 6, 7, 9, 9], [1, 5, 7, 8, 8])   # [1, 3, 4, 5, 6, 7, 8, 9]

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)                                      # nums is now [5, 6, 7, 1, 2, 3, 4]
```

## `algokit.subarrays`

- `longest_alternating_subarray(nums, threshold)`: returns the length of the
  longest run that starts with an even number, alternates parity and has no
  element above `threshold`.
- `longest_subarray_with_sum(nums, k)`: returns the length of the longest
  subarray that sums to `k`. It uses prefix sums, so negative numbers work.
- `longest_positive_subarray_with_sum(nums, k)`: does the same with a sliding
  window. The result is only correct for non-negative input.
- `count_subarrays_with_sum(nums, k)`: returns the number of subarrays that
  sum to `k`.

## `algokit.adjacency`

- `Graph()`: a graph stored as a mapping from each node to its neighbours.
  - `add_edge(u, v, directed)` adds an edge. An undirected edge is stored in
    both directions.
  - `neighbours(node)` returns the node's neighbours in insertion order.
  - `format()` renders the graph as lines of the form `node -> a, b, `.
    Nodes appear in the order they were first added.
- `build_adjacency(n, edges)`: builds undirected adjacency rows for nodes
  `0..n-1`. Each row starts with the node itself, followed by its neighbours.
- `format_adjacency(adjacency)`: renders rows as `index -> a, b, ` lines.

## `algokit.traversal`

- `bfs_traversal(n, adjacency)`: returns the breadth-first order of the nodes
  reachable from node 0 (nodes `0..n-1`).
- `depth_first_search(n, edges)`: returns the depth-first order of each
  connected component of an undirected graph on nodes `0..n-1`.
- `shortest_path_unweighted(edges, n, source, target)`: returns a shortest
  path in an undirected graph on nodes `1..n`. It raises `ValueError` if
  `target` cannot be reached.

## `algokit.cycles`

`has_cycle_undirected(edges, n)` and `has_cycle_directed(edges, n)` work on
nodes `1..n`.

## `algokit.toposort`

- `topological_sort_dfs(edges, n)`: orders nodes `0..n-1` by reversed
  depth-first finishing time.
- `topological_sort_kahn(edges, n)`: uses Kahn's algorithm. Nodes on a cycle
  are left out of the result.
- `can_finish(n, prerequisites)`: returns True if the dependency pairs contain
  no cycle.
- `find_order(n, prerequisites)`: returns a valid course order, or `[]` if
  none exists. A pair `[a, b]` means course `b` comes before course `a`.

## `algokit.shortest`

- `dijkstra(edges, n, source)`: returns the distances from `source` in an
  undirected weighted graph on nodes `0..n-1`. Unreachable nodes get
  `UNREACHABLE` (`2**31 - 1`).
- `network_delay_time(times, n, source)`: works on a directed graph on nodes
  `1..n`. It returns the time for a signal from `source` to reach every node,
  or `-1` if some node is never reached.
- `DagGraph(n, edges)`: a weighted DAG on nodes `0..n-1`. It provides
  `add_edge`, `topological_sort`, `shortest_path` (which relaxes edges in
  topological order) and `format`.
- `WeightedDigraph(n, edges)`: a weighted digraph on nodes `0..n-1`. It
  provides `add_edge`, `shortest_path` (which uses Dijkstra) and `format`.

In both classes `shortest_path` returns `-1` when the target is unreachable.

```python
from algokit.shortest import WeightedDigraph

g = WeightedDigraph(4, [[0, 2, 5], [0, 1, 2], [1, 2, 1], [3, 0, 3]])
g.shortest_path(3, 2)    # 6
g.shortest_path(0, 3)    # -1
g.add_edge([1, 3, 4])
g.shortest_path(0, 3)    # 6
```

## `algokit.grid`

Both functions take a rectangular grid of opening times. A room can be entered
only once its time has passed. Each function returns the earliest time to
reach the bottom-right room, starting from the top-left room at time 0.

- `min_time_to_reach(move_time)`: every move takes 1 second.
- `min_time_to_reach_alternating(move_time)`: moves take 1 and 2 seconds in
  turn.

An empty or ragged grid raises `ValueError`.

## `algokit.mst`

- `DisjointSet(n)`: union-find over `0..n-1`. `find(node)` returns the
  representative of a node's set. `union(u, v)` merges two sets and returns
  False if they were already joined.
- `minimum_spanning_tree(edges, n)`: returns the total weight of a minimum
  spanning forest, found with Kruskal's algorithm (nodes `0..n-1`).
- `prims_mst(n, edges)`: uses Prim's algorithm from node 1 (nodes `1..n`).
  Edges are given as `((u, v), weight)`. It returns a `((parent, node),
  weight)` tuple for each node from 2 to `n`, and raises `ValueError` if the
  graph is not connected.
- `manhattan_distance(x1, y1, x2, y2)`.
- `min_cost_connect_points(points)` and `min_cost_connect_points_prims(points)`:
  return the cheapest total Manhattan length that joins all the points.

```python
from algokit.mst import minimum_spanning_tree

minimum_spanning_tree([[0, 1, 3], [0, 3, 5], [1, 2, 1], [2, 3, 8]], 4)   # 9
```

## `algokit.bridges`

`find_bridges(edges, n)` and `critical_connections(n, connections)` use the
low-link method on undirected graphs with nodes `0..n-1`. They return, as
`(u, v)` tuples, the edges whose removal disconnects the graph.

## Scope

algokit is a library only. It has no command-line tool. It does not read
graphs from files or save them, and it provides no drawing or visualisation.