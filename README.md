# csesgraphs

A small collection of grid and graph algorithms, each one solving a classic
programming problem: counting rooms in a floor plan, finding a way through a
labyrinth, escaping monsters, shortest routes, high scores, negative cycles
and more.

Everything is plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### `csesgraphs.spiral`

- `spiral_value(row, col)` – the number at a 1-based row and column of the
  infinite number spiral. Raises `ValueError` if either is below 1.

### `csesgraphs.grids`

Grids are given as a sequence of equal-length strings, with `#` for walls and
any other character for floor. Rows of different lengths raise `ValueError`.
Moves are written as the letters `U`, `D`, `L`, `R`.

- `count_rooms(grid)` – number of connected floor regions.
- `find_path(grid)` – moves of a shortest way from `A` to `B`, or `None` when
  `B` cannot be reached. Raises `ValueError` if the grid has no `A` or no `B`.
- `escape(grid)` – moves that take `A` to a border cell strictly before any
  monster `M` can reach it, or `None`.
- `escape_by_exits(grid)` – the same question answered by a search from each
  exit in turn; slower, but a useful cross-check.

### `csesgraphs.connectivity`

Graphs have nodes numbered from 1 to `n` and are given as a list of
undirected edges `(a, b)`. An edge naming a node outside `1..n` raises
`ValueError`.

- `connect_components(n, edges)` – the list of new roads `(a, b)` needed to
  join every component.
- `message_route(n, edges)` – a shortest list of nodes from 1 to `n`, or
  `None`.
- `assign_teams(n, edges)` – a list giving team 1 or 2 for each node so that
  no edge joins members of the same team, or `None` if impossible.
- `find_round_trip(n, edges)` – a cycle as a list of nodes that starts and
  ends at the same node, or `None`.
- `topological_sort(num_vertices, adjacency)` – an order of the vertices
  `0..num_vertices-1` of a directed acyclic graph, given as one list of
  successors per vertex, in which every edge points forward.

### `csesgraphs.shortest`

Weighted graphs are given as directed edges `(a, b, weight)` on nodes `1..n`
(undirected for `all_pairs_shortest`).

- `dijkstra(n, edges)` – shortest distances from node 1 to each node, `None`
  where unreachable.
- `bellman_ford(n, edges)` – the same by repeated relaxation; negative
  weights are allowed.
- `all_pairs_shortest(n, edges)` – an `n × n` matrix of distances, `None`
  where two nodes are not connected.
- `high_score(n, edges)` – the largest total weight of a walk from 1 to `n`;
  `None` when it can grow without limit, `ValueError` when `n` is unreachable.
- `discount_price(n, edges)` – cheapest price from 1 to `n` when one flight
  may be taken at half price (rounded down), or `None`.
- `discount_price_greedy(n, edges)` – a single-pass greedy search for the
  same problem; it does not always find the cheapest price.
- `find_negative_cycle(n, edges)` – a cycle of negative total weight, first
  node repeated at the end, or `None`.

Example:

```python
from csesgraphs.grids import count_rooms
from csesgraphs.shortest import dijkstra, discount_price

count_rooms([
    "########",
    "#..#...#",
    "####.#.#",
    "#..#...#",
    "########",
])                                               # 3

dijkstra(3, [(1, 2, 6), (1, 3, 2), (3, 2, 3)])   # [0, 5, 2]

discount_price(3, [(1, 2, 3), (2, 3, 1), (1, 3, 7), (2, 1, 5)])   # 2
```

## Command line

The `csesgraphs` command reads whitespace-separated input on standard input
and prints the answer:

```
csesgraphs --help
csesgraphs spiral < input.txt
```

Problems:

- `spiral` – a count `t`, then `t` pairs `row col`; prints one number per pair.
- `labyrinth` – `n m`, then `n` rows of the grid; prints `NO`, or `YES`, the
  path length and the moves.
- `routes` – `n m q`, then `m` edges `a b weight`, then `q` queries `a b`;
  prints each distance, or `-1` when there is no route.
- `cycle` – `n m`, then `m` directed edges `a b weight`; prints `NO`, or
  `YES` and the nodes of a negative cycle.

Malformed input is reported on standard error with exit status 1.

## Limitations

The command line covers only the four problems above. Rooms, monsters,
roads, message routes, teams, round trips, topological sort, single-source
shortest routes, high score and flight discount are available from the
library only.