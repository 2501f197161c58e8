"""Shortest and longest path problems on weighted graphs with nodes ``1..n``."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence

Edge = tuple[int, int, int]


def _edges(n: int, edges: Iterable[Edge]) -> list[Edge]:
    if n < 1:
        raise ValueError("a graph needs at least one node")
    checked: list[Edge] = []
    for a, b, w in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) refers to a node outside 1..{n}")
        checked.append((a, b, w))
    return checked


def _half(value: int) -> int:
    """Halve an integer, rounding towards zero."""
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def _adjacency(size: int, edges: Iterable[Edge]) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(size + 1)]
    for a, b, w in edges:
        adjacency[a].append((b, w))
    return adjacency


def _dijkstra_from_one(adjacency: Sequence[Iterable[tuple[int, int]]]) -> list[int | None]:
    dist: list[int | None] = [None] * len(adjacency)
    done = [False] * len(adjacency)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        _, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        base = dist[u]
        for v, w in adjacency[u]:
            candidate = base + w
            if dist[v] is None or candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def dijkstra(n: int, edges: Iterable[Edge]) -> list[int | None]:
    """Return distances from node 1 to nodes ``1..n`` over directed edges; None if unreachable."""
    checked = _edges(n, edges)
    return _dijkstra_from_one(_adjacency(n, checked))[1:]


def bellman_ford(n: int, edges: Iterable[Edge]) -> list[int | None]:
    """Return distances from node 1 by repeated relaxation; negative edges are allowed."""
    checked = _edges(n, edges)
    dist: list[int | None] = [None] * (n + 1)
    dist[1] = 0
    for _ in range(n):
        changed = False
        for a, b, w in checked:
            if dist[a] is None:
                continue
            candidate = dist[a] + w
            if dist[b] is None or candidate < dist[b]:
                dist[b] = candidate
                changed = True
        if not changed:
            break
    return dist[1:]


def all_pairs_shortest(n: int, edges: Iterable[Edge]) -> list[list[int | None]]:
    """Return the matrix of shortest distances over undirected edges.

    Row ``i - 1``, column ``j - 1`` holds the distance from node ``i`` to node
    ``j``, or None when they are not connected.
    """
    checked = _edges(n, edges)
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for i, row in enumerate(dist):
        row[i] = 0
    for a, b, w in checked:
        u, v = a - 1, b - 1
        shortest = min(dist[u][v], w)
        dist[u][v] = dist[v][u] = shortest
    for k in range(n):
        row_k = dist[k]
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, via in enumerate(row_k):
                if through + via < row[j]:
                    row[j] = through + via
    return [[None if d == math.inf else int(d) for d in row] for row in dist]


def high_score(n: int, edges: Iterable[Edge]) -> int | None:
    """Return the largest total weight of a walk from node 1 to node ``n``.

    Returns None when the score can grow without bound, and raises ValueError
    when node ``n`` cannot be reached from node 1.
    """
    checked = _edges(n, edges)
    score: list[int | None] = [None] * (n + 1)
    score[1] = 0
    on_loop = [False] * (n + 1)
    for round_number in range(1, n + 1):
        changed = False
        for a, b, w in checked:
            if score[a] is None:
                continue
            candidate = score[a] + w
            if score[b] is None or candidate > score[b]:
                score[b] = candidate
                if round_number == n:
                    on_loop[b] = True
                changed = True
        if not changed:
            break

    successors: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b, _ in checked:
        successors[a].append(b)
    visited = [False] * (n + 1)
    stack = [node for node in range(1, n + 1) if on_loop[node]]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        stack.extend(nxt for nxt in successors[node] if not visited[nxt])

    if visited[n]:
        return None
    if score[n] is None:
        raise ValueError(f"node {n} cannot be reached from node 1")
    return score[n]


def discount_price(n: int, edges: Iterable[Edge]) -> int | None:
    """Return the cheapest price from 1 to ``n`` when one flight may be halved.

    Returns None when node ``n`` cannot be reached.
    """
    checked = _edges(n, edges)
    layered: list[Edge] = []
    for u, v, w in checked:
        layered.append((u, v, w))
        layered.append((u, v + n, _half(w)))
        layered.append((u + n, v + n, w))
    return _dijkstra_from_one(_adjacency(2 * n, layered))[2 * n]


def discount_price_greedy(n: int, edges: Iterable[Edge]) -> int | None:
    """Return a discounted price from 1 to ``n`` found by a single greedy search.

    The search keeps, for each node, the most expensive flight on its best
    route and moves the discount onto a newer flight when that one is dearer.
    Returns None when node ``n`` cannot be reached.
    """
    checked = _edges(n, edges)
    adjacency = _adjacency(n, checked)
    regular = _dijkstra_from_one(adjacency)

    dist: list[int | None] = [None] * (n + 1)
    done = [False] * (n + 1)
    discounted = [0] * (n + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        _, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, c in adjacency[u]:
            cost = c
            if discounted[u] < c:
                cost = _half(c) + discounted[u] - _half(discounted[u])
            candidate = dist[u] + cost
            if dist[v] is None or candidate < dist[v]:
                dist[v] = candidate
                discounted[v] = max(discounted[u], c)
                if regular[u] is not None and regular[u] + _half(c) < dist[v]:
                    dist[v] = regular[u] + _half(c)
                    discounted[v] = c
                heapq.heappush(heap, (dist[v], v))
    return dist[n]


def find_negative_cycle(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Return a cycle of negative total weight, first node repeated at the end, or None."""
    checked = _edges(n, edges)
    dist = [0] * (n + 1)
    parent: list[int] = [0] * (n + 1)
    in_cycle = [False] * (n + 1)
    for round_number in range(n + 1):
        changed = False
        for a, b, w in checked:
            if dist[a] + w < dist[b]:
                dist[b] = dist[a] + w
                parent[b] = a
                if round_number == n:
                    in_cycle[b] = True
                changed = True
        if not changed:
            break

    start = next((node for node in range(1, n + 1) if in_cycle[node]), None)
    if start is None:
        return None
    for _ in range(n):
        start = parent[start]
    cycle = [start]
    node = parent[start]
    while node != start:
        cycle.append(node)
        node = parent[node]
    cycle.append(start)
    cycle.reverse()
    return cycle