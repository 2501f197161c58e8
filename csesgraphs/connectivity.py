"""Traversal problems on small unweighted graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) refers to a node outside 1..{n}")
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _preorder(adjacency: Sequence[Iterable[int]], root: int, visited: list[bool]) -> Iterator[int]:
    visited[root] = True
    yield root
    stack = [iter(adjacency[root])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                yield neighbour
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()


def connect_components(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the new roads that join all components of nodes ``1..n``."""
    adjacency = _undirected(n, edges)
    visited = [False] * (n + 1)
    roads: list[tuple[int, int]] = []
    last: int | None = None
    for node in range(1, n + 1):
        if visited[node]:
            continue
        if last is not None:
            roads.append((last, node))
        for last in _preorder(adjacency, node, visited):
            pass
    return roads


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a shortest route of nodes from 1 to ``n``, or None if unreachable."""
    adjacency = _undirected(n, edges)
    parent: dict[int, int | None] = {1: None}
    queue = deque([1])
    while queue:
        current = queue.popleft()
        if current == n:
            break
        for neighbour in adjacency[current]:
            if neighbour not in parent:
                parent[neighbour] = current
                queue.append(neighbour)
    if n not in parent:
        return None
    route: list[int] = []
    at: int | None = n
    while at is not None:
        route.append(at)
        at = parent[at]
    route.reverse()
    return route


def assign_teams(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Split nodes into teams 1 and 2 so no edge stays within a team, or return None."""
    adjacency = _undirected(n, edges)
    team = [0] * (n + 1)
    for root in range(1, n + 1):
        if team[root]:
            continue
        team[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if not team[neighbour]:
                    team[neighbour] = team[node] % 2 + 1
                    queue.append(neighbour)
                elif team[neighbour] == team[node]:
                    return None
    return team[1:]


def find_round_trip(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a cycle as a list of nodes starting and ending at the same node, or None."""
    adjacency = _undirected(n, edges)
    visited = [False] * (n + 1)
    parent: list[int | None] = [None] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    parent[neighbour] = node
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
                if parent[node] != neighbour:
                    cycle = [neighbour]
                    at = node
                    while at != neighbour:
                        cycle.append(at)
                        at = parent[at]
                    cycle.append(neighbour)
                    return cycle
            else:
                stack.pop()
    return None


def topological_sort(num_vertices: int, adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Return vertices ``0..num_vertices-1`` so every edge points forward."""
    if len(adjacency) != num_vertices:
        raise ValueError("adjacency must have one entry per vertex")
    visited = [False] * num_vertices
    finished: list[int] = []
    for root in range(num_vertices):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished