"""Searches on character grids where ``#`` marks a wall."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Cell = tuple[int, int]

WALL = "#"
_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))
_OPPOSITE = {"U": "D", "D": "U", "L": "R", "R": "L"}


def _rows(grid: Iterable[str]) -> list[str]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _cells(rows: Sequence[str]) -> Iterator[tuple[Cell, str]]:
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            yield (r, c), ch


def _open_neighbours(rows: Sequence[str], cell: Cell) -> Iterator[tuple[str, Cell]]:
    r, c = cell
    height, width = len(rows), len(rows[0])
    for letter, dr, dc in _MOVES:
        nr, nc = r + dr, c + dc
        if 0 <= nr < height and 0 <= nc < width and rows[nr][nc] != WALL:
            yield letter, (nr, nc)


def _locate(rows: Sequence[str], marker: str) -> Cell:
    found = [cell for cell, ch in _cells(rows) if ch == marker]
    if not found:
        raise ValueError(f"grid has no {marker!r} cell")
    return found[-1]


def _bfs(
    rows: Sequence[str], sources: Iterable[Cell], stop: Cell | None = None
) -> tuple[dict[Cell, int], dict[Cell, tuple[Cell, str]]]:
    """Breadth-first search from all sources; parent maps a cell to (previous, move)."""
    dist = {source: 0 for source in sources}
    parent: dict[Cell, tuple[Cell, str]] = {}
    queue = deque(dist)
    while queue:
        current = queue.popleft()
        if current == stop:
            break
        for letter, neighbour in _open_neighbours(rows, current):
            if neighbour not in dist:
                dist[neighbour] = dist[current] + 1
                parent[neighbour] = (current, letter)
                queue.append(neighbour)
    return dist, parent


def _trace(parent: dict[Cell, tuple[Cell, str]], end: Cell) -> str:
    moves = []
    while end in parent:
        end, letter = parent[end]
        moves.append(letter)
    return "".join(reversed(moves))


def _walk_towards_root(parent: dict[Cell, tuple[Cell, str]], start: Cell) -> str:
    moves = []
    while start in parent:
        start, letter = parent[start]
        moves.append(_OPPOSITE[letter])
    return "".join(moves)


def _exits(rows: Sequence[str]) -> list[Cell]:
    height, width = len(rows), len(rows[0])
    return [
        (r, c)
        for (r, c), ch in _cells(rows)
        if ch not in (WALL, "M")
        and (r in (0, height - 1) or c in (0, width - 1))
    ]


def count_rooms(grid: Iterable[str]) -> int:
    """Count the connected areas of floor cells (anything but ``#``)."""
    rows = _rows(grid)
    seen: set[Cell] = set()
    rooms = 0
    for cell, ch in _cells(rows):
        if ch == WALL or cell in seen:
            continue
        rooms += 1
        seen.add(cell)
        stack = [cell]
        while stack:
            current = stack.pop()
            for _, neighbour in _open_neighbours(rows, current):
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
    return rooms


def find_path(grid: Iterable[str]) -> str | None:
    """Return the moves of a shortest path from ``A`` to ``B``, or None if there is none."""
    rows = _rows(grid)
    source = _locate(rows, "A")
    destination = _locate(rows, "B")
    dist, parent = _bfs(rows, [source], stop=destination)
    if destination not in dist:
        return None
    return _trace(parent, destination)


def escape(grid: Iterable[str]) -> str | None:
    """Return moves taking ``A`` to the border always ahead of every ``M``, or None."""
    rows = _rows(grid)
    start = _locate(rows, "A")
    monsters = [cell for cell, ch in _cells(rows) if ch == "M"]
    own_dist, parent = _bfs(rows, [start])
    monster_dist, _ = _bfs(rows, monsters)
    for exit_cell in _exits(rows):
        if exit_cell in own_dist and monster_dist.get(
            exit_cell, float("inf")
        ) > own_dist[exit_cell]:
            return _trace(parent, exit_cell)
    return None


def escape_by_exits(grid: Iterable[str]) -> str | None:
    """Same question as :func:`escape`, answered by searching from each exit in turn."""
    rows = _rows(grid)
    start = _locate(rows, "A")
    monsters = [cell for cell, ch in _cells(rows) if ch == "M"]
    for exit_cell in _exits(rows):
        dist, parent = _bfs(rows, [exit_cell])
        if start not in dist:
            continue
        nearest = min(
            (dist.get(m, float("inf")) for m in monsters), default=float("inf")
        )
        if nearest > dist[start]:
            return _walk_towards_root(parent, start)
    return None