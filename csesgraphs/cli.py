"""Command line solver reading problem input on stdin and writing answers to stdout."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from csesgraphs.grids import find_path
from csesgraphs.shortest import all_pairs_shortest, find_negative_cycle
from csesgraphs.spiral import spiral_value


def _take(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise ValueError("unexpected end of input")
    return token


def _int(tokens: Iterator[str]) -> int:
    token = _take(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _weighted_edges(tokens: Iterator[str], count: int) -> list[tuple[int, int, int]]:
    return [(_int(tokens), _int(tokens), _int(tokens)) for _ in range(count)]


def _spiral(tokens: Iterator[str]) -> list[str]:
    tests = _int(tokens)
    if tests < 1:
        raise ValueError("the number of tests must be positive")
    return [str(spiral_value(_int(tokens), _int(tokens))) for _ in range(tests)]


def _labyrinth(tokens: Iterator[str]) -> list[str]:
    height, width = _int(tokens), _int(tokens)
    rows = [_take(tokens) for _ in range(height)]
    if any(len(row) != width for row in rows):
        raise ValueError(f"every row must have {width} cells")
    path = find_path(rows)
    if path is None:
        return ["NO"]
    return ["YES", str(len(path)), path]


def _routes(tokens: Iterator[str]) -> list[str]:
    n, m, queries = _int(tokens), _int(tokens), _int(tokens)
    matrix = all_pairs_shortest(n, _weighted_edges(tokens, m))
    answers = []
    for _ in range(queries):
        a, b = _int(tokens), _int(tokens)
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"query ({a}, {b}) refers to a node outside 1..{n}")
        distance = matrix[a - 1][b - 1]
        answers.append(str(-1 if distance is None else distance))
    return answers


def _cycle(tokens: Iterator[str]) -> list[str]:
    n, m = _int(tokens), _int(tokens)
    cycle = find_negative_cycle(n, _weighted_edges(tokens, m))
    if cycle is None:
        return ["NO"]
    return ["YES", " ".join(map(str, cycle))]


_SOLVERS: dict[str, Callable[[Iterator[str]], list[str]]] = {
    "spiral": _spiral,
    "labyrinth": _labyrinth,
    "routes": _routes,
    "cycle": _cycle,
}


def main(argv: list[str] | None = None) -> int:
    """Solve the named problem for the input on stdin; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="csesgraphs", description="Solve a graph problem read from standard input."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        lines = _SOLVERS[args.problem](tokens)
    except ValueError as error:
        print(f"csesgraphs: {error}", file=sys.stderr)
        return 1
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())