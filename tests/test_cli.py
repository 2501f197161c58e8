import io

import pytest

from csesgraphs.cli import main
from csesgraphs.grids import find_path
from csesgraphs.shortest import all_pairs_shortest, find_negative_cycle
from csesgraphs.spiral import spiral_value

MAZE = [
    "########",
    "#.A#...#",
    "#.##.#B#",
    "#......#",
    "########",
]


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out.splitlines(), captured.err


def test_spiral_answers_each_query(monkeypatch, capsys):
    queries = [(2, 3), (1, 1), (4, 2), (7, 9)]
    text = f"{len(queries)}\n" + "".join(f"{r} {c}\n" for r, c in queries)
    code, lines, _ = _run(monkeypatch, capsys, ["spiral"], text)
    assert code == 0
    assert lines == [str(spiral_value(r, c)) for r, c in queries]


def test_spiral_rejects_zero_tests(monkeypatch, capsys):
    code, lines, err = _run(monkeypatch, capsys, ["spiral"], "0\n")
    assert code == 1
    assert lines == []
    assert "positive" in err


def test_labyrinth_prints_path(monkeypatch, capsys):
    text = f"{len(MAZE)} {len(MAZE[0])}\n" + "\n".join(MAZE) + "\n"
    code, lines, _ = _run(monkeypatch, capsys, ["labyrinth"], text)
    assert code == 0
    assert lines[0] == "YES"
    assert lines[2] == find_path(MAZE)
    assert lines[1] == str(len(lines[2]))


def test_labyrinth_without_path(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, ["labyrinth"], "1 3\nA#B\n")
    assert code == 0
    assert lines == ["NO"]


def test_labyrinth_rejects_ragged_rows(monkeypatch, capsys):
    code, lines, err = _run(monkeypatch, capsys, ["labyrinth"], "2 3\nA.B\n..\n")
    assert code == 1
    assert lines == []
    assert err.startswith("csesgraphs:")


def test_routes_answers_queries(monkeypatch, capsys):
    edges = [(1, 2, 5), (1, 3, 9), (2, 3, 3)]
    queries = [(1, 2), (2, 1), (3, 1), (1, 4)]
    text = (
        f"4 {len(edges)} {len(queries)}\n"
        + "".join(f"{a} {b} {w}\n" for a, b, w in edges)
        + "".join(f"{a} {b}\n" for a, b in queries)
    )
    code, lines, _ = _run(monkeypatch, capsys, ["routes"], text)
    matrix = all_pairs_shortest(4, edges)
    assert code == 0
    assert lines[:3] == [str(matrix[a - 1][b - 1]) for a, b in queries[:3]]
    assert lines[3] == "-1"


def test_cycle_absent(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, ["cycle"], "3 2\n1 2 1\n2 3 1\n")
    assert code == 0
    assert lines == ["NO"]


def test_cycle_present(monkeypatch, capsys):
    edges = [(1, 2, 1), (2, 4, 1), (3, 1, 1), (4, 1, -3), (4, 3, -2)]
    text = f"4 {len(edges)}\n" + "".join(f"{a} {b} {w}\n" for a, b, w in edges)
    code, lines, _ = _run(monkeypatch, capsys, ["cycle"], text)
    assert code == 0
    assert lines[0] == "YES"
    assert lines[1] == " ".join(map(str, find_negative_cycle(4, edges)))


def test_truncated_input_fails(monkeypatch, capsys):
    code, lines, err = _run(monkeypatch, capsys, ["cycle"], "3 2\n1 2 1\n")
    assert code == 1
    assert lines == []
    assert "end of input" in err


def test_unknown_problem_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main(["nonsense"])
    assert excinfo.value.code == 2