import random

import pytest

from labirinto.generator import generate_maze, render_maze
from labirinto.grid import format_matrix, load_maze, main, parse_maze


def test_parse_small_maze():
    assert parse_maze("###\n#.#\n###\n") == [
        [-1, -1, -1],
        [-1, 0, -1],
        [-1, -1, -1],
    ]


def test_parse_without_trailing_newline():
    assert parse_maze("###\n#.#\n###") == parse_maze("###\n#.#\n###\n")


def test_parse_accepts_crlf():
    assert parse_maze("###\r\n#.#\r\n###\r\n") == parse_maze("###\n#.#\n###\n")


def test_parse_round_trip_with_generator():
    maze = generate_maze(15, 35, random.Random(11))
    matrix = parse_maze(render_maze(maze))
    assert len(matrix) == 15
    for row, values in zip(maze, matrix):
        assert values == [-1 if ch == "#" else 0 for ch in row]


def test_parse_rejects_empty():
    with pytest.raises(ValueError):
        parse_maze("")


def test_parse_rejects_short_grid():
    with pytest.raises(ValueError):
        parse_maze("####\n#..#\n")


def test_format_matrix_columns():
    assert format_matrix([[-1, 0]]) == " -1  0\n"


def test_format_matrix_width_invariant():
    matrix = parse_maze(render_maze(generate_maze(8, 40, random.Random(2))))
    lines = format_matrix(matrix, 4).splitlines()
    assert len(lines) == 8
    assert all(len(line) == 32 for line in lines)


def test_load_maze_and_main(tmp_path, monkeypatch, capsys):
    (tmp_path / "labirinto.txt").write_text("###\n#.#\n###\n")
    assert load_maze(tmp_path / "labirinto.txt")[1] == [-1, 0, -1]
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == format_matrix(parse_maze("###\n#.#\n###\n"))


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1