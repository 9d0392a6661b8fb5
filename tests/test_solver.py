import pytest

from labirinto.grid import parse_maze
from labirinto.point import Point
from labirinto.solver import NoPathError, annotate, end_point, extract_path

OPEN = parse_maze("#####\n#...#\n#.#.#\n#...#\n#####\n")
BLOCKED = parse_maze("#####\n#...#\n#.###\n#.#.#\n#####\n")


def _adjacent(a, b):
    return abs(a.x - b.x) + abs(a.y - b.y) == 1


def test_annotate_marks_entrance_with_one():
    assert annotate(OPEN)[1][1] == 1


def test_annotate_keeps_walls():
    result = annotate(OPEN)
    for row_in, row_out in zip(OPEN, result):
        for before, after in zip(row_in, row_out):
            if before == -1:
                assert after == -1


def test_annotate_does_not_modify_input():
    copy = [list(row) for row in OPEN]
    annotate(OPEN)
    assert OPEN == copy


def test_annotate_neighbours_differ_by_at_most_one():
    result = annotate(OPEN)
    for i in range(1, 4):
        for j in range(1, 4):
            if result[i][j] > 0:
                for ni, nj in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
                    if result[ni][nj] > 0:
                        assert abs(result[ni][nj] - result[i][j]) <= 1


def test_annotate_leaves_unreachable_cells_zero():
    assert annotate(BLOCKED)[3][3] == 0


def test_annotate_sets_entrance_even_if_wall():
    matrix = [[-1] * 4 for _ in range(4)]
    result = annotate(matrix)
    assert result[1][1] == 1
    assert sum(v == -1 for row in result for v in row) == 15


def test_extract_path_runs_from_entrance_to_exit():
    path = extract_path(annotate(OPEN))
    assert path[0] == Point(1, 1)
    assert path[-1] == end_point(5)
    assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))


def test_extract_path_length_matches_annotation():
    annotated = annotate(OPEN)
    path = extract_path(annotated)
    assert len(path) == annotated[3][3]
    assert [annotated[p.x][p.y] for p in path] == list(range(1, len(path) + 1))


def test_extract_path_prefers_lower_row_neighbour_first():
    path = extract_path(annotate(OPEN))
    assert path == [Point(1, 1), Point(1, 2), Point(1, 3), Point(2, 3), Point(3, 3)]


def test_extract_path_without_path_raises():
    with pytest.raises(NoPathError) as info:
        extract_path(annotate(BLOCKED))
    assert info.value.partial == [Point(3, 3)]
    assert str(info.value) == "nao ha caminho"


def test_extract_path_on_smallest_maze():
    matrix = [[-1, -1, -1], [-1, 0, -1], [-1, -1, -1]]
    assert extract_path(annotate(matrix)) == [Point(1, 1)]


def test_non_square_rejected():
    with pytest.raises(ValueError):
        annotate([[-1, -1, -1], [-1, 0, -1]])


def test_too_small_rejected():
    with pytest.raises(ValueError):
        extract_path([[-1, -1], [-1, -1]])