"""Breadth-first distance annotation of a maze and shortest-path extraction."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

from labirinto.point import Point

START = Point(1, 1)

# Neighbour order used both when spreading distances and when walking back.
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class NoPathError(LookupError):
    """Raised when the exit cannot be traced back to the entrance.

    ``partial`` holds the cells walked before the trail broke off, ordered
    from the cell closest to the entrance to the exit.
    """

    def __init__(self, partial: Iterable[Point]) -> None:
        super().__init__("nao ha caminho")
        self.partial = list(partial)


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if size < 3 or any(len(row) != size for row in matrix):
        raise ValueError("maze must be a square grid of at least 3x3 cells")
    return size


def _neighbours(x: int, y: int, size: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size:
            yield nx, ny


def end_point(size: int) -> Point:
    """Return the exit cell of a maze of the given size."""
    return Point(size - 2, size - 2)


def annotate(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of the matrix with each reachable free cell numbered.

    The entrance at (1, 1) gets 1 and every free cell reached from it gets
    its breadth-first distance plus one. Walls keep -1 and unreachable free
    cells keep 0.
    """
    size = _check_square(matrix)
    result = [list(row) for row in matrix]
    result[START.x][START.y] = 1
    queue = deque([(START.x, START.y)])
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, size):
            if result[nx][ny] == 0:
                result[nx][ny] = result[x][y] + 1
                queue.append((nx, ny))
    return result


def extract_path(matrix: Sequence[Sequence[int]]) -> list[Point]:
    """Trace a shortest path through an annotated matrix.

    Returns the cells from the entrance (1, 1) to the exit (N-2, N-2).
    Raises NoPathError when the exit is not connected to the entrance.
    """
    size = _check_square(matrix)
    here = end_point(size)
    x, y = int(here.x), int(here.y)
    trail = [Point(x, y)]
    while (x, y) != (START.x, START.y):
        wanted = matrix[x][y] - 1
        step = next(
            (
                (nx, ny)
                for nx, ny in _neighbours(x, y, size)
                if wanted >= 1 and matrix[nx][ny] == wanted
            ),
            None,
        )
        if step is None:
            raise NoPathError(reversed(trail))
        x, y = step
        trail.append(Point(x, y))
    trail.reverse()
    return trail