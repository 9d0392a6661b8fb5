"""Reading a maze file into a numeric matrix."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

WALL_VALUE = -1
FREE_VALUE = 0
DEFAULT_MAZE_FILE = "labirinto.txt"

_CELL_VALUES = {"#": WALL_VALUE, ".": FREE_VALUE}


def parse_maze(text: str) -> list[list[int]]:
    """Turn maze text into a square matrix: -1 for walls, 0 for free cells.

    The size is the number of walls that open the first row; any character
    other than a wall or a free cell ends a row.
    """
    size = len(text) - len(text.lstrip("#"))
    if size == 0:
        raise ValueError("maze text does not start with a wall row")

    rows: list[list[int]] = []
    current: list[int] = []
    for ch in text:
        if ch in _CELL_VALUES:
            current.append(_CELL_VALUES[ch])
        elif ch != "\r":
            rows.append(current)
            current = []
    if current:
        rows.append(current)

    if len(rows) < size or any(len(row) < size for row in rows[:size]):
        raise ValueError(f"maze is not a {size}x{size} grid")
    return [row[:size] for row in rows[:size]]


def load_maze(path: str | Path) -> list[list[int]]:
    """Read and parse the maze file at ``path``."""
    return parse_maze(Path(path).read_text(encoding="ascii"))


def format_matrix(matrix: Sequence[Sequence[int]], width: int = 3) -> str:
    """Return the matrix as right-aligned columns of the given width."""
    return "".join(
        "".join(f"{value:{width}d}" for value in row) + "\n" for row in matrix
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Load the maze file and print its numeric matrix."""
    parser = argparse.ArgumentParser(description="Print a maze as a matrix.")
    parser.add_argument("path", nargs="?", default=DEFAULT_MAZE_FILE)
    args = parser.parse_args(argv)
    try:
        matrix = load_maze(args.path)
    except OSError as exc:
        print(f"cannot read {args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(format_matrix(matrix), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())