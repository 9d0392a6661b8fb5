"""Random maze generation and writing of the maze file."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

WALL = "#"
FREE = "."
DEFAULT_MAZE_FILE = "labirinto.txt"

MIN_SIZE, MAX_SIZE = 7, 100
MIN_PERCENT, MAX_PERCENT = 10, 80


class InvalidParametersError(ValueError):
    """Raised when the maze size and wall percentage are rejected."""


def validate_parameters(size: int, wall_percent: int) -> None:
    """Reject the parameters when both the percentage and the size are out of range."""
    percent_bad = not MIN_PERCENT <= wall_percent <= MAX_PERCENT
    size_bad = not MIN_SIZE <= size <= MAX_SIZE
    if percent_bad and size_bad:
        raise InvalidParametersError("entrada invalida")


def generate_maze(
    size: int, wall_percent: int, rng: random.Random | None = None
) -> list[str]:
    """Build a ``size`` x ``size`` maze with walled borders.

    Each interior cell becomes a wall with probability ``wall_percent``/100.
    """
    validate_parameters(size, wall_percent)
    if size < 1:
        raise InvalidParametersError("entrada invalida")
    rng = rng if rng is not None else random.Random()

    def cell(i: int, j: int) -> str:
        if i in (0, size - 1) or j in (0, size - 1):
            return WALL
        return WALL if rng.randint(1, 100) <= wall_percent else FREE

    return ["".join(cell(i, j) for j in range(size)) for i in range(size)]


def render_maze(maze: Sequence[str]) -> str:
    """Return the maze as text, one row per line."""
    return "".join(f"{row}\n" for row in maze)


def write_maze(maze: Sequence[str], path: str | Path) -> None:
    """Write the maze to ``path``."""
    Path(path).write_text(render_maze(maze), encoding="ascii")


def main(argv: Sequence[str] | None = None) -> int:
    """Read the size and wall percentage, then write a new maze file."""
    parser = argparse.ArgumentParser(description="Generate a random maze.")
    parser.add_argument("size", nargs="?", type=int)
    parser.add_argument("wall_percent", nargs="?", type=int)
    parser.add_argument("-o", "--output", default=DEFAULT_MAZE_FILE)
    args = parser.parse_args(argv)

    size, wall_percent = args.size, args.wall_percent
    if size is None or wall_percent is None:
        tokens = sys.stdin.read().split()
        try:
            size, wall_percent = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError):
            print("entrada invalida")
            return 0

    try:
        maze = generate_maze(size, wall_percent)
    except InvalidParametersError:
        print("entrada invalida")
        return 0

    try:
        write_maze(maze, args.output)
    except OSError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())