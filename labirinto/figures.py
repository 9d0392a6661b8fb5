"""Rendering and writing of the maze figures and the solved path."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from labirinto.grid import DEFAULT_MAZE_FILE, WALL_VALUE, format_matrix, load_maze
from labirinto.point import Point
from labirinto.solver import START, NoPathError, annotate, extract_path

GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"
PATH_MARK = "x"

FIGURE_2A = "F2a.txt"
FIGURE_2B = "F2b.txt"
FIGURE_2C = "F2c.txt"
FIGURE_3B = "F3b.txt"


def wall_chars(matrix: Sequence[Sequence[int]]) -> list[list[str]]:
    """Map a numeric maze to characters: '#' for walls, a blank otherwise."""
    return [["#" if value == WALL_VALUE else " " for value in row] for row in matrix]


def render_chars(chars: Sequence[Sequence[str]]) -> str:
    """Return a character grid as text, each cell followed by a space."""
    return "".join("".join(f"{c} " for c in row) + "\n" for row in chars)


def render_numbers(matrix: Sequence[Sequence[int]]) -> str:
    """Return a numeric grid as text, each value two wide plus a space."""
    return "".join("".join(f"{v:2d} " for v in row) + "\n" for row in matrix)


def mark_path(chars: Sequence[Sequence[str]], path: Sequence[Point]) -> list[list[str]]:
    """Return a copy of the character grid with the path cells marked."""
    marked = [list(row) for row in chars]
    for point in path:
        marked[int(point.x)][int(point.y)] = PATH_MARK
    return marked


def render_path(chars: Sequence[Sequence[str]], color: bool = True) -> str:
    """Return the marked grid for the terminal.

    With ``color`` the entrance and exit are green and path cells red.
    """
    size = len(chars)
    ends = {(START.x, START.y), (size - 2, size - 2)}
    lines = []
    for i, row in enumerate(chars):
        cells = []
        for j, c in enumerate(row):
            cell = f" {c} "
            if color and (i, j) in ends:
                cell = f"{GREEN}{cell}{RESET}"
            elif color and c == PATH_MARK:
                cell = f"{RED}{cell}{RESET}"
            cells.append(cell)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


@dataclass
class _Figures:
    matrix: list[list[int]]
    chars: list[list[str]]
    annotated: list[list[int]]
    path: list[Point]
    found: bool

    @property
    def marked(self) -> list[list[str]]:
        return mark_path(self.chars, self.path)


def _build(matrix: Sequence[Sequence[int]]) -> _Figures:
    annotated = annotate(matrix)
    try:
        path, found = extract_path(annotated), True
    except NoPathError as exc:
        path, found = exc.partial, False
    return _Figures(
        matrix=[list(row) for row in matrix],
        chars=wall_chars(matrix),
        annotated=annotated,
        path=path,
        found=found,
    )


def _write(figures: _Figures, directory: Path) -> list[Path]:
    contents = {
        FIGURE_2A: render_chars(figures.chars),
        FIGURE_2B: render_numbers(figures.matrix),
        FIGURE_2C: render_numbers(figures.annotated),
        FIGURE_3B: render_chars(figures.marked),
    }
    written = []
    for name, text in contents.items():
        target = directory / name
        target.write_text(text, encoding="ascii")
        written.append(target)
    return written


def write_figures(matrix: Sequence[Sequence[int]], directory: str | Path) -> list[Path]:
    """Write the four figure files into ``directory`` and return their paths."""
    return _write(_build(matrix), Path(directory))


def _console_chars(chars: Sequence[Sequence[str]]) -> str:
    return "".join("".join(f"{c:>2} " for c in row) + "\n" for row in chars)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the maze file, print every figure and write them to disk."""
    parser = argparse.ArgumentParser(description="Solve a maze and draw the figures.")
    parser.add_argument("path", nargs="?", default=DEFAULT_MAZE_FILE)
    parser.add_argument("-d", "--directory", default=".")
    parser.add_argument("--no-color", action="store_true")
    args = parser.parse_args(argv)

    try:
        matrix = load_maze(args.path)
        figures = _build(matrix)
    except OSError as exc:
        print(f"cannot read {args.path}: {exc.strerror}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    out = sys.stdout
    out.write(" Figura 2-a\n")
    out.write(_console_chars(figures.chars))
    out.write("\n Figura 2-b\n")
    out.write(format_matrix(figures.matrix))
    out.write("\n Figura 2-c\n")
    out.write(format_matrix(figures.annotated))
    out.write("\n menor caminho: ")
    out.write("".join(f"{p} " for p in reversed(figures.path) if p != START))
    if not figures.found:
        out.write("\n nao ha caminho\n\n")
    out.write("\n\n Figura 3-b\n")
    out.write(render_path(figures.marked, color=not args.no_color))

    try:
        _write(figures, Path(args.directory))
    except OSError as exc:
        print(f"cannot write figures: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())