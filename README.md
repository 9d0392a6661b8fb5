# labirinto

This package makes random square mazes and reads them back as number grids.
It fills each grid with breadth-first distances from the top-left open corner.
It then traces a shortest path to the bottom-right open corner.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Maze file format

A maze is a square of `N` rows, each `N` characters long. `#` is a wall and
`.` is an open cell. The outer border is always wall. The entrance is cell
(1, 1) and the exit is cell (N-2, N-2), where the first number is the row.

## Commands

### `labirinto-generate`

```
labirinto-generate [N P] [-o OUTPUT]
```

This command makes a random maze. `N` is the side length. `P` is the chance,
as a percentage, that any inner cell becomes a wall. If `N` and `P` are not
given as arguments, the command reads them as two integers from standard
input. It writes the maze to `OUTPUT`, which defaults to `labirinto.txt`.

```
echo "15 30" | labirinto-generate
labirinto-generate 15 30 -o maze.txt
```

`N` is valid from 7 to 100 and `P` is valid from 10 to 80. The command rejects
the input only when both values are out of range, when `N` is below 1, or when
standard input does not hold two integers. When it rejects the input, it
prints `entrada invalida` and writes no file.

### `labirinto-grid`

```
labirinto-grid [PATH]
```

This command reads a maze file and prints it as a number matrix, each value
three columns wide. A wall is `-1` and an open cell is `0`. `PATH` defaults to
`labirinto.txt`. If the file cannot be read or is not a square grid, the
command reports the problem on standard error and exits with status 1.

### `labirinto-figures`

```
labirinto-figures [PATH] [-d DIRECTORY] [--no-color]
```

This command reads a maze file, which defaults to `labirinto.txt`, and prints
these figures:

| Figure | What it shows | File |
|---|---|---|
| 2-a | the maze as characters (`#` for walls, blanks for open cells) | `F2a.txt` |
| 2-b | the number matrix | `F2b.txt` |
| 2-c | the breadth-first distances, with the entrance numbered 1 | `F2c.txt` |
| 3-b | the maze with the shortest path marked `x` | `F3b.txt` |

Before Figure 3-b, the command prints the path cells after `menor caminho:`.
The list runs from the exit back towards the entrance as `(row,column)` pairs.

On screen, Figure 3-b shows the entrance and exit cells in green and the path
cells in red. `--no-color` turns the colours off. If the exit cannot be
reached, the command prints `nao ha caminho`. Figure 3-b then marks only the
exit cell. The four files go into `DIRECTORY`, which defaults to the current
directory.

## Library use

```python
import random

from labirinto.generator import generate_maze, render_maze
from labirinto.grid import parse_maze
from labirinto.solver import NoPathError, annotate, extract_path

maze = generate_maze(15, 30, random.Random(1))   # list of row strings
matrix = parse_maze(render_maze(maze))           # -1 walls, 0 open cells
distances = annotate(matrix)                     # a new, numbered matrix
try:
    path = extract_path(distances)               # Points from (1,1) to (N-2,N-2)
except NoPathError as exc:
    path = exc.partial
```

### `labirinto.generator`

- `generate_maze(size, wall_percent, rng=None)` returns the maze as a list of
  strings. It raises `InvalidParametersError`, a `ValueError`, when the
  parameters are rejected.
- `validate_parameters(size, wall_percent)` checks the parameters and nothing
  else.
- `render_maze(maze)` turns a maze into text. `write_maze(maze, path)` writes
  that text to a file.

### `labirinto.grid`

- `parse_maze(text)` turns maze text into a matrix. It takes the size from
  the `#` characters that open the first row. It raises `ValueError` if the
  text is not a full square.
- `load_maze(path)` reads a maze file and parses it.
- `format_matrix(matrix, width=3)` formats a matrix as right-aligned columns.

### `labirinto.solver`

- `annotate(matrix)` returns a copy of the matrix. In the copy, each open cell
  that can be reached from (1, 1) holds its breadth-first distance plus one.
  Walls stay `-1` and cells that cannot be reached stay `0`.
- `extract_path(matrix)` walks back from the exit through an annotated matrix.
  It returns the path as `Point`s in order from entrance to exit. When the
  trail breaks, it raises `NoPathError`, whose `partial` attribute holds the
  cells walked so far.
- `end_point(size)` returns the exit cell for a maze of that size.

### `labirinto.figures`

- `wall_chars` maps a number matrix to the characters `#` and blank.
- `mark_path` returns a copy of a character grid with the path cells set to
  `x`.
- `render_chars` and `render_numbers` produce the text of the figure files.
- `render_path(chars, color=True)` produces the on-screen Figure 3-b.
- `write_figures(matrix, directory)` writes the four figure files and returns
  their paths.

### `labirinto.point`

`Point` is a frozen 2-D point with fields `x` and `y`. It has two methods:
`distance()` returns the distance to the origin, and `moved(dx, dy)` returns a
shifted copy. `str()` of a point gives `(x,y)`.

## Limits

The package does not let you play a maze interactively, and it does not
display mazes graphically. Its output is text on the terminal and in files.
The entrance and exit are always the cells (1, 1) and (N-2, N-2). You cannot
change them.