[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labirinto"
version = "0.1.0"
description = "Generate random square mazes, number them by breadth-first distance and extract the shortest path."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "bfs", "shortest-path", "puzzle"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labirinto-generate = "labirinto.generator:main"
labirinto-grid = "labirinto.grid:main"
labirinto-figures = "labirinto.figures:main"

[tool.hatch.build.targets.wheel]
packages = ["labirinto"]

[tool.pytest.ini_options]
addopts = "-ra"
