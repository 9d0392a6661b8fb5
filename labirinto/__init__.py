"""Generate random square mazes, number them by breadth-first distance and trace a shortest path."""

__version__ = "0.1.0"