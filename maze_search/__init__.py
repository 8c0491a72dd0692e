"""Maze Search: breadth-first and depth-first maze solving."""

__version__ = "1.0.0"
