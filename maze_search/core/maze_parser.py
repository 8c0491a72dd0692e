"""
Maze Parser for Maze Search.

Loads and validates maze files from the filesystem.

Maze Format:
    # = Wall (impassable)
    ' ' = Passageway (open)
    @, F, V = Output markers (accepted as their literal kinds)

The start is always row 1, column 0 and the destination is always the
second-to-last row, last column.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .maze_grid import MazeGrid, MazeParseError, MazeValidationError

logger = logging.getLogger("maze_search.parser")


@dataclass
class ParsedMaze:
    """Parsed maze data ready for listing or solving."""

    name: str
    grid_data: str
    width: int
    height: int
    start_row: int
    start_col: int
    exit_row: int
    exit_col: int

    @property
    def slug(self) -> str:
        """URL-friendly maze identifier."""
        return self.name.lower().replace(" ", "-")

    def build_grid(self) -> MazeGrid:
        """Build a fresh, unsearched grid for this maze."""
        return MazeGrid.from_text(self.grid_data)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "grid_data": self.grid_data,
            "width": self.width,
            "height": self.height,
            "start_row": self.start_row,
            "start_col": self.start_col,
            "exit_row": self.exit_row,
            "exit_col": self.exit_col,
        }


def parse_maze_text(maze_text: str, name: str = "Unnamed") -> ParsedMaze:
    """
    Parse maze text and extract metadata.

    Args:
        maze_text: Multi-line string representing the maze grid.
        name: Name of the maze.

    Returns:
        ParsedMaze with grid data and metadata.

    Raises:
        MazeParseError: If the maze cannot be parsed.
        MazeValidationError: If the maze is invalid.
    """
    grid = MazeGrid.from_text(maze_text)

    return ParsedMaze(
        name=name,
        grid_data=grid.render(),
        width=grid.width,
        height=grid.height,
        start_row=grid.start[0],
        start_col=grid.start[1],
        exit_row=grid.destination[0],
        exit_col=grid.destination[1],
    )


def load_maze_file(
    file_path: Path | str,
    name: Optional[str] = None,
) -> ParsedMaze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        name: Optional name override. If not provided, uses filename.

    Returns:
        ParsedMaze with grid data and metadata.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the maze cannot be parsed.
        MazeValidationError: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    # Infer name from filename if not provided
    if name is None:
        name = file_path.stem.replace("_", " ").replace("-", " ").title()

    return parse_maze_text(maze_text, name=name)


def load_all_mazes(mazes_dir: Path | str) -> list[ParsedMaze]:
    """
    Load all maze files from a directory.

    Args:
        mazes_dir: Path to the directory containing maze files.

    Returns:
        List of ParsedMaze objects sorted by filename. Invalid files are
        skipped.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise FileNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise MazeParseError(f"Path is not a directory: {mazes_dir}")

    mazes = []
    for maze_file in sorted(mazes_dir.glob("*.txt")):
        try:
            mazes.append(load_maze_file(maze_file))
        except (MazeParseError, MazeValidationError) as e:
            logger.warning(f"Failed to load {maze_file}: {e}")

    return mazes


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except (MazeParseError, MazeValidationError) as e:
        return False, str(e)
