# Core module
from .maze_grid import (
    CellCounts,
    CellKind,
    MazeCell,
    MazeGrid,
    MazeParseError,
    MazeStateError,
    MazeValidationError,
)
from .maze_solver import SearchAlgorithm, SearchResult, solve, solve_bfs, solve_dfs
from .maze_parser import (
    ParsedMaze,
    parse_maze_text,
    load_maze_file,
    load_all_mazes,
    validate_maze_text,
)

__all__ = [
    "CellCounts",
    "CellKind",
    "MazeCell",
    "MazeGrid",
    "MazeParseError",
    "MazeStateError",
    "MazeValidationError",
    "SearchAlgorithm",
    "SearchResult",
    "solve",
    "solve_bfs",
    "solve_dfs",
    "ParsedMaze",
    "parse_maze_text",
    "load_maze_file",
    "load_all_mazes",
    "validate_maze_text",
]
