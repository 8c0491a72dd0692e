"""
Maze Search command line runner.

Solves a maze file and prints the annotated maze with cell counts.

Usage:
    python -m maze_search <maze_file> [bfs|dfs]
"""

import logging
import sys

from maze_search.config import get_settings
from maze_search.core import (
    MazeParseError,
    MazeValidationError,
    load_maze_file,
    solve,
)

logger = logging.getLogger("maze_search")


def run(maze_path: str, algorithm: str) -> int:
    """
    Solve one maze file and print the report.

    Returns:
        Process exit code.
    """
    try:
        maze = load_maze_file(maze_path)
        grid = maze.build_grid()
        result = solve(grid, algorithm)
    except (FileNotFoundError, MazeParseError, MazeValidationError, ValueError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print(f"{maze.name} ({grid.width}x{grid.height}) - {result.algorithm.value.upper()}")
    print("=" * 40)
    print(grid.render())
    print("=" * 40)
    if result.found:
        print(f"Solution found: {result.path_length} cells")
    else:
        print("No path from start to destination")

    counts = result.counts
    print(f"solution={counts.solution} visited={counts.visited} frontier={counts.frontier}")
    return 0


def main():
    """Main entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if len(sys.argv) < 2 or len(sys.argv) > 3:
        print("Usage: python -m maze_search <maze_file> [bfs|dfs]", file=sys.stderr)
        sys.exit(1)

    algorithm = sys.argv[2] if len(sys.argv) == 3 else settings.default_algorithm
    sys.exit(run(sys.argv[1], algorithm))


if __name__ == "__main__":
    main()
