"""Solver service: runs a search on a fresh grid and builds the API response."""

import logging

from maze_search.core import MazeGrid, ParsedMaze, solve
from maze_search.schemas.maze import (
    CellCountsResponse,
    MazeDetail,
    MazeListItem,
    MazePosition,
    SolveResponse,
)

logger = logging.getLogger("maze_search.service")


def solve_grid(grid: MazeGrid, algorithm: str) -> SolveResponse:
    """Search the grid and describe the outcome, including the annotated maze."""
    result = solve(grid, algorithm)

    return SolveResponse(
        algorithm=result.algorithm.value,
        status=result.status,
        found=result.found,
        path=[MazePosition(row=row, col=col) for row, col in result.path],
        path_length=result.path_length,
        counts=CellCountsResponse(**result.counts.to_dict()),
        rendered=grid.render(),
        width=grid.width,
        height=grid.height,
    )


def solve_text(maze_text: str, algorithm: str) -> SolveResponse:
    """
    Parse maze text and solve it.

    Raises:
        MazeParseError: If the text is empty.
        MazeValidationError: If the maze is malformed.
    """
    grid = MazeGrid.from_text(maze_text)
    logger.info(f"Solving {grid.width}x{grid.height} maze with {algorithm}")
    return solve_grid(grid, algorithm)


def to_list_item(maze: ParsedMaze) -> MazeListItem:
    return MazeListItem(
        slug=maze.slug,
        name=maze.name,
        width=maze.width,
        height=maze.height,
    )


def to_detail(maze: ParsedMaze) -> MazeDetail:
    return MazeDetail(
        slug=maze.slug,
        name=maze.name,
        width=maze.width,
        height=maze.height,
        grid_data=maze.grid_data,
        start=MazePosition(row=maze.start_row, col=maze.start_col),
        destination=MazePosition(row=maze.exit_row, col=maze.exit_col),
    )
