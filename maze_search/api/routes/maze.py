"""Maze routes for listing, retrieving and solving stored mazes."""

from typing import Literal, Optional

from fastapi import APIRouter, HTTPException, Query, status

from maze_search.api.deps import AppSettings, MazeCatalog
from maze_search.core import ParsedMaze
from maze_search.schemas.maze import MazeDetail, MazeListResponse, SolveResponse
from maze_search.services import solver_service

router = APIRouter(prefix="/maze", tags=["Mazes"])


def _get_or_404(catalog: dict[str, ParsedMaze], slug: str) -> ParsedMaze:
    maze = catalog.get(slug)
    if maze is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {slug}",
        )
    return maze


@router.get(
    "",
    response_model=MazeListResponse,
)
async def list_mazes(catalog: MazeCatalog) -> MazeListResponse:
    """List all available mazes.

    Grid data is not included - use GET /v1/maze/{slug} for full details.
    """
    maze_items = [solver_service.to_list_item(maze) for maze in catalog.values()]

    return MazeListResponse(
        mazes=maze_items,
        total=len(maze_items),
    )


@router.get(
    "/{slug}",
    response_model=MazeDetail,
)
async def get_maze(slug: str, catalog: MazeCatalog) -> MazeDetail:
    """Get detailed information about a specific maze, including grid data."""
    return solver_service.to_detail(_get_or_404(catalog, slug))


@router.get(
    "/{slug}/solve",
    response_model=SolveResponse,
)
def solve_maze(
    slug: str,
    catalog: MazeCatalog,
    settings: AppSettings,
    algorithm: Optional[Literal["bfs", "dfs"]] = Query(
        None,
        description="Search algorithm (bfs, dfs). Defaults to the configured algorithm.",
    ),
) -> SolveResponse:
    """Solve a stored maze on a fresh grid."""
    maze = _get_or_404(catalog, slug)
    return solver_service.solve_grid(
        maze.build_grid(),
        algorithm or settings.default_algorithm,
    )
