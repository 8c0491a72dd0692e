"""Solve route for mazes submitted as text."""

from fastapi import APIRouter, HTTPException

from maze_search.api.deps import AppSettings
from maze_search.core import MazeParseError, MazeValidationError
from maze_search.schemas.maze import SolveRequest, SolveResponse
from maze_search.services import solver_service

router = APIRouter(prefix="/solve", tags=["Solve"])


@router.post(
    "",
    response_model=SolveResponse,
)
def solve_maze_text(request: SolveRequest, settings: AppSettings) -> SolveResponse:
    """Solve a maze given as text.

    The start is row 1, column 0 and the destination is the second-to-last
    row, last column. An unreachable destination is reported with status
    "exhausted", not as an error.
    """
    if len(request.maze_text) > settings.max_maze_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Maze text exceeds {settings.max_maze_chars} characters",
        )

    try:
        return solver_service.solve_text(request.maze_text, request.algorithm)
    except (MazeParseError, MazeValidationError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
