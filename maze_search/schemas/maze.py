"""Maze schemas for request/response validation."""

from typing import Literal

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    row: int
    col: int


class MazeBase(BaseModel):
    """Base maze schema with common fields."""

    slug: str
    name: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class MazeListItem(MazeBase):
    """Schema for maze list item (without grid data)."""

    pass


class MazeDetail(MazeBase):
    """Schema for detailed maze response with grid data."""

    grid_data: str
    start: MazePosition
    destination: MazePosition


class MazeListResponse(BaseModel):
    """Schema for maze list response."""

    mazes: list[MazeListItem]
    total: int


class SolveRequest(BaseModel):
    """Schema for solving an ad hoc maze."""

    maze_text: str = Field(..., min_length=1)
    algorithm: Literal["bfs", "dfs"] = "bfs"


class CellCountsResponse(BaseModel):
    """Schema for cell kind counts after a search."""

    solution: int
    visited: int
    frontier: int


class SolveResponse(BaseModel):
    """Schema for a search result with the annotated maze."""

    algorithm: str
    status: Literal["found", "exhausted"]
    found: bool
    path: list[MazePosition]
    path_length: int
    counts: CellCountsResponse
    rendered: str
    width: int
    height: int
