"""
Maze Search Engine

Uninformed traversal of a MazeGrid from its start to its destination:
- Breadth-first search (frontier used as a FIFO queue)
- Depth-first search (frontier used as a LIFO stack)
- Backtracking reconstruction of the solution path

Both searches mark cells in place as they run. Discovered cells become
FRONTIER, dequeued cells become VISITED and cells on the reconstructed path
become SOLUTION.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional, Union

from .maze_grid import CellCounts, CellKind, MazeCell, MazeGrid, MazeStateError, Position

logger = logging.getLogger("maze_search.search")


class SearchAlgorithm(Enum):
    """Supported search algorithms."""
    BFS = "bfs"
    DFS = "dfs"


@dataclass
class SearchResult:
    """Result of a search run."""
    algorithm: SearchAlgorithm
    status: Literal["found", "exhausted"]
    path: list[Position] = field(default_factory=list)
    visit_order: list[Position] = field(default_factory=list)
    counts: CellCounts = field(default_factory=CellCounts)

    @property
    def found(self) -> bool:
        """Check if the destination was reached."""
        return self.status == "found"

    @property
    def path_length(self) -> int:
        return len(self.path)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "algorithm": self.algorithm.value,
            "status": self.status,
            "found": self.found,
            "path": [{"row": row, "col": col} for row, col in self.path],
            "path_length": self.path_length,
            "counts": self.counts.to_dict(),
        }


def _traverse(grid: MazeGrid, algorithm: SearchAlgorithm) -> SearchResult:
    """
    Run a breadth-first or depth-first search over the grid.

    The frontier, visited set and parent map only live for this call. The
    parent of the start is None; cells that were never discovered have no
    entry at all.
    """
    if grid.searched:
        raise MazeStateError("Grid has already been searched, call reset() first")
    grid.searched = True

    start = grid.start_cell
    frontier: deque[MazeCell] = deque([start])
    visited: set[Position] = {start.position}
    parents: dict[Position, Optional[Position]] = {start.position: None}
    visit_order: list[Position] = []

    logger.debug(f"{algorithm.value.upper()} from {grid.start} to {grid.destination}")

    found: Optional[MazeCell] = None
    while frontier:
        if algorithm == SearchAlgorithm.BFS:
            current = frontier.popleft()
        else:
            current = frontier.pop()

        current.kind = CellKind.VISITED
        visit_order.append(current.position)

        # Stop on dequeue, not on discovery
        if grid.is_destination(current):
            found = current
            break

        for neighbor in grid.neighbors(current):
            if neighbor.position in visited:
                continue
            visited.add(neighbor.position)
            parents[neighbor.position] = current.position
            neighbor.kind = CellKind.FRONTIER
            frontier.append(neighbor)

    path: list[Position] = []
    if found is not None:
        path = _reconstruct_path(grid, parents, found.position)

    result = SearchResult(
        algorithm=algorithm,
        status="found" if found is not None else "exhausted",
        path=path,
        visit_order=visit_order,
        counts=grid.cell_counts(),
    )
    logger.info(
        f"{algorithm.value.upper()} {result.status}: "
        f"path={result.path_length} visited={result.counts.visited} "
        f"frontier={result.counts.frontier}"
    )
    return result


def _reconstruct_path(
    grid: MazeGrid,
    parents: dict[Position, Optional[Position]],
    end: Position,
) -> list[Position]:
    """Walk parents back from end to the start, marking each cell as solution."""
    path: list[Position] = []
    current: Optional[Position] = end
    while current is not None:
        row, col = current
        grid.cells[row][col].kind = CellKind.SOLUTION
        path.append(current)
        current = parents[current]
    path.reverse()
    return path


def solve_bfs(grid: MazeGrid) -> SearchResult:
    """
    Solve the maze with a breadth-first search.

    Args:
        grid: Freshly parsed (or reset) grid. Cells are marked in place.

    Returns:
        SearchResult. The path is a shortest path when found and empty when
        the destination is unreachable.

    Raises:
        MazeStateError: If the grid was already searched.
    """
    return _traverse(grid, SearchAlgorithm.BFS)


def solve_dfs(grid: MazeGrid) -> SearchResult:
    """
    Solve the maze with a depth-first search.

    The most recently discovered neighbor is always explored first.
    """
    return _traverse(grid, SearchAlgorithm.DFS)


def solve(grid: MazeGrid, algorithm: Union[SearchAlgorithm, str] = SearchAlgorithm.BFS) -> SearchResult:
    """
    Solve the maze with the named algorithm.

    Raises:
        ValueError: If the algorithm is not supported.
    """
    if isinstance(algorithm, str):
        try:
            algorithm = SearchAlgorithm(algorithm.lower())
        except ValueError:
            raise ValueError(
                f"Unknown algorithm '{algorithm}'. "
                f"Must be one of: {', '.join(a.value for a in SearchAlgorithm)}"
            ) from None

    return _traverse(grid, algorithm)
