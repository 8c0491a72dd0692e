"""
Maze Search Grid Model

Core grid representation including:
- Maze parsing from text format
- Cell kind classification
- Neighbor queries with a fixed direction ordering
- Cell counts for reporting
- Reset and ASCII rendering

Maze Format:
    # = Wall (impassable)
    ' ' = Passageway (open)
    @ = Solution (output marker)
    F = Frontier (output marker)
    V = Visited (output marker)

The start cell is always row 1, column 0 and the destination is always the
second-to-last row, last column.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional


Position = tuple[int, int]  # (row, col)


class MazeParseError(Exception):
    """Exception raised when maze text cannot be parsed."""

    pass


class MazeValidationError(Exception):
    """Exception raised when a parsed maze cannot be searched."""

    pass


class MazeStateError(RuntimeError):
    """Exception raised when a grid is searched twice without a reset."""

    pass


class CellKind(Enum):
    """Kinds of cells in the maze."""
    WALL = "#"
    PASSAGEWAY = " "
    SOLUTION = "@"
    FRONTIER = "F"
    VISITED = "V"

    @classmethod
    def from_char(cls, char: str) -> "CellKind":
        """Convert character to CellKind."""
        try:
            return cls(char)
        except ValueError:
            raise MazeValidationError(
                f"Invalid character {char!r}. "
                f"Valid characters: {', '.join(repr(k.value) for k in cls)}"
            ) from None


# (d_row, d_col) in the order neighbors are reported: right, down, left, up
NEIGHBOR_OFFSETS: tuple[Position, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass
class MazeCell:
    """A single cell of the maze grid."""
    row: int
    col: int
    kind: CellKind
    # only used by cost-based searches
    priority: float = float("inf")

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def __repr__(self) -> str:
        return f"MazeCell({self.kind.name} at [{self.row},{self.col}])"


@dataclass
class CellCounts:
    """Summary of cell kinds after a search run."""
    solution: int = 0
    visited: int = 0
    frontier: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "solution": self.solution,
            "visited": self.visited,
            "frontier": self.frontier,
        }


@dataclass
class MazeGrid:
    """
    Grid of maze cells with fixed start and destination positions.

    Example usage:
        grid = MazeGrid.from_text(maze_text)
        grid.neighbors(grid.start_cell)
        grid.cell_counts()

    A grid may be searched once. Call reset() before running another search
    on the same instance.
    """

    cells: list[list[MazeCell]]
    start: Position
    destination: Position
    searched: bool = field(default=False, compare=False)

    @classmethod
    def from_text(cls, maze_text: str) -> "MazeGrid":
        """
        Build a grid from maze text.

        Args:
            maze_text: Newline-separated rows of cell symbols.

        Returns:
            MazeGrid with start and destination resolved.

        Raises:
            MazeParseError: If the text is empty.
            MazeValidationError: If the grid is too small, contains an unknown
                symbol, or the start/destination is not a passageway.

        Output markers (@, F, V) elsewhere in the text keep their kind. They
        are never traversed and cell_counts() includes them, so counts on such
        a grid no longer match the number of cells a search dequeued.
        """
        # Spaces are passageways, so only line endings are trimmed
        lines = [line.rstrip("\r") for line in maze_text.split("\n")]
        while lines and not lines[-1]:
            lines.pop()

        if not lines:
            raise MazeParseError("Maze text is empty")

        cells: list[list[MazeCell]] = []
        for row, line in enumerate(lines):
            cells_row = []
            for col, char in enumerate(line):
                try:
                    kind = CellKind.from_char(char)
                except MazeValidationError as e:
                    raise MazeValidationError(f"{e} (at row {row}, column {col})") from None
                cells_row.append(MazeCell(row, col, kind))
            cells.append(cells_row)

        if len(cells) < 3:
            raise MazeValidationError(
                f"Maze must have at least 3 rows, got {len(cells)}"
            )
        if len(cells[0]) < 2:
            raise MazeValidationError(
                f"Maze must have at least 2 columns, got {len(cells[0])}"
            )

        start = (1, 0)
        destination = (len(cells) - 2, len(cells[0]) - 1)

        for label, (row, col) in (("Start", start), ("Destination", destination)):
            if col >= len(cells[row]):
                raise MazeValidationError(
                    f"{label} position ({row}, {col}) is outside the maze"
                )
            kind = cells[row][col].kind
            if kind != CellKind.PASSAGEWAY:
                raise MazeValidationError(
                    f"{label} position ({row}, {col}) must be an open cell, found {kind.name}"
                )

        return cls(cells=cells, start=start, destination=destination)

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return max(len(row) for row in self.cells)

    @property
    def start_cell(self) -> MazeCell:
        return self.cells[self.start[0]][self.start[1]]

    @property
    def destination_cell(self) -> MazeCell:
        return self.cells[self.destination[0]][self.destination[1]]

    def get_cell(self, row: int, col: int) -> Optional[MazeCell]:
        """Get cell at position, or None if out of bounds."""
        if not (0 <= row < self.height and 0 <= col < len(self.cells[row])):
            return None
        return self.cells[row][col]

    def is_destination(self, cell: MazeCell) -> bool:
        """Check whether the cell sits on the destination position."""
        return cell.position == self.destination

    def neighbors(self, cell: MazeCell) -> list[MazeCell]:
        """
        Get adjacent passageway cells.

        Neighbors are reported right, down, left, up. The start is always near
        the top-left and the destination near the bottom-right, so right and
        down are tried first. Cells already marked frontier, visited or
        solution are not passageways and are skipped.
        """
        result = []
        for d_row, d_col in NEIGHBOR_OFFSETS:
            neighbor = self.get_cell(cell.row + d_row, cell.col + d_col)
            if neighbor is not None and neighbor.kind == CellKind.PASSAGEWAY:
                result.append(neighbor)
        return result

    def cell_counts(self) -> CellCounts:
        """
        Count solution, visited and frontier cells.

        Solution cells are also counted as visited, since every cell on the
        path was dequeued. Frontier cells were discovered but never dequeued. Markers
        that were already in the maze text are counted the same way.
        """
        counts = CellCounts()
        for row in self.cells:
            for cell in row:
                if cell.kind == CellKind.SOLUTION:
                    counts.solution += 1
                    counts.visited += 1
                elif cell.kind == CellKind.VISITED:
                    counts.visited += 1
                elif cell.kind == CellKind.FRONTIER:
                    counts.frontier += 1
        return counts

    def reset(self) -> None:
        """Restore every non-wall cell to a passageway."""
        for row in self.cells:
            for cell in row:
                if cell.kind != CellKind.WALL:
                    cell.kind = CellKind.PASSAGEWAY
                cell.priority = float("inf")
        self.searched = False

    def render(self, glyphs: Optional[dict[CellKind, str]] = None) -> str:
        """
        Generate ASCII rendering of the maze.

        Args:
            glyphs: Optional display glyph per cell kind. Kinds not in the
                mapping keep their symbol.

        Returns:
            Multi-line string, one line per row.
        """
        glyphs = glyphs or {}
        lines = []
        for row in self.cells:
            lines.append("".join(glyphs.get(cell.kind, cell.kind.value) for cell in row))
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Get grid metadata."""
        return {
            "width": self.width,
            "height": self.height,
            "start": {"row": self.start[0], "col": self.start[1]},
            "destination": {"row": self.destination[0], "col": self.destination[1]},
        }
