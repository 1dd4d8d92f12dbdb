"""
Grid model for tile-world pathfinding.

Holds a dense width x height array of cells with a mutable walkable flag
and provides Bresenham line rasterization for line-of-sight checks.
Search bookkeeping lives in the search itself, not on the cells.
"""

from typing import List, Protocol, Sequence
from dataclasses import dataclass

from ..core.exceptions import OutOfBoundsError, GridShapeError
from .types import Position, PositionLike


class WalkableGrid(Protocol):
    """Capabilities the search engine needs from a grid."""
    width: int
    height: int

    def in_bounds(self, pos: Position) -> bool: ...

    def is_walkable(self, pos: Position) -> bool: ...


@dataclass
class Cell:
    """Represents a cell in the grid."""
    position: Position
    walkable: bool = True


class Grid:
    """
    Dense rectangular grid of cells.

    Cells are addressed by (x, y) in [0, width) x [0, height) and start
    out walkable. Bounds are fixed at construction.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize grid.

        Args:
            width: Number of columns
            height: Number of rows
        """
        if width < 0 or height < 0:
            raise GridShapeError(f"Grid dimensions must be non-negative, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells: List[List[Cell]] = [
            [Cell(Position(x, y)) for x in range(width)]
            for y in range(height)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> 'Grid':
        """Build a grid from a [y][x] walkability layout."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        grid = cls(width, height)
        grid.load_walkability(rows)
        return grid

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"

    def in_bounds(self, pos: Position) -> bool:
        """Check if a position is within grid bounds."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def validate(self, pos: PositionLike) -> Position:
        """
        Coerce and bounds-check a caller-supplied position.

        Raises:
            OutOfBoundsError: If the position is outside the grid
        """
        pos = Position.of(pos)
        if not self.in_bounds(pos):
            raise OutOfBoundsError(f"Position {pos} is outside the {self.width}x{self.height} grid")
        return pos

    def cell(self, pos: PositionLike) -> Cell:
        pos = self.validate(pos)
        return self._cells[pos.y][pos.x]

    def is_walkable(self, pos: Position) -> bool:
        """Check if an in-bounds cell can be traversed."""
        return self._cells[pos.y][pos.x].walkable

    def set_walkable(self, pos: PositionLike, walkable: bool) -> None:
        self.cell(pos).walkable = walkable

    def cells(self):
        """Iterate over every cell in row-major order."""
        for row in self._cells:
            yield from row

    def paint(self, pos: PositionLike, walkable: bool) -> None:
        """
        Paint a plus-shaped brush: the cell and its in-bounds cardinal neighbors.

        Positions outside the grid are ignored so strokes can run off the edge.
        """
        pos = Position.of(pos)
        if not self.in_bounds(pos):
            return

        for dx, dy in [(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)]:
            target = Position(pos.x + dx, pos.y + dy)
            if self.in_bounds(target):
                self._cells[target.y][target.x].walkable = walkable

    def paint_line(self, start: PositionLike, end: PositionLike, walkable: bool) -> None:
        """Paint the brush along the straight line from start to end."""
        for pos in rasterize(start, end):
            self.paint(pos, walkable)

    def clear(self) -> None:
        """Make every cell walkable."""
        for cell in self.cells():
            cell.walkable = True

    def load_walkability(self, rows: Sequence[Sequence[bool]]) -> None:
        """
        Copy a [y][x] walkability layout into the grid.

        Args:
            rows: Layout with exactly height rows of width flags each

        Raises:
            GridShapeError: If the layout dimensions differ from the grid's
        """
        if len(rows) != self.height or any(len(row) != self.width for row in rows):
            raise GridShapeError(
                f"Layout shape does not match the {self.width}x{self.height} grid"
            )

        for y, row in enumerate(rows):
            for x, walkable in enumerate(row):
                self._cells[y][x].walkable = bool(walkable)

    def walkability(self) -> List[List[bool]]:
        """Snapshot of the walkable flags as a [y][x] layout."""
        return [[cell.walkable for cell in row] for row in self._cells]


def _line(start: Position, end: Position):
    """Yield the cells along a straight line (Bresenham's algorithm)."""
    x0, y0 = start.x, start.y
    x1, y1 = end.x, end.y

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)

    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1

    err = dx - dy

    x, y = x0, y0

    while True:
        yield Position(x, y)

        if x == x1 and y == y1:
            break

        e2 = 2 * err

        if e2 > -dy:
            err -= dy
            x += sx

        if e2 < dx:
            err += dx
            y += sy


def rasterize(start: PositionLike, end: PositionLike) -> List[Position]:
    """
    Get all cells along a straight line, both endpoints included.

    Swapping the endpoints does not always give the exact reverse sequence
    for lines whose slope is not a whole ratio.
    """
    return list(_line(Position.of(start), Position.of(end)))


def walkable_between(grid: WalkableGrid, start: PositionLike, end: PositionLike) -> bool:
    """
    Check whether every cell on the line from start to end is walkable.

    Raises:
        OutOfBoundsError: If start or end is outside the grid
    """
    start = Position.of(start)
    end = Position.of(end)
    for name, pos in (("start", start), ("end", end)):
        if not grid.in_bounds(pos):
            raise OutOfBoundsError(f"Line {name} {pos} is outside the {grid.width}x{grid.height} grid")

    for pos in _line(start, end):
        if not grid.is_walkable(pos):
            return False
    return True
