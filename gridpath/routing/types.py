"""
Shared value types for grid routing.

Positions are integer lattice coordinates with y growing downward, so
``Direction.UP`` decreases y.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, List, Sequence, Tuple, Union

from ..core.exceptions import NotNeighborsError


@dataclass(frozen=True, order=True)
class Position:
    """Integer cell coordinate on the grid."""
    x: int
    y: int

    def __add__(self, other: 'Position') -> 'Position':
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Position') -> 'Position':
        return Position(self.x - other.x, self.y - other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"

    @classmethod
    def of(cls, value: Union['Position', Tuple[int, int], Sequence[int]]) -> 'Position':
        """Coerce a Position or an (x, y) pair into a Position."""
        if isinstance(value, Position):
            return value
        x, y = value
        return cls(int(x), int(y))


PositionLike = Union[Position, Tuple[int, int]]


class Direction(Enum):
    """Compass step between two adjacent cells."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (1, -1)
    DOWN_LEFT = (-1, 1)
    DOWN_RIGHT = (1, 1)

    @property
    def offset(self) -> Position:
        dx, dy = self.value
        return Position(dx, dy)

    @property
    def is_diagonal(self) -> bool:
        dx, dy = self.value
        return dx != 0 and dy != 0

    @classmethod
    def cardinal(cls) -> List['Direction']:
        return [cls.UP, cls.DOWN, cls.LEFT, cls.RIGHT]


class Connectivity(IntEnum):
    """Which moves a search may take: cardinal only, or cardinal plus diagonal."""
    FOUR = 4
    EIGHT = 8


_DIRECTION_BY_OFFSET = {d.value: d for d in Direction}


def direction_between(start: Position, end: Position) -> Direction:
    """
    Get the direction of the single step from start to end.

    Raises:
        NotNeighborsError: If the two cells are not lattice neighbors
    """
    step = (end.x - start.x, end.y - start.y)
    try:
        return _DIRECTION_BY_OFFSET[step]
    except KeyError:
        raise NotNeighborsError(f"{start} and {end} are not neighbors") from None


@dataclass
class Path:
    """
    Ordered directions from a start cell (exclusive) to a goal (inclusive).

    A Path does not remember where it starts; integrate it from the
    position the query was issued with.
    """
    directions: List[Direction] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.directions)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self.directions)

    def __getitem__(self, index):
        return self.directions[index]

    def positions(self, start: PositionLike) -> List[Position]:
        """Walk the path from start, returning every visited cell including start."""
        current = Position.of(start)
        cells = [current]
        for direction in self.directions:
            current = current + direction.offset
            cells.append(current)
        return cells

    def destination(self, start: PositionLike) -> Position:
        """Cell reached after applying every step from start."""
        return self.positions(start)[-1]
