"""
Output formatting and printing utilities for CLI
"""

from typing import Iterable, Optional

from ..routing.grid import Grid
from ..routing.types import Direction, Path, Position

WALL = '#'
FLOOR = '.'
MARK = '*'
EXPLORED = '+'
START = 'S'
END = 'E'

_ARROWS = {
    Direction.UP: '↑',
    Direction.DOWN: '↓',
    Direction.LEFT: '←',
    Direction.RIGHT: '→',
    Direction.UP_LEFT: '↖',
    Direction.UP_RIGHT: '↗',
    Direction.DOWN_LEFT: '↙',
    Direction.DOWN_RIGHT: '↘',
}


def render_grid(
    grid: Grid,
    start: Position,
    end: Position,
    marked: Iterable[Position] = (),
    explored: Optional[Iterable[Position]] = None
) -> str:
    """
    Render the grid as ASCII art

    Args:
        grid: Grid to draw
        start: Start cell, drawn as 'S'
        end: End cell, drawn as 'E'
        marked: Cells on the result (walked cells or corner points), drawn as '*'
        explored: Cells expanded by the search, drawn as '+'

    Returns:
        Multi-line string, one line per grid row
    """
    rows = [
        [FLOOR if walkable else WALL for walkable in row]
        for row in grid.walkability()
    ]

    for pos in explored or ():
        if rows[pos.y][pos.x] == FLOOR:
            rows[pos.y][pos.x] = EXPLORED

    for pos in marked:
        rows[pos.y][pos.x] = MARK

    rows[start.y][start.x] = START
    rows[end.y][end.x] = END

    return '\n'.join(''.join(row) for row in rows)


def format_directions(path: Path) -> str:
    """Format path directions as an arrow string"""
    if not len(path):
        return "(already at destination)"
    return ''.join(_ARROWS[direction] for direction in path)


def format_duration(milliseconds: float) -> str:
    """
    Format a duration for display

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        Formatted string (e.g., "1.234ms" or "2.50s")
    """
    if milliseconds >= 1000:
        return f"{milliseconds / 1000:.2f}s"
    return f"{milliseconds:.3f}ms"


def print_separator(width: int = 70, char: str = '=') -> None:
    """
    Print a separator line

    Args:
        width: Width of the separator
        char: Character to use for separator
    """
    print(char * width)
