"""
Randomized depth-first maze generation.

Carves a perfect maze on the stride-2 lattice around the start cell: every
carved cell is reachable from the start by exactly one route. Cells between
lattice points are carved as connectors, everything else stays wall.
"""

from typing import List, Optional
import logging
import random
import time

from ..core.exceptions import OutOfBoundsError
from ..routing.types import Position, PositionLike

logger = logging.getLogger(__name__)


def _lattice_neighbors(pos: Position, width: int, height: int) -> List[Position]:
    """Get the in-bounds cells two steps away along each axis."""
    candidates = []
    if pos.x - 2 >= 0:
        candidates.append(Position(pos.x - 2, pos.y))
    if pos.x + 2 < width:
        candidates.append(Position(pos.x + 2, pos.y))
    if pos.y - 2 >= 0:
        candidates.append(Position(pos.x, pos.y - 2))
    if pos.y + 2 < height:
        candidates.append(Position(pos.x, pos.y + 2))
    return candidates


def generate_maze(
    width: int,
    height: int,
    start: PositionLike,
    end: PositionLike,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None
) -> List[List[bool]]:
    """
    Generate a maze layout.

    The end cell is always carved, but it only joins the maze when it lies on
    the start's stride-2 lattice or next to a carved cell; pick an end with
    the same x and y parity as the start to guarantee a route.

    Args:
        width: Number of columns
        height: Number of rows
        start: Cell the carving starts from
        end: Cell that is forced open after carving
        rng: Random source; takes precedence over seed
        seed: Seed for a new random source (default: unseeded)

    Returns:
        Walkability rows indexed [y][x], True for walkable cells

    Raises:
        OutOfBoundsError: If start or end is outside a non-empty grid
    """
    if width <= 0 or height <= 0:
        return []
    if width == 1 and height == 1:
        return [[True]]

    start = Position.of(start)
    end = Position.of(end)
    for name, pos in (("start", start), ("end", end)):
        if not (0 <= pos.x < width and 0 <= pos.y < height):
            raise OutOfBoundsError(f"Maze {name} {pos} is outside the {width}x{height} grid")

    if rng is None:
        rng = random.Random(seed)

    started = time.perf_counter()

    carved = [[False] * width for _ in range(height)]
    carved[start.y][start.x] = True
    carved_count = 1

    stack = [start]
    while stack:
        current = stack.pop()

        candidates = _lattice_neighbors(current, width, height)
        rng.shuffle(candidates)

        for neighbor in candidates:
            if carved[neighbor.y][neighbor.x]:
                continue

            carved[neighbor.y][neighbor.x] = True
            carved[(neighbor.y + current.y) // 2][(neighbor.x + current.x) // 2] = True
            carved_count += 2

            # Revisit current once the neighbor's branch is exhausted
            stack.append(current)
            stack.append(neighbor)
            break

    if not carved[end.y][end.x]:
        carved[end.y][end.x] = True
        carved_count += 1

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug(f"Maze {width}x{height}: carved {carved_count} cells in {elapsed_ms:.3f}ms")

    return carved
