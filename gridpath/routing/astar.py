"""
A* pathfinding over a 2D tile grid.

Implements A* with Euclidean distance used both as the step cost
(1 for cardinal moves, sqrt(2) for diagonal ones) and as the heuristic.

Open cells are ordered by lowest f, then lowest h, then the order in
which they first entered the open set. Scores are compared exactly,
without an epsilon, so when several optimal paths exist the one returned
is "an optimal path" rather than a bit-for-bit reproducible choice.
"""

from typing import Dict, List, Optional, Set, Tuple, Union
import heapq
import logging
import math
from dataclasses import dataclass, field

from ..core.exceptions import OutOfBoundsError
from .grid import WalkableGrid
from .types import Connectivity, Path, Position, PositionLike, direction_between

logger = logging.getLogger(__name__)


# Row-major from the top-left, the order neighbors enter the open set
NEIGHBOR_OFFSETS = {
    Connectivity.EIGHT: [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)],
    Connectivity.FOUR: [(0, -1), (-1, 0), (1, 0), (0, 1)],
}


@dataclass
class NodeScore:
    """Search bookkeeping for one discovered cell."""
    g: float = 0.0  # Cost from start
    h: float = 0.0  # Heuristic to goal
    f: float = 0.0  # f = g + h
    predecessor: Optional[Position] = None


@dataclass
class SearchState:
    """
    Per-search scratch state.

    Allocated fresh for every search so consecutive or nested searches on
    the same grid never see each other's scores.
    """
    start: Position
    end: Position
    scores: Dict[Position, NodeScore] = field(default_factory=dict)
    open_heap: List[Tuple[float, float, int, Position]] = field(default_factory=list)
    open_order: Dict[Position, int] = field(default_factory=dict)
    closed: Set[Position] = field(default_factory=set)
    expanded: int = 0
    _counter: int = 0

    def push(self, pos: Position, score: NodeScore) -> None:
        """Add or re-prioritise an open cell, keeping its first insertion order."""
        order = self.open_order.get(pos)
        if order is None:
            order = self._counter
            self._counter += 1
            self.open_order[pos] = order
        heapq.heappush(self.open_heap, (score.f, score.h, order, pos))

    def pop(self) -> Optional[Position]:
        """Remove and return the best open cell, or None when the open set is empty."""
        while self.open_heap:
            f, h, _, pos = heapq.heappop(self.open_heap)
            if pos not in self.open_order:
                continue
            score = self.scores[pos]
            # Superseded by a later, cheaper push
            if f != score.f or h != score.h:
                continue
            del self.open_order[pos]
            return pos
        return None

    def is_open(self, pos: Position) -> bool:
        return pos in self.open_order


def distance(a: Position, b: Position) -> float:
    """Euclidean distance between two cells."""
    return math.hypot(a.x - b.x, a.y - b.y)


def neighbors(grid: WalkableGrid, pos: Position, connectivity: Connectivity) -> List[Position]:
    """
    Get the in-bounds, walkable neighbors of a cell.

    Args:
        grid: Grid to search
        pos: Cell whose neighbors are wanted
        connectivity: FOUR for cardinal moves only, EIGHT to include diagonals

    Returns:
        Neighbor positions in row-major order
    """
    result = []
    for dx, dy in NEIGHBOR_OFFSETS[connectivity]:
        candidate = Position(pos.x + dx, pos.y + dy)
        if grid.in_bounds(candidate) and grid.is_walkable(candidate):
            result.append(candidate)
    return result


def reconstruct_path(state: SearchState, end: Position) -> Path:
    """Reconstruct path from goal by following predecessor links."""
    directions = []
    current = end
    predecessor = state.scores[current].predecessor

    while predecessor is not None:
        directions.append(direction_between(predecessor, current))
        current = predecessor
        predecessor = state.scores[current].predecessor

    directions.reverse()
    return Path(directions)


def check_bounds(grid: WalkableGrid, pos: PositionLike, name: str) -> Position:
    """Coerce a caller-supplied position and fail fast if it is off the grid."""
    pos = Position.of(pos)
    if not grid.in_bounds(pos):
        raise OutOfBoundsError(f"{name} {pos} is outside the {grid.width}x{grid.height} grid")
    return pos


def search(
    grid: WalkableGrid,
    start: PositionLike,
    end: PositionLike,
    connectivity: Union[Connectivity, int] = Connectivity.EIGHT
) -> Tuple[Optional[Path], SearchState]:
    """
    Run A* and return both the result and the search's scratch state.

    Walkability is checked on neighbors only: the start cell itself may be
    unwalkable and the search still leaves it, while an unwalkable end is
    never entered unless it equals start.

    Args:
        grid: Grid to search
        start: Starting cell (must be in bounds)
        end: Goal cell (must be in bounds)
        connectivity: FOUR or EIGHT (or the ints 4 and 8)

    Returns:
        Tuple of (path or None, search state)

    Raises:
        OutOfBoundsError: If start or end is outside the grid
    """
    start = check_bounds(grid, start, "start")
    end = check_bounds(grid, end, "end")
    connectivity = Connectivity(connectivity)

    state = SearchState(start=start, end=end)
    state.scores[start] = NodeScore()
    state.push(start, state.scores[start])

    while True:
        current = state.pop()
        if current is None:
            break

        state.closed.add(current)
        state.expanded += 1

        # Goal reached
        if current == end:
            path = reconstruct_path(state, current)
            logger.debug(
                f"Path {start} -> {end} found: {len(path)} steps, "
                f"cost {state.scores[current].g:.3f}, {state.expanded} cells expanded"
            )
            return path, state

        current_score = state.scores[current]

        for neighbor in neighbors(grid, current, connectivity):
            if neighbor in state.closed:
                continue

            candidate_g = current_score.g + distance(current, neighbor)
            score = state.scores.get(neighbor)

            if score is None or not state.is_open(neighbor) or candidate_g < score.g:
                if score is None:
                    score = state.scores[neighbor] = NodeScore()
                score.g = candidate_g
                score.h = distance(neighbor, end)
                score.f = score.g + score.h
                score.predecessor = current
                state.push(neighbor, score)

    logger.debug(f"No path {start} -> {end} after expanding {state.expanded} cells")
    return None, state


def find_path(
    grid: WalkableGrid,
    start: PositionLike,
    end: PositionLike,
    connectivity: Union[Connectivity, int] = Connectivity.EIGHT
) -> Optional[Path]:
    """
    Find an optimal path from start to end using A*.

    Args:
        grid: Grid to search
        start: Starting cell (must be in bounds)
        end: Goal cell (must be in bounds)
        connectivity: FOUR or EIGHT (or the ints 4 and 8)

    Returns:
        Path of directions, empty when start equals end, or None if no path exists
    """
    path, _ = search(grid, start, end, connectivity)
    return path
