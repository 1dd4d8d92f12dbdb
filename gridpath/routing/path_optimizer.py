"""
Path optimization for grid routing.

Post-processes raw A* output:
- Reduce a walked path to its line-of-sight corner points
- Re-rasterize corner points into a smoothed step sequence
- Compress collinear segments
"""

from typing import List, Optional, Union

from .astar import find_path
from .grid import WalkableGrid, rasterize
from .types import Connectivity, Direction, Path, Position, PositionLike, direction_between


def compress_path(cells: List[Position]) -> List[Position]:
    """
    Compress path by merging collinear segments.

    Removes unnecessary waypoints where path continues in same direction.

    Args:
        cells: Walked cells, start and end included

    Returns:
        Compressed path with minimal waypoints
    """
    if len(cells) <= 2:
        return cells

    compressed = [cells[0]]  # Start with first cell

    for i in range(1, len(cells) - 1):
        prev_cell = cells[i - 1]
        curr_cell = cells[i]
        next_cell = cells[i + 1]

        # Keep waypoint if direction changes
        if curr_cell - prev_cell != next_cell - curr_cell:
            compressed.append(curr_cell)

    # Always keep last cell
    compressed.append(cells[-1])

    return compressed


def _visible_from(grid: WalkableGrid, origin: Position, target: Position) -> bool:
    """Check the line from origin to target, leaving out origin itself."""
    for pos in rasterize(origin, target)[1:]:
        if not grid.is_walkable(pos):
            return False
    return True


def reduce_to_corners(grid: WalkableGrid, cells: List[Position]) -> List[Position]:
    """
    Greedily keep only the cells where line of sight breaks.

    A cell is accepted as a waypoint once the straight line from the last
    waypoint to the cell after it is blocked, so every waypoint is the last
    cell still visible from the previous one. The final cell is tested the
    same way before it is appended. The waypoint a line leaves from is not
    tested, since the first cell may be an unwalkable query start; every
    other cell on the line between two consecutive waypoints is walkable.

    Args:
        grid: Grid used for line-of-sight checks
        cells: Walked cells, start and end included

    Returns:
        Waypoints beginning with the first cell and ending with the last
    """
    if len(cells) <= 2:
        return list(cells)

    corners = [cells[0]]

    for i in range(1, len(cells)):
        if cells[i - 1] == corners[-1]:
            continue
        if not _visible_from(grid, corners[-1], cells[i]):
            corners.append(cells[i - 1])

    corners.append(cells[-1])
    return corners


def corner_points(
    grid: WalkableGrid,
    start: PositionLike,
    end: PositionLike,
    connectivity: Union[Connectivity, int] = Connectivity.EIGHT
) -> Optional[List[Position]]:
    """
    Find a path and reduce it to its corner points.

    Args:
        grid: Grid to search
        start: Starting cell
        end: Goal cell
        connectivity: FOUR or EIGHT

    Returns:
        Waypoints from start to end, [start] when start equals end,
        or None if no path exists
    """
    path = find_path(grid, start, end, connectivity)
    if path is None:
        return None

    return reduce_to_corners(grid, path.positions(start))


def rasterize_waypoints(waypoints: List[Position]) -> List[Position]:
    """Join consecutive waypoints with straight lines, dropping repeated cells."""
    if len(waypoints) < 2:
        return list(waypoints)

    cells: List[Position] = []
    for i in range(1, len(waypoints)):
        for cell in rasterize(waypoints[i - 1], waypoints[i]):
            # Segments share their joining waypoint
            if cells and cells[-1] == cell:
                continue
            cells.append(cell)

    return cells


def split_diagonal(grid: WalkableGrid, pos: Position, direction: Direction) -> List[Direction]:
    """
    Replace one diagonal step by two cardinal steps.

    The vertical step goes first when the cell directly above (for up
    diagonals) or below (for down diagonals) is walkable, otherwise the
    horizontal step goes first.
    """
    dx, dy = direction.value
    vertical = Direction.UP if dy < 0 else Direction.DOWN
    horizontal = Direction.LEFT if dx < 0 else Direction.RIGHT

    if grid.is_walkable(pos + vertical.offset):
        return [vertical, horizontal]
    return [horizontal, vertical]


def smooth_path(
    grid: WalkableGrid,
    start: PositionLike,
    end: PositionLike,
    connectivity: Union[Connectivity, int] = Connectivity.EIGHT
) -> Optional[Path]:
    """
    Find a path and straighten it through its corner points.

    Each pair of consecutive corner points is joined by a Bresenham line.
    With FOUR connectivity the diagonal steps those lines produce are split
    into two cardinal steps.

    Args:
        grid: Grid to search
        start: Starting cell
        end: Goal cell
        connectivity: FOUR or EIGHT

    Returns:
        Smoothed path, or None if no path exists
    """
    connectivity = Connectivity(connectivity)
    waypoints = corner_points(grid, start, end, connectivity)
    if waypoints is None:
        return None

    return waypoints_to_path(grid, waypoints, connectivity)


def waypoints_to_path(
    grid: WalkableGrid,
    waypoints: List[Position],
    connectivity: Union[Connectivity, int] = Connectivity.EIGHT
) -> Path:
    """
    Turn waypoints into a step sequence along straight lines between them.

    Args:
        grid: Grid consulted when splitting diagonal steps
        waypoints: Corner points, start first
        connectivity: FOUR splits every diagonal step into two cardinal ones

    Returns:
        Path leading from the first waypoint to the last
    """
    cells = rasterize_waypoints(waypoints)

    directions: List[Direction] = []
    for i in range(1, len(cells)):
        direction = direction_between(cells[i - 1], cells[i])
        if connectivity == Connectivity.FOUR and direction.is_diagonal:
            directions.extend(split_diagonal(grid, cells[i - 1], direction))
        else:
            directions.append(direction)

    return Path(directions)
