"""
Pathfinder bound to one grid and connectivity mode.
"""

from typing import List, Optional, Union

from .astar import SearchState, search
from .grid import WalkableGrid
from .path_optimizer import reduce_to_corners, waypoints_to_path
from .types import Connectivity, Path, Position, PositionLike


class Pathfinder:
    """
    Runs path queries against a single grid.

    Keeps the scratch state of the most recent search in ``last_search``
    so callers can inspect g/h/f scores, e.g. to visualise what the search
    explored. Not meant to be shared between threads.
    """

    def __init__(self, grid: WalkableGrid, connectivity: Union[Connectivity, int] = Connectivity.EIGHT):
        self.grid = grid
        self.connectivity = Connectivity(connectivity)
        self.last_search: Optional[SearchState] = None

    def reset(self) -> None:
        """Forget the scores of the previous search."""
        self.last_search = None

    def find_path(self, start: PositionLike, end: PositionLike) -> Optional[Path]:
        path, self.last_search = search(self.grid, start, end, self.connectivity)
        return path

    def corner_points(self, start: PositionLike, end: PositionLike) -> Optional[List[Position]]:
        path = self.find_path(start, end)
        if path is None:
            return None

        return reduce_to_corners(self.grid, path.positions(start))

    def smooth_path(self, start: PositionLike, end: PositionLike) -> Optional[Path]:
        waypoints = self.corner_points(start, end)
        if waypoints is None:
            return None

        return waypoints_to_path(self.grid, waypoints, self.connectivity)
