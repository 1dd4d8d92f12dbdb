"""
Grid-based A* routing for 2D tile worlds.

This package finds routes between cells of a walkable/unwalkable grid,
reduces them to line-of-sight corner points and re-rasterizes those into
smoothed step sequences.
"""

from .types import Position, Direction, Connectivity, Path, direction_between
from .grid import Grid, Cell, WalkableGrid, rasterize, walkable_between
from .astar import find_path, search, NodeScore, SearchState
from .path_optimizer import compress_path, corner_points, smooth_path
from .pathfinder import Pathfinder

__all__ = [
    'Position',
    'Direction',
    'Connectivity',
    'Path',
    'direction_between',
    'Grid',
    'Cell',
    'WalkableGrid',
    'rasterize',
    'walkable_between',
    'find_path',
    'search',
    'NodeScore',
    'SearchState',
    'compress_path',
    'corner_points',
    'smooth_path',
    'Pathfinder',
]
