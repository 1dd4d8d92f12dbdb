"""
gridpath - A* pathfinding, path smoothing and maze generation for 2D tile grids
"""

from importlib.metadata import version, PackageNotFoundError

from .routing import (
    Position,
    Direction,
    Connectivity,
    Path,
    Grid,
    Cell,
    Pathfinder,
    find_path,
    corner_points,
    smooth_path,
    rasterize,
    walkable_between,
)
from .maze import generate_maze
from .core.config import GridPathConfig

try:
    __version__ = version("gridpath")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    "Position",
    "Direction",
    "Connectivity",
    "Path",
    "Grid",
    "Cell",
    "Pathfinder",
    "find_path",
    "corner_points",
    "smooth_path",
    "rasterize",
    "walkable_between",
    "generate_maze",
    "GridPathConfig",
]
