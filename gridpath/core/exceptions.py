"""
Custom exceptions for gridpath
"""


class GridPathError(Exception):
    """Base exception for all gridpath errors"""
    pass


class OutOfBoundsError(GridPathError, IndexError):
    """Raised when a caller-supplied position lies outside the grid"""
    pass


class NotNeighborsError(GridPathError, ValueError):
    """Raised when a direction is requested between cells that are not adjacent"""
    pass


class GridShapeError(GridPathError, ValueError):
    """Raised when a walkability layout does not match the grid dimensions"""
    pass


class ConfigError(GridPathError, ValueError):
    """Raised when configuration loading or validation fails"""
    pass
