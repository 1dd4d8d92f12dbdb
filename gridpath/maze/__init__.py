"""
Procedural maze layouts for exercising the pathfinder.
"""

from .generator import generate_maze

__all__ = ['generate_maze']
