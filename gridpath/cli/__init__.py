"""
CLI utilities for the gridpath command
"""

from .argument_parser import setup_argument_parser, collect_overrides, parse_position
from .output import render_grid, format_directions, format_duration, print_separator
from .init_command import run_init_command
from .config_discovery import discover_config

__all__ = [
    'setup_argument_parser',
    'collect_overrides',
    'parse_position',
    'render_grid',
    'format_directions',
    'format_duration',
    'print_separator',
    'run_init_command',
    'discover_config',
]
