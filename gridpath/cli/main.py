"""
Entry point for the gridpath CLI
Usage: gridpath run [config_file] [--mode smooth] [--seed 7]
"""

import sys
import time
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..core.config import GridPathConfig
from ..core.exceptions import ConfigError
from ..maze.generator import generate_maze
from ..routing.grid import Grid
from ..routing.pathfinder import Pathfinder
from ..routing.path_optimizer import compress_path
from ..routing.types import Path, Position
from .argument_parser import setup_argument_parser, collect_overrides
from .config_discovery import discover_config
from .init_command import run_init_command
from .output import render_grid, format_directions, format_duration, print_separator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_PATH = 2

CONSOLE_HANDLER_NAME = "gridpath.console"


@dataclass
class QueryResult:
    """Outcome of one path query"""
    mode: str
    path: Optional[Path] = None
    corners: Optional[List[Position]] = None
    marked: List[Position] = field(default_factory=list)
    explored: List[Position] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def found(self) -> bool:
        return self.path is not None or self.corners is not None


def setup_logging(log_level: str = 'WARNING') -> None:
    """
    Configure console logging

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace the handler of an earlier call instead of stacking another one
    for handler in list(root_logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)


def build_grid(config: GridPathConfig) -> Tuple[Grid, float]:
    """
    Create the grid for a run, carving a maze into it when enabled

    Args:
        config: Run configuration

    Returns:
        Tuple of (grid, maze generation time in milliseconds)
    """
    grid = Grid(config.width, config.height)
    if not config.maze_enabled:
        return grid, 0.0

    started = time.perf_counter()
    layout = generate_maze(config.width, config.height, config.start, config.end, seed=config.seed)
    elapsed_ms = (time.perf_counter() - started) * 1000

    grid.load_walkability(layout)
    logger.info(f"Generated {config.width}x{config.height} maze (seed={config.seed})")
    return grid, elapsed_ms


def run_query(grid: Grid, config: GridPathConfig) -> QueryResult:
    """
    Run the configured query against a grid

    Args:
        grid: Grid to search
        config: Run configuration (mode, connectivity, endpoints)

    Returns:
        QueryResult describing the outcome
    """
    pathfinder = Pathfinder(grid, config.connectivity)
    result = QueryResult(mode=config.mode)

    started = time.perf_counter()
    if config.mode == 'corners':
        result.corners = pathfinder.corner_points(config.start, config.end)
    elif config.mode == 'smooth':
        result.path = pathfinder.smooth_path(config.start, config.end)
    else:
        result.path = pathfinder.find_path(config.start, config.end)
    result.elapsed_ms = (time.perf_counter() - started) * 1000

    if result.corners is not None:
        result.marked = result.corners
    elif result.path is not None:
        result.marked = result.path.positions(config.start)

    if pathfinder.last_search is not None:
        result.explored = sorted(pathfinder.last_search.closed)

    return result


def print_report(grid: Grid, config: GridPathConfig, result: QueryResult, maze_ms: float) -> None:
    """Print the rendered grid and a summary of the query"""
    explored = result.explored if config.show_explored else None
    print(render_grid(grid, config.start, config.end, result.marked, explored))
    print_separator(min(max(config.width, 20), 70), '-')

    if not result.found:
        print(f"❌ No path from {config.start} to {config.end}")
    elif result.corners is not None:
        print(f"📍 {len(result.corners)} corner points: " + ' '.join(repr(p) for p in result.corners))
    else:
        turns = len(compress_path(result.marked)) - 1
        print(f"✅ {config.mode} path: {len(result.path)} steps, {turns} segments")
        if config.show_directions:
            print(f"   {format_directions(result.path)}")

    if config.show_timings:
        if config.maze_enabled:
            print(f"⏱  maze: {format_duration(maze_ms)}")
        print(f"⏱  {result.mode}: {format_duration(result.elapsed_ms)} ({len(result.explored)} cells expanded)")


def run_command(args) -> int:
    """
    Execute the run subcommand

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = path found, 1 = error, 2 = no path)
    """
    try:
        config_file = discover_config(args.config_file)
        if config_file:
            logger.info(f"Loading config from: {config_file}")
            config = GridPathConfig.from_yaml(config_file)
        else:
            config = GridPathConfig()
        config = config.with_overrides(**collect_overrides(args))
    except (ConfigError, FileNotFoundError) as e:
        print(f"❌ {e}")
        return EXIT_ERROR

    logger.debug(f"Running with {config!r}")

    grid, maze_ms = build_grid(config)
    result = run_query(grid, config)
    print_report(grid, config, result, maze_ms)

    return EXIT_OK if result.found else EXIT_NO_PATH


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for gridpath CLI"""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    if args.command == 'init':
        sys.exit(run_init_command(force=args.force, path=args.path))

    setup_logging(args.log_level)
    sys.exit(run_command(args))
