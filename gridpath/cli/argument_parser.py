"""
Command-line argument parser configuration with subcommands
"""

import argparse

from ..routing.types import Position


def parse_position(value: str) -> Position:
    """Parse an 'x,y' command-line value into a Position"""
    parts = value.split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected 'x,y', got '{value}'")
    try:
        return Position(int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"coordinates must be integers, got '{value}'")


def setup_argument_parser() -> argparse.ArgumentParser:
    """
    Configure and return the argument parser with subcommands (init, run)

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='gridpath',
        description='A* pathfinding and maze generation on 2D tile grids',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Initialize configuration
  gridpath init                            # Create ./gridpath.yaml
  gridpath init --force                    # Overwrite existing config

  # Run queries
  gridpath run                             # Auto-discover config, smoothed path through a maze
  gridpath run my_config.yaml              # Use specific config file
  gridpath run --mode corners --seed 7     # Corner points through a reproducible maze
  gridpath run --no-maze --start 0,0 --end 9,4 --width 10 --height 5
  gridpath run --connectivity 4 --log-level DEBUG
        """
    )

    subparsers = parser.add_subparsers(
        dest='command',
        required=True,
        help='Command to execute'
    )

    # ========================================================================
    # INIT SUBCOMMAND
    # ========================================================================
    init_parser = subparsers.add_parser(
        'init',
        help='Create a new configuration file',
        description='Initialize gridpath by creating a configuration file'
    )

    init_parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing configuration file'
    )

    init_parser.add_argument(
        '--path', '-p',
        type=str,
        help='Custom path for config file (default: ./gridpath.yaml)'
    )

    # ========================================================================
    # RUN SUBCOMMAND
    # ========================================================================
    run_parser = subparsers.add_parser(
        'run',
        help='Run a path query',
        description='Build a grid, optionally carve a maze into it, and run a path query'
    )

    run_parser.add_argument(
        'config_file',
        nargs='?',
        help='Path to YAML configuration file (optional, will auto-discover)'
    )

    run_parser.add_argument(
        '--mode', '-m',
        choices=['path', 'smooth', 'corners'],
        help='Query to run (default from config: smooth)'
    )

    run_parser.add_argument(
        '--connectivity', '-c',
        type=int,
        choices=[4, 8],
        help='4 for cardinal moves only, 8 to allow diagonals'
    )

    run_parser.add_argument('--width', type=int, help='Grid width in cells')
    run_parser.add_argument('--height', type=int, help='Grid height in cells')
    run_parser.add_argument('--start', type=parse_position, help="Start cell as 'x,y'")
    run_parser.add_argument('--end', type=parse_position, help="End cell as 'x,y'")

    run_parser.add_argument(
        '--seed', '-s',
        type=int,
        help='Random seed for maze generation'
    )

    run_parser.add_argument(
        '--no-maze',
        action='store_true',
        help='Search an open grid instead of a generated maze'
    )

    run_parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Set logging level (default: WARNING). Use DEBUG to see search statistics.'
    )

    return parser


def collect_overrides(args: argparse.Namespace) -> dict:
    """
    Collect config overrides from parsed run arguments

    Args:
        args: Parsed command-line arguments

    Returns:
        Keyword arguments for GridPathConfig.with_overrides
    """
    overrides = {
        'mode': args.mode,
        'connectivity': args.connectivity,
        'width': args.width,
        'height': args.height,
        'start': tuple(args.start) if args.start else None,
        'end': tuple(args.end) if args.end else None,
        'seed': args.seed,
    }
    if args.no_maze:
        overrides['maze_enabled'] = False
    return overrides
