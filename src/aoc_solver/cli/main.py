"""Main CLI entry point for aoc-solver."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='aoc-solver',
        description='Daily puzzle solvers built on a shared A* search engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aoc-solver run 12                            # Solve day 12 from data/day12.txt
  aoc-solver run 24 --input basin.txt          # Solve day 24 from a specific file
  aoc-solver run all --data-dir inputs/        # Solve every registered day
  aoc-solver config show                       # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Configuration override (e.g., search.astar.skip_stale=true)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Run command
    run_parser = subparsers.add_parser(
        'run',
        help='Solve one day or all days',
        description='Solve a single day, or every registered day with "all"'
    )

    run_parser.add_argument(
        'day',
        type=str,
        help='Day number or "all"'
    )

    run_parser.add_argument(
        '--input', '-i',
        type=str,
        help='Input file (single day only; default: <data-dir>/dayNN.txt)'
    )

    run_parser.add_argument(
        '--data-dir', '-d',
        type=str,
        help='Directory containing the puzzle inputs'
    )

    run_parser.add_argument(
        '--skip-stale',
        action='store_true',
        help='Discard superseded frontier entries instead of re-expanding them'
    )

    # List command
    subparsers.add_parser(
        'list',
        help='List the days with a solver'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect solver configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'run':
            return commands.run_command(parsed_args)
        if parsed_args.command == 'list':
            return commands.list_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
