"""CLI command implementations."""

import logging
import time
from typing import Any, Dict, List

from omegaconf import DictConfig, OmegaConf

from aoc_solver.config import (
    load_config, default_config, validate_config, ConfigValidationError
)
from aoc_solver.integration.io import PuzzleInputLoader, read_lines, strip_trailing_blank
from aoc_solver.puzzles import available_days, get_puzzle

from .utils import save_results, summarize_results, format_duration

logger = logging.getLogger(__name__)


def build_config(args) -> DictConfig:
    """Load the configuration for a command, applying CLI overrides.

    Falls back to the built-in defaults when no conf directory exists.
    """
    overrides: List[str] = []
    if getattr(args, 'skip_stale', False):
        overrides.append("search.astar.skip_stale=true")
    if getattr(args, 'config', None):
        overrides.append(args.config)

    try:
        config = load_config(overrides=overrides)
    except FileNotFoundError as e:
        logger.warning(f"{e}; using built-in defaults")
        config = default_config(overrides)

    # Verbosity flags win over the configured level
    if not getattr(args, 'verbose', 0) and not getattr(args, 'quiet', False):
        logging.getLogger().setLevel(str(config.logging.level).upper())

    return config


def solve_day(day: int, lines: List[str]) -> Dict[str, Any]:
    """Run the solver of ``day`` on ``lines``.

    Returns:
        Result dictionary with both answers and the elapsed time
    """
    puzzle = get_puzzle(day)
    start_time = time.time()
    part1, part2 = puzzle.solve(lines)
    elapsed = time.time() - start_time
    logger.info(f"Day {day} solved in {format_duration(elapsed)}")
    return {
        'day': day,
        'title': puzzle.TITLE,
        'part1': part1,
        'part2': part2,
        'computation_time': elapsed
    }


def print_result(result: Dict[str, Any]) -> None:
    print(f"== Day {result['day']} ==")
    print(f"Part 1: {result['part1']}")
    print(f"Part 2: {result['part2']}")


def parse_day_selection(selection: str) -> List[int]:
    """Resolve ``all`` or a day number to the days to run.

    Raises:
        ValueError: If ``selection`` is neither
    """
    if selection == 'all':
        return available_days()
    try:
        day = int(selection)
    except ValueError:
        raise ValueError(f"Unrecognized day: {selection}") from None
    get_puzzle(day)
    return [day]


def run_command(args) -> int:
    """Handle run command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        days = parse_day_selection(args.day)
        if args.input and len(days) != 1:
            logger.error("--input can only be used with a single day")
            return 1

        config = build_config(args)
        data_dir = args.data_dir or config.puzzles.data_dir
        loader = PuzzleInputLoader(data_dir, config.puzzles.input_template)

        results = []
        for index, day in enumerate(days):
            if args.input:
                lines = strip_trailing_blank(list(read_lines(args.input)))
            else:
                lines = loader.load_lines(day)

            result = solve_day(day, lines)
            results.append(result)

            if index:
                print()
            print_result(result)

        summary = summarize_results(results)
        logger.info(f"Solved {summary['days']} day(s) in {format_duration(summary['total_time'])}")
        if summary['unsolved_days']:
            logger.warning(f"No answer for day(s): {summary['unsolved_days']}")

        if args.output:
            save_results({'results': results, 'summary': summary}, args.output)
            logger.info(f"Results saved to {args.output}")

        return 0

    except (FileNotFoundError, ValueError, ConfigValidationError) as e:
        logger.error(f"Run command failed: {e}")
        return 1


def list_command(args) -> int:
    """Print the registered days."""
    for day in available_days():
        print(f"{day:2d}  {get_puzzle(day).TITLE}")
    return 0


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        if args.config_action == 'show':
            config = build_config(args)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = build_config(args)
                validate_config(config)
                print("Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
