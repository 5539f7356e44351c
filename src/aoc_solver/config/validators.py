"""Configuration validation for aoc-solver."""

import logging
from omegaconf import DictConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_puzzles_config(config.get('puzzles', {}))
        validate_search_config(config.get('search', {}))
        validate_logging_config(config.get('logging', {}))

        logger.info("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_puzzles_config(puzzles_config: DictConfig) -> None:
    """Validate puzzles configuration section.

    Args:
        puzzles_config: Puzzles configuration section
    """
    if not puzzles_config:
        return

    data_dir = puzzles_config.get('data_dir', 'data')
    if not isinstance(data_dir, str) or not data_dir.strip():
        raise ConfigValidationError(
            f"puzzles.data_dir must be a non-empty string, got {data_dir!r}"
        )

    template = puzzles_config.get('input_template', 'day{day:02d}.txt')
    if not isinstance(template, str) or '{day' not in template:
        raise ConfigValidationError(
            f"puzzles.input_template must contain a {{day}} field, got {template!r}"
        )


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    astar_config = search_config.get('astar', {})
    if astar_config:
        skip_stale = astar_config.get('skip_stale', False)
        if not isinstance(skip_stale, bool):
            raise ConfigValidationError(
                f"astar.skip_stale must be a boolean, got {skip_stale!r}"
            )

        every = astar_config.get('log_progress_every', 0)
        if isinstance(every, bool) or not isinstance(every, int) or every < 0:
            raise ConfigValidationError(
                f"astar.log_progress_every must be non-negative integer, got {every!r}"
            )


def validate_logging_config(logging_config: DictConfig) -> None:
    """Validate logging configuration section."""
    if not logging_config:
        return

    level = logging_config.get('level', 'WARNING')
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigValidationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
