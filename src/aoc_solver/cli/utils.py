"""CLI utility functions."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


def setup_logging(level: Union[int, str] = logging.WARNING,
                  format_string: Optional[str] = None) -> None:
    """Configure the root logger once for the whole run.

    Args:
        level: Logging level, as a number or a name such as ``"INFO"``
        format_string: Custom format string
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%H:%M:%S")


def _to_json(obj: Any) -> Any:
    # numpy scalars and arrays expose tolist(); tuple states become lists
    if hasattr(obj, 'tolist'):
        return obj.tolist()
    if isinstance(obj, dict):
        return {str(k): _to_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_json(item) for item in obj]
    return obj


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Write solver results to a JSON file, creating parent directories.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to indent the JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        json.dump(_to_json(results), f, indent=2 if pretty else None, sort_keys=True)


def summarize_results(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Summary over the per-day results of a run.

    A day counts as unsolved when either part has no answer.

    Returns:
        Summary statistics dictionary
    """
    times = [r.get('computation_time', 0.0) for r in results]
    unsolved = [r['day'] for r in results
                if r.get('part1') is None or r.get('part2') is None]
    slowest = max(results, key=lambda r: r.get('computation_time', 0.0)) if results else None

    return {
        'days': len(results),
        'unsolved_days': unsolved,
        'total_time': sum(times),
        'slowest_day': slowest['day'] if slowest else None,
    }


def format_duration(seconds: float) -> str:
    """Format a duration for log output, e.g. ``"250.0ms"`` or ``"2m 5.0s"``."""
    if seconds < 0.001:
        return f"{seconds * 1e6:.1f}µs"
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, secs = divmod(seconds, 60)
    return f"{int(minutes)}m {secs:.1f}s"
