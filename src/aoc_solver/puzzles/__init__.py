"""Puzzle solvers built on the shared search engine.

Each solver module exposes ``DAY``, ``TITLE`` and ``solve(lines)``, which
returns the answers to both parts.
"""

from types import ModuleType
from typing import Dict, List

from . import day12, day16, day24

PUZZLES: Dict[int, ModuleType] = {
    module.DAY: module for module in (day12, day16, day24)
}


def available_days() -> List[int]:
    """Days with a registered solver, in ascending order."""
    return sorted(PUZZLES)


def get_puzzle(day: int) -> ModuleType:
    """Solver module for ``day``.

    Raises:
        ValueError: If no solver is registered for ``day``
    """
    try:
        return PUZZLES[day]
    except KeyError:
        raise ValueError(
            f"No solver for day {day}; available days: "
            f"{', '.join(str(d) for d in available_days())}"
        ) from None


__all__ = [
    'PUZZLES',
    'available_days',
    'get_puzzle'
]
