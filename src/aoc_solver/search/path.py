"""Path reconstruction from a predecessor map."""

from typing import Dict, List, Optional

from .problem import StateT


def reconstruct_path(came_from: Dict[StateT, StateT], goal: StateT) -> List[StateT]:
    """Rebuild the start-to-goal path ending at ``goal``.

    Predecessors are followed until a state without an entry is reached;
    that state is the start of the search.

    Args:
        came_from: Predecessor map produced by a search
        goal: Terminal state of the path

    Returns:
        States ordered from start to ``goal`` (inclusive)
    """
    path = [goal]
    current = goal
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def path_length(came_from: Dict[StateT, StateT],
                start: StateT,
                end: StateT) -> Optional[int]:
    """Number of edges on the recorded path from ``start`` to ``end``.

    Returns:
        Edge count, or None if ``end`` was never reached from ``start``
    """
    if end == start:
        return 0
    if end not in came_from:
        return None

    length = 0
    current = end
    while current != start:
        if current not in came_from:
            return None
        current = came_from[current]
        length += 1
    return length
