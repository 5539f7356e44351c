"""Day 12: Hill Climbing Algorithm.

The heightmap is searched downhill from the summit ``E``: stepping from
``u`` to ``v`` is allowed when the forward climb ``v -> u`` is at most one
unit. Part 1 targets the start square ``S`` with a Manhattan heuristic;
part 2 targets any square of elevation ``a`` with no heuristic at all,
which reduces A* to uniform-cost search.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from aoc_solver.search import SearchProblem, create_astar_searcher

DAY = 12
TITLE = "Hill Climbing Algorithm"

Cell = Tuple[int, int]  # (row, col)

LOWEST = 0
HIGHEST = ord('z') - ord('a')


@dataclass
class Heightmap:
    """Elevation grid with the marked start and summit squares."""
    heights: np.ndarray
    start: Cell
    summit: Cell


def parse_heightmap(lines: List[str]) -> Heightmap:
    """Parse rows of ``a``-``z``, ``S`` and ``E`` into a Heightmap.

    Raises:
        ValueError: If the grid is ragged, empty, has unknown characters or
            does not hold exactly one ``S`` and one ``E``
    """
    rows = [line.strip() for line in lines if line.strip()]
    if not rows:
        raise ValueError("Heightmap is empty")
    if len({len(row) for row in rows}) != 1:
        raise ValueError("Heightmap rows have different lengths")

    codes = np.array([[ord(c) for c in row] for row in rows], dtype=np.int32)

    starts = np.argwhere(codes == ord('S'))
    summits = np.argwhere(codes == ord('E'))
    if len(starts) != 1 or len(summits) != 1:
        raise ValueError("Heightmap must contain exactly one 'S' and one 'E'")

    start = (int(starts[0][0]), int(starts[0][1]))
    summit = (int(summits[0][0]), int(summits[0][1]))

    heights = codes - ord('a')
    heights[start] = LOWEST
    heights[summit] = HIGHEST
    if heights.min() < LOWEST or heights.max() > HIGHEST:
        raise ValueError("Heightmap contains characters outside 'a'-'z', 'S' and 'E'")

    return Heightmap(heights=heights, start=start, summit=summit)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class DescentProblem(SearchProblem[Cell, int]):
    """Walk down from the summit until ``goal_test`` accepts a square.

    Args:
        heightmap: Parsed map
        goal_test: Predicate over cells
        target: Cell the heuristic measures towards; None disables it
    """

    def __init__(self, heightmap: Heightmap, goal_test: Callable[[Cell], bool],
                 target: Optional[Cell] = None):
        self.heightmap = heightmap
        self.goal_test = goal_test
        self.target = target

    def start(self) -> Cell:
        return self.heightmap.summit

    def is_goal(self, state: Cell) -> bool:
        return self.goal_test(state)

    def neighbors(self, state: Cell) -> List[Cell]:
        heights = self.heightmap.heights
        rows, cols = heights.shape
        r, c = state
        result = []
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < rows and 0 <= nc < cols and heights[r, c] <= heights[nr, nc] + 1:
                result.append((nr, nc))
        return result

    def heuristic(self, state: Cell) -> int:
        if self.target is None:
            return 0
        return manhattan(state, self.target)

    def distance(self, current: Cell, neighbor: Cell) -> int:
        return manhattan(current, neighbor)


def part1(heightmap: Heightmap) -> Optional[int]:
    """Fewest steps from ``S`` to ``E``."""
    problem = DescentProblem(heightmap, lambda cell: cell == heightmap.start, target=heightmap.start)
    result = create_astar_searcher().search(problem)
    return None if result is None else result.cost


def part2(heightmap: Heightmap) -> Optional[int]:
    """Fewest steps from any lowest square to ``E``."""
    heights = heightmap.heights
    problem = DescentProblem(heightmap, lambda cell: bool(heights[cell] == LOWEST))
    result = create_astar_searcher().search(problem)
    return None if result is None else result.cost


def solve(lines: List[str]) -> Tuple[Optional[int], Optional[int]]:
    heightmap = parse_heightmap(lines)
    return part1(heightmap), part2(heightmap)
