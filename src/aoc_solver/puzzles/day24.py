"""Day 24: Blizzard Basin.

Search states are ``(x, y, minute)``. Which cells are free at a given
minute depends only on the blizzards, which return to their starting
layout every ``lcm(width, height)`` minutes. The problem keeps one boolean
grid per phase of that cycle and grows the list lazily as the search
reaches later minutes. The list is kept across searches, which makes the
there-and-back trip of part 2 cheap.
"""

import logging
from typing import Dict, List, NamedTuple, Tuple

import numpy as np

from aoc_solver.search import MemoizingSearchProblem, create_astar_searcher

logger = logging.getLogger(__name__)

DAY = 24
TITLE = "Blizzard Basin"

Position = Tuple[int, int]  # (x, y) inside the walls

DIRECTIONS = {
    '>': (1, 0),
    'v': (0, 1),
    '<': (-1, 0),
    '^': (0, -1),
}

MOVES = ((0, 0), (1, 0), (0, 1), (-1, 0), (0, -1))


class State(NamedTuple):
    x: int
    y: int
    minute: int

    @property
    def position(self) -> Position:
        return (self.x, self.y)


class Valley:
    """Blizzard layout inside the walls of the basin.

    Coordinates exclude the walls: the interior spans ``0 <= x < width``
    and ``0 <= y < height``, the entry sits at ``(0, -1)`` and the exit at
    ``(width - 1, height)``.
    """

    def __init__(self, width: int, height: int, origins: np.ndarray, headings: np.ndarray):
        self.width = width
        self.height = height
        self.origins = origins
        self.headings = headings

    @property
    def entry(self) -> Position:
        return (0, -1)

    @property
    def exit(self) -> Position:
        return (self.width - 1, self.height)

    def blizzards_at(self, minute: int) -> np.ndarray:
        """Blizzard positions after ``minute`` minutes, one ``(x, y)`` row each."""
        bounds = np.array([self.width, self.height])
        return np.mod(self.origins + self.headings * minute, bounds)

    @property
    def period(self) -> int:
        """Minutes after which every blizzard is back where it started."""
        return int(np.lcm(self.width, self.height))

    def open_cells(self, minute: int) -> np.ndarray:
        """Boolean ``(height, width)`` grid of interior cells free of blizzards."""
        free = np.ones((self.height, self.width), dtype=bool)
        positions = self.blizzards_at(minute)
        if len(positions):
            free[positions[:, 1], positions[:, 0]] = False
        return free


def parse_valley(lines: List[str]) -> Valley:
    """Parse the walled basin map.

    Raises:
        ValueError: If the map is too small, ragged or has unknown tiles
    """
    rows = [line.strip() for line in lines if line.strip()]
    if len(rows) < 3 or len({len(row) for row in rows}) != 1 or len(rows[0]) < 3:
        raise ValueError("Valley map must be a rectangle of at least 3x3 tiles")

    width = len(rows[0]) - 2
    height = len(rows) - 2

    origins = []
    headings = []
    for y, row in enumerate(rows[1:-1]):
        for x, tile in enumerate(row[1:-1]):
            if tile in DIRECTIONS:
                origins.append((x, y))
                headings.append(DIRECTIONS[tile])
            elif tile != '.':
                raise ValueError(f"Unexpected tile {tile!r} at row {y + 1}")

    return Valley(
        width,
        height,
        np.array(origins, dtype=np.int64).reshape(-1, 2),
        np.array(headings, dtype=np.int64).reshape(-1, 2),
    )


class BlizzardProblem(MemoizingSearchProblem[State, int]):
    """Reach ``goal`` from ``start`` while dodging the blizzards.

    ``open_memo[p]`` is the free-cell grid at blizzard phase ``p``, that is
    ``minute % period``. It only ever covers the phases needed by states
    that were actually expanded, and never more than one period.

    A state is dropped when its cell was already reached at the same phase
    no later: the earlier arrival can follow any route the later one could.
    Each search therefore generates at most ``(cells + 2) * period`` states,
    even when the goal is unreachable.
    """

    def __init__(self, valley: Valley, start: State, goal: Position):
        self.valley = valley
        self.period = valley.period
        self.open_memo: List[np.ndarray] = []
        self.restart(start, goal)

    def restart(self, start: State, goal: Position) -> None:
        """Aim the next search at ``goal`` from ``start``, keeping the memo."""
        self.start_state = start
        self.goal = goal
        self.earliest: Dict[Tuple[int, int, int], int] = {self.phase_key(start): start.minute}

    def phase_key(self, state: State) -> Tuple[int, int, int]:
        return (state.x, state.y, state.minute % self.period)

    def update(self, state: State) -> None:
        for phase in range(len(self.open_memo), min(state.minute + 2, self.period)):
            self.open_memo.append(self.valley.open_cells(phase))

    def is_open(self, state: State) -> bool:
        position = state.position
        if position == self.valley.entry or position == self.valley.exit:
            return True
        if not (0 <= state.x < self.valley.width and 0 <= state.y < self.valley.height):
            return False
        return bool(self.open_memo[state.minute % self.period][state.y, state.x])

    def neighbors(self, state: State) -> List[State]:
        result = []
        for dx, dy in MOVES:
            candidate = State(state.x + dx, state.y + dy, state.minute + 1)
            if not self.is_open(candidate):
                continue
            key = self.phase_key(candidate)
            if key in self.earliest and self.earliest[key] <= candidate.minute:
                continue
            self.earliest[key] = candidate.minute
            result.append(candidate)
        return result

    def start(self) -> State:
        return self.start_state

    def is_goal(self, state: State) -> bool:
        return state.position == self.goal

    def heuristic(self, state: State) -> int:
        return abs(state.x - self.goal[0]) + abs(state.y - self.goal[1])

    def distance(self, current: State, neighbor: State) -> int:
        return neighbor.minute - current.minute


def cross(problem: BlizzardProblem, start: State, goal: Position) -> State:
    """Search from ``start`` to ``goal`` and return the arrival state.

    Raises:
        ValueError: If the goal cannot be reached
    """
    problem.restart(start, goal)
    result = create_astar_searcher().search(problem)
    if result is None:
        raise ValueError(f"No way through the valley from {start.position} to {goal}")
    logger.info(f"Reached {goal} at minute {result.goal.minute}, "
                f"{len(problem.open_memo)} blizzard phases memoized")
    return result.goal


def part1(problem: BlizzardProblem) -> int:
    valley = problem.valley
    arrival = cross(problem, State(*valley.entry, 0), valley.exit)
    return arrival.minute


def part2(problem: BlizzardProblem) -> int:
    valley = problem.valley
    there = cross(problem, State(*valley.entry, 0), valley.exit)
    back = cross(problem, there, valley.entry)
    again = cross(problem, back, valley.exit)
    return again.minute


def solve(lines: List[str]) -> Tuple[int, int]:
    valley = parse_valley(lines)
    problem = BlizzardProblem(valley, State(*valley.entry, 0), valley.exit)
    return part1(problem), part2(problem)
