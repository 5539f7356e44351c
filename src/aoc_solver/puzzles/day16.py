"""Day 16: Proboscidea Volcanium.

Only valves with a positive flow rate are worth visiting, so the tunnel
network is first collapsed into a distance table between those valves and
the entry valve ``AA``; each entry is a shortest-path search through the
tunnels. The best pressure release is then found by exploring every order
in which valves can be opened before time runs out.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from aoc_solver.search import SearchProblem, create_astar_searcher, path_length

logger = logging.getLogger(__name__)

DAY = 16
TITLE = "Proboscidea Volcanium"

ENTRY_VALVE = 'AA'
SOLO_MINUTES = 30
PAIR_MINUTES = 26

VALVE_PATTERN = re.compile(
    r"Valve (\w+) has flow rate=(\d+); tunnels? leads? to valves? ([\w, ]+)"
)


@dataclass
class Valve:
    name: str
    flow_rate: int
    leads_to: List[str]


def parse_valve(line: str) -> Valve:
    """Parse a single ``Valve XX has flow rate=N; ...`` line.

    Raises:
        ValueError: If the line does not describe a valve
    """
    match = VALVE_PATTERN.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"Invalid valve description: {line!r}")
    name, rate, tunnels = match.groups()
    return Valve(name, int(rate), [t.strip() for t in tunnels.split(',')])


def parse_valves(lines: List[str]) -> Dict[str, Valve]:
    valves = {}
    for line in lines:
        if line.strip():
            valve = parse_valve(line)
            valves[valve.name] = valve

    if ENTRY_VALVE not in valves:
        raise ValueError(f"No entry valve {ENTRY_VALVE}")
    for valve in valves.values():
        for other in valve.leads_to:
            if other not in valves:
                raise ValueError(f"Valve {valve.name} leads to unknown valve {other}")
    return valves


class TunnelProblem(SearchProblem[str, int]):
    """Walk the tunnels from one valve to another, one minute per tunnel."""

    def __init__(self, valves: Dict[str, Valve], start: str, end: str):
        self.valves = valves
        self._start = start
        self.end = end

    def start(self) -> str:
        return self._start

    def is_goal(self, state: str) -> bool:
        return state == self.end

    def neighbors(self, state: str) -> List[str]:
        return list(self.valves[state].leads_to)

    def heuristic(self, state: str) -> int:
        return 0

    def distance(self, current: str, neighbor: str) -> int:
        return 1


def distance_table(valves: Dict[str, Valve], names: List[str]) -> Dict[str, Dict[str, int]]:
    """Tunnel distances between every pair of ``names``.

    Unreachable pairs are left out of the table.
    """
    searcher = create_astar_searcher()
    table: Dict[str, Dict[str, int]] = {name: {} for name in names}
    for source in names:
        for target in names:
            if source == target:
                continue
            result = searcher.search(TunnelProblem(valves, source, target))
            if result is None:
                logger.debug(f"Valve {target} unreachable from {source}")
                continue
            table[source][target] = path_length(result.came_from, source, result.goal)
    return table


def best_releases(valves: Dict[str, Valve],
                  distances: Dict[str, Dict[str, int]],
                  minutes: int) -> Dict[int, int]:
    """Best pressure release for each set of opened valves.

    Sets are bitmasks over the valves with positive flow, in the order of
    ``useful_valves``.
    """
    useful = useful_valves(valves)
    bits = {name: 1 << i for i, name in enumerate(useful)}

    best: Dict[int, int] = {}
    stack: List[Tuple[str, int, int, int]] = [(ENTRY_VALVE, minutes, 0, 0)]
    if ENTRY_VALVE in bits:
        # Opening the entry valve first costs one minute and no travel
        stack.append((ENTRY_VALVE, minutes - 1, bits[ENTRY_VALVE],
                      valves[ENTRY_VALVE].flow_rate * (minutes - 1)))
    while stack:
        position, time_left, opened, released = stack.pop()
        if released > best.get(opened, -1):
            best[opened] = released
        for name, steps in distances[position].items():
            bit = bits.get(name)
            if bit is None or opened & bit:
                continue
            remaining = time_left - steps - 1
            if remaining <= 0:
                continue
            stack.append((name, remaining, opened | bit,
                          released + valves[name].flow_rate * remaining))
    return best


def useful_valves(valves: Dict[str, Valve]) -> List[str]:
    return [name for name, valve in valves.items() if valve.flow_rate > 0]


def part1(valves: Dict[str, Valve], distances: Dict[str, Dict[str, int]]) -> int:
    return max(best_releases(valves, distances, SOLO_MINUTES).values())


def part2(valves: Dict[str, Valve], distances: Dict[str, Dict[str, int]]) -> int:
    """You and the elephant open disjoint sets of valves."""
    ranked = sorted(best_releases(valves, distances, PAIR_MINUTES).items(),
                    key=lambda item: item[1], reverse=True)
    best = 0
    for i, (mine, mine_released) in enumerate(ranked):
        if mine_released * 2 < best:
            break
        for theirs, theirs_released in ranked[i:]:
            if mine_released + theirs_released <= best:
                break
            if not mine & theirs:
                best = mine_released + theirs_released
    return best


def solve(lines: List[str]) -> Tuple[int, int]:
    valves = parse_valves(lines)
    names = [ENTRY_VALVE] + [name for name in useful_valves(valves) if name != ENTRY_VALVE]
    distances = distance_table(valves, names)
    return part1(valves, distances), part2(valves, distances)
