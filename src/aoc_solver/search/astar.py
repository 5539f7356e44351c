"""A* search over a generic search problem.

The engine drives a priority frontier ordered by g + h, relaxes edges with
a strict improvement test and stops as soon as a goal state is popped. It
returns the predecessor map together with the goal it reached, or None when
the frontier runs dry.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Optional, Set

from .frontier import Frontier
from .path import reconstruct_path
from .problem import CostT, SearchProblem, StateT

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    skip_stale: bool = False  # Discard frontier entries superseded by a cheaper path
    log_progress_every: int = 0  # DEBUG progress line every N expansions, 0 disables


@dataclass
class SearchStatistics:
    """Counters collected during a single search."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    stale_skipped: int = 0
    max_frontier_size: int = 0
    computation_time: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'stale_skipped': self.stale_skipped,
            'max_frontier_size': self.max_frontier_size,
            'computation_time': self.computation_time
        }


@dataclass
class SearchResult(Generic[StateT, CostT]):
    """Successful search outcome.

    Iterating a result yields ``(came_from, goal)`` so it can be unpacked
    like a plain pair.
    """
    came_from: Dict[StateT, StateT]
    goal: StateT
    cost: CostT
    statistics: SearchStatistics = field(default_factory=SearchStatistics)

    def path(self) -> List[StateT]:
        """Start-to-goal path through the predecessor map."""
        return reconstruct_path(self.came_from, self.goal)

    def __iter__(self) -> Iterator[Any]:
        yield self.came_from
        yield self.goal


class AStarSearcher:
    """A* search engine.

    A searcher holds no per-search state, so one instance can run any
    number of searches. Stale frontier entries (a state pushed again after a
    cheaper path was found) are reprocessed by default; the relaxation test
    makes that harmless. With ``skip_stale`` they are dropped on pop.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        logger.info(f"A* searcher initialized with skip_stale={self.config.skip_stale}")

    def search(self, problem: SearchProblem[StateT, CostT]) -> Optional[SearchResult[StateT, CostT]]:
        """Run A* on ``problem``.

        Args:
            problem: Search space to explore

        Returns:
            SearchResult for the first goal popped from the frontier, or None
            if the goal is unreachable

        Raises:
            KeyError: If a popped state has no recorded g-score, which only
                happens when the problem breaks the engine's invariants
        """
        start_time = time.time()
        stats = SearchStatistics()

        start = problem.start()
        came_from: Dict[StateT, StateT] = {}
        g_score: Dict[StateT, CostT] = {start: problem.zero()}
        open_set: Set[StateT] = {start}

        frontier: Frontier[StateT, CostT] = Frontier()
        frontier.push(start, problem.heuristic(start))
        stats.nodes_generated = 1
        stats.max_frontier_size = 1

        while open_set:
            entry = frontier.pop()
            current = entry.state
            current_g = g_score[current]

            if self.config.skip_stale and entry.cost > current_g + problem.heuristic(current):
                stats.stale_skipped += 1
                continue

            if problem.is_goal(current):
                stats.computation_time = time.time() - start_time
                logger.debug(f"Goal reached at cost {current_g}: {stats.to_dict()}")
                return SearchResult(came_from=came_from, goal=current,
                                    cost=current_g, statistics=stats)

            open_set.discard(current)
            stats.nodes_expanded += 1

            for neighbor in problem.expand(current):
                tentative_g = current_g + problem.distance(current, neighbor)
                if tentative_g < g_score.get(neighbor, problem.infinity()):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative_g
                    frontier.push(neighbor, tentative_g + problem.heuristic(neighbor))
                    open_set.add(neighbor)
                    stats.nodes_generated += 1

            stats.max_frontier_size = max(stats.max_frontier_size, len(frontier))

            every = self.config.log_progress_every
            if every and stats.nodes_expanded % every == 0:
                logger.debug(f"Expanded {stats.nodes_expanded} nodes, "
                             f"frontier={len(frontier)}, open={len(open_set)}")

        stats.computation_time = time.time() - start_time
        logger.debug(f"Frontier exhausted without reaching a goal: {stats.to_dict()}")
        return None


def astar_search(problem: SearchProblem[StateT, CostT],
                 config: Optional[SearchConfig] = None) -> Optional[SearchResult[StateT, CostT]]:
    """Search ``problem`` with a one-off searcher."""
    return AStarSearcher(config).search(problem)


def create_astar_searcher(**kwargs) -> AStarSearcher:
    """Factory function to create A* searcher.

    Settings under ``search.astar`` in the loaded configuration are used as
    defaults; keyword arguments override them.

    Args:
        **kwargs: SearchConfig field overrides

    Returns:
        Configured AStarSearcher instance
    """
    settings: Dict[str, Any] = {}

    from aoc_solver.config import get_config
    cfg = get_config()
    if cfg is not None:
        astar_cfg = cfg.get('search', {}).get('astar', {}) or {}
        if 'skip_stale' in astar_cfg:
            settings['skip_stale'] = bool(astar_cfg.skip_stale)
        if 'log_progress_every' in astar_cfg:
            settings['log_progress_every'] = int(astar_cfg.log_progress_every)

    settings.update(kwargs)
    return AStarSearcher(SearchConfig(**settings))
