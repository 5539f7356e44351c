"""Generic best-first search.

This module provides the A* engine shared by the puzzle solvers, the
search problem abstractions it consumes and path reconstruction helpers.
"""

from .problem import SearchProblem, MemoizingSearchProblem
from .frontier import Frontier, Ranked
from .astar import (
    AStarSearcher, SearchConfig, SearchResult, SearchStatistics,
    astar_search, create_astar_searcher
)
from .path import reconstruct_path, path_length

__all__ = [
    'SearchProblem',
    'MemoizingSearchProblem',
    'Frontier',
    'Ranked',
    'AStarSearcher',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'astar_search',
    'create_astar_searcher',
    'reconstruct_path',
    'path_length'
]
