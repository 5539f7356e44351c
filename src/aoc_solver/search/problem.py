"""Search problem abstractions consumed by the A* engine.

A search problem describes a state space: where to start, when to stop,
how to move between states, what each move costs and an admissible
estimate of the remaining cost. Two flavors are provided:

- ``SearchProblem``: the state space is pure; expanding a state never
  changes the problem.
- ``MemoizingSearchProblem``: expanding a state may first extend
  auxiliary data owned by the problem (for example obstacle layouts
  indexed by time step), so that only the parts of the space actually
  reached by the search are ever materialized.

The engine only ever calls ``expand``; each flavor decides what that means.
"""

import math
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

StateT = TypeVar('StateT')
CostT = TypeVar('CostT')


class SearchProblem(ABC, Generic[StateT, CostT]):
    """Read-only search space.

    States must be hashable and are never mutated in place. Costs must be
    totally ordered and support addition.

    Implementers are responsible for the usual A* contract: ``heuristic``
    never overestimates the remaining cost, ``distance`` is the true cost
    of an edge reported by ``neighbors`` and edge costs are non-negative.
    None of this is checked at runtime.
    """

    @abstractmethod
    def start(self) -> StateT:
        """Return the state the search begins from."""

    @abstractmethod
    def is_goal(self, state: StateT) -> bool:
        """Return True if ``state`` terminates the search."""

    @abstractmethod
    def neighbors(self, state: StateT) -> List[StateT]:
        """Return the states reachable from ``state`` by a single edge."""

    @abstractmethod
    def heuristic(self, state: StateT) -> CostT:
        """Estimate the remaining cost from ``state`` to a goal."""

    @abstractmethod
    def distance(self, current: StateT, neighbor: StateT) -> CostT:
        """Cost of the edge from ``current`` to its neighbor ``neighbor``."""

    def zero(self) -> CostT:
        """Identity for cost accumulation (the g-score of the start)."""
        return 0

    def infinity(self) -> CostT:
        """Sentinel exceeding any real path cost."""
        return math.inf

    def expand(self, state: StateT) -> List[StateT]:
        """Successors of ``state`` as seen by the search engine."""
        return self.neighbors(state)


class MemoizingSearchProblem(SearchProblem[StateT, CostT]):
    """Search space whose expansion may grow memoized data.

    Subclasses own their memo structure (typically created in ``__init__``)
    and implement ``update`` to extend it so that it covers ``state`` and
    everything ``neighbors(state)`` needs to look at. ``neighbors`` may then
    assume the memo is populated for that state.

    The memo survives across searches on the same instance, which lets a
    caller run several searches (e.g. with a moved start or goal) without
    recomputing it. It is not safe to share one instance between concurrent
    searches.
    """

    @abstractmethod
    def update(self, state: StateT) -> None:
        """Extend the memo so that ``state`` can be expanded."""

    def expand(self, state: StateT) -> List[StateT]:
        self.update(state)
        return self.neighbors(state)
