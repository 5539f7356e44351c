"""Priority frontier for best-first search."""

import heapq
import itertools
from typing import Any, Generic, List

from .problem import CostT, StateT


class Ranked(Generic[StateT, CostT]):
    """Frontier entry pairing a state with its estimated total cost.

    Entries order by cost ascending. Equal costs are broken by ``order``,
    the insertion sequence, so the earliest pushed entry wins. Equality
    only looks at the cost; it is meaningful for heap ordering only.
    """

    __slots__ = ('state', 'cost', 'order')

    def __init__(self, state: StateT, cost: CostT, order: int = 0):
        self.state = state
        self.cost = cost
        self.order = order

    def __lt__(self, other: 'Ranked') -> bool:
        if self.cost != other.cost:
            return self.cost < other.cost
        return self.order < other.order

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Ranked):
            return NotImplemented
        return self.cost == other.cost

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ranked(state={self.state!r}, cost={self.cost!r})"


class Frontier(Generic[StateT, CostT]):
    """Min-priority queue of ``Ranked`` entries backed by ``heapq``.

    The same state may be pushed several times with different costs; the
    frontier does not deduplicate.
    """

    def __init__(self):
        self._heap: List[Ranked[StateT, CostT]] = []
        self._counter = itertools.count()

    def push(self, state: StateT, cost: CostT) -> None:
        """Add ``state`` with estimated total cost ``cost``."""
        heapq.heappush(self._heap, Ranked(state, cost, next(self._counter)))

    def pop(self) -> Ranked[StateT, CostT]:
        """Remove and return the entry with the lowest estimated cost.

        Raises:
            IndexError: If the frontier is empty
        """
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)

    def peek(self) -> Ranked[StateT, CostT]:
        if not self._heap:
            raise IndexError("peek into an empty frontier")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
