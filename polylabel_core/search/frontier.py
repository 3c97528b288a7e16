"""
Search Frontier Module
======================

Max-priority queue of cells awaiting refinement.

Design:
- Binary heap (heapq) over negated priorities
- Insertion counter breaks ties: among equal priorities the cell pushed
  first is popped first, so repeated searches are deterministic
- Duplicates allowed, no decrease-key, no peek
"""

import heapq
import itertools
from typing import List, Tuple

from polylabel_core.search.cell import Cell


class SearchFrontier:
    """
    Max-priority container ordering cells by priority (their max_distance).

    Usage:
        frontier = SearchFrontier()
        frontier.push(cell, cell.max_distance)
        while frontier:
            best = frontier.pop()

    Thread Safety:
        Not synchronized; each search owns its own frontier.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, Cell]] = []
        self._counter = itertools.count()

    def push(self, cell: Cell, priority: float) -> None:
        """Insert a cell with the given priority (higher pops first)."""
        heapq.heappush(self._heap, (-priority, next(self._counter), cell))

    def pop(self) -> Cell:
        """
        Remove and return the highest-priority cell.

        Raises:
            IndexError: If the frontier is empty
        """
        if not self._heap:
            raise IndexError("pop from empty SearchFrontier")
        _, _, cell = heapq.heappop(self._heap)
        return cell

    @property
    def count(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"SearchFrontier(count={len(self._heap)})"
