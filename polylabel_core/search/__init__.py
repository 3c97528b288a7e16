"""
Search Layer
============

Bounded Context: Pole of inaccessibility branch-and-bound search.

Responsibilities:
- Cell evaluation (distance + upper bound)
- Max-priority frontier
- Seeding, refinement and termination
"""

from polylabel_core.search.cell import Cell
from polylabel_core.search.frontier import SearchFrontier
from polylabel_core.search.pole import PoleResult, PoleSearch, find_pole_of_isolation

__all__ = [
    "Cell",
    "SearchFrontier",
    "PoleResult",
    "PoleSearch",
    "find_pole_of_isolation",
]
