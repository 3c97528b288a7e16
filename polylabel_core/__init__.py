"""
polylabel core v1.0
===================

Bounded Context: Label placement inside polygons.

Finds the pole of inaccessibility of a simple polygon (the interior point
farthest from every edge) and the inscribed-circle radius at that point,
so a marker or label can be centered well clear of the boundary.

Architecture:

    polylabel_core/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── primitives.py  # distances, point-in-polygon, area, centroid
    │   └── shapes.py      # Polygon, BoundingBox
    │
    ├── search/            # Branch-and-bound search
    │   ├── cell.py        # Cell (distance + upper bound)
    │   ├── frontier.py    # SearchFrontier (max-priority queue)
    │   └── pole.py        # PoleSearch, find_pole_of_isolation
    │
    ├── placement.py       # LabelPlacement (result -> anchor/diameter)
    ├── config.py          # SearchConfig, LabelJobConfig (YAML)
    └── logging/           # Structured JSON logs

Usage:

    from polylabel_core import find_pole_of_isolation, LabelPlacement

    radius, pole = find_pole_of_isolation(
        [(0, 0), (10, 0), (10, 10), (0, 10)],
        precision=1e-3,
    )
    # radius == 5.0, pole == (5.0, 5.0)

    # Class form with config + logger
    from polylabel_core import PoleSearch, SearchConfig, create_logger

    search = PoleSearch(
        SearchConfig(precision=0.5, max_probes=50_000),
        logger=create_logger("search"),
    )
    result = search.find(vertices)
    placement = LabelPlacement.from_result(result, label_id="lake")
"""

# Geometry Layer
from polylabel_core.geometry import (
    BoundingBox,
    InvalidPolygonError,
    Polygon,
    point_in_polygon,
    point_segment_distance,
    point_to_polygon_distance,
)

# Search Layer
from polylabel_core.search import (
    Cell,
    PoleResult,
    PoleSearch,
    SearchFrontier,
    find_pole_of_isolation,
)

# Configuration, placement, logging
from polylabel_core.config import LabelJobConfig, PolygonConfig, SearchConfig
from polylabel_core.placement import LabelPlacement
from polylabel_core.logging import LogEvent, StructuredLogger, create_logger

__all__ = [
    # Geometry
    "BoundingBox",
    "InvalidPolygonError",
    "Polygon",
    "point_in_polygon",
    "point_segment_distance",
    "point_to_polygon_distance",
    # Search
    "Cell",
    "PoleResult",
    "PoleSearch",
    "SearchFrontier",
    "find_pole_of_isolation",
    # Config
    "LabelJobConfig",
    "PolygonConfig",
    "SearchConfig",
    # Placement
    "LabelPlacement",
    # Logging
    "LogEvent",
    "StructuredLogger",
    "create_logger",
]

__version__ = "1.0.0"
