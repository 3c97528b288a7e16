"""
Geometry Layer
==============

Bounded Context: Pure geometric shapes and distance queries.

Responsibilities:
- Polygon and bounding box representation (immutable)
- Point-segment and signed point-polygon distance
- Point-in-polygon tests
- Area and centroid
- NO search state, NO logging

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
"""

from polylabel_core.geometry.primitives import (
    centroid,
    point_in_polygon,
    point_segment_distance,
    point_to_polygon_distance,
    polygon_area,
    segments_intersect,
)
from polylabel_core.geometry.shapes import BoundingBox, InvalidPolygonError, Polygon

__all__ = [
    "BoundingBox",
    "InvalidPolygonError",
    "Polygon",
    "centroid",
    "point_in_polygon",
    "point_segment_distance",
    "point_to_polygon_distance",
    "polygon_area",
    "segments_intersect",
]
