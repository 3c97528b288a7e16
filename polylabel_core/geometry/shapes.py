"""
Geometric Shapes Module
========================

Immutable polygon and bounding box representations.

Design:
- Frozen dataclasses (no mutation after construction)
- Fail-fast validation at construction
- Vertices copied into a read-only float64 array (caller data untouched)
- Thread-safe by immutability
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from polylabel_core.geometry.primitives import (
    Point,
    centroid,
    point_in_polygon,
    point_to_polygon_distance,
    polygon_area,
    segments_intersect,
)


class InvalidPolygonError(ValueError):
    """Raised when vertices cannot form a polygon the search accepts."""
    pass


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned bounds of a vertex ring.

    Attributes:
        min_x, min_y, max_x, max_y: Extreme vertex coordinates
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_vertices(cls, vertices: np.ndarray) -> "BoundingBox":
        mins = vertices.min(axis=0)
        maxs = vertices.max(axis=0)
        return cls(
            min_x=float(mins[0]),
            min_y=float(mins[1]),
            max_x=float(maxs[0]),
            max_y=float(maxs[1]),
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return self.min_x + self.width / 2, self.min_y + self.height / 2

    @property
    def cell_size(self) -> float:
        """Side of the square seed cells (shorter bbox side)."""
        return min(self.width, self.height)

    @property
    def is_degenerate(self) -> bool:
        """True when the box has no area (e.g. collinear vertices)."""
        return self.cell_size == 0


@dataclass(frozen=True, eq=False)
class Polygon:
    """
    Immutable simple polygon, implicitly closed (last vertex joins the first).

    Attributes:
        vertices: Nx2 array of (x, y) vertices, N >= 3, all finite

    Raises:
        InvalidPolygonError: On wrong shape, fewer than 3 vertices or
            non-finite coordinates

    Example:
        >>> square = Polygon.from_points([(0, 0), (10, 0), (10, 10), (0, 10)])
        >>> square.bounding_box().center
        (5.0, 5.0)
    """

    vertices: np.ndarray

    def __post_init__(self):
        """Copy, validate and freeze vertices."""
        try:
            vertices = np.array(self.vertices, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidPolygonError(f"vertices must be numeric (x, y) pairs: {e}")

        if vertices.ndim != 2 or vertices.shape[1] != 2:
            raise InvalidPolygonError(f"vertices must be Nx2 array, got shape {vertices.shape}")
        if len(vertices) < 3:
            raise InvalidPolygonError(f"Polygon must have at least 3 vertices, got {len(vertices)}")
        if not np.all(np.isfinite(vertices)):
            raise InvalidPolygonError("Polygon vertices must be finite")

        vertices.flags.writeable = False
        object.__setattr__(self, 'vertices', vertices)

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "Polygon":
        """Build a polygon from any iterable of (x, y) pairs."""
        return cls(vertices=np.array([tuple(p) for p in points], dtype=np.float64))

    def __len__(self) -> int:
        return len(self.vertices)

    def edges(self) -> List[Tuple[Point, Point]]:
        """Edges as (start, end) pairs, closing edge last."""
        points = [(float(x), float(y)) for x, y in self.vertices]
        return [(points[i], points[(i + 1) % len(points)]) for i in range(len(points))]

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_vertices(self.vertices)

    def area(self) -> float:
        """Signed area (positive when counter-clockwise)."""
        return polygon_area(self.vertices)

    def centroid(self) -> Optional[Point]:
        """Area centroid, None for zero-area polygons."""
        return centroid(self.vertices)

    def contains(self, point: Point) -> bool:
        return point_in_polygon(point, self.vertices)

    def signed_distance(self, point: Point) -> float:
        """Distance to the boundary, positive inside, negative outside."""
        return point_to_polygon_distance(point, self.vertices)

    def is_simple(self) -> bool:
        """
        Check that no two non-adjacent edges touch.

        O(N^2) pairwise test. Polygons with holes cannot be expressed as a
        single ring, so this is the only structural check needed.
        """
        edges = self.edges()
        count = len(edges)

        for i in range(count):
            for j in range(i + 1, count):
                # Adjacent edges share a vertex by construction
                if j == i + 1 or (i == 0 and j == count - 1):
                    continue
                if segments_intersect(edges[i][0], edges[i][1], edges[j][0], edges[j][1]):
                    return False
        return True
