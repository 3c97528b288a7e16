"""
Search Cell Module
==================

Square probe region used by the branch-and-bound search.

Design:
- Value object (frozen, no identity)
- Distance computed once at construction
- max_distance is an upper bound for any point inside the cell: the signed
  distance field is 1-Lipschitz and no point is farther than
  half_size * sqrt(2) from the center
"""

import math
from dataclasses import dataclass
from typing import List

from polylabel_core.geometry.primitives import Point, point_to_polygon_distance
from polylabel_core.geometry.shapes import Polygon

SQRT_2 = math.sqrt(2)


@dataclass(frozen=True)
class Cell:
    """
    Immutable square cell with its distance metrics.

    Attributes:
        x, y: Cell center
        half_size: Half the side length (0 for a point probe)
        distance: Signed distance from center to the polygon boundary
        max_distance: distance + half_size * sqrt(2)

    Invariants:
        - half_size >= 0
        - max_distance >= distance (equal for point probes)
    """

    x: float
    y: float
    half_size: float
    distance: float
    max_distance: float

    def __post_init__(self):
        """Validate invariants."""
        if self.half_size < 0:
            raise ValueError(f"Cell half_size must be >= 0, got {self.half_size}")

    @classmethod
    def probe(cls, x: float, y: float, half_size: float, polygon: Polygon) -> "Cell":
        """
        Evaluate a cell centered at (x, y) against a polygon.

        Args:
            x, y: Cell center
            half_size: Half the side length
            polygon: Polygon to measure against

        Returns:
            Cell with distance and upper bound filled in
        """
        distance = point_to_polygon_distance((x, y), polygon.vertices)
        return cls(
            x=x,
            y=y,
            half_size=half_size,
            distance=distance,
            max_distance=distance + half_size * SQRT_2,
        )

    @property
    def center(self) -> Point:
        return self.x, self.y

    def split(self, polygon: Polygon) -> List["Cell"]:
        """
        Subdivide into four quadrant children of half the size.

        Returns:
            Children in order (-,-), (+,-), (-,+), (+,+)
        """
        h = self.half_size / 2
        return [
            Cell.probe(self.x - h, self.y - h, h, polygon),
            Cell.probe(self.x + h, self.y - h, h, polygon),
            Cell.probe(self.x - h, self.y + h, h, polygon),
            Cell.probe(self.x + h, self.y + h, h, polygon),
        ]
