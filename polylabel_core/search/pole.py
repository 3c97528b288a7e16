"""
Pole of Inaccessibility Search
==============================

Best-first branch-and-bound over square cells.

Algorithm:
1. Bounding box of the vertices; seed cell size = shorter side
2. Best guess = better of the centroid and bbox-center point probes
3. Cover the bounding box with a grid of seed cells
4. Pop the cell with the largest upper bound, keep it if it beats the
   best distance, then either prune it (its bound cannot beat the best
   by more than precision) or split it into four
5. The best cell center is the pole, its distance the inscribed radius

Design:
- Each call owns its frontier; no state shared between calls
- Deterministic for identical input (heap ties broken by insertion order)
- Degenerate input degrades to the heuristic candidates, never raises
"""

import math
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple, Union

import numpy as np

from polylabel_core.config import SearchConfig
from polylabel_core.geometry.primitives import Point, Vertices
from polylabel_core.geometry.shapes import BoundingBox, InvalidPolygonError, Polygon
from polylabel_core.logging import LogEvent, StructuredLogger, create_logger
from polylabel_core.search.cell import Cell
from polylabel_core.search.frontier import SearchFrontier


@dataclass(frozen=True)
class PoleResult:
    """
    Result of a pole search.

    Unpacks as (radius, pole):
        >>> radius, (x, y) = find_pole_of_isolation(square)

    Attributes:
        radius: Signed distance from pole to boundary (inscribed radius)
        pole: (x, y) best point found
        probes: Number of cells evaluated
        iterations: Number of cells popped from the frontier
        truncated: True if max_probes stopped refinement early
    """

    radius: float
    pole: Point
    probes: int = 0
    iterations: int = 0
    truncated: bool = False

    def __iter__(self) -> Iterator[Any]:
        return iter((self.radius, self.pole))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'radius': self.radius,
            'pole': {'x': self.pole[0], 'y': self.pole[1]},
            'probes': self.probes,
            'iterations': self.iterations,
            'truncated': self.truncated,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PoleResult":
        """
        Deserialize from dict.

        Raises:
            ValueError: If required keys are missing or invalid
        """
        try:
            return cls(
                radius=float(data['radius']),
                pole=(float(data['pole']['x']), float(data['pole']['y'])),
                probes=int(data.get('probes', 0)),
                iterations=int(data.get('iterations', 0)),
                truncated=bool(data.get('truncated', False)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid PoleResult data: {e}")


class PoleSearch:
    """
    Finds the pole of inaccessibility of simple polygons.

    Usage:
        search = PoleSearch(SearchConfig(precision=0.01))
        result = search.find([(0, 0), (10, 0), (10, 10), (0, 10)])
        result.radius, result.pole  # 5.0, (5.0, 5.0)

    Thread Safety:
        find() keeps all search state local; one instance can serve
        concurrent callers.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            config: Search settings (default: SearchConfig())
            logger: Structured logger (default: shared "search" component,
                level left as configured, WARNING otherwise)
        """
        self.config = config or SearchConfig()
        self.logger = logger or create_logger("search", level=None)

    def find(self, polygon: Union[Polygon, Vertices]) -> PoleResult:
        """
        Run the search.

        Args:
            polygon: Polygon, Nx2 array or sequence of (x, y) pairs

        Returns:
            PoleResult with radius and pole

        Raises:
            InvalidPolygonError: Fewer than 3 vertices, bad shape, non-finite
                coordinates, or self-intersection when validate_simple is set
        """
        polygon = self._as_polygon(polygon)
        precision = self.config.precision
        max_probes = self.config.max_probes
        started_at = time.perf_counter()

        bbox = polygon.bounding_box()
        best, probes = self._seed_best(polygon, bbox)

        frontier = SearchFrontier()
        probes += self._seed_grid(frontier, polygon, bbox)

        self.logger.info(
            event=LogEvent.SEARCH_STARTED,
            message="Seeded pole search",
            metadata={
                'vertices': len(polygon),
                'bbox': [bbox.min_x, bbox.min_y, bbox.max_x, bbox.max_y],
                'cell_size': bbox.cell_size,
                'seed_cells': len(frontier),
                'precision': precision,
            }
        )

        iterations = 0
        truncated = False

        while frontier:
            cell = frontier.pop()
            iterations += 1

            if cell.distance > best.distance:
                best = cell
                self.logger.debug(
                    event=LogEvent.SEARCH_BEST_UPDATED,
                    message="Found better cell",
                    metadata={'distance': best.distance, 'probes': probes}
                )

            # No descendant can beat the best by more than precision
            if cell.max_distance - best.distance <= precision:
                continue

            if max_probes is not None and probes >= max_probes:
                truncated = True
                break

            for child in cell.split(polygon):
                frontier.push(child, child.max_distance)
            probes += 4

        if truncated:
            self.logger.warning(
                event=LogEvent.SEARCH_TRUNCATED,
                message="Probe cap reached, returning best cell so far",
                metadata={'max_probes': max_probes, 'pending_cells': len(frontier)}
            )

        result = PoleResult(
            radius=best.distance,
            pole=best.center,
            probes=probes,
            iterations=iterations,
            truncated=truncated,
        )

        self.logger.info(
            event=LogEvent.SEARCH_COMPLETED,
            message="Pole search finished",
            metadata={
                'radius': result.radius,
                'pole': list(result.pole),
                'probes': probes,
                'iterations': iterations,
                'elapsed_ms': round((time.perf_counter() - started_at) * 1000, 3),
            }
        )

        return result

    def _as_polygon(self, polygon: Union[Polygon, Vertices]) -> Polygon:
        """Coerce and validate input, logging rejections."""
        try:
            if not isinstance(polygon, Polygon):
                polygon = Polygon(vertices=np.asarray(polygon, dtype=np.float64))

            if self.config.validate_simple and not polygon.is_simple():
                raise InvalidPolygonError(
                    "Polygon is self-intersecting; only simple polygons are supported"
                )
        except (InvalidPolygonError, ValueError, TypeError) as e:
            self.logger.error(
                event=LogEvent.INVALID_POLYGON_ERROR,
                message="Rejected polygon",
                exc_info=e,
            )
            if isinstance(e, InvalidPolygonError):
                raise
            raise InvalidPolygonError(str(e)) from e

        return polygon

    def _seed_best(self, polygon: Polygon, bbox: BoundingBox) -> Tuple[Cell, int]:
        """
        Pick the initial best cell from the centroid and bbox-center probes.

        Returns:
            (best cell, number of probes evaluated)
        """
        bbox_cell = Cell.probe(*bbox.center, 0, polygon)

        center = polygon.centroid()
        if center is None:
            self.logger.warning(
                event=LogEvent.SEARCH_DEGENERATE,
                message="Zero-area polygon, skipping centroid candidate",
                metadata={'area': polygon.area()}
            )
            return bbox_cell, 1

        centroid_cell = Cell.probe(*center, 0, polygon)
        if bbox_cell.distance > centroid_cell.distance:
            return bbox_cell, 2
        return centroid_cell, 2

    def _seed_grid(self, frontier: SearchFrontier, polygon: Polygon, bbox: BoundingBox) -> int:
        """
        Tile the bounding box with square cells of side cell_size.

        Returns:
            Number of cells pushed
        """
        cell_size = bbox.cell_size
        if bbox.is_degenerate:
            self.logger.warning(
                event=LogEvent.SEARCH_DEGENERATE,
                message="Zero-area bounding box, result is a heuristic candidate",
                metadata={'width': bbox.width, 'height': bbox.height}
            )
            return 0

        h = cell_size / 2
        columns = math.ceil(bbox.width / cell_size)
        rows = math.ceil(bbox.height / cell_size)

        for i in range(columns):
            x = bbox.min_x + i * cell_size
            for j in range(rows):
                y = bbox.min_y + j * cell_size
                cell = Cell.probe(x + h, y + h, h, polygon)
                frontier.push(cell, cell.max_distance)

        return columns * rows


def find_pole_of_isolation(
    vertices: Union[Polygon, Vertices],
    precision: float = 1.0,
    max_probes: Optional[int] = None,
    validate_simple: bool = False,
    logger: Optional[StructuredLogger] = None,
) -> PoleResult:
    """
    Find the point inside a polygon farthest from its boundary.

    Args:
        vertices: Polygon, Nx2 array or sequence of (x, y) pairs (>= 3)
        precision: Tolerance on the returned radius, in coordinate units
        max_probes: Optional cap on evaluated cells
        validate_simple: Reject self-intersecting input
        logger: Optional structured logger

    Returns:
        PoleResult, unpackable as (radius, pole)

    Raises:
        ValueError: If precision is not a positive finite number
        InvalidPolygonError: If the vertices do not form a valid polygon

    Example:
        >>> radius, pole = find_pole_of_isolation(
        ...     [(0, 0), (10, 0), (10, 10), (0, 10)], precision=1e-3
        ... )
        >>> radius, pole
        (5.0, (5.0, 5.0))
    """
    config = SearchConfig(
        precision=precision,
        max_probes=max_probes,
        validate_simple=validate_simple,
    )
    return PoleSearch(config=config, logger=logger).find(vertices)
