"""
Geometry Primitives
===================

Pure functions over 2D points and implicitly closed vertex rings.

Design:
- Stateless, no side effects (inputs are never mutated)
- Points are (x, y) pairs, rings are Nx2 arrays or sequences of pairs
- Per-edge work is vectorized with numpy
- Signed distance convention: positive inside, negative outside
"""

import math
import numpy as np
from typing import Optional, Sequence, Tuple, Union

Point = Tuple[float, float]
Vertices = Union[np.ndarray, Sequence[Sequence[float]]]

# Relative to the squared extent of the ring
_AREA_EPSILON = 1e-12


def _as_ring(vertices: Vertices) -> np.ndarray:
    return np.asarray(vertices, dtype=np.float64)


def point_segment_distance(point: Point, seg_start: Point, seg_end: Point) -> float:
    """
    Euclidean distance from a point to the closed segment [seg_start, seg_end].

    Projects the point onto the segment line, clamps the scalar projection
    to [0, 1] and measures to the projected point. A zero-length segment
    degrades to point-to-point distance.

    Args:
        point: (x, y) query point
        seg_start: (x, y) segment start
        seg_end: (x, y) segment end

    Returns:
        Non-negative distance
    """
    px, py = float(point[0]), float(point[1])
    ax, ay = float(seg_start[0]), float(seg_start[1])
    dx = float(seg_end[0]) - ax
    dy = float(seg_end[1]) - ay

    squared_length = dx * dx + dy * dy
    if squared_length == 0:
        return math.hypot(px - ax, py - ay)

    t = ((px - ax) * dx + (py - ay) * dy) / squared_length
    t = min(1.0, max(0.0, t))
    return math.hypot(px - (ax + t * dx), py - (ay + t * dy))


def point_in_polygon(point: Point, vertices: Vertices) -> bool:
    """
    Even-odd (ray casting) containment test.

    Every edge (v[i], v[i-1]) straddling the horizontal line through
    point.y is intersected with it; the point is inside when an odd
    number of those intersections lie strictly to its right.

    Points exactly on the boundary may land on either side.

    Args:
        point: (x, y) query point
        vertices: Nx2 ring, implicitly closed

    Returns:
        True if the point is inside the ring
    """
    ring = _as_ring(vertices)
    px, py = float(point[0]), float(point[1])

    xi, yi = ring[:, 0], ring[:, 1]
    previous = np.roll(ring, 1, axis=0)
    xj, yj = previous[:, 0], previous[:, 1]

    straddles = (yi > py) != (yj > py)

    # Non-straddling edges may divide by zero; they are masked out below
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = xj + (py - yj) * (xi - xj) / (yi - yj)
        crossings = straddles & (px < x_cross)

    return bool(np.count_nonzero(crossings) % 2)


def point_to_polygon_distance(point: Point, vertices: Vertices) -> float:
    """
    Signed distance from a point to a ring's boundary.

    Minimum point-segment distance over every edge, negated when the
    point is outside the ring. This is the field the pole search maximizes.

    Args:
        point: (x, y) query point
        vertices: Nx2 ring, implicitly closed

    Returns:
        Distance to the nearest edge (positive inside, negative outside)
    """
    ring = _as_ring(vertices)
    p = np.array([float(point[0]), float(point[1])])

    seg_start = ring
    seg_vec = np.roll(ring, -1, axis=0) - ring
    squared_length = np.einsum("ij,ij->i", seg_vec, seg_vec)

    # t = 0 for zero-length edges (point-to-point distance)
    dot = np.einsum("ij,ij->i", p - seg_start, seg_vec)
    t = np.divide(dot, squared_length, out=np.zeros_like(dot), where=squared_length > 0)
    t = np.clip(t, 0.0, 1.0)

    projection = seg_start + t[:, None] * seg_vec
    offsets = p - projection
    min_distance = float(np.min(np.hypot(offsets[:, 0], offsets[:, 1])))

    if not point_in_polygon(point, ring):
        return -min_distance
    return min_distance


def polygon_area(vertices: Vertices) -> float:
    """Signed shoelace area (positive for counter-clockwise rings)."""
    ring = _as_ring(vertices)
    x, y = ring[:, 0], ring[:, 1]
    x_next, y_next = np.roll(x, -1), np.roll(y, -1)
    return float(np.sum(x * y_next - x_next * y) / 2.0)


def centroid(vertices: Vertices) -> Optional[Point]:
    """
    Area centroid of a simple ring.

    Shoelace-weighted vertex sum:
        A  = 1/2 * sum(x_i * y_i+1 - x_i+1 * y_i)
        Cx = sum((x_i + x_i+1) * cross_i) / (6 * A)
        Cy = sum((y_i + y_i+1) * cross_i) / (6 * A)

    Args:
        vertices: Nx2 ring, implicitly closed

    Returns:
        (x, y) centroid, or None when the ring has (near) zero area or the
        result is not finite
    """
    ring = _as_ring(vertices)
    x, y = ring[:, 0], ring[:, 1]
    x_next, y_next = np.roll(x, -1), np.roll(y, -1)

    cross = x * y_next - x_next * y
    area = float(np.sum(cross)) / 2.0

    extent = float(np.max(np.ptp(ring, axis=0)))
    if extent == 0 or abs(area) <= _AREA_EPSILON * extent * extent:
        return None

    cx = float(np.sum((x + x_next) * cross)) / (6.0 * area)
    cy = float(np.sum((y + y_next) * cross)) / (6.0 * area)

    if not (math.isfinite(cx) and math.isfinite(cy)):
        return None
    return cx, cy


def _orientation(a: Point, b: Point, c: Point) -> int:
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if cross > 0:
        return 1
    elif cross < 0:
        return -1
    else:
        return 0


def _on_segment(a: Point, b: Point, c: Point) -> bool:
    """c is collinear with a-b; check it lies within the segment's box."""
    return (min(a[0], b[0]) <= c[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= c[1] <= max(a[1], b[1]))


def segments_intersect(p1: Point, p2: Point, q1: Point, q2: Point) -> bool:
    """
    Check whether closed segments p1-p2 and q1-q2 share any point.

    Uses orientation tests, including collinear overlap and touching
    endpoints.
    """
    o1 = _orientation(p1, p2, q1)
    o2 = _orientation(p1, p2, q2)
    o3 = _orientation(q1, q2, p1)
    o4 = _orientation(q1, q2, p2)

    if o1 != o2 and o3 != o4:
        return True

    if o1 == 0 and _on_segment(p1, p2, q1):
        return True
    if o2 == 0 and _on_segment(p1, p2, q2):
        return True
    if o3 == 0 and _on_segment(q1, q2, p1):
        return True
    if o4 == 0 and _on_segment(q1, q2, p2):
        return True

    return False
