"""
Test Pole Search
================

Branch-and-bound pole of inaccessibility search: known analytic answers,
containment, global optimality within precision, degenerate input,
determinism, probe cap and logging.

Usage:
    pytest test_pole_search.py
    python test_pole_search.py
"""

import json
import logging
import math

import numpy as np
import pytest

from polylabel_core import (
    Cell,
    InvalidPolygonError,
    LogEvent,
    Polygon,
    PoleResult,
    PoleSearch,
    SearchConfig,
    SearchFrontier,
    StructuredLogger,
    create_logger,
    find_pole_of_isolation,
    point_to_polygon_distance,
)
from polylabel_core.logging.events import ERROR_EVENTS, SEARCH_EVENTS

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]
L_SHAPE = [(0, 0), (30, 0), (30, 10), (10, 10), (10, 30), (0, 30)]


def regular_polygon(sides: int, radius: float, center=(0.0, 0.0)):
    return [
        (center[0] + radius * math.cos(2 * math.pi * k / sides),
         center[1] + radius * math.sin(2 * math.pi * k / sides))
        for k in range(sides)
    ]


# ========== Frontier & Cell ==========

def test_frontier_pops_highest_priority_first():
    """Max-priority order, deterministic ties, empty pop."""
    square = Polygon.from_points(SQUARE)
    frontier = SearchFrontier()

    low = Cell.probe(1, 1, 0, square)
    high = Cell.probe(5, 5, 0, square)
    mid = Cell.probe(3, 3, 0, square)

    frontier.push(low, 1.0)
    frontier.push(high, 5.0)
    frontier.push(mid, 3.0)
    assert len(frontier) == 3
    assert frontier.count == 3

    assert frontier.pop() is high
    assert frontier.pop() is mid
    assert frontier.pop() is low
    assert not frontier

    with pytest.raises(IndexError):
        frontier.pop()


def test_frontier_ties_pop_in_insertion_order():
    square = Polygon.from_points(SQUARE)
    frontier = SearchFrontier()
    first = Cell.probe(2, 2, 0, square)
    second = Cell.probe(8, 8, 0, square)

    frontier.push(first, 2.0)
    frontier.push(second, 2.0)

    assert frontier.pop() is first
    assert frontier.pop() is second


def test_cell_upper_bound():
    """max_distance = distance + half_size * sqrt(2)."""
    square = Polygon.from_points(SQUARE)

    probe = Cell.probe(5, 5, 0, square)
    assert probe.distance == pytest.approx(5.0)
    assert probe.max_distance == probe.distance

    cell = Cell.probe(5, 5, 5, square)
    assert cell.max_distance == pytest.approx(5.0 + 5.0 * math.sqrt(2))
    assert cell.max_distance >= cell.distance

    children = cell.split(square)
    assert [c.center for c in children] == [(2.5, 2.5), (7.5, 2.5), (2.5, 7.5), (7.5, 7.5)]
    assert all(c.half_size == 2.5 for c in children)

    with pytest.raises(ValueError):
        Cell(x=0.0, y=0.0, half_size=-1.0, distance=0.0, max_distance=0.0)


# ========== Known answers ==========

def test_unit_square_scenario():
    """Square [0,10]^2 at precision 1e-3 -> pole (5, 5), radius 5."""
    print("\n" + "=" * 60)
    print("TEST: Square Scenario")
    print("=" * 60)

    radius, pole = find_pole_of_isolation(SQUARE, precision=1e-3)

    assert radius == pytest.approx(5.0, abs=1e-3)
    assert pole[0] == pytest.approx(5.0, abs=1e-2)
    assert pole[1] == pytest.approx(5.0, abs=1e-2)
    print(f"✓ radius={radius}, pole={pole}")


def test_centered_square():
    """Square of side s centered at the origin -> radius s/2 at the origin."""
    side = 4.0
    h = side / 2
    result = find_pole_of_isolation([(-h, -h), (h, -h), (h, h), (-h, h)], precision=1e-4)

    assert result.radius == pytest.approx(side / 2, abs=1e-4)
    assert result.pole == pytest.approx((0.0, 0.0), abs=1e-3)


@pytest.mark.parametrize("sides", [6, 12, 64])
def test_regular_polygon_inradius(sides):
    """Regular N-gon: max inscribed radius is R * cos(pi / N)."""
    precision = 1e-3
    circumradius = 10.0
    expected = circumradius * math.cos(math.pi / sides)

    result = find_pole_of_isolation(
        regular_polygon(sides, circumradius, center=(3.0, -2.0)), precision=precision
    )

    assert result.radius <= expected + 1e-9
    assert result.radius >= expected - precision - 1e-9
    assert math.hypot(result.pole[0] - 3.0, result.pole[1] + 2.0) < 0.1


def test_rectangle_wide_grid():
    """Seed grid with several columns (30 x 10 rectangle)."""
    result = find_pole_of_isolation([(0, 0), (30, 0), (30, 10), (0, 10)], precision=1e-3)

    assert result.radius == pytest.approx(5.0, abs=1e-3)
    assert result.pole[1] == pytest.approx(5.0, abs=1e-2)
    assert 5.0 - 1e-6 <= result.pole[0] <= 25.0 + 1e-6


# ========== Properties ==========

def test_l_shape_containment_and_global_optimality():
    """Concave polygon: pole inside, no probe point beats radius + precision."""
    print("\n" + "=" * 60)
    print("TEST: L-Shape Global Optimality")
    print("=" * 60)

    precision = 0.01
    result = find_pole_of_isolation(L_SHAPE, precision=precision)

    assert point_to_polygon_distance(result.pole, L_SHAPE) > 0

    # Best circle sits in the corner square, larger than an arm's half width
    assert result.radius > 5.0

    best_probe = -math.inf
    for x in np.arange(0.0, 30.25, 0.25):
        for y in np.arange(0.0, 30.25, 0.25):
            best_probe = max(best_probe, point_to_polygon_distance((x, y), L_SHAPE))

    assert best_probe <= result.radius + precision
    print(f"✓ radius={result.radius:.4f}, best probe={best_probe:.4f}")


def test_containment_for_concave_polygon():
    """Star-shaped concave polygon: the pole lies inside."""
    star = []
    for k in range(10):
        r = 10.0 if k % 2 == 0 else 4.0
        angle = math.pi * k / 5
        star.append((r * math.cos(angle), r * math.sin(angle)))

    result = find_pole_of_isolation(star, precision=0.01)
    assert point_to_polygon_distance(result.pole, star) > 0
    assert result.radius > 0


def test_smaller_precision_never_decreases_radius():
    """Refining precision never lowers the radius or leaves the coarse band."""
    coarse = find_pole_of_isolation(L_SHAPE, precision=1.0)
    fine = find_pole_of_isolation(L_SHAPE, precision=0.01)

    assert fine.radius >= coarse.radius
    assert fine.radius <= coarse.radius + 1.0


def test_repeated_searches_are_deterministic():
    first = find_pole_of_isolation(L_SHAPE, precision=0.05)
    second = find_pole_of_isolation(L_SHAPE, precision=0.05)

    assert first == second
    assert tuple(first) == tuple(second)


def test_input_polygon_not_mutated():
    vertices = np.array(L_SHAPE, dtype=float)
    snapshot = vertices.copy()

    find_pole_of_isolation(vertices, precision=0.1)

    assert np.array_equal(vertices, snapshot)
    assert vertices.flags.writeable


# ========== Degenerate & invalid input ==========

def test_collinear_horizontal_polygon_is_finite():
    """Zero-height bounding box: no grid, heuristic candidate only."""
    result = find_pole_of_isolation([(0, 0), (5, 0), (10, 0)])

    assert math.isfinite(result.radius)
    assert all(math.isfinite(v) for v in result.pole)
    assert result.radius <= 0
    assert result.pole == (5.0, 0.0)
    assert result.iterations == 0


def test_collinear_diagonal_polygon_is_finite():
    """Zero-area polygon with a non-degenerate bounding box terminates."""
    result = find_pole_of_isolation([(0, 0), (5, 5), (10, 10)], precision=0.5)

    assert math.isfinite(result.radius)
    assert all(math.isfinite(v) for v in result.pole)
    assert result.radius <= 0


def test_fewer_than_three_vertices_rejected():
    with pytest.raises(InvalidPolygonError):
        find_pole_of_isolation([(0, 0), (1, 1)])

    with pytest.raises(InvalidPolygonError):
        find_pole_of_isolation([(0, 0), (1, 1), (2, 0), (3,)])


@pytest.mark.parametrize("precision", [0.0, -1.0, float("nan"), float("inf")])
def test_invalid_precision_rejected(precision):
    with pytest.raises(ValueError):
        find_pole_of_isolation(SQUARE, precision=precision)


def test_self_intersecting_polygon_rejected_on_request():
    bowtie = [(0, 0), (10, 10), (10, 0), (0, 10)]

    # Accepted (unsupported, answer undefined) unless validation is on
    result = find_pole_of_isolation(bowtie)
    assert math.isfinite(result.radius)

    with pytest.raises(InvalidPolygonError):
        find_pole_of_isolation(bowtie, validate_simple=True)


# ========== Probe cap ==========

def test_max_probes_truncates_search():
    result = find_pole_of_isolation(L_SHAPE, precision=1e-6, max_probes=20)

    assert result.truncated
    assert result.probes <= 20 + 3
    assert math.isfinite(result.radius)
    assert point_to_polygon_distance(result.pole, L_SHAPE) == pytest.approx(result.radius)


def test_untruncated_search_reports_stats():
    result = PoleSearch(SearchConfig(precision=0.1)).find(Polygon.from_points(SQUARE))

    assert not result.truncated
    assert result.probes >= 3
    assert result.iterations >= 1


def test_cell_exactly_precision_above_best_is_pruned():
    """A cell whose bound beats the best by exactly precision is not split."""
    polygon = Polygon.from_points(SQUARE)

    # Single 10x10 seed cell centered on the centroid (distance 5)
    seed = Cell.probe(5.0, 5.0, 5.0, polygon)
    tie = seed.max_distance - seed.distance

    pruned = find_pole_of_isolation(SQUARE, precision=tie)
    assert pruned.iterations == 1
    assert pruned.probes == 3

    split = find_pole_of_isolation(SQUARE, precision=math.nextafter(tie, 0))
    assert split.iterations == 5
    assert split.probes == 7
    assert split.radius == pruned.radius == 5.0


# ========== Result serialization ==========

def test_result_unpacks_and_serializes():
    result = PoleResult(radius=2.5, pole=(1.0, 2.0), probes=9, iterations=3)

    radius, pole = result
    assert radius == 2.5
    assert pole == (1.0, 2.0)

    data = json.loads(json.dumps(result.to_dict()))
    assert data['pole'] == {'x': 1.0, 'y': 2.0}
    assert PoleResult.from_dict(data) == result

    with pytest.raises(ValueError):
        PoleResult.from_dict({'radius': 1.0})


# ========== Logging ==========

def _events(caplog):
    return [json.loads(r.getMessage()) for r in caplog.records
            if r.name.startswith("polylabel.test")]


def test_search_logs_structured_events(caplog):
    logger = StructuredLogger("search", level=logging.DEBUG, logger_name="polylabel.test.search")

    with caplog.at_level(logging.DEBUG, logger="polylabel.test.search"):
        PoleSearch(SearchConfig(precision=0.5), logger=logger).find(L_SHAPE)

    events = [e['event'] for e in _events(caplog)]
    assert events[0] == LogEvent.SEARCH_STARTED.value
    assert events[-1] == LogEvent.SEARCH_COMPLETED.value
    assert set(events) <= {e.value for e in SEARCH_EVENTS}

    completed = _events(caplog)[-1]
    assert completed['component'] == "search"
    assert completed['metadata']['probes'] >= 3


def test_degenerate_search_logs_warning(caplog):
    logger = StructuredLogger("search", level=logging.WARNING, logger_name="polylabel.test.degenerate")

    with caplog.at_level(logging.WARNING, logger="polylabel.test.degenerate"):
        find_pole_of_isolation([(0, 0), (5, 0), (10, 0)], logger=logger)

    events = [e['event'] for e in _events(caplog)]
    assert events.count(LogEvent.SEARCH_DEGENERATE.value) == 2
    assert LogEvent.SEARCH_COMPLETED.value not in events


def test_rejected_polygon_logs_error_event(caplog):
    logger = StructuredLogger("search", level=logging.WARNING, logger_name="polylabel.test.rejected")

    with caplog.at_level(logging.WARNING, logger="polylabel.test.rejected"):
        with pytest.raises(InvalidPolygonError):
            find_pole_of_isolation([(0, 0), (1, 1)], logger=logger)

    events = [e['event'] for e in _events(caplog)]
    assert events == [LogEvent.INVALID_POLYGON_ERROR.value]
    assert set(events) <= {e.value for e in ERROR_EVENTS}


def test_default_logger_keeps_configured_level():
    """Searches without an explicit logger leave the shared logger's level alone."""
    shared = create_logger("search", level=logging.DEBUG)
    try:
        find_pole_of_isolation(SQUARE)
        PoleSearch()
        assert shared.logger.isEnabledFor(logging.DEBUG)
    finally:
        shared.set_level(logging.WARNING)

    # A logger nobody configured falls back to WARNING
    fresh = StructuredLogger("search", level=None, logger_name="polylabel.test.fresh")
    assert fresh.logger.level == logging.WARNING


def main():
    """Run the fixture-free tests."""
    print("\n🎯 polylabel_core.search - Pole Search Tests")
    print("=" * 60)

    try:
        test_frontier_pops_highest_priority_first()
        test_frontier_ties_pop_in_insertion_order()
        test_cell_upper_bound()
        test_unit_square_scenario()
        test_centered_square()
        for sides in (6, 12, 64):
            test_regular_polygon_inradius(sides)
        test_rectangle_wide_grid()
        test_l_shape_containment_and_global_optimality()
        test_containment_for_concave_polygon()
        test_smaller_precision_never_decreases_radius()
        test_repeated_searches_are_deterministic()
        test_collinear_horizontal_polygon_is_finite()
        test_collinear_diagonal_polygon_is_finite()
        test_max_probes_truncates_search()
        test_cell_exactly_precision_above_best_is_pruned()
        test_result_unpacks_and_serializes()

        print("\n" + "=" * 60)
        print("✅ ALL TESTS PASSED!")
        print("=" * 60)

    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        raise


if __name__ == "__main__":
    main()
