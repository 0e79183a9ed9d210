"""Mini README: Tests for haversine distance, bounding boxes and validation.

Covers the metric properties the pathfinder relies on (identity, symmetry,
triangle inequality) and the exact padding arithmetic of query boxes.
"""

import math

import pytest

from droneroute.errors import InputValidationError
from droneroute.geodesy import (
    EARTH_RADIUS_KM,
    BoundingBox,
    Point,
    distance,
    path_length,
    validate_point,
)

SAMPLE_POINTS = [
    Point(50.0, 36.0),
    Point(50.01, 36.01),
    Point(-33.8688, 151.2093),
    Point(0.0, 0.0),
    Point(89.9, -179.5),
]


@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_distance_to_self_is_zero(point):
    assert distance(point, point) == 0.0


def test_distance_is_symmetric_and_obeys_triangle_inequality():
    for a in SAMPLE_POINTS:
        for b in SAMPLE_POINTS:
            assert distance(a, b) == pytest.approx(distance(b, a))
            for c in SAMPLE_POINTS:
                assert distance(a, c) <= distance(a, b) + distance(b, c) + 1e-9


def test_one_degree_of_latitude_matches_earth_radius():
    expected = EARTH_RADIUS_KM * math.pi / 180
    assert distance(Point(10.0, 20.0), Point(11.0, 20.0)) == pytest.approx(expected)


def test_antipodal_points_do_not_break_the_formula():
    assert distance(Point(0.0, 0.0), Point(0.0, 180.0)) == pytest.approx(EARTH_RADIUS_KM * math.pi)


def test_path_length_sums_consecutive_hops():
    points = [Point(50.0, 36.0), Point(50.003, 36.003), Point(50.006, 36.006)]
    expected = distance(points[0], points[1]) + distance(points[1], points[2])
    assert path_length(points) == pytest.approx(expected)
    assert path_length(points[:1]) == 0.0
    assert path_length([]) == 0.0


def test_bounding_box_pads_start_and_end():
    bbox = BoundingBox.around(Point(10.0, 20.0), Point(10.02, 20.02), 0.009)
    assert bbox.min_lat == pytest.approx(9.991, abs=1e-12)
    assert bbox.max_lat == pytest.approx(10.029, abs=1e-12)
    assert bbox.min_lon == pytest.approx(19.991, abs=1e-12)
    assert bbox.max_lon == pytest.approx(20.029, abs=1e-12)


def test_bounding_box_contains_endpoints_in_any_direction():
    start, end = Point(10.02, 20.0), Point(10.0, 20.02)
    bbox = BoundingBox.around(start, end)
    assert bbox.contains(start)
    assert bbox.contains(end)
    assert not bbox.contains(Point(11.0, 20.0))


@pytest.mark.parametrize(
    "point",
    [
        Point(float("nan"), 0.0),
        Point(0.0, float("inf")),
        Point(90.5, 0.0),
        Point(0.0, -180.5),
    ],
)
def test_validate_point_rejects_malformed_coordinates(point):
    with pytest.raises(InputValidationError):
        validate_point(point)


def test_points_are_hashable_and_ordered():
    assert Point(1.0, 2.0) == Point(1.0, 2.0)
    assert len({Point(1.0, 2.0), Point(1.0, 2.0)}) == 1
    assert sorted([Point(1.0, 3.0), Point(0.5, 9.0), Point(1.0, 2.0)]) == [
        Point(0.5, 9.0),
        Point(1.0, 2.0),
        Point(1.0, 3.0),
    ]
