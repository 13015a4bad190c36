import math

import numpy as np
import pytest

from navigation.fluvial.models import Coord
from navigation.fluvial.geo_utils import (
    haversine_distance,
    haversine_distances,
    calculate_bearing,
    project_onto_segment,
    route_length,
    destination_point,
)


def test_haversine_one_degree_of_latitude():
    assert haversine_distance(0.0, 0.0, 1.0, 0.0) == pytest.approx(111_195, rel=1e-3)


def test_haversine_same_point_is_zero():
    assert haversine_distance(-3.1, -60.0, -3.1, -60.0) == 0.0


def test_vectorised_haversine_matches_scalar():
    lats = np.array([-3.2, -3.5, 0.0])
    lons = np.array([-59.85, -59.4, 0.0])
    got = haversine_distances(-3.1, -60.0, lats, lons)
    for i in range(3):
        assert got[i] == pytest.approx(haversine_distance(-3.1, -60.0, lats[i], lons[i]))


@pytest.mark.parametrize("lat2, lon2, expected", [
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 90.0),
    (-1.0, 0.0, 180.0),
    (0.0, -1.0, 270.0),
])
def test_bearing_cardinal_directions(lat2, lon2, expected):
    assert calculate_bearing(0.0, 0.0, lat2, lon2) == pytest.approx(expected)


def test_bearing_is_in_range():
    b = calculate_bearing(-3.1, -60.0, -3.1000001, -60.0000001)
    assert 0.0 <= b < 360.0


def test_projection_of_midpoint():
    a, b = Coord(-3.10, -60.00), Coord(-3.30, -59.70)
    mid = Coord((a.lat + b.lat) / 2, (a.lon + b.lon) / 2)
    proj = project_onto_segment(mid, a, b)
    assert proj.fraction_along_segment == pytest.approx(0.5, abs=1e-6)
    assert proj.distance_to_segment_m == pytest.approx(0.0, abs=1e-3)


def test_projection_clamps_to_segment_ends():
    a, b = Coord(0.0, 0.0), Coord(0.0, 0.01)
    before = project_onto_segment(Coord(0.0, -0.01), a, b)
    after = project_onto_segment(Coord(0.0, 0.02), a, b)
    assert before.fraction_along_segment == 0.0
    assert before.closest_point == a
    assert after.fraction_along_segment == 1.0
    assert after.distance_to_segment_m == pytest.approx(1112, rel=1e-2)


def test_projection_perpendicular_distance():
    a, b = Coord(0.0, 0.0), Coord(0.0, 0.1)
    p = destination_point(Coord(0.0, 0.05), 0.0, 500)
    proj = project_onto_segment(p, a, b)
    assert proj.distance_to_segment_m == pytest.approx(500, rel=1e-3)
    assert proj.fraction_along_segment == pytest.approx(0.5, abs=1e-4)


def test_projection_onto_zero_length_segment():
    a = Coord(-3.1, -60.0)
    proj = project_onto_segment(Coord(-3.11, -60.0), a, a)
    assert proj.fraction_along_segment == 0.0
    assert proj.closest_point == a
    assert proj.distance_to_segment_m == pytest.approx(1112, rel=1e-2)


def test_route_length_sums_segments(route):
    expected = sum(
        haversine_distance(p.lat, p.lon, q.lat, q.lon) for p, q in zip(route, route[1:])
    )
    assert route_length(route) == pytest.approx(expected)
    assert route_length(route) == pytest.approx(80_092, rel=1e-3)
    assert route_length(route[:1]) == 0.0


def test_destination_point_distance_and_bearing():
    origin = Coord(-3.2, -59.85)
    dest = destination_point(origin, 45.0, 1900.0)
    assert haversine_distance(origin.lat, origin.lon, dest.lat, dest.lon) == pytest.approx(1900.0, rel=1e-9)
    assert calculate_bearing(origin.lat, origin.lon, dest.lat, dest.lon) == pytest.approx(45.0, abs=1e-3)
    assert math.isfinite(dest.lat) and math.isfinite(dest.lon)
