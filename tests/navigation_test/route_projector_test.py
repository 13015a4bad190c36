import pytest

from navigation.fluvial.models import Coord, RouteProgress
from navigation.fluvial.route_projector import RouteProjector, project_onto_route
from navigation.fluvial.geo_utils import haversine_distance, destination_point, calculate_bearing, route_length


A = Coord(-3.10, -60.00)
B = Coord(-3.30, -59.70)


def test_midpoint_of_straight_route():
    projector = RouteProjector([A, B])
    mid = Coord((A.lat + B.lat) / 2, (A.lon + B.lon) / 2)
    progress = projector.project(mid)
    total = haversine_distance(A.lat, A.lon, B.lat, B.lon)
    assert projector.total_length_m == pytest.approx(total)
    assert progress.distance_traveled_m == pytest.approx(total / 2, rel=1e-3)
    assert progress.distance_remaining_m == pytest.approx(total / 2, rel=1e-3)
    assert progress.deviation_m == pytest.approx(0.0, abs=1.0)


def test_route_endpoints():
    projector = RouteProjector([A, B])
    at_start = projector.project(A)
    at_end = projector.project(B)
    assert at_start.distance_traveled_m == 0.0
    assert at_start.distance_remaining_m == pytest.approx(projector.total_length_m)
    assert at_end.distance_traveled_m == pytest.approx(projector.total_length_m)
    assert at_end.distance_remaining_m == pytest.approx(0.0, abs=1e-6)


def test_before_start_and_beyond_end_clamp():
    projector = RouteProjector([A, B])
    course = calculate_bearing(A.lat, A.lon, B.lat, B.lon)
    before = destination_point(A, course + 180, 2_000)
    beyond = destination_point(B, course, 2_000)

    p_before = projector.project(before)
    assert p_before.distance_traveled_m == 0.0
    assert p_before.deviation_m == pytest.approx(2_000, rel=1e-2)

    p_beyond = projector.project(beyond)
    assert p_beyond.distance_traveled_m == pytest.approx(projector.total_length_m)
    assert p_beyond.distance_remaining_m == pytest.approx(0.0, abs=1e-6)


def test_picks_nearest_segment_on_multi_segment_route(route):
    projector = RouteProjector(route)
    b, c = route[1], route[2]
    seg0 = haversine_distance(route[0].lat, route[0].lon, b.lat, b.lon)
    seg1 = haversine_distance(b.lat, b.lon, c.lat, c.lon)
    course = calculate_bearing(b.lat, b.lon, c.lat, c.lon)
    p = destination_point(destination_point(b, course, 5_000), course - 90, 400)

    progress = projector.project(p)
    assert progress.segment_index == 1
    assert progress.deviation_m == pytest.approx(400, rel=2e-2)
    assert progress.distance_traveled_m == pytest.approx(seg0 + 5_000, rel=1e-3)
    assert progress.distance_remaining_m == pytest.approx(seg1 - 5_000, rel=1e-2)


def test_intermediate_waypoint_progress(route):
    projector = RouteProjector(route)
    first = haversine_distance(route[0].lat, route[0].lon, route[1].lat, route[1].lon)
    assert projector.project(route[1]).distance_traveled_m == pytest.approx(first)


@pytest.mark.parametrize("waypoints", [[], [A]])
def test_degenerate_route_returns_sentinel(waypoints):
    projector = RouteProjector(waypoints)
    assert projector.is_degenerate
    assert projector.total_length_m == 0.0
    assert projector.project(A) == RouteProgress.empty()


def test_functional_form_matches_projector(route):
    p = Coord(-3.25, -59.80)
    assert project_onto_route(p, route) == RouteProjector(route).project(p)


def test_total_length_matches_route_length(route):
    projector = RouteProjector(route)
    assert projector.total_length_m == route_length(route)
    assert projector.project(route[-1]).distance_traveled_m == pytest.approx(route_length(route))
