"""Shared fixtures for the navigation tests."""
import pytest

from navigation.fluvial.models import Coord, RawFix, HazardZone, HazardSeverity
from navigation.fluvial.nav_config import NavConfig
from navigation.fluvial.geo_utils import calculate_bearing, destination_point


START_TS = 1_700_000_000.0

# Manaus downstream, about 80 km over two ~40 km segments
SCENARIO_ROUTE = (
    Coord(-3.10, -60.00),
    Coord(-3.30, -59.70),
    Coord(-3.50, -59.40),
)


# --- Factory helpers -------------------------------------------------
def first_segment_course() -> float:
    a, b = SCENARIO_ROUTE[0], SCENARIO_ROUTE[1]
    return calculate_bearing(a.lat, a.lon, b.lat, b.lon)


def point_along_first_segment(distance_m: float, offset_m: float = 0.0) -> Coord:
    """Point distance_m down the first segment, optionally offset_m to starboard."""
    course = first_segment_course()
    on_route = destination_point(SCENARIO_ROUTE[0], course, distance_m)
    if offset_m:
        return destination_point(on_route, course + 90, offset_m)
    return on_route


def make_fix(coord: Coord, t: float, accuracy_m=None) -> RawFix:
    return RawFix(coord, START_TS + t, accuracy_m)


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def config():
    return NavConfig()


@pytest.fixture
def route():
    return SCENARIO_ROUTE


@pytest.fixture
def hazard_zone():
    return HazardZone(
        zone_id="dz-test",
        center=Coord(-3.20, -59.85),
        radius_m=2000,
        severity=HazardSeverity.MEDIUM,
        label="Test sandbank",
    )
