# geo_utils.py
# Pure mathematical / geographic helper functions.
# No side effects, no state.

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .models import Coord
from .nav_config import EARTH_RADIUS_M


@dataclass(frozen=True)
class SegmentProjection:
    closest_point: Coord
    distance_to_segment_m: float
    fraction_along_segment: float   # in [0, 1]


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two points in metres.

    Args:
        lat1, lon1: Origin in decimal degrees.
        lat2, lon2: Destination in decimal degrees.

    Returns:
        Distance in metres.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_distances(lat: float, lon: float, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    """Vectorised haversine from one point to many, in metres."""
    d_lat = np.radians(lats - lat)
    d_lon = np.radians(lons - lon)
    a = (
        np.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat))
        * np.cos(np.radians(lats))
        * np.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Forward azimuth (bearing) from point 1 to point 2 in degrees [0, 360).

    Args:
        lat1, lon1: Origin in decimal degrees.
        lat2, lon2: Destination in decimal degrees.

    Returns:
        Bearing in degrees.
    """
    rlat1, rlon1 = math.radians(lat1), math.radians(lon1)
    rlat2, rlon2 = math.radians(lat2), math.radians(lon2)
    d_lon = rlon2 - rlon1
    y = math.sin(d_lon) * math.cos(rlat2)
    x = math.cos(rlat1) * math.sin(rlat2) - math.sin(rlat1) * math.cos(rlat2) * math.cos(d_lon)
    return (math.degrees(math.atan2(y, x)) + 360) % 360


def project_onto_segment(p: Coord, seg_start: Coord, seg_end: Coord) -> SegmentProjection:
    """
    Closest point on segment [seg_start, seg_end] to p.

    Uses a local equirectangular projection centred on p, which is accurate
    for river spans up to a couple of hundred kilometres.

    Returns:
        SegmentProjection with the snapped point, its distance from p in
        metres and the fraction along the segment.
    """
    k_lon = math.cos(math.radians(p.lat))

    ax = math.radians(seg_start.lon) * k_lon * EARTH_RADIUS_M
    ay = math.radians(seg_start.lat) * EARTH_RADIUS_M
    bx = math.radians(seg_end.lon) * k_lon * EARTH_RADIUS_M
    by = math.radians(seg_end.lat) * EARTH_RADIUS_M
    px = math.radians(p.lon) * k_lon * EARTH_RADIUS_M
    py = math.radians(p.lat) * EARTH_RADIUS_M

    abx, aby = bx - ax, by - ay
    len_sq = abx * abx + aby * aby
    if len_sq == 0:
        t = 0.0
    else:
        t = max(0.0, min(1.0, ((px - ax) * abx + (py - ay) * aby) / len_sq))

    cx, cy = ax + t * abx, ay + t * aby
    closest = Coord(
        seg_start.lat + t * (seg_end.lat - seg_start.lat),
        seg_start.lon + t * (seg_end.lon - seg_start.lon),
    )
    return SegmentProjection(
        closest_point=closest,
        distance_to_segment_m=math.hypot(px - cx, py - cy),
        fraction_along_segment=t,
    )


def route_length(route: Sequence[Coord]) -> float:
    """Total polyline length in metres (0 for fewer than two points)."""
    return sum(
        haversine_distance(a.lat, a.lon, b.lat, b.lon)
        for a, b in zip(route, route[1:])
    )


def destination_point(origin: Coord, bearing_deg: float, distance_m: float) -> Coord:
    """Point reached by travelling distance_m from origin on the given bearing."""
    delta = distance_m / EARTH_RADIUS_M
    theta = math.radians(bearing_deg)
    lat1, lon1 = math.radians(origin.lat), math.radians(origin.lon)
    lat2 = math.asin(
        math.sin(lat1) * math.cos(delta)
        + math.cos(lat1) * math.sin(delta) * math.cos(theta)
    )
    lon2 = lon1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )
    return Coord(math.degrees(lat2), (math.degrees(lon2) + 540) % 360 - 180)
