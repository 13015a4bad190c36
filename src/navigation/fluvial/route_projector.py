# route_projector.py
# Projects the vessel position onto the route polyline.
# Build one RouteProjector per session, then call project() on every smoothed position.

import logging
from typing import Optional, Sequence

import numpy as np

from .models import Coord, Route, RouteProgress
from .geo_utils import haversine_distance, project_onto_segment, route_length

logger = logging.getLogger(__name__)


class RouteProjector:
    """
    Nearest-segment projection onto a fixed route.

    Segment lengths and their running totals are computed once; each
    project() call is a linear scan over the segments.

    Usage:
        projector = RouteProjector(route)
        progress = projector.project(position)
    """

    def __init__(self, route: Sequence[Coord]) -> None:
        self._route: Route = tuple(route)

        if len(self._route) < 2:
            logger.warning(f"Route has {len(self._route)} waypoint(s); projection disabled.")
            self._segment_lengths = np.zeros(0)
            self._offsets = np.zeros(0)
            self._total_length = 0.0
            return

        self._segment_lengths = np.array([
            haversine_distance(a.lat, a.lon, b.lat, b.lon)
            for a, b in zip(self._route, self._route[1:])
        ])
        # Distance from the route start to the beginning of each segment
        self._offsets = np.concatenate(([0.0], np.cumsum(self._segment_lengths)[:-1]))
        self._total_length = route_length(self._route)

    # ------------------------------------------------------------------
    # Read-only properties
    # ------------------------------------------------------------------

    @property
    def route(self) -> Route:
        return self._route

    @property
    def is_degenerate(self) -> bool:
        return len(self._route) < 2

    @property
    def total_length_m(self) -> float:
        return self._total_length

    # ------------------------------------------------------------------
    # Core method
    # ------------------------------------------------------------------

    def project(self, position: Coord) -> RouteProgress:
        """
        Locate position along the route.

        Args:
            position: Smoothed vessel position.

        Returns:
            RouteProgress; RouteProgress.empty() when the route has fewer than two waypoints.
        """
        if self.is_degenerate:
            return RouteProgress.empty()

        best_index = 0
        best = None
        for i, (a, b) in enumerate(zip(self._route, self._route[1:])):
            proj = project_onto_segment(position, a, b)
            if best is None or proj.distance_to_segment_m < best.distance_to_segment_m:
                best = proj
                best_index = i

        total = self.total_length_m
        traveled = (
            float(self._offsets[best_index])
            + best.fraction_along_segment * float(self._segment_lengths[best_index])
        )
        traveled = max(0.0, min(total, traveled))

        return RouteProgress(
            distance_traveled_m=traveled,
            distance_remaining_m=max(0.0, total - traveled),
            deviation_m=best.distance_to_segment_m,
            segment_index=best_index,
            snapped_position=best.closest_point,
        )


def project_onto_route(position: Coord, route: Sequence[Coord],
                       projector: Optional[RouteProjector] = None) -> RouteProgress:
    """One-shot projection; pass a cached projector to skip recomputing segment lengths."""
    return (projector or RouteProjector(route)).project(position)
