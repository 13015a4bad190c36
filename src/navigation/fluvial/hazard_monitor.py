# hazard_monitor.py
# Reports which static hazard zones are within alert range of a position.
#
# Usage:
#   monitor = HazardProximityMonitor(AMAZON_HAZARD_ZONES, config)
#   nearby = monitor.query(Coord(-3.16, -59.90))

import logging
from typing import Iterable, Optional, Tuple

import numpy as np

from .models import Coord, HazardZone, NearbyZone
from .geo_utils import haversine_distances
from .nav_config import NavConfig

logger = logging.getLogger(__name__)


class HazardProximityMonitor:
    """
    Stateless proximity query over a fixed hazard catalog.

    Zone centres and radii are kept as numpy arrays so each query is a
    single vectorised distance computation over the whole catalog.

    Args:
        zones:  Hazard catalog, loaded once per session.
        config: NavConfig instance for hazard_alert_margin_m.
    """

    def __init__(self, zones: Iterable[HazardZone] = (), config: Optional[NavConfig] = None) -> None:
        self.config = config or NavConfig()
        self._zones: Tuple[HazardZone, ...] = tuple(zones)
        self._lats = np.array([z.center.lat for z in self._zones], dtype=float)
        self._lons = np.array([z.center.lon for z in self._zones], dtype=float)
        self._radii = np.array([z.radius_m for z in self._zones], dtype=float)
        logger.info(f"Hazard catalog ready ({len(self._zones)} zones).")

    @property
    def zones(self) -> Tuple[HazardZone, ...]:
        return self._zones

    def query(self, position: Coord) -> Tuple[NearbyZone, ...]:
        """
        Zones whose centre is within radius + alert margin of position.

        Returns:
            NearbyZone tuple, nearest first; equal distances list the more
            severe zone first.
        """
        if not self._zones:
            return ()

        dists = haversine_distances(position.lat, position.lon, self._lats, self._lons)
        within = dists <= self._radii + self.config.hazard_alert_margin_m

        results = [
            NearbyZone(
                zone=self._zones[i],
                distance_m=float(dists[i]),
                distance_to_boundary_m=max(0.0, float(dists[i] - self._radii[i])),
            )
            for i in np.flatnonzero(within)
        ]
        results.sort(key=lambda nz: (nz.distance_m, -nz.zone.severity.value))
        return tuple(results)
