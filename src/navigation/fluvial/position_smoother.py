# position_smoother.py
# Time-adaptive exponential smoothing of raw GPS fixes.
# Call ingest() on every fix; it returns the smoothed snapshot or None if the fix was dropped.

import logging
import math
from typing import Optional

from .models import Coord, RawFix, SmoothedFix
from .geo_utils import haversine_distance, calculate_bearing
from .nav_config import NavConfig

logger = logging.getLogger(__name__)


class PositionSmoother:
    """
    EMA filter over lat/lon with alpha = 1 - exp(-dt / tau).

    Sparse fixes get a large alpha (fast reaction), dense fixes a small one
    (heavier smoothing). Heading and speed are derived from consecutive
    smoothed positions, not from raw fixes.

    Args:
        config: NavConfig instance; uses smoothing_tau_s, heading_min_move_m,
                max_speed_mps and max_fix_accuracy_m.
    """

    def __init__(self, config: Optional[NavConfig] = None) -> None:
        self.config = config or NavConfig()
        self._last: Optional[SmoothedFix] = None
        self._dropped: int = 0

    def reset(self) -> None:
        self._last = None
        self._dropped = 0

    @property
    def last(self) -> Optional[SmoothedFix]:
        return self._last

    @property
    def dropped_count(self) -> int:
        return self._dropped

    # ------------------------------------------------------------------
    # Core method, called on every GPS update
    # ------------------------------------------------------------------

    def ingest(self, fix: RawFix) -> Optional[SmoothedFix]:
        reason = self._reject_reason(fix)
        if reason:
            self._dropped += 1
            logger.debug(f"Dropped fix {fix.coord} @ {fix.timestamp}: {reason}")
            return None

        prev = self._last
        if prev is None:
            self._last = SmoothedFix(position=fix.coord, timestamp=fix.timestamp)
            return self._last

        dt = fix.timestamp - prev.timestamp
        alpha = 1.0 - math.exp(-dt / self.config.smoothing_tau_s)
        position = Coord(
            prev.position.lat + alpha * (fix.coord.lat - prev.position.lat),
            prev.position.lon + alpha * (fix.coord.lon - prev.position.lon),
        )

        moved = haversine_distance(
            prev.position.lat, prev.position.lon,
            position.lat, position.lon,
        )

        heading = prev.heading_deg
        if moved >= self.config.heading_min_move_m:
            heading = calculate_bearing(
                prev.position.lat, prev.position.lon,
                position.lat, position.lon,
            )

        speed = prev.speed_mps
        instant = moved / dt
        if instant <= self.config.max_speed_mps:
            speed = instant
        else:
            logger.debug(f"Speed spike rejected: {instant:.1f} m/s")

        self._last = SmoothedFix(
            position=position,
            timestamp=fix.timestamp,
            heading_deg=heading,
            speed_mps=speed,
        )
        return self._last

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _reject_reason(self, fix: RawFix) -> Optional[str]:
        if not fix.coord.is_valid():
            return "invalid coordinate"
        if not math.isfinite(fix.timestamp):
            return "invalid timestamp"
        if fix.accuracy_m is not None:
            if not math.isfinite(fix.accuracy_m) or fix.accuracy_m < 0:
                return "invalid accuracy"
            limit = self.config.max_fix_accuracy_m
            if limit is not None and fix.accuracy_m > limit:
                return f"accuracy {fix.accuracy_m:.0f} m worse than {limit:.0f} m"
        if self._last is not None and fix.timestamp <= self._last.timestamp:
            return "timestamp not after previous fix"
        return None
