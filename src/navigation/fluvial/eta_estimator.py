# eta_estimator.py
# Progress fraction and arrival time from remaining distance and current speed.

import time
from typing import Optional

from .models import ProgressEstimate
from .nav_config import NavConfig


class ETAEstimator:
    """
    Uses the latest smoothed speed only; river current and throttle change
    often enough that a long averaging window would lag behind.
    """

    def __init__(self, config: Optional[NavConfig] = None) -> None:
        self.config = config or NavConfig()

    def estimate(
        self,
        distance_remaining_m: float,
        speed_mps: Optional[float],
        total_length_m: float,
        now: Optional[float] = None,
    ) -> ProgressEstimate:
        """
        Args:
            distance_remaining_m: Metres left along the route.
            speed_mps:            Current speed, None if unknown.
            total_length_m:       Full route length.
            now:                  Reference Unix time; defaults to time.time().

        Returns:
            ProgressEstimate; eta is None while the estimate is not meaningful.
        """
        if total_length_m <= 0:
            return ProgressEstimate(progress_fraction=0.0)

        progress = 1.0 - distance_remaining_m / total_length_m
        progress = max(0.0, min(1.0, progress))

        if speed_mps is None or speed_mps < self.config.min_moving_speed_mps:
            return ProgressEstimate(progress_fraction=progress)

        remaining_s = distance_remaining_m / speed_mps
        if now is None:
            now = time.time()
        return ProgressEstimate(
            progress_fraction=progress,
            eta=now + remaining_s,
            time_remaining_s=remaining_s,
        )
