# off_route_monitor.py
# Debounced off-route detection with a hysteresis band.
# Call update() with the route deviation on every accepted fix.

import logging
from typing import Optional

from .models import OffRouteState
from .nav_config import NavConfig

logger = logging.getLogger(__name__)


class OffRouteMonitor:
    """
    ON_ROUTE  -> OFF_ROUTE after off_route_enter_count consecutive deviations above off_route_enter_m.
    OFF_ROUTE -> ON_ROUTE  after off_route_exit_count consecutive deviations below off_route_exit_m.

    Counts are in updates, not seconds, since fixes arrive irregularly.
    """

    def __init__(self, config: Optional[NavConfig] = None) -> None:
        self.config = config or NavConfig()
        self._state = OffRouteState.ON_ROUTE
        self._streak = 0

    def reset(self) -> None:
        self._state = OffRouteState.ON_ROUTE
        self._streak = 0

    @property
    def state(self) -> OffRouteState:
        return self._state

    @property
    def is_off_route(self) -> bool:
        return self._state is OffRouteState.OFF_ROUTE

    def update(self, deviation_m: float) -> bool:
        """Feed one deviation sample and return the (possibly new) off-route flag."""
        cfg = self.config

        if self._state is OffRouteState.ON_ROUTE:
            qualifies = deviation_m > cfg.off_route_enter_m
            needed = cfg.off_route_enter_count
            target = OffRouteState.OFF_ROUTE
        else:
            qualifies = deviation_m < cfg.off_route_exit_m
            needed = cfg.off_route_exit_count
            target = OffRouteState.ON_ROUTE

        if not qualifies:
            self._streak = 0
            return self.is_off_route

        self._streak += 1
        if self._streak >= needed:
            logger.info(f"{self._state.name} -> {target.name} (deviation {deviation_m:.0f} m)")
            self._state = target
            self._streak = 0

        return self.is_off_route
