# navigator.py
# Public entry point for the tracking engine.
# Owns no business logic; delegates everything to specialist modules.

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from .models import Coord, HazardZone, NavigationState, RawFix, Route
from .nav_config import NavConfig
from .position_smoother import PositionSmoother
from .route_projector import RouteProjector
from .eta_estimator import ETAEstimator
from .off_route_monitor import OffRouteMonitor
from .hazard_monitor import HazardProximityMonitor

logger = logging.getLogger(__name__)

StateListener = Callable[[NavigationState], None]


class NavigationStateAggregator:
    """
    High-level tracking facade, one instance per trip session.

    Typical lifecycle:
        engine = NavigationStateAggregator(route, AMAZON_HAZARD_ZONES)
        unsubscribe = engine.subscribe(hud.render)

        # Location callback (single producer):
        state = engine.ingest(RawFix(Coord(lat, lon), timestamp))

    Every accepted fix produces one new immutable NavigationState; a
    dropped fix leaves the previous state in place.

    Args:
        route:        Ordered waypoints, fixed for the session.
        hazard_zones: Static hazard catalog.
        config:       Optional NavConfig; defaults to NavConfig().
    """

    def __init__(
        self,
        route: Sequence[Coord],
        hazard_zones: Iterable[HazardZone] = (),
        config: Optional[NavConfig] = None,
    ) -> None:
        self.config = config or NavConfig()

        # Specialist modules
        self._smoother  = PositionSmoother(self.config)
        self._projector = RouteProjector(route)
        self._estimator = ETAEstimator(self.config)
        self._off_route = OffRouteMonitor(self.config)
        self._hazards   = HazardProximityMonitor(hazard_zones, self.config)

        self._state: Optional[NavigationState] = None
        self._listeners: List[StateListener] = []

        logger.info(
            f"Tracking session ready: {len(self._projector.route)} waypoints, "
            f"{self._projector.total_length_m / 1000:.1f} km."
        )

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new state. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # GPS update, called on every position fix
    # ------------------------------------------------------------------

    def ingest(self, fix: RawFix) -> Optional[NavigationState]:
        """
        Process a raw GPS fix and return the current navigation state.

        Args:
            fix: Raw fix from the device location provider.

        Returns:
            The new NavigationState, or the previous one (None before the
            first accepted fix) if the fix was dropped.
        """
        smoothed = self._smoother.ingest(fix)
        if smoothed is None:
            return self._state

        progress = self._projector.project(smoothed.position)
        estimate = self._estimator.estimate(
            progress.distance_remaining_m,
            smoothed.speed_mps,
            self._projector.total_length_m,
            now=smoothed.timestamp,
        )
        is_off_route = self._off_route.update(progress.deviation_m)
        nearby = self._hazards.query(smoothed.position)

        has_arrived = (
            not self._projector.is_degenerate
            and progress.distance_remaining_m <= self.config.arrival_threshold_m
        )

        self._state = NavigationState(
            smoothed_position=smoothed.position,
            timestamp=smoothed.timestamp,
            heading_deg=smoothed.heading_deg,
            speed_mps=smoothed.speed_mps,
            distance_traveled_m=progress.distance_traveled_m,
            distance_remaining_m=progress.distance_remaining_m,
            deviation_m=progress.deviation_m,
            progress_fraction=estimate.progress_fraction,
            eta=estimate.eta,
            time_remaining_s=estimate.time_remaining_s,
            is_off_route=is_off_route,
            nearby_zones=nearby,
            has_arrived=has_arrived,
        )
        self._notify(self._state)
        return self._state

    def reset(self) -> None:
        """Clear filter and monitor state; the route and catalog are kept."""
        self._smoother.reset()
        self._off_route.reset()
        self._state = None
        logger.info("Tracking state reset.")

    # ------------------------------------------------------------------
    # Convenience read-only properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> Optional[NavigationState]:
        return self._state

    @property
    def route(self) -> Route:
        return self._projector.route

    @property
    def route_length_m(self) -> float:
        return self._projector.total_length_m

    @property
    def dropped_fix_count(self) -> int:
        return self._smoother.dropped_count

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _notify(self, state: NavigationState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception(f"Navigation state listener {listener!r} failed")
