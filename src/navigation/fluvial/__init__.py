"""River trip tracking: raw GPS fixes in, immutable navigation snapshots out."""

from .models import (
    Coord,
    RawFix,
    SmoothedFix,
    HazardZone,
    HazardSeverity,
    HazardType,
    NearbyZone,
    RouteProgress,
    ProgressEstimate,
    OffRouteState,
    NavigationState,
)
from .nav_config import NavConfig
from .position_smoother import PositionSmoother
from .route_projector import RouteProjector, project_onto_route
from .eta_estimator import ETAEstimator
from .off_route_monitor import OffRouteMonitor
from .hazard_monitor import HazardProximityMonitor
from .navigator import NavigationStateAggregator
