# nav_config.py
# All tuneable constants in one place.
# Pass a NavConfig instance to every module that needs settings.

from dataclasses import dataclass, asdict, fields
from typing import Optional


EARTH_RADIUS_M: float = 6_371_000.0


# ---------------------------------------------------------------------------
# Main config
# ---------------------------------------------------------------------------

@dataclass
class NavConfig:
    # Position smoothing
    smoothing_tau_s: float = 6.0              # EMA time constant
    heading_min_move_m: float = 3.0           # below this the previous heading is kept
    max_speed_mps: float = 30.0               # faster samples are treated as GPS spikes
    max_fix_accuracy_m: Optional[float] = None  # drop fixes reporting worse accuracy

    # ETA
    min_moving_speed_mps: float = 0.3         # below this ETA is "estimating"

    # Off-route hysteresis
    off_route_enter_m: float = 300.0          # T_high
    off_route_exit_m: float = 150.0           # T_low
    off_route_enter_count: int = 2            # N consecutive updates above T_high
    off_route_exit_count: int = 3             # M consecutive updates below T_low

    # Hazards
    hazard_alert_margin_m: float = 0.0        # added to each zone radius

    # Arrival
    arrival_threshold_m: float = 50.0

    def __post_init__(self) -> None:
        if self.smoothing_tau_s <= 0:
            raise ValueError("smoothing_tau_s must be positive")
        if self.max_speed_mps <= 0:
            raise ValueError("max_speed_mps must be positive")
        if self.off_route_enter_m <= self.off_route_exit_m:
            raise ValueError("off_route_enter_m must be greater than off_route_exit_m")
        if self.off_route_enter_count < 1 or self.off_route_exit_count < 1:
            raise ValueError("off-route update counts must be at least 1")
        if self.hazard_alert_margin_m < 0:
            raise ValueError("hazard_alert_margin_m must not be negative")

    def to_dict(self) -> dict:
        return asdict(self)

    @staticmethod
    def from_dict(d: dict) -> "NavConfig":
        """Build a config from a per-vessel mapping; unknown keys are ignored."""
        known = {f.name for f in fields(NavConfig)}
        return NavConfig(**{k: v for k, v in d.items() if k in known})
