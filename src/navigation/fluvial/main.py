# main.py
# Entry point: simulates a GPS feed pushing fixes into NavigationStateAggregator.
# In production, the host's location callback calls engine.ingest() instead of this loop.

import logging
import random

from .models import Coord, RawFix
from .nav_config import NavConfig
from .navigator import NavigationStateAggregator
from .hazard_catalog import AMAZON_HAZARD_ZONES
from .geo_utils import calculate_bearing, destination_point, haversine_distance
from .formatting import format_distance, format_duration, format_eta, format_speed_kmh

# ------------------------------------------------------------------
# Logging setup, once here; all modules inherit
# ------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

# ------------------------------------------------------------------
# Config: tweak thresholds here, not inside the modules
# ------------------------------------------------------------------
config = NavConfig(
    smoothing_tau_s=6.0,
    off_route_enter_m=300.0,
    off_route_exit_m=150.0,
    hazard_alert_margin_m=2000.0,
)

# ------------------------------------------------------------------
# Simulated route (Manaus → downstream, Rio Amazonas)
# ------------------------------------------------------------------
ROUTE = (
    Coord(-3.10, -60.00),
    Coord(-3.30, -59.70),
    Coord(-3.50, -59.40),
)

SPEED_MPS = 5.0
FIX_INTERVAL_S = 15.0
GPS_NOISE_M = 12.0
FIX_COUNT = 40


def simulated_fixes(start_ts: float = 1_700_000_000.0):
    """Noisy fixes along the first route segment, with one excursion off the channel."""
    a, b = ROUTE[0], ROUTE[1]
    course = calculate_bearing(a.lat, a.lon, b.lat, b.lon)
    rng = random.Random(7)

    for i in range(FIX_COUNT):
        ts = start_ts + i * FIX_INTERVAL_S + rng.uniform(-3, 3)
        true_pos = destination_point(a, course, SPEED_MPS * i * FIX_INTERVAL_S)
        if 20 <= i < 26:
            true_pos = destination_point(true_pos, course + 90, 800)
        noisy = destination_point(true_pos, rng.uniform(0, 360), rng.uniform(0, GPS_NOISE_M))
        yield RawFix(noisy, ts, accuracy_m=GPS_NOISE_M)


def main() -> None:
    # 1. Boot engine for this trip session
    engine = NavigationStateAggregator(ROUTE, AMAZON_HAZARD_ZONES, config)
    print(f"[Main] Route length: {format_distance(engine.route_length_m)}")

    print("\n--- GPS Feed Active ---")

    # 2. Fix loop; replace with the real location callback in production
    for fix in simulated_fixes():
        state = engine.ingest(fix)
        if state is None:
            continue

        eta = format_eta(state.eta)
        remaining = format_distance(state.distance_remaining_m)
        print(
            f"  {state.progress_fraction:6.2%}  {remaining:>9} left  "
            f"{format_speed_kmh(state.speed_mps):>8}  ETA {eta}"
            + (f" (~{format_duration(state.time_remaining_s)})" if state.time_remaining_s else "")
        )

        # React to status
        if state.is_off_route:
            print(f"  ⚠  Off-route by {format_distance(state.deviation_m)}.")

        for nz in state.nearby_zones:
            where = "inside" if nz.is_inside else f"{format_distance(nz.distance_to_boundary_m)} away"
            print(f"  ⚠  Hazard {nz.zone.label} [{nz.zone.severity.name}]: {where}")

        if state.has_arrived:
            print("  ✓  Destination reached.")
            break

    print("\n--- Session complete ---")
    last = engine.state
    if last is not None:
        start = ROUTE[0]
        moved = haversine_distance(start.lat, start.lon, last.smoothed_position.lat, last.smoothed_position.lon)
        print(f"    Straight-line distance from departure: {format_distance(moved)}")
    print(f"    Dropped fixes: {engine.dropped_fix_count}")


if __name__ == "__main__":
    main()
