# formatting.py
# Human-readable strings for HUD fields.

from datetime import datetime
from typing import Optional


def format_distance(meters: float) -> str:
    if meters < 1000:
        return f"{round(meters)} m"
    return f"{meters / 1000:.1f} km"


def format_duration(seconds: float) -> str:
    if seconds < 60:
        return "< 1 min"
    total_min = round(seconds / 60)
    if total_min < 60:
        return f"{total_min} min"
    hours, minutes = divmod(total_min, 60)
    return f"{hours}h {minutes}min"


def format_eta(eta: Optional[float]) -> str:
    """Local HH:MM of an arrival timestamp, or a placeholder while estimating."""
    if eta is None:
        return "--:--"
    return datetime.fromtimestamp(eta).strftime("%H:%M")


def format_speed_kmh(speed_mps: Optional[float]) -> str:
    if speed_mps is None:
        return "-- km/h"
    return f"{round(speed_mps * 3.6)} km/h"
