# models.py
# Shared data structures and enums used across all modules.

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Tuple


# ---------------------------------------------------------------------------
# Coordinate
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Coord:
    """Immutable geographic coordinate (WGS84 degrees)."""
    lat: float
    lon: float

    def is_valid(self) -> bool:
        return (
            math.isfinite(self.lat)
            and math.isfinite(self.lon)
            and -90.0 <= self.lat <= 90.0
            and -180.0 <= self.lon <= 180.0
        )

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lon": self.lon}

    @staticmethod
    def from_dict(d: dict) -> "Coord":
        return Coord(float(d["lat"]), float(d["lon"]))


Route = Tuple[Coord, ...]


# ---------------------------------------------------------------------------
# GPS input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RawFix:
    """One GPS sample as delivered by the device location provider."""
    coord: Coord
    timestamp: float                     # Unix timestamp (s)
    accuracy_m: Optional[float] = None   # reported horizontal accuracy


@dataclass(frozen=True)
class SmoothedFix:
    """Output of PositionSmoother.ingest()."""
    position: Coord
    timestamp: float
    heading_deg: Optional[float] = None  # None until the vessel has moved
    speed_mps: Optional[float] = None    # None until two fixes were accepted


# ---------------------------------------------------------------------------
# Hazard zones
# ---------------------------------------------------------------------------

class HazardSeverity(Enum):
    LOW    = 1
    MEDIUM = 2
    HIGH   = 3

    @staticmethod
    def parse(value) -> "HazardSeverity":
        if isinstance(value, HazardSeverity):
            return value
        if isinstance(value, str):
            return HazardSeverity[value.strip().upper()]
        return HazardSeverity(value)


class HazardType(Enum):
    SANDBANK   = "sandbank"
    RAPIDS     = "rapids"
    RESTRICTED = "restricted"
    SHALLOW    = "shallow"
    CURRENT    = "current"


@dataclass(frozen=True)
class HazardZone:
    """A static circular hazard area on the river."""
    zone_id: str
    center: Coord
    radius_m: float
    severity: HazardSeverity
    label: str
    hazard_type: Optional[HazardType] = None
    description: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius_m) or self.radius_m < 0:
            raise ValueError(f"Hazard zone {self.zone_id!r} has invalid radius {self.radius_m}")

    def to_dict(self) -> dict:
        return {
            "id": self.zone_id,
            "center": self.center.to_dict(),
            "radius_m": self.radius_m,
            "severity": self.severity.name.lower(),
            "label": self.label,
            "type": self.hazard_type.value if self.hazard_type else None,
            "description": self.description,
        }

    @staticmethod
    def from_dict(d: dict) -> "HazardZone":
        hazard_type = d.get("type")
        return HazardZone(
            zone_id=str(d["id"]),
            center=Coord.from_dict(d["center"]),
            radius_m=float(d["radius_m"]),
            severity=HazardSeverity.parse(d["severity"]),
            label=d["label"],
            hazard_type=HazardType(hazard_type) if hazard_type else None,
            description=d.get("description", ""),
        )


@dataclass(frozen=True)
class NearbyZone:
    """A hazard zone within alert range of the vessel."""
    zone: HazardZone
    distance_m: float               # to the zone centre
    distance_to_boundary_m: float   # 0 when inside

    @property
    def is_inside(self) -> bool:
        return self.distance_m <= self.zone.radius_m


# ---------------------------------------------------------------------------
# Route progress
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RouteProgress:
    """Returned by RouteProjector.project() for every position."""
    distance_traveled_m: float
    distance_remaining_m: float
    deviation_m: float
    segment_index: int = -1                  # -1 when the route is degenerate
    snapped_position: Optional[Coord] = None

    @staticmethod
    def empty() -> "RouteProgress":
        return RouteProgress(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class ProgressEstimate:
    progress_fraction: float
    eta: Optional[float] = None              # Unix timestamp of arrival
    time_remaining_s: Optional[float] = None


# ---------------------------------------------------------------------------
# Navigation status
# ---------------------------------------------------------------------------

class OffRouteState(Enum):
    ON_ROUTE  = "on_route"
    OFF_ROUTE = "off_route"


@dataclass(frozen=True)
class NavigationState:
    """Immutable snapshot published by NavigationStateAggregator on every accepted fix."""
    smoothed_position: Coord
    timestamp: float
    heading_deg: Optional[float]
    speed_mps: Optional[float]
    distance_traveled_m: float
    distance_remaining_m: float
    deviation_m: float
    progress_fraction: float
    eta: Optional[float]
    time_remaining_s: Optional[float]
    is_off_route: bool
    nearby_zones: Tuple[NearbyZone, ...] = ()
    has_arrived: bool = False

    def to_dict(self) -> dict:
        data = asdict(self)
        data["nearby_zones"] = [
            {
                "zone": nz.zone.to_dict(),
                "distance_m": nz.distance_m,
                "distance_to_boundary_m": nz.distance_to_boundary_m,
                "is_inside": nz.is_inside,
            }
            for nz in self.nearby_zones
        ]
        return data
