# nav_storage.py
# File I/O for session inputs supplied by the host: route, hazard catalog, vessel config.
# Never called from the ingest loop.

import json
import logging
from datetime import datetime
from typing import List, Optional, Sequence

from .models import Coord, HazardZone, Route
from .nav_config import NavConfig

# Configure handlers at the app entry point
logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Route
# ------------------------------------------------------------------

def save_route(route: Sequence[Coord], filepath: str) -> bool:
    """
    Serialize a route to JSON.

    Returns:
        True on success, False on failure.
    """
    try:
        data = {
            "saved_at": datetime.now().isoformat(),
            "waypoint_count": len(route),
            "waypoints": [c.to_dict() for c in route],
        }
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        logger.info(f"Route saved to {filepath} ({len(route)} waypoints).")
        return True
    except OSError as e:
        logger.error(f"Failed to save route to {filepath}: {e}")
        return False


def load_route(filepath: str) -> Optional[Route]:
    """
    Load a route from JSON.

    Returns:
        Tuple of Coord, or None if loading failed.
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        route = tuple(Coord.from_dict(c) for c in data["waypoints"])
        logger.info(f"Route loaded from {filepath} ({len(route)} waypoints).")
        return route
    except (OSError, KeyError, TypeError, ValueError) as e:
        logger.error(f"Failed to load route from {filepath}: {e}")
        return None


# ------------------------------------------------------------------
# Hazard catalog
# ------------------------------------------------------------------

def load_hazard_zones(filepath: str) -> Optional[List[HazardZone]]:
    """
    Load a hazard catalog from JSON ({"zones": [...]}).

    Returns:
        List of HazardZone, or None if loading failed.
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        zones = [HazardZone.from_dict(z) for z in data["zones"]]
        logger.info(f"Hazard catalog loaded from {filepath} ({len(zones)} zones).")
        return zones
    except (OSError, KeyError, TypeError, ValueError) as e:
        logger.error(f"Failed to load hazard catalog from {filepath}: {e}")
        return None


# ------------------------------------------------------------------
# Vessel config
# ------------------------------------------------------------------

def load_config(filepath: str) -> Optional[NavConfig]:
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        config = NavConfig.from_dict(data)
        logger.info(f"Navigation config loaded from {filepath}.")
        return config
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to load config from {filepath}: {e}")
        return None
