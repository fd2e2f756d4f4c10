"""
User location input for the map.

The browser location is an optional, untrusted input: the page may pass
`lat`/`lon` in the URL query string (for example from a "use my location"
link). Anything missing or malformed is treated the same as a denied
permission, and the map falls back to the configured default region.
"""

# Import libraries
from __future__ import annotations
from typing import Mapping, Optional

from models.game_model import Coordinate
from . import config


def default_map_center() -> Coordinate:
    return Coordinate(config.MAP_LAT, config.MAP_LON)


def parse_user_location(params: Mapping[str, str]) -> Optional[Coordinate]:
    raw_lat, raw_lon = params.get("lat"), params.get("lon")
    if raw_lat is None or raw_lon is None:
        return None
    try:
        lat, lon = float(raw_lat), float(raw_lon)
    except (TypeError, ValueError):
        return None
    # reject NaN and out-of-range values
    if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lon <= 180.0):
        return None
    return Coordinate(lat, lon)


def resolve_map_center(user_location: Optional[Coordinate]) -> Coordinate:
    """Center on the user when we know where they are, otherwise on the default region."""
    return user_location if user_location is not None else default_map_center()
