# dreamhouse/domain/geo.py
from __future__ import annotations

import math


EARTH_RADIUS_MILES = 3958.8


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance in miles between two points given in decimal degrees.
    NaN in gives NaN out; callers guard their own inputs.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def has_known_location(lat: float | None, lng: float | None) -> bool:
    # (0, 0) is the ingestion layer's "never geocoded" marker
    if lat is None or lng is None:
        return False
    return not (lat == 0 and lng == 0)
