from __future__ import annotations

import math
from datetime import date

EARTH_RADIUS_KM = 6_371


def haversine_km(lat1, lon1, lat2, lon2):
    if None in (lat1, lon1, lat2, lon2):
        return None
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def format_event_date(value: date) -> str:
    # e.g. "Tue, Dec 10"
    return f"{value.strftime('%a')}, {value.strftime('%b')} {value.day}"
