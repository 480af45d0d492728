from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

NEA_FORECAST_URL = "https://api.data.gov.sg/v1/environment/4-day-weather-forecast"


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


@dataclass(frozen=True)
class Settings:
    weather_url: str = NEA_FORECAST_URL
    weather_timeout: float = 10.0
    geo_timeout: float = 10.0
    static_lat: Optional[float] = None
    static_lon: Optional[float] = None
    color_scheme: str = "light"
    worker_script: str = "sw.js"
    frontend_origin: str = "http://localhost:5173"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            weather_url=os.getenv("SHORESQUAD_WEATHER_URL", NEA_FORECAST_URL),
            weather_timeout=float(os.getenv("SHORESQUAD_WEATHER_TIMEOUT", "10")),
            geo_timeout=float(os.getenv("SHORESQUAD_GEO_TIMEOUT", "10")),
            static_lat=_optional_float("SHORESQUAD_LAT"),
            static_lon=_optional_float("SHORESQUAD_LON"),
            color_scheme=os.getenv("SHORESQUAD_COLOR_SCHEME", "light").strip().lower(),
            worker_script=os.getenv("SHORESQUAD_WORKER_SCRIPT", "sw.js"),
            frontend_origin=os.getenv("FRONTEND_ORIGIN", "http://localhost:5173"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
