from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shoresquad.api.deps import get_controller
from shoresquad.api.serializers import fix_to_dict, notification_to_dict
from shoresquad.domain.errors import GeoError, ValidationFailure
from shoresquad.providers.location.base import ReportedPosition
from shoresquad.services.app_controller import AppController

router = APIRouter(tags=["session"])


class LocationReport(BaseModel):
    lat: Optional[float] = None
    lon: Optional[float] = None
    error: Optional[GeoError] = None


@router.post("/location")
async def report_location(report: LocationReport, controller: AppController = Depends(get_controller)):
    """Feed a browser geolocation reading (or its failure code) through the locator."""
    try:
        source = ReportedPosition(lat=report.lat, lon=report.lon, error=report.error)
    except ValueError as exc:
        raise ValidationFailure({"location": str(exc)}) from exc
    result = await controller.dispatch("locate", source=source)
    return {
        "ok": result.ok,
        "fix": fix_to_dict(result.fix),
        "error": result.error.value if result.error else None,
        "map": controller.map.to_dict(),
    }


@router.get("/map")
async def get_map(controller: AppController = Depends(get_controller)):
    return controller.map.to_dict()


@router.get("/notifications")
async def list_notifications(controller: AppController = Depends(get_controller)):
    overlay = controller.notifications.overlay
    return {
        "active": [notification_to_dict(note) for note in controller.notifications.active()],
        "loading_overlay": (
            {"active": overlay.active, "message": overlay.message} if overlay is not None else None
        ),
    }


@router.get("/state")
async def get_state(controller: AppController = Depends(get_controller)):
    state = controller.state
    return {
        "selected_filter": state.selected_filter.value,
        "location": fix_to_dict(state.location),
        "loading": dict(state.loading),
        "is_dark_mode": state.is_dark_mode,
        "nav_open": state.nav_open,
        "nav_sections": list(state.nav_sections),
        "forecast_is_fallback": state.forecast_is_fallback,
        "background_registered": state.background_registered,
        "event_count": len(controller.store),
    }


@router.post("/navigation/toggle")
async def toggle_navigation(controller: AppController = Depends(get_controller)):
    return {"nav_open": await controller.dispatch("toggle_navigation")}


@router.post("/movement/join")
async def join_movement(controller: AppController = Depends(get_controller)):
    return {"message": await controller.dispatch("join_movement")}
