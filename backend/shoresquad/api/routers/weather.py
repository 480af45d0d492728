from __future__ import annotations

from fastapi import APIRouter, Depends

from shoresquad.api.deps import get_controller
from shoresquad.api.serializers import forecast_day_to_dict
from shoresquad.services.app_controller import AppController

router = APIRouter(tags=["weather"])


def _forecast_payload(controller: AppController) -> dict:
    return {
        "fallback": controller.state.forecast_is_fallback,
        "loading": controller.state.loading["weather"],
        "days": [forecast_day_to_dict(day) for day in controller.state.forecast],
    }


@router.get("/weather")
async def get_weather(controller: AppController = Depends(get_controller)):
    return _forecast_payload(controller)


@router.post("/weather/refresh")
async def refresh_weather(controller: AppController = Depends(get_controller)):
    await controller.dispatch("refresh_weather")
    return _forecast_payload(controller)
