from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from shoresquad.api.deps import get_controller
from shoresquad.api.serializers import event_to_dict, listing_to_dict
from shoresquad.services.app_controller import AppController

router = APIRouter(tags=["events"])


class EventForm(BaseModel):
    # Plain strings on purpose: field checks and their messages live in the form service.
    name: str = ""
    location: str = ""
    date: str = ""
    time: str = ""
    description: Optional[str] = None


@router.get("/events")
async def list_events(
    filter: Optional[str] = Query(None, description="all | today | week | month"),
    controller: AppController = Depends(get_controller),
):
    if filter is None:
        listing = controller.render_events()
    else:
        listing = await controller.dispatch("select_filter", selector=filter)
    return listing_to_dict(listing)


@router.post("/events", status_code=201)
async def create_event(form: EventForm, controller: AppController = Depends(get_controller)):
    event = await controller.dispatch("create_event", form=form.model_dump())
    return event_to_dict(event)


@router.post("/events/{event_id}/join")
async def join_event(event_id: int, controller: AppController = Depends(get_controller)):
    event = await controller.dispatch("join_event", event_id=event_id)
    return event_to_dict(event)
