from __future__ import annotations

from fastapi import HTTPException, Request

from shoresquad.services.app_controller import AppController


def get_controller(request: Request) -> AppController:
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(status_code=500, detail="Application controller not configured")
    return controller
