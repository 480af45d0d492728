from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shoresquad.api.routers import events, session, weather
from shoresquad.config import Settings
from shoresquad.domain.errors import ActionFailed, EventNotFound, ValidationFailure
from shoresquad.services.app_controller import GENERIC_ERROR_MESSAGE, AppController

logger = logging.getLogger(__name__)


def create_app(
    controller: Optional[AppController] = None,
    settings: Optional[Settings] = None,
    *,
    wait_for_background: bool = False,
) -> FastAPI:
    settings = settings or Settings.from_env()
    if controller is None:
        controller = AppController(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Location and weather keep loading in the background unless asked to wait.
        await app.state.controller.initialize(drain=wait_for_background)
        yield
        await app.state.controller.shutdown()

    app = FastAPI(title="ShoreSquad API", version="0.1.0", lifespan=lifespan)
    app.state.controller = controller

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationFailure)
    async def _validation_failure(request: Request, exc: ValidationFailure):
        return JSONResponse(status_code=422, content={"errors": exc.errors})

    @app.exception_handler(EventNotFound)
    async def _event_not_found(request: Request, exc: EventNotFound):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ActionFailed)
    async def _action_failed(request: Request, exc: ActionFailed):
        return JSONResponse(status_code=500, content={"detail": GENERIC_ERROR_MESSAGE})

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        logger.exception("[api] unhandled error on %s %s", request.method, request.url.path)
        request.app.state.controller.notifications.inline_error(GENERIC_ERROR_MESSAGE)
        return JSONResponse(status_code=500, content={"detail": GENERIC_ERROR_MESSAGE})

    app.include_router(events.router, prefix="/api")
    app.include_router(weather.router, prefix="/api")
    app.include_router(session.router, prefix="/api")

    @app.get("/")
    async def read_root():
        return {"message": "ShoreSquad API"}

    return app


app = create_app()
