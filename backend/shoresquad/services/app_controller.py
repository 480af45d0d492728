from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from shoresquad.config import Settings
from shoresquad.domain.cards import present
from shoresquad.domain.errors import ActionFailed, EventNotFound, ValidationFailure
from shoresquad.domain.filtering import EMPTY_STATE_MESSAGE, filter_events, parse_selector
from shoresquad.domain.models import DisplayRecord, Event, FilterSelector, ForecastDay, LocationFix, Severity
from shoresquad.domain.seed import load_demo_events
from shoresquad.infra.event_store import EventStore
from shoresquad.infra.weather.nea_client import NeaForecastClient
from shoresquad.providers.location.base import PositionSource, StaticPositionSource
from shoresquad.providers.weather.nea import NeaForecastSource

from .event_form import validate_event_form
from .geolocator import GeoLocator, GeoResult
from .map_widget import MapWidget
from .notifications import NotificationCenter
from .weather import WeatherProvider

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please refresh and try again."
NAV_SECTIONS = ("events", "weather", "map")


@dataclass
class AppState:
    selected_filter: FilterSelector = FilterSelector.ALL
    location: Optional[LocationFix] = None
    loading: Dict[str, bool] = field(default_factory=lambda: {"weather": False, "location": False})
    is_dark_mode: bool = False
    nav_open: bool = False
    nav_sections: Tuple[str, ...] = ()
    forecast: List[ForecastDay] = field(default_factory=list)
    forecast_is_fallback: bool = False
    background_registered: bool = False


@dataclass(frozen=True)
class EventListing:
    selected_filter: FilterSelector
    records: List[DisplayRecord]
    empty_message: Optional[str] = None


class AppController:
    """Owns ``AppState`` and is the only thing that writes to it.

    All handlers are expected to run on one event loop; nothing here is
    shared with worker threads.
    """

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        store: Optional[EventStore] = None,
        notifications: Optional[NotificationCenter] = None,
        weather: Optional[WeatherProvider] = None,
        locator: Optional[GeoLocator] = None,
        map_widget: Optional[MapWidget] = None,
        clock: Optional[Callable[[], datetime]] = None,
        register_worker: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.clock = clock or datetime.now
        self.store = store or EventStore()
        self.notifications = notifications or NotificationCenter()
        self.weather = weather or WeatherProvider(
            self.notifications,
            NeaForecastSource(
                NeaForecastClient(url=self.settings.weather_url, timeout=self.settings.weather_timeout)
            ),
            timeout=self.settings.weather_timeout,
            today=self._today,
        )
        self.locator = locator or GeoLocator(
            self.notifications,
            _configured_position_source(self.settings),
            timeout=self.settings.geo_timeout,
        )
        self.map = map_widget or MapWidget()
        self.register_worker = register_worker
        self.state = AppState()
        self._actions: Dict[str, Callable[..., Any]] = {}
        self._pending: List[asyncio.Task] = []

    # ------------------------------------------------------------------ #
    # Startup
    # ------------------------------------------------------------------ #

    async def initialize(self, *, drain: bool = True) -> None:
        """Run the startup steps in order.

        Location and weather run as background tasks. With ``drain=False`` they
        are left running so events can be served before either finishes; call
        ``shutdown`` to stop whatever is still pending.
        """
        logger.info("[app] initializing ShoreSquad")
        try:
            for name, step in self._startup_steps():
                try:
                    result = step()
                    if inspect.isawaitable(result):
                        await result
                except Exception:
                    logger.exception("[app] startup step '%s' failed; continuing", name)
            if drain:
                await self._drain_pending()
        except Exception:
            logger.exception("[app] initialization failed")
            self.notifications.inline_error(GENERIC_ERROR_MESSAGE)
        logger.info("[app] ready events=%d forecast_days=%d", len(self.store), len(self.state.forecast))

    async def shutdown(self) -> None:
        pending, self._pending = self._pending, []
        for task in pending:
            if not task.done():
                task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    def _startup_steps(self) -> List[Tuple[str, Callable[[], Any]]]:
        return [
            ("navigation", self._setup_navigation),
            ("actions", self._setup_actions),
            ("map", self._start_map),
            ("weather", self._start_weather),
            ("events", self.load_events),
            ("color_scheme", self._check_color_scheme),
            ("background", self._register_background),
        ]

    def _setup_navigation(self) -> None:
        self.state.nav_sections = NAV_SECTIONS
        self.state.nav_open = False

    def _setup_actions(self) -> None:
        self._actions = {
            "select_filter": self.select_filter,
            "join_event": self.join_event,
            "create_event": self.create_event,
            "locate": self.locate,
            "refresh_weather": self.refresh_weather,
            "join_movement": self.join_movement,
            "toggle_navigation": self.toggle_navigation,
            "close_navigation": self.close_navigation,
        }

    def _start_map(self) -> None:
        logger.info("[app] map centred on organising location (%.6f, %.6f)", self.map.lat, self.map.lon)
        self._spawn("location", self.locate())

    def _start_weather(self) -> None:
        self._spawn("weather", self.refresh_weather())

    def _check_color_scheme(self) -> None:
        self.state.is_dark_mode = self.settings.color_scheme == "dark"

    async def _register_background(self) -> None:
        if self.register_worker is None:
            logger.debug("[app] no background worker host; skipping registration")
            return
        try:
            result = self.register_worker(self.settings.worker_script)
            if inspect.isawaitable(result):
                await result
        except Exception as exc:
            logger.info("[app] background worker registration failed: %s", exc)
            return
        self.state.background_registered = True

    def _spawn(self, name: str, coro) -> None:
        self._pending.append(asyncio.create_task(self._guarded(name, coro), name=name))

    async def _guarded(self, name: str, coro) -> None:
        # Nobody awaits these tasks while the app is serving, so failures are reported here.
        try:
            await coro
        except Exception as exc:
            logger.error("[app] background task '%s' failed: %r", name, exc)
            self.notifications.inline_error(GENERIC_ERROR_MESSAGE)

    async def _drain_pending(self) -> None:
        pending, self._pending = self._pending, []
        await asyncio.gather(*pending, return_exceptions=True)

    # ------------------------------------------------------------------ #
    # Actions
    # ------------------------------------------------------------------ #

    async def dispatch(self, action: str, **payload) -> Any:
        """Run a user action, surfacing failures instead of letting them escape raw.

        ``ValidationFailure`` and ``EventNotFound`` are re-raised after the
        user has been told; anything else becomes ``ActionFailed``.
        """
        try:
            handler = self._actions[action]
        except KeyError:
            raise KeyError(f"Unknown action '{action}'") from None
        try:
            result = handler(**payload)
            if inspect.isawaitable(result):
                result = await result
            return result
        except ValidationFailure as exc:
            for message in exc.errors.values():
                self.notifications.inline_error(message)
            raise
        except EventNotFound:
            raise
        except Exception as exc:
            logger.exception("[app] action '%s' failed", action)
            self.notifications.inline_error(GENERIC_ERROR_MESSAGE)
            raise ActionFailed(action) from exc

    def load_events(self) -> EventListing:
        if not len(self.store):
            self.store.seed(load_demo_events(self._today()))
        return self.render_events()

    def render_events(self) -> EventListing:
        now = self.clock()
        selected = self.state.selected_filter
        events = filter_events(self.store.all(), selected, now)
        if not events:
            return EventListing(selected_filter=selected, records=[], empty_message=EMPTY_STATE_MESSAGE)
        origin = None
        if self.state.location is not None:
            origin = (self.state.location.latitude, self.state.location.longitude)
        return EventListing(
            selected_filter=selected,
            records=[present(event, now, origin) for event in events],
        )

    def select_filter(self, selector) -> EventListing:
        try:
            self.state.selected_filter = parse_selector(selector)
        except ValueError as exc:
            raise ValidationFailure({"filter": str(exc)}) from exc
        return self.render_events()

    def join_event(self, event_id: int) -> Event:
        if not self.store.increment_participants(event_id):
            self.notifications.toast("Event not found", Severity.WARNING)
            raise EventNotFound(event_id)
        event = self.store.get(event_id)
        self.notifications.toast(f'✨ You joined "{event.name}"! Welcome to the crew!')
        return event

    def create_event(self, form: Mapping) -> Event:
        draft = validate_event_form(form, today=self._today(), location=self.state.location)
        event = self.store.insert_front(draft)
        logger.info("[app] event created id=%d name=%r", event.id, event.name)
        self.notifications.toast(f'🎉 Event "{event.name}" created successfully!')
        return event

    async def locate(self, source: Optional[PositionSource] = None) -> GeoResult:
        self.state.loading["location"] = True
        try:
            result = await self.locator.acquire(source)
        finally:
            self.state.loading["location"] = False
        if result.ok:
            self.state.location = result.fix
            self.map.center_on(result.fix)
        return result

    async def refresh_weather(self) -> List[ForecastDay]:
        self.state.loading["weather"] = True
        self.notifications.loading_overlay(True, "Fetching weather...")
        try:
            days = await self.weather.fetch_forecast()
        finally:
            self.state.loading["weather"] = False
            self.notifications.loading_overlay(False)
        self.state.forecast = list(days)
        self.state.forecast_is_fallback = self.weather.last_was_fallback
        return self.state.forecast

    def join_movement(self) -> str:
        message = "🌍 Thanks for joining the movement! Check out our events!"
        self.notifications.toast(message, Severity.SUCCESS)
        return message

    def toggle_navigation(self) -> bool:
        self.state.nav_open = not self.state.nav_open
        return self.state.nav_open

    def close_navigation(self) -> bool:
        self.state.nav_open = False
        return self.state.nav_open

    def _today(self) -> date:
        return self.clock().date()


def _configured_position_source(settings: Settings) -> Optional[PositionSource]:
    if settings.static_lat is None or settings.static_lon is None:
        return None
    return StaticPositionSource(settings.static_lat, settings.static_lon)
