from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import httpx

from shoresquad.config import NEA_FORECAST_URL
from shoresquad.domain.errors import NetworkFailure


class NeaForecastClient:
    """Thin async client for the NEA 4-day weather forecast endpoint."""

    def __init__(
        self,
        url: str = NEA_FORECAST_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def fetch_items(self) -> List[dict]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(self.url, headers={"Accept": "application/json"})
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise NetworkFailure(f"forecast endpoint returned {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise NetworkFailure(f"forecast request failed: {exc}") from exc
        except ValueError as exc:
            raise NetworkFailure("forecast payload is not valid JSON") from exc
        if not isinstance(data, dict):
            raise NetworkFailure(f"unexpected forecast payload type: {type(data).__name__}")
        items = data.get("items")
        if not items:
            raise NetworkFailure("forecast payload has no items")
        return list(items)

    @staticmethod
    def parse_time(value: str) -> datetime:
        if value.endswith("Z"):
            value = value.replace("Z", "+00:00")
        return datetime.fromisoformat(value)
