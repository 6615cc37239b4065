# soilsense/app/tools/weather.py
import json
import logging
import time
from typing import Any, Dict, Optional

import httpx
import pydantic

from soilsense.app.config import settings
from soilsense.app.http import get_http_client
from soilsense.core.errors import ProviderError
from soilsense.core.models.domain import Coordinate, WeatherSnapshot

logger = logging.getLogger(__name__)

def t(): return time.perf_counter()


def _decode(r: httpx.Response) -> Any:
    try:
        return r.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return r.text


def _provider_ok(data: Dict[str, Any]) -> bool:
    # OpenWeatherMap repeats the status in "cod", as int on success and
    # sometimes as a string on errors
    cod = data.get("cod")
    return cod is None or str(cod) == "200"


def normalize_current_weather(data: Dict[str, Any]) -> WeatherSnapshot:
    """
    Map an OpenWeatherMap /data/2.5/weather payload onto a WeatherSnapshot.

    Optional blocks (rain, weather, sys, name) are defaulted; a payload
    without the "main" readings raises pydantic.ValidationError.
    """
    main = data.get("main") or {}
    rain = data.get("rain") or {}
    conditions = data.get("weather") or [{}]
    sys_block = data.get("sys") or {}
    place = data.get("name") or None

    return WeatherSnapshot(
        temperature=main.get("temp"),
        humidity=main.get("humidity"),
        max_temp=main.get("temp_max"),
        min_temp=main.get("temp_min"),
        precipitation=rain.get("1h") or 0,
        description=(conditions[0] or {}).get("description") or "No description",
        location_name=f"{place or 'Unknown'}, {sys_block.get('country') or ''}",
        place=place,
    )


class OpenWeatherClient:
    """Current conditions from OpenWeatherMap. One request per call, no retry."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        units: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.OPENWEATHER_API_KEY
        self.url = url or settings.OPENWEATHER_URL
        self.units = units or settings.WEATHER_UNITS
        self._client = client

    async def fetch(self, coord: Coordinate) -> WeatherSnapshot:
        if not self.api_key:
            raise ProviderError(ProviderError.CONFIGURATION, "OPENWEATHER_API_KEY is not set")

        params = {
            "lat": coord.latitude,
            "lon": coord.longitude,
            "units": self.units,
            "appid": self.api_key,
        }

        client = self._client or get_http_client()
        start = t()
        try:
            r = await client.get(self.url, params=params)
        except httpx.HTTPError as e:
            logger.warning(
                "Weather API request failed for (%.4f, %.4f): %s",
                coord.latitude, coord.longitude, e,
            )
            raise ProviderError(ProviderError.TRANSPORT, "Weather API unreachable") from e
        api_ms = round((t() - start) * 1000)

        data = _decode(r)
        logger.info("Weather API status: %s (%dms)", r.status_code, api_ms)
        logger.debug("Weather API raw data: %s", data)

        if not r.is_success:
            raise ProviderError(
                ProviderError.UPSTREAM_STATUS,
                "Weather API error",
                status_code=r.status_code,
                details=data,
            )

        if not isinstance(data, dict) or not _provider_ok(data):
            raise ProviderError(
                ProviderError.LOGICAL_FAILURE,
                "Weather API failed",
                status_code=r.status_code,
                details=data,
            )

        try:
            return normalize_current_weather(data)
        except pydantic.ValidationError as e:
            logger.warning("Weather payload missing readings: %s", e)
            raise ProviderError(
                ProviderError.LOGICAL_FAILURE,
                "Weather API returned incomplete data",
                status_code=r.status_code,
                details=data,
            ) from e
