"""
/api/weather endpoint
"""
from typing import Optional

from fastapi import APIRouter, Depends

from soilsense.app.di import get_weather_client
from soilsense.app.schemas import WeatherResponse
from soilsense.app.tools.weather import OpenWeatherClient
from soilsense.core.models.domain import Coordinate

router = APIRouter(tags=["weather"], prefix="/api")

@router.get("/weather", response_model=WeatherResponse)
async def weather(lat: Optional[str] = None,
                  lon: Optional[str] = None,
                  client: OpenWeatherClient = Depends(get_weather_client)):
    """
    Current conditions for lat/lon. Upstream error statuses are passed
    through with the provider's body under "details".
    """
    coord = Coordinate.parse(lat, lon)
    wx = await client.fetch(coord)
    return WeatherResponse.from_snapshot(wx)
