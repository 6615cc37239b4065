"""
/api/soil-weather: combined weather + soil + season advisory
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from soilsense.app.di import get_advisory_engine
from soilsense.core.errors import ProviderError
from soilsense.core.models.domain import Advisory, Coordinate
from soilsense.core.services.advisory import AdvisoryEngine

logger = logging.getLogger(__name__)

router = APIRouter(tags=["advisory"], prefix="/api")

@router.get("/soil-weather", response_model=Advisory, responses={500: {"description": "Weather API failed"}})
async def soil_weather(lat: Optional[str] = None,
                       lon: Optional[str] = None,
                       engine: AdvisoryEngine = Depends(get_advisory_engine)):
    """
    Weather is mandatory here: any provider failure answers 500 and no
    partial advisory is returned.
    """
    coord = Coordinate.parse(lat, lon)
    try:
        return await engine.build_advisory(coord)
    except ProviderError as e:
        logger.error("soil-weather failed for (%s, %s): %r", lat, lon, e)
        return JSONResponse(status_code=500, content={"message": "Weather API failed"})
