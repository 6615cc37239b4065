# core/services/advisory.py
import logging
import time
from typing import Optional

from ..adapters.base import SoilClassifier, WeatherProvider
from ..errors import ProviderError, ValidationError
from ..models.domain import (
    Advisory,
    AdvisoryRecommendation,
    AdvisorySoil,
    AdvisoryWeather,
    Coordinate,
    SeasonCategory,
)
from .soil_classifier import CoordinateHeuristicClassifier

logger = logging.getLogger(__name__)

FIXED_CONFIDENCE = "High"

# Season thresholds (degC, mm over the last hour)
KHARIF_MIN_TEMP_C = 25.0
KHARIF_MIN_RAIN_MM = 20.0
ZAID_MIN_TEMP_C = 30.0


def t(): return time.perf_counter()


def classify_season(temperature: float, precipitation: float) -> SeasonCategory:
    """
    Cropping season suggested by current conditions.

    Warm and wet -> Kharif; hot but dry -> Zaid; anything else -> Rabi.
    Bounds are strict: 25 degC with 30 mm of rain is still Rabi.
    """
    if temperature > KHARIF_MIN_TEMP_C and precipitation > KHARIF_MIN_RAIN_MM:
        return "Kharif"
    if temperature > ZAID_MIN_TEMP_C:
        return "Zaid"
    return "Rabi"


class AdvisoryEngine:
    """Combines live weather with a soil classifier into one advisory."""

    def __init__(
        self,
        weather: WeatherProvider,
        soil: Optional[SoilClassifier] = None,
    ):
        self.weather = weather
        self.soil = soil or CoordinateHeuristicClassifier()

    async def build_advisory(self, coord: Optional[Coordinate]) -> Advisory:
        if coord is None or coord.latitude is None or coord.longitude is None:
            raise ValidationError("Latitude & Longitude required")

        start = t()
        try:
            wx = await self.weather.fetch(coord)
        except ProviderError as e:
            logger.warning(
                "Advisory aborted for (%.4f, %.4f): weather %s (%s)",
                coord.latitude, coord.longitude, e.kind, e.message,
            )
            raise

        profile = self.soil.classify(coord)
        season = classify_season(wx.temperature, wx.precipitation)

        logger.info(
            "Advisory for (%.4f, %.4f): soil=%s season=%s in %dms",
            coord.latitude, coord.longitude, profile.soil_type, season,
            round((t() - start) * 1000),
        )

        return Advisory(
            location=wx.place,
            weather=AdvisoryWeather(
                temperature=wx.temperature,
                humidity=wx.humidity,
                rainfall=wx.precipitation,
            ),
            soil=AdvisorySoil(type=profile.soil_type, ph=profile.ph),
            recommendation=AdvisoryRecommendation(
                crop_category=season,
                confidence=FIXED_CONFIDENCE,
            ),
        )
