from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Literal, Optional

from ..errors import ValidationError

SeasonCategory = Literal["Kharif", "Rabi", "Zaid"]


# Domain models for the advisory logic
class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @classmethod
    def parse(cls, lat: Any, lon: Any) -> "Coordinate":
        """
        Build a coordinate from raw query values.

        Raises ValidationError when either value is missing, not a number
        or outside the WGS84 range.
        """
        if lat is None or lon is None or str(lat).strip() == "" or str(lon).strip() == "":
            raise ValidationError("lat and lon are required")
        try:
            latitude = float(lat)
            longitude = float(lon)
        except (TypeError, ValueError):
            raise ValidationError("lat and lon must be numbers")
        # float() accepts "nan" and "inf"; neither is a place on earth
        if latitude != latitude or longitude != longitude:
            raise ValidationError("lat and lon must be numbers")
        if not -90 <= latitude <= 90:
            raise ValidationError(f"Latitude {latitude} out of range [-90, 90]")
        if not -180 <= longitude <= 180:
            raise ValidationError(f"Longitude {longitude} out of range [-180, 180]")
        return cls(latitude=latitude, longitude=longitude)


class SoilZone(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float
    soil_type: str
    ph_range: str
    organic_carbon: str

    def contains(self, coord: Coordinate) -> bool:
        # inclusive on every edge
        return (
            self.lat_min <= coord.latitude <= self.lat_max
            and self.lon_min <= coord.longitude <= self.lon_max
        )

    @property
    def is_global(self) -> bool:
        return (
            self.lat_min <= -90 and self.lat_max >= 90
            and self.lon_min <= -180 and self.lon_max >= 180
        )


class CropRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    ideal_season: str = Field(..., alias="idealSeason")
    sowing: str
    growing: str
    harvest: str


class WeatherSnapshot(BaseModel):
    temperature: float
    humidity: float
    max_temp: float
    min_temp: float
    precipitation: float = 0.0     # mm over the last hour
    description: str = "No description"
    location_name: str = "Unknown, "
    place: Optional[str] = None    # raw provider place name


class SoilProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    soil_type: str
    ph: float


class AdvisoryWeather(BaseModel):
    temperature: float
    humidity: float
    rainfall: float


class AdvisorySoil(BaseModel):
    type: str
    ph: float


class AdvisoryRecommendation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    crop_category: SeasonCategory = Field(..., alias="cropCategory")
    confidence: str = "High"


class Advisory(BaseModel):
    location: Optional[str] = None
    weather: AdvisoryWeather
    soil: AdvisorySoil
    recommendation: AdvisoryRecommendation
