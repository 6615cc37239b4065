from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from soilsense.core.models.domain import CropRecommendation, WeatherSnapshot, SoilZone


# ---------- Response models ----------

class WeatherResponse(BaseModel):
    temperature: float
    humidity: float
    maxTemp: float
    minTemp: float
    precipitation: float = 0.0
    description: str
    locationName: str

    @classmethod
    def from_snapshot(cls, wx: WeatherSnapshot) -> "WeatherResponse":
        return cls(
            temperature=wx.temperature,
            humidity=wx.humidity,
            maxTemp=wx.max_temp,
            minTemp=wx.min_temp,
            precipitation=wx.precipitation,
            description=wx.description,
            locationName=wx.location_name,
        )

class SoilResponse(BaseModel):
    region: str
    soilType: str
    phRange: str
    organicCarbon: str

    @classmethod
    def from_zone(cls, zone: SoilZone) -> "SoilResponse":
        return cls(
            region=zone.name,
            soilType=zone.soil_type,
            phRange=zone.ph_range,
            organicCarbon=zone.organic_carbon,
        )

class RecommendationsResponse(BaseModel):
    soilType: str
    crops: List[CropRecommendation] = Field(default_factory=list)


# ---------- Record models (schemes / users) ----------

class Scheme(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    tagline: Optional[str] = None
    shortNote: Optional[str] = None
    focusAreas: List[str] = Field(default_factory=list)
    eligibility: Optional[str] = None
    support: Optional[str] = None
    howItHelps: Optional[str] = None
    learnMoreUrl: Optional[str] = None
    imageUrl: str = ""
    logoUrl: str = ""

class UserResponse(BaseModel):
    success: bool = True
    user: Dict[str, Any]
