"""
Soil zone and crop recommendation lookups (no network involved).
"""
from typing import Optional

from fastapi import APIRouter, Depends

from soilsense.app.di import get_crop_rules, get_zone_classifier
from soilsense.app.schemas import RecommendationsResponse, SoilResponse
from soilsense.core.errors import ValidationError
from soilsense.core.models.domain import Coordinate
from soilsense.core.services.crop_rules import CropRuleTable
from soilsense.core.services.soil_classifier import ZoneTableClassifier

router = APIRouter(tags=["soil"], prefix="/api")

@router.get("/soil", response_model=SoilResponse)
async def soil(lat: Optional[str] = None,
               lon: Optional[str] = None,
               classifier: ZoneTableClassifier = Depends(get_zone_classifier)):
    coord = Coordinate.parse(lat, lon)
    return SoilResponse.from_zone(classifier.zone(coord))

@router.get("/recommendations", response_model=RecommendationsResponse)
async def recommendations(soilType: Optional[str] = None,
                          rules: CropRuleTable = Depends(get_crop_rules)):
    if not soilType or not soilType.strip():
        raise ValidationError("soilType is required")
    # echo what was asked for, even when the Mixed list is served
    return RecommendationsResponse(soilType=soilType, crops=list(rules.lookup(soilType)))
