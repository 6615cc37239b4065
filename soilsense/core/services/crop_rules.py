# core/services/crop_rules.py
from types import MappingProxyType
from typing import Mapping, Sequence, Tuple

from ..models.domain import CropRecommendation

FALLBACK_SOIL_TYPE = "Mixed"


def _crop(name: str, season: str, sowing: str, growing: str, harvest: str) -> CropRecommendation:
    return CropRecommendation(
        name=name, ideal_season=season,
        sowing=sowing, growing=growing, harvest=harvest,
    )


DEFAULT_CROP_RULES: Mapping[str, Tuple[CropRecommendation, ...]] = MappingProxyType({
    "Alluvial": (
        _crop("Wheat", "Rabi", "Nov–Dec", "Dec–Feb", "Mar–Apr"),
        _crop("Paddy", "Kharif", "Jun–Jul", "Jul–Sep", "Oct–Nov"),
        _crop("Sugarcane", "Perennial", "Feb–Apr", "Year-round", "12–16 months after sowing"),
    ),
    "Red & Loamy": (
        _crop("Groundnut", "Kharif", "Jun–Jul", "Jul–Sep", "Oct–Nov"),
        _crop("Millets (Bajra)", "Kharif", "Jun–Jul", "Jul–Sep", "Sep–Oct"),
    ),
    FALLBACK_SOIL_TYPE: (
        _crop("Pulses (Gram)", "Rabi", "Oct–Nov", "Nov–Feb", "Feb–Mar"),
    ),
})


class CropRuleTable:
    """Soil type -> candidate crops, in presentation order."""

    def __init__(self, rules: Mapping[str, Sequence[CropRecommendation]] = DEFAULT_CROP_RULES):
        if FALLBACK_SOIL_TYPE not in rules:
            raise ValueError(f"crop rules need a '{FALLBACK_SOIL_TYPE}' entry")
        self._rules = MappingProxyType({k: tuple(v) for k, v in rules.items()})

    def lookup(self, soil_type: str) -> Tuple[CropRecommendation, ...]:
        """Crops for soil_type; unknown types get the Mixed list."""
        return self._rules.get(soil_type) or self._rules[FALLBACK_SOIL_TYPE]
