# core/services/soil_classifier.py
"""
Two independent ways of naming the soil under a coordinate.

ZoneTableClassifier answers from the SoilZoneCatalog rectangles (used by
the standalone /soil query). CoordinateHeuristicClassifier applies the
quick lat/lon rules used by the combined soil-weather advisory. They give
different answers for the same point and are kept apart on purpose.
"""
from typing import Optional

from ..models.domain import Coordinate, SoilProfile, SoilZone
from .soil_zones import SoilZoneCatalog

HEURISTIC_SOIL_PH = 6.7
HEURISTIC_DEFAULT_SOIL = "Loamy"


def _ph_midpoint(ph_range: str) -> Optional[float]:
    """'6.5 - 7.5' -> 7.0; None when the range text is not two numbers."""
    parts = [p.strip() for p in ph_range.split("-")]
    try:
        low, high = (float(p) for p in parts)
    except ValueError:
        return None
    return round((low + high) / 2, 2)


class ZoneTableClassifier:
    def __init__(self, catalog: Optional[SoilZoneCatalog] = None):
        self.catalog = catalog or SoilZoneCatalog()

    def zone(self, coord: Coordinate) -> SoilZone:
        return self.catalog.resolve(coord)

    def classify(self, coord: Coordinate) -> SoilProfile:
        zone = self.zone(coord)
        return SoilProfile(soil_type=zone.soil_type, ph=_ph_midpoint(zone.ph_range) or HEURISTIC_SOIL_PH)


class CoordinateHeuristicClassifier:
    """Indian soil belts by coarse lat/lon cut-offs, first rule wins."""

    def __init__(self, ph: float = HEURISTIC_SOIL_PH):
        self.ph = ph

    def soil_type(self, coord: Coordinate) -> str:
        lat, lon = coord.latitude, coord.longitude
        if lat > 25 and lon < 80:
            return "Alluvial"
        if lat < 20:
            return "Red Soil"
        if lon > 85:
            return "Laterite"
        return HEURISTIC_DEFAULT_SOIL

    def classify(self, coord: Coordinate) -> SoilProfile:
        return SoilProfile(soil_type=self.soil_type(coord), ph=self.ph)
