# core/services/soil_zones.py
import logging
from typing import Iterable, Tuple

from ..models.domain import Coordinate, SoilZone

logger = logging.getLogger(__name__)

# Most specific zones first; the global "Generic Zone" must stay last.
DEFAULT_SOIL_ZONES: Tuple[SoilZone, ...] = (
    SoilZone(
        name="North India - Alluvial",
        lat_min=20, lat_max=32,
        lon_min=73, lon_max=90,
        soil_type="Alluvial",
        ph_range="6.5 - 7.5",
        organic_carbon="Medium",
    ),
    SoilZone(
        name="Peninsular - Red/Loamy",
        lat_min=10, lat_max=20,
        lon_min=73, lon_max=85,
        soil_type="Red & Loamy",
        ph_range="6.0 - 7.0",
        organic_carbon="Low-Medium",
    ),
    SoilZone(
        name="Generic Zone",
        lat_min=-90, lat_max=90,
        lon_min=-180, lon_max=180,
        soil_type="Mixed",
        ph_range="6.0 - 7.5",
        organic_carbon="Medium",
    ),
)


class SoilZoneCatalog:
    """Ordered rectangle table resolving a coordinate to its soil zone."""

    def __init__(self, zones: Iterable[SoilZone] = DEFAULT_SOIL_ZONES):
        zones = tuple(zones)
        if not zones or not zones[-1].is_global:
            raise ValueError("the last soil zone must cover the whole globe")
        self._zones = zones

    def resolve(self, coord: Coordinate) -> SoilZone:
        for zone in self._zones:
            if zone.contains(coord):
                logger.debug(
                    "Soil zone for (%.4f, %.4f): %s",
                    coord.latitude, coord.longitude, zone.name,
                )
                return zone
        # unreachable for valid coordinates, kept so resolve never raises
        return self._zones[-1]
