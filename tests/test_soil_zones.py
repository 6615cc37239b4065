"""Tests for the soil zone table and the two soil classifiers."""

import pytest

from soilsense.core.models.domain import Coordinate, SoilZone
from soilsense.core.services.soil_classifier import (
    CoordinateHeuristicClassifier,
    ZoneTableClassifier,
)
from soilsense.core.services.soil_zones import DEFAULT_SOIL_ZONES, SoilZoneCatalog


class TestSoilZoneCatalog:
    def test_delhi_is_north_india_alluvial(self):
        zone = SoilZoneCatalog().resolve(Coordinate(latitude=28, longitude=77))
        assert zone.name == "North India - Alluvial"
        assert zone.soil_type == "Alluvial"

    def test_peninsular_point(self):
        zone = SoilZoneCatalog().resolve(Coordinate(latitude=12, longitude=78))
        assert zone.name == "Peninsular - Red/Loamy"
        assert zone.soil_type == "Red & Loamy"
        assert zone.organic_carbon == "Low-Medium"

    def test_outside_every_specific_zone_falls_to_catch_all(self):
        catalog = SoilZoneCatalog()
        for lat, lon in [(51.5, -0.12), (-33.9, 151.2), (90, 180), (-90, -180), (0, 0)]:
            zone = catalog.resolve(Coordinate(latitude=lat, longitude=lon))
            assert zone.name == "Generic Zone"
            assert zone.soil_type == "Mixed"

    def test_bounds_are_inclusive(self):
        catalog = SoilZoneCatalog()
        assert catalog.resolve(Coordinate(latitude=32, longitude=90)).name == "North India - Alluvial"
        assert catalog.resolve(Coordinate(latitude=10, longitude=73)).name == "Peninsular - Red/Loamy"

    def test_shared_edge_goes_to_first_declared_zone(self):
        # lat 20 belongs to both rectangles; declaration order decides
        zone = SoilZoneCatalog().resolve(Coordinate(latitude=20, longitude=80))
        assert zone.name == "North India - Alluvial"

    def test_every_point_inside_a_zone_resolves_to_it(self):
        catalog = SoilZoneCatalog()
        for zone in DEFAULT_SOIL_ZONES[:-1]:
            mid = Coordinate(
                latitude=(zone.lat_min + zone.lat_max) / 2,
                longitude=(zone.lon_min + zone.lon_max) / 2,
            )
            assert catalog.resolve(mid) == zone

    def test_table_without_catch_all_is_rejected(self):
        with pytest.raises(ValueError):
            SoilZoneCatalog(DEFAULT_SOIL_ZONES[:-1])

    def test_custom_table_order_is_priority(self):
        wide = SoilZone(
            name="Wide", lat_min=0, lat_max=40, lon_min=60, lon_max=100,
            soil_type="Black", ph_range="7.0 - 8.0", organic_carbon="Low",
        )
        catalog = SoilZoneCatalog([wide] + list(DEFAULT_SOIL_ZONES))
        assert catalog.resolve(Coordinate(latitude=28, longitude=77)).name == "Wide"


class TestClassifiers:
    @pytest.mark.parametrize("lat,lon,expected", [
        (28, 77, "Alluvial"),
        (12, 78, "Red Soil"),
        (23, 88, "Laterite"),
        (22, 82, "Loamy"),
        (26, 82, "Loamy"),     # north but east of 80
        (25, 75, "Loamy"),     # lat 25 is not > 25
    ])
    def test_heuristic_rules(self, lat, lon, expected):
        profile = CoordinateHeuristicClassifier().classify(Coordinate(latitude=lat, longitude=lon))
        assert profile.soil_type == expected
        assert profile.ph == 6.7

    def test_strategies_disagree_for_the_same_point(self):
        coord = Coordinate(latitude=12, longitude=78)
        assert ZoneTableClassifier().classify(coord).soil_type == "Red & Loamy"
        assert CoordinateHeuristicClassifier().classify(coord).soil_type == "Red Soil"

    def test_zone_classifier_ph_is_range_midpoint(self):
        profile = ZoneTableClassifier().classify(Coordinate(latitude=28, longitude=77))
        assert profile.ph == 7.0
