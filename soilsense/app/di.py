"""
Dependency injection container for the application.
Constructs singletons and provides them to routes via FastAPI Depends;
tests swap them with app.dependency_overrides.
"""

from fastapi import Depends

from soilsense.app.stores.memory import InMemoryDocumentStore, InMemoryUserDirectory
from soilsense.app.tools.weather import OpenWeatherClient
from soilsense.core.services.advisory import AdvisoryEngine
from soilsense.core.services.crop_rules import CropRuleTable
from soilsense.core.services.soil_classifier import CoordinateHeuristicClassifier, ZoneTableClassifier
from soilsense.core.services.soil_zones import SoilZoneCatalog

# Singletons - created once and reused
_soil_catalog = None
_crop_rules = None
_weather_client = None
_scheme_store = None
_method_store = None
_user_directory = None

def get_soil_catalog() -> SoilZoneCatalog:
    """Get singleton soil zone table."""
    global _soil_catalog
    if _soil_catalog is None:
        _soil_catalog = SoilZoneCatalog()
    return _soil_catalog

def get_crop_rules() -> CropRuleTable:
    """Get singleton crop rule table."""
    global _crop_rules
    if _crop_rules is None:
        _crop_rules = CropRuleTable()
    return _crop_rules

def get_weather_client() -> OpenWeatherClient:
    """Get singleton weather client (uses the shared HTTP client lazily)."""
    global _weather_client
    if _weather_client is None:
        _weather_client = OpenWeatherClient()
    return _weather_client

def get_zone_classifier() -> ZoneTableClassifier:
    return ZoneTableClassifier(get_soil_catalog())

def get_heuristic_classifier() -> CoordinateHeuristicClassifier:
    return CoordinateHeuristicClassifier()

def get_scheme_store() -> InMemoryDocumentStore:
    """Get singleton scheme store."""
    global _scheme_store
    if _scheme_store is None:
        _scheme_store = InMemoryDocumentStore(key_field="id")
    return _scheme_store

def get_method_store() -> InMemoryDocumentStore:
    """Get singleton sustainable-method store."""
    global _method_store
    if _method_store is None:
        _method_store = InMemoryDocumentStore(key_field="id")
    return _method_store

def get_user_directory() -> InMemoryUserDirectory:
    """Get singleton user directory."""
    global _user_directory
    if _user_directory is None:
        _user_directory = InMemoryUserDirectory()
    return _user_directory

def get_advisory_engine(
    weather: OpenWeatherClient = Depends(get_weather_client),
    soil: CoordinateHeuristicClassifier = Depends(get_heuristic_classifier),
) -> AdvisoryEngine:
    return AdvisoryEngine(weather=weather, soil=soil)
