from typing import Any, Dict, List, Optional, Protocol

from ..models.domain import Coordinate, SoilProfile, WeatherSnapshot


class WeatherProvider(Protocol):
    async def fetch(self, coord: Coordinate) -> WeatherSnapshot:
        """Current weather for coord; raises ProviderError on any failure."""
        ...


class SoilClassifier(Protocol):
    def classify(self, coord: Coordinate) -> SoilProfile:
        """Soil type and pH for coord. Must not fail for a valid coordinate."""
        ...


class DocumentStore(Protocol):
    async def find_all(self) -> List[Dict[str, Any]]:
        ...

    async def insert(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        """Store doc and return the saved record."""
        ...


class UserDirectory(Protocol):
    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        ...

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        ...
