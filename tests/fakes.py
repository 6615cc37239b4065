"""Fake weather provider and snapshot builder shared by the tests."""

from soilsense.core.models.domain import WeatherSnapshot


class FakeWeather:
    """Canned weather provider that records every coordinate it is asked for."""

    def __init__(self, snapshot=None, error=None):
        self.snapshot = snapshot
        self.error = error
        self.calls = []

    async def fetch(self, coord):
        self.calls.append(coord)
        if self.error is not None:
            raise self.error
        return self.snapshot


def make_snapshot(**overrides):
    values = {
        "temperature": 27.0,
        "humidity": 80.0,
        "max_temp": 29.0,
        "min_temp": 25.0,
        "precipitation": 25.0,
        "description": "moderate rain",
        "location_name": "Delhi, IN",
        "place": "Delhi",
    }
    values.update(overrides)
    return WeatherSnapshot(**values)
