"""
Shared fixtures. No test touches the network: the weather provider is
replaced by FakeWeather or driven through httpx.MockTransport.
"""

import pytest
from fastapi.testclient import TestClient

from soilsense.core.errors import ProviderError
from fakes import FakeWeather, make_snapshot


@pytest.fixture
def fake_weather():
    return FakeWeather(snapshot=make_snapshot())


@pytest.fixture
def failing_weather():
    return FakeWeather(error=ProviderError(
        ProviderError.UPSTREAM_STATUS,
        "Weather API error",
        status_code=401,
        details={"cod": 401, "message": "Invalid API key."},
    ))


@pytest.fixture
def app():
    from soilsense.app.main import app as fastapi_app
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app, fake_weather):
    from soilsense.app.di import get_weather_client

    app.dependency_overrides[get_weather_client] = lambda: fake_weather
    return TestClient(app, raise_server_exceptions=False)
