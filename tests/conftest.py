"""Shared fixtures for the weather relay test suite."""

from typing import Any, Callable, Dict, List
from unittest.mock import AsyncMock

import httpx
import pytest


def make_response(json_data: Any, status_code: int = 200) -> httpx.Response:
    """Build an httpx.Response the way the Open-Meteo APIs would return it."""
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


@pytest.fixture
def mock_http_client() -> Callable[..., AsyncMock]:
    """Factory for an httpx.AsyncClient mock answering GETs in order.

    Each argument is either a JSON payload, an httpx.Response or an
    exception to raise for the corresponding call.
    """
    def _factory(*answers: Any) -> AsyncMock:
        client = AsyncMock(spec=httpx.AsyncClient)
        side_effect: List[Any] = []
        for answer in answers:
            if isinstance(answer, (httpx.Response, BaseException)):
                side_effect.append(answer)
            else:
                side_effect.append(make_response(answer))
        client.get.side_effect = side_effect
        return client

    return _factory


@pytest.fixture
def paris_geocoding() -> Dict[str, Any]:
    """Geocoding payload where the best provider match is not in France."""
    return {
        "results": [
            {
                "id": 4717560,
                "name": "Paris",
                "latitude": 33.66094,
                "longitude": -95.55551,
                "country_code": "US",
                "timezone": "America/Chicago",
                "country": "United States",
            },
            {
                "id": 2988507,
                "name": "Paris",
                "latitude": 48.85341,
                "longitude": 2.3488,
                "country_code": "FR",
                "timezone": "Europe/Paris",
                "country": "France",
            },
        ],
        "generationtime_ms": 0.74,
    }


@pytest.fixture
def current_weather() -> Dict[str, Any]:
    """Forecast payload with a current weather block."""
    return {
        "latitude": 48.86,
        "longitude": 2.3399997,
        "timezone": "Europe/Paris",
        "current_units": {"temperature_2m": "°C", "weather_code": "wmo code", "wind_speed_10m": "km/h"},
        "current": {
            "time": "2026-10-19T12:00",
            "interval": 900,
            "temperature_2m": 14.2,
            "weather_code": 3,
            "wind_speed_10m": 11.5,
        },
    }
