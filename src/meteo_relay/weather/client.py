"""HTTP client for the Open-Meteo geocoding and forecast APIs."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from meteo_relay.config import (
    GEOCODING_API_URL, FORECAST_API_URL, USER_AGENT,
    GEOCODING_RESULT_COUNT, CURRENT_WEATHER_METRICS, DEFAULT_FORECAST_TIMEZONE
)
from meteo_relay.weather.models import ForecastResponse, GeocodingResponse

logger = logging.getLogger(__name__)


class OpenMeteoClient:
    """Async client for fetching locations and current weather from Open-Meteo."""

    def __init__(
        self,
        geocoding_url: str = GEOCODING_API_URL,
        forecast_url: str = FORECAST_API_URL,
        user_agent: str = USER_AGENT,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the Open-Meteo client.

        Args:
            geocoding_url: Geocoding search endpoint
            forecast_url: Forecast endpoint
            user_agent: User-Agent header for API requests
            http_client: Preconfigured httpx client (creates default if None)
        """
        self.geocoding_url = geocoding_url
        self.forecast_url = forecast_url
        self.user_agent = user_agent
        self.client = http_client or httpx.AsyncClient(headers={"User-Agent": self.user_agent})

    async def search_locations(self, city: str) -> GeocodingResponse:
        """Search for candidate locations matching a city name.

        Args:
            city: City name to search for

        Returns:
            Geocoding response with candidates in provider order

        Raises:
            httpx.HTTPError: If API request fails
            ValidationError: If response format is invalid
            ValueError: If the body is not JSON
        """
        params = {"name": city, "count": GEOCODING_RESULT_COUNT, "format": "json"}

        logger.info(f"Geocoding city: {city}")

        try:
            response = await self.client.get(self.geocoding_url, params=params)
            response.raise_for_status()

            geocoding = GeocodingResponse.model_validate(response.json())
            logger.info(f"Geocoding returned {len(geocoding.results or [])} candidates for '{city}'")
            return geocoding

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from geocoding API: {e.response.status_code} - {e.response.text}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request error to geocoding API: {e}")
            raise
        except ValidationError as e:
            logger.error(f"Invalid geocoding response format: {e}")
            raise
        except ValueError as e:
            logger.error(f"Geocoding API returned invalid JSON: {e}")
            raise

    async def get_current_weather(
        self,
        lat: float,
        lon: float,
        timezone: Optional[str] = None
    ) -> ForecastResponse:
        """Fetch current weather for given coordinates.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees
            timezone: Timezone identifier, ``auto`` is sent when None

        Returns:
            Forecast response holding the provider's current weather

        Raises:
            httpx.HTTPError: If API request fails
            ValidationError: If response format is invalid
            ValueError: If the body is not JSON
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": CURRENT_WEATHER_METRICS,
            "timezone": DEFAULT_FORECAST_TIMEZONE if timezone is None else timezone,
        }

        logger.info(f"Fetching current weather for lat={lat}, lon={lon}, timezone={params['timezone']}")

        try:
            response = await self.client.get(self.forecast_url, params=params)
            response.raise_for_status()

            forecast = ForecastResponse.model_validate(response.json())
            logger.info(f"Successfully fetched current weather with {len(forecast.current)} fields")
            return forecast

        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from forecast API: {e.response.status_code} - {e.response.text}")
            raise
        except httpx.RequestError as e:
            logger.error(f"Request error to forecast API: {e}")
            raise
        except ValidationError as e:
            logger.error(f"Invalid forecast response format: {e}")
            raise
        except ValueError as e:
            logger.error(f"Forecast API returned invalid JSON: {e}")
            raise

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
