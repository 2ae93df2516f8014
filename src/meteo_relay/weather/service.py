"""Weather service merging geocoding and current weather."""

import logging
from typing import Optional

from meteo_relay.config import PROVIDER_NAME
from meteo_relay.weather.client import OpenMeteoClient
from meteo_relay.weather.errors import InternalError, NotFoundError
from meteo_relay.weather.geocoding import GeocodingService
from meteo_relay.weather.models import LocationInfo, WeatherLookupResponse, WeatherQuery

logger = logging.getLogger(__name__)


class WeatherService:
    """Service for looking up current weather by city and country."""

    def __init__(
        self,
        client: Optional[OpenMeteoClient] = None,
        geocoding_service: Optional[GeocodingService] = None
    ):
        """Initialize the weather service.

        Args:
            client: Open-Meteo client instance (creates default if None)
            geocoding_service: Geocoding service instance (built on ``client`` if None)
        """
        self.client = client or OpenMeteoClient()
        self.geocoding_service = geocoding_service or GeocodingService(self.client)

    async def lookup(self, query: WeatherQuery) -> WeatherLookupResponse:
        """
        Resolve the query to a location and fetch its current weather.

        The forecast call only happens once a location is resolved.

        Args:
            query: Normalized city and country

        Returns:
            WeatherLookupResponse with location and current weather

        Raises:
            NotFoundError: If no location matches the city
            InternalError: On any provider or data failure
        """
        try:
            location = await self.geocoding_service.resolve_location(query.city, query.country)

            forecast = await self.client.get_current_weather(
                lat=location.latitude,
                lon=location.longitude,
                timezone=location.timezone
            )

            return WeatherLookupResponse(
                location=LocationInfo.from_geo_result(location),
                weather=forecast.current,
                provider=PROVIDER_NAME
            )

        except NotFoundError:
            raise
        except Exception as e:
            logger.error(f"Weather lookup failed for '{query.city}, {query.country}': {e}")
            raise InternalError.from_exception(e) from e

    async def aclose(self):
        """Close the Open-Meteo client."""
        if self.client:
            try:
                await self.client.aclose()
            except Exception as e:
                logger.error(f"Error closing Open-Meteo client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
