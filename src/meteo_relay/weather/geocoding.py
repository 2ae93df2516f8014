"""Location resolution for weather lookups."""

import logging
from typing import Sequence

from meteo_relay.weather.client import OpenMeteoClient
from meteo_relay.weather.errors import NotFoundError
from meteo_relay.weather.models import GeoResult

logger = logging.getLogger(__name__)


def select_location(candidates: Sequence[GeoResult], country: str) -> GeoResult:
    """Pick the candidate whose country code matches, else the first one.

    Args:
        candidates: Non-empty candidates in provider order
        country: Uppercased country code from the query

    Returns:
        Selected candidate
    """
    for candidate in candidates:
        if candidate.country_code is not None and candidate.country_code.upper() == country:
            return candidate

    logger.info(f"No candidate in country '{country}', falling back to '{candidates[0].name}'")
    return candidates[0]


class GeocodingService:
    """Service resolving a city and country to one location."""

    def __init__(self, client: OpenMeteoClient):
        self.client = client

    async def resolve_location(self, city: str, country: str) -> GeoResult:
        """Resolve a city and country to the best matching candidate.

        Args:
            city: City name
            country: Uppercased country code

        Returns:
            Selected candidate

        Raises:
            NotFoundError: If the provider returns no candidates
        """
        geocoding = await self.client.search_locations(city)

        if not geocoding.results:
            logger.info(f"No location found for '{city}'")
            raise NotFoundError()

        location = select_location(geocoding.results, country)
        logger.info(f"Resolved '{city}, {country}' to '{location.name}' ({location.latitude}, {location.longitude})")
        return location
