"""API endpoints for the weather relay service."""

import logging
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from meteo_relay.weather.errors import ValidationError, WeatherLookupError
from meteo_relay.weather.models import ErrorResponse, WeatherLookupResponse, WeatherQuery
from meteo_relay.weather.service import WeatherService

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(tags=["weather"])


async def get_weather_service() -> AsyncGenerator[WeatherService, None]:
    """Dependency yielding a weather service scoped to one request."""
    async with WeatherService() as weather_service:
        yield weather_service


@router.get(
    "/weather",
    response_model=WeatherLookupResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing city or country"},
        404: {"model": ErrorResponse, "description": "Location not found"},
        500: {"model": ErrorResponse, "description": "Provider or internal failure"},
    }
)
async def get_current_weather(
    city: Optional[str] = Query(None, description="City name"),
    country: Optional[str] = Query(None, description="Two-letter country code"),
    weather_service: WeatherService = Depends(get_weather_service)
):
    """Get current weather for a city within a country.

    Args:
        city: City name
        country: Country code, matched case-insensitively
        weather_service: Request-scoped weather service

    Returns:
        WeatherLookupResponse, or an ErrorResponse body with 400/404/500
    """
    try:
        query = validate_weather_parameters(city, country)
        result = await weather_service.lookup(query)

        logger.info(f"Successfully retrieved weather for '{result.location.name}'")
        return result

    except WeatherLookupError as e:
        return JSONResponse(status_code=e.status_code, content=e.to_response())


def validate_weather_parameters(city: Optional[str], country: Optional[str]) -> WeatherQuery:
    """
    Validate and normalize weather request parameters.

    Args:
        city: City name
        country: Country code

    Returns:
        WeatherQuery with trimmed city and uppercased country

    Raises:
        ValidationError: If either value is missing or blank
    """
    city = (city or "").strip()
    country = (country or "").strip().upper()

    if not city or not country:
        logger.warning(f"Rejected weather request: city={city!r}, country={country!r}")
        raise ValidationError()

    return WeatherQuery(city=city, country=country)


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": "meteo-relay"}
