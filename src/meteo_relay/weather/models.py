"""Data models for the weather relay service."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class WeatherQuery(BaseModel):
    """Normalized inbound lookup query."""
    city: str = Field(..., min_length=1, description="Trimmed city name")
    country: str = Field(..., min_length=1, description="Uppercased country code")


class GeoResult(BaseModel):
    """One ranked candidate from the Open-Meteo geocoding API."""
    name: str = Field(..., description="Place name")
    latitude: Union[int, float] = Field(..., description="Latitude in decimal degrees")
    longitude: Union[int, float] = Field(..., description="Longitude in decimal degrees")
    country: Optional[str] = Field(None, description="Country name")
    country_code: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 code")
    timezone: Optional[str] = Field(None, description="IANA timezone identifier")


class GeocodingResponse(BaseModel):
    """Raw response from the Open-Meteo geocoding API."""
    results: Optional[List[GeoResult]] = Field(None, description="Candidates in provider order, absent or null when nothing matched")


class ForecastResponse(BaseModel):
    """Raw response from the Open-Meteo forecast API."""
    current: Dict[str, Any] = Field(..., description="Current weather metrics")


class LocationInfo(BaseModel):
    """Location information model."""
    name: str = Field(..., description="Place name")
    country: Optional[str] = Field(None, description="Country name")
    lat: Union[int, float] = Field(..., description="Latitude in decimal degrees")
    lon: Union[int, float] = Field(..., description="Longitude in decimal degrees")
    timezone: Optional[str] = Field(None, description="Timezone identifier")

    @classmethod
    def from_geo_result(cls, result: GeoResult) -> "LocationInfo":
        return cls(
            name=result.name,
            country=result.country,
            lat=result.latitude,
            lon=result.longitude,
            timezone=result.timezone,
        )


class WeatherLookupResponse(BaseModel):
    """Weather lookup response model."""
    location: LocationInfo = Field(..., description="Resolved location")
    weather: Dict[str, Any] = Field(..., description="Current weather as returned by the provider")
    provider: str = Field(..., description="Upstream data provider")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
