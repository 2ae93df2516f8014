"""Errors raised by the weather lookup pipeline."""

from typing import Any, Dict, Optional

from meteo_relay.weather.models import ErrorResponse


class WeatherLookupError(Exception):
    """Base error carrying the HTTP status and body it maps to."""

    status_code: int = 500
    message: str = "Server error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)
        self.detail = detail

    def to_response(self) -> Dict[str, Any]:
        """Build the JSON error body.

        Returns:
            Error body, with ``detail`` only when one was given
        """
        return ErrorResponse(error=self.message, detail=self.detail).model_dump(exclude_none=True)


class ValidationError(WeatherLookupError):
    """Raised when city or country is missing."""
    status_code = 400
    message = "Missing city or country"


class NotFoundError(WeatherLookupError):
    """Raised when the geocoding provider has no candidates."""
    status_code = 404
    message = "Location not found"


class InternalError(WeatherLookupError):
    """Raised for any downstream or internal failure."""
    status_code = 500
    message = "Server error"

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InternalError":
        """Wrap an unexpected exception, keeping its message as detail."""
        return cls(str(exc) or type(exc).__name__)
