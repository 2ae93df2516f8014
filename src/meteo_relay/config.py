"""Configuration settings for the weather relay service."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# Provider configuration
GEOCODING_API_URL: str = os.getenv("GEOCODING_API_URL", "https://geocoding-api.open-meteo.com/v1/search")
FORECAST_API_URL: str = os.getenv("FORECAST_API_URL", "https://api.open-meteo.com/v1/forecast")
USER_AGENT: str = os.getenv("USER_AGENT", "MeteoRelay/0.1")
PROVIDER_NAME: Final[str] = "open-meteo"

# Lookup settings
GEOCODING_RESULT_COUNT: Final[int] = 5
CURRENT_WEATHER_METRICS: Final[str] = "temperature_2m,weather_code,wind_speed_10m"
DEFAULT_FORECAST_TIMEZONE: Final[str] = "auto"

# Server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "3000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Hosted runs export the app without binding a local listener
APP_ENV: str = os.getenv("APP_ENV", "development")
SERVERLESS: bool = APP_ENV.lower() == "production"

# Cross-origin permission layer
CORS_ENABLED: bool = os.getenv("CORS_ENABLED", "true").lower() == "true"
CORS_ALLOW_ORIGIN: Final[str] = "*"
CORS_ALLOW_METHODS: Final[str] = "GET,POST,OPTIONS"
CORS_ALLOW_HEADERS: Final[str] = "Content-Type,Accept,X-Requested-With"
