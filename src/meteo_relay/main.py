"""Main FastAPI application for the weather relay service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI

from meteo_relay.api.endpoints import router as weather_router
from meteo_relay.config import HOST, PORT, DEBUG, APP_ENV, SERVERLESS, CORS_ENABLED
from meteo_relay.logging_config import configure_logging
from meteo_relay.middleware.cors import AllowAllCorsMiddleware

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info(f"Starting Meteo Relay Service (env={APP_ENV})")
    try:
        yield
    finally:
        logger.info("Shutting down Meteo Relay Service")


def create_app(cors_enabled: bool = CORS_ENABLED) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        cors_enabled: Install the cross-origin permission layer

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Meteo Relay Service",
        description="Looks up a city with Open-Meteo geocoding and returns its current weather",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    if cors_enabled:
        app.add_middleware(AllowAllCorsMiddleware)

    # Include API routers
    app.include_router(weather_router)

    return app


# Create app instance for uvicorn and hosted runtimes
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    if SERVERLESS:
        logger.info("Production environment detected, app is exported as meteo_relay.main:app without a local listener")
        return

    logger.info(f"Weather service running on http://{HOST}:{PORT}")
    uvicorn.run(
        "meteo_relay.main:app" if DEBUG else app,
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()
