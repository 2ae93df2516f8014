"""Cross-origin permission middleware."""

import logging
from typing import Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from meteo_relay.config import CORS_ALLOW_ORIGIN, CORS_ALLOW_METHODS, CORS_ALLOW_HEADERS

logger = logging.getLogger(__name__)


class AllowAllCorsMiddleware(BaseHTTPMiddleware):
    """Grant every origin, answer pre-flight requests without routing.

    Adds the fixed CORS headers to each response. OPTIONS requests on any
    path get an empty 204 and never reach the endpoints.
    """

    def __init__(self, app):
        """Initialize CORS middleware.

        Args:
            app: FastAPI application instance
        """
        super().__init__(app)
        self.headers: Dict[str, str] = {
            "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
            "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
            "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
        }
        logger.info(f"CORS enabled: origin={CORS_ALLOW_ORIGIN}, methods={CORS_ALLOW_METHODS}")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Answer pre-flight requests or decorate the downstream response.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/endpoint in chain

        Returns:
            HTTP response carrying the CORS headers
        """
        if request.method == "OPTIONS":
            logger.debug(f"Pre-flight request for {request.url.path}")
            return Response(status_code=204, headers=self.headers)

        response = await call_next(request)
        response.headers.update(self.headers)
        return response
