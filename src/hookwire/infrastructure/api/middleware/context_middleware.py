"""Middleware for managing the request logging context.

Binds a correlation id (taken from the request header or generated) into
the structlog context for the duration of the request, so every log line
written by hook subscribers during the request carries it.
"""

import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from hookwire.core.logging import bind_correlation_id, clear_context, get_logger

logger = get_logger(__name__)


class ContextMiddleware(BaseHTTPMiddleware):
    """Middleware to bind a correlation id for every request."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Bind the correlation id, call the app, echo the id back.

        Args:
            request: The incoming request.
            call_next: The next middleware/endpoint to call.

        Returns:
            The response from the application.
        """
        correlation_id = request.headers.get(self.header_name) or f"req_{uuid.uuid4().hex[:12]}"
        request.state.correlation_id = correlation_id
        bind_correlation_id(correlation_id)
        logger.debug("Request context bound", path=request.url.path)

        try:
            response = await call_next(request)
            response.headers[self.header_name] = correlation_id
            return response
        finally:
            # Cleanup to prevent context leakage
            clear_context()
