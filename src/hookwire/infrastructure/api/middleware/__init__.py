"""Server middleware package."""

from hookwire.infrastructure.api.middleware.context_middleware import ContextMiddleware
from hookwire.infrastructure.api.middleware.middleware_registry import MiddlewareRegistry

__all__ = ["ContextMiddleware", "MiddlewareRegistry"]
