"""Route table."""

from hookwire.infrastructure.routing.route_registry import RouteRegistry

__all__ = ["RouteRegistry"]
