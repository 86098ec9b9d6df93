"""Route registry - the route table filled by ``routes-init``.

Every route passes through the sync ``register-route`` hook before it is
stored, so plugins can decorate routes they did not create (add metadata,
swap the component, change the order).
"""

from typing import Any, Callable, Optional

from hookwire.core.enums import RegistryMode
from hookwire.core.hooks.hook_engine import HookEngine
from hookwire.core.hooks.hook_events import HookName
from hookwire.core.logging import get_logger
from hookwire.core.registry import Registry
from hookwire.domain.entities.route import Route

logger = get_logger(__name__)


class RouteRegistry:
    """Ordered route table backed by a Registry."""

    def __init__(self, engine: HookEngine, mode: RegistryMode | str = RegistryMode.CLEAN) -> None:
        self._engine = engine
        self._registry: Registry[Route] = Registry("routes", mode=mode)

    @property
    def registry(self) -> Registry[Route]:
        """Get the underlying registry."""
        return self._registry

    def register(self, route: Route) -> Route:
        """Run ``register-route`` on the route, then store it.

        Returns:
            The stored route, as left by the hook subscribers.

        Raises:
            ProtectedEntryViolation: If the route id is protected or banned.
                Subscribers are not called in that case.
        """
        self._registry.ensure_writable(route.id)
        self._engine.run_sync(HookName.REGISTER_ROUTE, route)
        self._registry.register(route.id, route, route.order)
        logger.debug("Route registered", route_id=route.id, path=route.path, order=route.order)
        return route

    def unregister(self, route_id: str) -> bool:
        return self._registry.unregister(route_id)

    def get(self, route_id: str) -> Optional[Route]:
        return self._registry.get(route_id)

    def list(self) -> list[Route]:
        """Routes in matching order."""
        return [entry.value for entry in self._registry.list]

    def match(self, path: str) -> Optional[Route]:
        """First route, in order, that handles ``path``."""
        for entry in self._registry.list:
            if entry.value.matches(path):
                return entry.value
        return None

    def subscribe(self, callback: Callable[[Registry[Route]], Any]) -> Callable[[], None]:
        return self._registry.subscribe(callback)

    def __contains__(self, route_id: object) -> bool:
        return route_id in self._registry

    def __len__(self) -> int:
        return len(self._registry)
