"""Middleware registry filled by the ``Server.Middleware`` hook."""

from typing import Optional

from hookwire.core.enums import RegistryMode
from hookwire.core.registry import Registry
from hookwire.domain.entities.middleware_spec import MiddlewareSpec


class MiddlewareRegistry:
    """Ordered middleware specs; the lowest order ends up outermost."""

    def __init__(self, mode: RegistryMode | str = RegistryMode.CLEAN) -> None:
        self._registry: Registry[MiddlewareSpec] = Registry("middleware", mode=mode)

    @property
    def registry(self) -> Registry[MiddlewareSpec]:
        """Get the underlying registry."""
        return self._registry

    def register(self, spec: MiddlewareSpec) -> None:
        self._registry.register(spec.id, spec, spec.order)

    def unregister(self, middleware_id: str) -> bool:
        return self._registry.unregister(middleware_id)

    def get(self, middleware_id: str) -> Optional[MiddlewareSpec]:
        return self._registry.get(middleware_id)

    def list(self) -> list[MiddlewareSpec]:
        """Specs from outermost to innermost."""
        return [entry.value for entry in self._registry.list]

    def __len__(self) -> int:
        return len(self._registry)
