"""Component registry - named components shared between plugins.

Plugins register components under a string id during ``plugin-init`` and
other plugins look them up by id, so a component can be replaced by a
later (or higher priority) plugin without touching its consumers.
"""

from typing import Any, Callable, Optional

from hookwire.core.enums import Priority, RegistryMode
from hookwire.core.logging import get_logger
from hookwire.core.registry import Registry
from hookwire.domain.entities.registry_entry import RegistryEntry

logger = get_logger(__name__)


class ComponentRegistry:
    """Id -> component lookup backed by a Registry."""

    def __init__(self, mode: RegistryMode | str = RegistryMode.CLEAN) -> None:
        self._registry: Registry[Any] = Registry("components", mode=mode)

    @property
    def registry(self) -> Registry[Any]:
        """Get the underlying registry."""
        return self._registry

    def register(self, component_id: str, component: Any, order: float = Priority.NEUTRAL) -> None:
        """Register (or replace) a component.

        Raises:
            ProtectedEntryViolation: If the id is protected or banned.
        """
        self._registry.register(component_id, component, order)
        logger.debug("Component registered", component_id=component_id)

    def unregister(self, component_id: str) -> bool:
        return self._registry.unregister(component_id)

    def get(self, component_id: str) -> Optional[Any]:
        return self._registry.get(component_id)

    def resolve(self, component_id: str, fallback: Any = None) -> Any:
        """Get a component, or ``fallback`` when nothing is registered.

        Consumers render the fallback (often a no-op placeholder) until the
        plugin providing the component has been initialized.
        """
        component = self._registry.get(component_id)
        if component is None:
            logger.debug("Component not registered, using fallback", component_id=component_id)
            return fallback
        return component

    def list(self) -> list[RegistryEntry[Any]]:
        return self._registry.list

    def protect(self, component_id: str) -> None:
        self._registry.protect(component_id)

    def unprotect(self, component_id: str) -> None:
        self._registry.unprotect(component_id)

    def ban(self, component_id: str) -> None:
        self._registry.ban(component_id)

    def subscribe(self, callback: Callable[[Registry[Any]], Any]) -> Callable[[], None]:
        return self._registry.subscribe(callback)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._registry

    def __len__(self) -> int:
        return len(self._registry)
