"""Zone registry - components placed into named zones.

A zone is a named slot that any plugin can fill. Components are added with
an order, and a zone renders its components lowest order first. Zone
subscribers are called only when their own zone's contents change.
"""

import dataclasses
from typing import Any, Callable

from hookwire.core.enums import RegistryMode
from hookwire.core.logging import get_logger
from hookwire.core.registry import Registry
from hookwire.domain.entities.zone_component import ZoneComponent

logger = get_logger(__name__)

ZoneSubscriber = Callable[[list[ZoneComponent]], Any]


class ZoneRegistry:
    """Registry of ZoneComponents keyed by component id.

    Example:
        zones.add_component(
            ZoneComponent(
                id="ZoneComponentInHookTester",
                zone="my-test-zone",
                component=ZoneComponent,
                order=Priority.NEUTRAL,
                props={"message": "This component is rendered in a Zone!"},
            )
        )
        zones.components("my-test-zone")
    """

    def __init__(self, mode: RegistryMode | str = RegistryMode.CLEAN) -> None:
        self._registry: Registry[ZoneComponent] = Registry("zones", mode=mode)

    @property
    def registry(self) -> Registry[ZoneComponent]:
        """Get the underlying registry."""
        return self._registry

    def add_component(self, component: ZoneComponent) -> str:
        """Add (or replace) a component in its zone.

        Returns:
            The component id.
        """
        self._registry.register(component.id, component, component.order)
        logger.debug("Zone component added", component_id=component.id, zone=component.zone)
        return component.id

    def remove_component(self, component_id: str) -> bool:
        return self._registry.unregister(component_id)

    def update_component(self, component_id: str, **changes: Any) -> ZoneComponent:
        """Replace fields of a registered zone component.

        Ids cannot be changed here; remove the component and add it again
        under the new id.

        Raises:
            KeyError: If no component has that id.
            ValueError: If ``changes`` includes ``id``.
        """
        if "id" in changes:
            raise ValueError("update_component cannot change a component id")
        current = self._registry.get(component_id)
        if current is None:
            raise KeyError(component_id)
        updated = dataclasses.replace(current, **changes)
        self._registry.register(component_id, updated, updated.order)
        return updated

    def get(self, component_id: str) -> ZoneComponent | None:
        return self._registry.get(component_id)

    def components(self, zone: str) -> list[ZoneComponent]:
        """Components of ``zone`` in render order."""
        return [entry.value for entry in self._registry.list if entry.value.zone == zone]

    def zones(self) -> list[str]:
        """Names of zones holding at least one component."""
        return sorted({entry.value.zone for entry in self._registry.list})

    def subscribe(self, zone: str, callback: ZoneSubscriber) -> Callable[[], None]:
        """Call ``callback(components)`` whenever the contents of ``zone`` change.

        Returns:
            A function that removes the subscription.
        """
        last: list[tuple[str, int]] = self._snapshot(zone)

        def on_change(registry: Registry[ZoneComponent]) -> None:
            nonlocal last
            current = self._snapshot(zone)
            if current != last:
                last = current
                callback(self.components(zone))

        return self._registry.subscribe(on_change)

    def _snapshot(self, zone: str) -> list[tuple[str, int]]:
        return [
            (entry.id, entry.sequence)
            for entry in self._registry.list
            if entry.value.zone == zone
        ]

    def __len__(self) -> int:
        return len(self._registry)
