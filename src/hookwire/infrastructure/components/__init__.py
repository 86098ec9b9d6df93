"""Component and zone registries."""

from hookwire.infrastructure.components.component_registry import ComponentRegistry
from hookwire.infrastructure.components.zone_registry import ZoneRegistry

__all__ = ["ComponentRegistry", "ZoneRegistry"]
