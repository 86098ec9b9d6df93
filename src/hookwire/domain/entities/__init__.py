"""Domain entities."""

from hookwire.domain.entities.action_context import ActionContext
from hookwire.domain.entities.hook_declaration import HookDeclaration
from hookwire.domain.entities.middleware_spec import MiddlewareSpec
from hookwire.domain.entities.registry_entry import HistoryRecord, RegistryEntry
from hookwire.domain.entities.route import Route
from hookwire.domain.entities.zone_component import ZoneComponent

__all__ = [
    "ActionContext",
    "HistoryRecord",
    "HookDeclaration",
    "MiddlewareSpec",
    "RegistryEntry",
    "Route",
    "ZoneComponent",
]
