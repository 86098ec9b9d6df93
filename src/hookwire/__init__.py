"""Hookwire - plugin framework built on ordered, domain-scoped hooks.

Every extension point is a named hook; plugins attach callbacks with an
order and a domain and the runtime fires the hooks in a defined sequence.
"""

__version__ = "0.1.0"

from hookwire.core.enums import DEFAULT_DOMAIN, HookType, Priority, RegistryMode
from hookwire.core.exceptions import ProtectedEntryViolation
from hookwire.core.hooks import DomainHandle, HookDecorator, HookEngine, HookName
from hookwire.core.registry import Registry
from hookwire.domain.entities import ActionContext
from hookwire.infrastructure.plugins import FunctionPlugin, Plugin
from hookwire.runtime import Runtime, create_runtime

__all__ = [
    "__version__",
    "ActionContext",
    "DEFAULT_DOMAIN",
    "DomainHandle",
    "FunctionPlugin",
    "HookDecorator",
    "HookEngine",
    "HookName",
    "HookType",
    "Plugin",
    "Priority",
    "ProtectedEntryViolation",
    "Registry",
    "RegistryMode",
    "Runtime",
    "create_runtime",
]
