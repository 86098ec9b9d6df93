"""Core Hookwire utilities.

This module exports core utilities for use throughout the application.
"""

from hookwire.core.config import Settings, get_settings
from hookwire.core.enums import DEFAULT_DOMAIN, HookType, Priority, RegistryMode
from hookwire.core.exceptions import (
    DomainDisposedError,
    HookwireError,
    ProtectedEntryViolation,
)
from hookwire.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
    "DEFAULT_DOMAIN",
    "HookType",
    "Priority",
    "RegistryMode",
    "HookwireError",
    "ProtectedEntryViolation",
    "DomainDisposedError",
]
