"""Shared enumerations and conventions.

Priority values are a caller convention only. The hook engine and the
registries accept any signed number as an order; these names exist so
plugins agree on where "early" and "late" are.
"""

from enum import Enum


class Priority:
    """Named execution orders (lower runs first)."""

    CORE = -2000
    HIGHEST = -1000
    HIGH = -500
    NEUTRAL = 0
    NORMAL = 0
    LOW = 500
    LOWEST = 1000


class HookType(str, Enum):
    """Hook namespaces. Ids never collide across types."""

    ASYNC = "async"
    SYNC = "sync"


class RegistryMode(str, Enum):
    """Registry retention modes."""

    CLEAN = "clean"
    HISTORY = "history"


DEFAULT_DOMAIN = "default"
