"""Generic ordered registry used by every Hookwire collection."""

from hookwire.core.registry.registry import Registry

__all__ = ["Registry"]
