"""Domain handle - scoped ownership of a group of hook registrations.

A plugin or mounted component registers its callbacks through one handle
and later tears all of them down with a single ``dispose()``, instead of
tracking ids or repeating the domain string at every cleanup site.

Example:
    with engine.domain("PluginX") as hooks:
        hooks.register("plugin-init", init_plugin_x)
        hooks.register("plugin-ready", announce_plugin_x, Priority.LOW)
    # every PluginX callback is gone here
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from hookwire.core.enums import DEFAULT_DOMAIN, Priority
from hookwire.core.exceptions import DomainDisposedError
from hookwire.core.logging import get_logger

if TYPE_CHECKING:
    from hookwire.core.hooks.hook_engine import HookEngine

logger = get_logger(__name__)


class DomainHandle:
    """Registers callbacks under one domain and removes them together."""

    def __init__(self, engine: HookEngine, domain: str) -> None:
        if domain == DEFAULT_DOMAIN:
            raise ValueError(f"'{DEFAULT_DOMAIN}' is reserved and cannot be scoped")
        self._engine = engine
        self.domain = domain
        self._names: dict[str, None] = {}
        self._disposed = False

    @property
    def names(self) -> list[str]:
        """Hook names this handle has registered callbacks on."""
        return list(self._names)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def register(
        self,
        name: str,
        callback: Callable[..., Any],
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
    ) -> str:
        """Register an async callback under this domain."""
        self._ensure_live()
        hook_id = self._engine.register(name, callback, order, hook_id, self.domain)
        self._names[name] = None
        return hook_id

    def register_sync(
        self,
        name: str,
        callback: Callable[..., Any],
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
    ) -> str:
        """Register a sync callback under this domain."""
        self._ensure_live()
        hook_id = self._engine.register_sync(name, callback, order, hook_id, self.domain)
        self._names[name] = None
        return hook_id

    def dispose(self) -> int:
        """Unregister every callback of this domain. Safe to call twice.

        Returns:
            Number of callbacks removed.
        """
        if self._disposed:
            return 0

        count = sum(self._engine.unregister_domain(name, self.domain) for name in self._names)
        self._disposed = True
        self._engine._release_domain(self)

        logger.debug("Domain disposed", domain=self.domain, hooks=list(self._names), count=count)
        return count

    def _ensure_live(self) -> None:
        if self._disposed:
            raise DomainDisposedError(self.domain)

    def __enter__(self) -> "DomainHandle":
        return self

    def __exit__(self, *args: Any) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return f"DomainHandle(domain={self.domain!r}, disposed={self._disposed})"
