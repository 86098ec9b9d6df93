"""Plugin manager - registration and teardown of plugins.

Each plugin gets its own hook domain (the plugin id). Unregistering a
plugin runs ``plugin-unregister`` and then disposes the domain, which
removes every hook the plugin attached in one step.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from hookwire.core.enums import RegistryMode
from hookwire.core.exceptions import ProtectedEntryViolation
from hookwire.core.hooks.domain_handle import DomainHandle
from hookwire.core.hooks.hook_events import HookName
from hookwire.core.logging import LoggingContext, get_logger
from hookwire.core.registry import Registry
from hookwire.infrastructure.plugins.plugin import Plugin

if TYPE_CHECKING:
    from hookwire.runtime import Runtime

logger = get_logger(__name__)


class PluginManager:
    """Registry of plugins bound to one runtime."""

    def __init__(self, runtime: "Runtime", mode: RegistryMode | str = RegistryMode.CLEAN) -> None:
        self._runtime = runtime
        self._registry: Registry[Plugin] = Registry("plugins", mode=mode)
        self._handles: dict[str, DomainHandle] = {}

    @property
    def registry(self) -> Registry[Plugin]:
        """Get the underlying registry."""
        return self._registry

    def register(self, plugin: Plugin) -> None:
        """Store a plugin and call its entry point.

        Registering an id again replaces the previous plugin; the hooks of
        the previous plugin are removed first.

        Raises:
            ProtectedEntryViolation: If the plugin id is protected or banned.
            Exception: Whatever the plugin's entry point raised. The
                plugin's partial registrations are rolled back first.
        """
        self._registry.ensure_writable(plugin.id)

        previous = self._handles.pop(plugin.id, None)
        if previous is not None:
            previous.dispose()
            logger.info("Plugin replaced", plugin_id=plugin.id)

        handle = self._runtime.hook.domain(plugin.id)
        self._registry.register(plugin.id, plugin, plugin.order)
        self._handles[plugin.id] = handle

        with LoggingContext(plugin_id=plugin.id):
            try:
                plugin.register(self._runtime, handle)
            except Exception as e:
                logger.error("Plugin registration failed", error=str(e))
                handle.dispose()
                del self._handles[plugin.id]
                self._discard(plugin.id)
                raise

            logger.info(
                "Plugin registered",
                plugin_name=plugin.name or plugin.id,
                version=plugin.version,
                hooks=handle.names,
            )

    def _discard(self, plugin_id: str) -> None:
        """Drop a plugin entry that never initialized, keeping any protection on the id."""
        protected = self._registry.is_protected(plugin_id)
        if protected:
            self._registry.unprotect(plugin_id)
        try:
            self._registry.unregister(plugin_id)
        finally:
            if protected:
                self._registry.protect(plugin_id)

    def register_all(self, plugins: Iterable[Plugin]) -> list[Plugin]:
        """Register plugins lowest order first, keeping the given order for ties.

        Returns:
            The plugins in the order they were registered.
        """
        ordered = sorted(plugins, key=lambda p: p.order)
        for plugin in ordered:
            self.register(plugin)
        return ordered

    async def unregister(self, plugin_id: str) -> bool:
        """Run ``plugin-unregister`` for the plugin, then remove it and its hooks.

        Returns:
            True if the plugin was removed, False if it was not registered.

        Raises:
            ProtectedEntryViolation: If the plugin is protected.
        """
        plugin = self._registry.get(plugin_id)
        if plugin is None:
            return False
        if self._registry.is_protected(plugin_id):
            raise ProtectedEntryViolation(self._registry.name, plugin_id, "protected")

        await self._runtime.hook.run(HookName.PLUGIN_UNREGISTER, plugin)

        handle = self._handles.pop(plugin_id, None)
        removed = handle.dispose() if handle is not None else 0
        self._registry.unregister(plugin_id)

        logger.info("Plugin unregistered", plugin_id=plugin_id, hooks_removed=removed)
        return True

    def get(self, plugin_id: str) -> Optional[Plugin]:
        return self._registry.get(plugin_id)

    def is_registered(self, plugin_id: str) -> bool:
        return self._registry.is_registered(plugin_id)

    def protect(self, plugin_id: str) -> None:
        self._registry.protect(plugin_id)

    def list(self) -> list[Plugin]:
        """Plugins sorted by order."""
        return [entry.value for entry in self._registry.list]

    def __len__(self) -> int:
        return len(self._registry)
