"""Runtime - the application context every subsystem is handed.

One Runtime is created at process start and passed explicitly to plugins,
registries and the server app. It owns the hook engine and the registries
built on it; nothing in Hookwire reaches for module-level singletons.

Bootstrap order:
    1. plugins are registered, lowest order first (explicit entry points)
    2. before-config (raw config dict) / after-config (validated Settings)
    3. plugin-init
    4. routes-init (route registry)
    5. plugin-ready
"""

from typing import Any, Iterable, Optional

from hookwire.core.config import Settings, get_settings
from hookwire.core.enums import RegistryMode
from hookwire.core.hooks.hook_decorator import HookDecorator
from hookwire.core.hooks.hook_engine import HookEngine
from hookwire.core.hooks.hook_events import HookName, get_hook_category, group_by_category
from hookwire.core.logging import configure_logging, get_logger
from hookwire.domain.entities.action_context import ActionContext
from hookwire.infrastructure.components import ComponentRegistry, ZoneRegistry
from hookwire.infrastructure.plugins import Plugin, PluginManager
from hookwire.infrastructure.routing import RouteRegistry

logger = get_logger(__name__)


class Runtime:
    """Holds the hook engine, the registries and the settings of one process.

    Attributes:
        settings: Effective settings (replaced once by ``configure``).
        hook: The HookEngine.
        hooks: Decorator API over ``hook``.
        components: Component registry.
        zones: Zone registry.
        routes: Route registry.
        plugins: Plugin manager.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        mode = RegistryMode(settings.registry_mode)

        self.hook = HookEngine(id_prefix=settings.hook_id_prefix)
        self.hooks = HookDecorator(self.hook)
        self.components = ComponentRegistry(mode)
        self.zones = ZoneRegistry(mode)
        self.routes = RouteRegistry(self.hook, mode)
        self.plugins = PluginManager(self, mode)
        self.bootstrapped = False

    async def bootstrap(self, plugins: Iterable[Plugin] = ()) -> None:
        """Register plugins and run the lifecycle hooks in order.

        Any failing subscriber aborts bootstrap and propagates.
        """
        registered = self.plugins.register_all(plugins)
        logger.info("Plugins registered", plugins=[plugin.id for plugin in registered])

        await self.configure()
        await self._fire(HookName.PLUGIN_INIT)
        await self._fire(HookName.ROUTES_INIT, self.routes)
        await self._fire(HookName.PLUGIN_READY)

        self.bootstrapped = True
        logger.info(
            "Runtime bootstrapped",
            components=len(self.components),
            routes=len(self.routes),
            hooks=group_by_category(self.hook.list()),
        )

    async def configure(self) -> Settings:
        """Let plugins adjust the configuration, then validate it.

        ``before-config`` subscribers receive a mutable dict of the current
        settings; the dict is validated into new Settings which
        ``after-config`` subscribers receive.

        Raises:
            pydantic.ValidationError: If a subscriber left an invalid value.
        """
        config = self.settings.model_dump()
        await self._fire(HookName.BEFORE_CONFIG, config)

        self.settings = Settings.model_validate(config)
        self._apply_registry_mode()

        await self._fire(HookName.AFTER_CONFIG, self.settings)
        return self.settings

    async def _fire(self, name: str, *params: Any) -> ActionContext:
        logger.debug("Running lifecycle hook", hook=name, category=get_hook_category(name))
        return await self.hook.run(name, *params)

    def _apply_registry_mode(self) -> None:
        mode = RegistryMode(self.settings.registry_mode)
        for registry in (
            self.components.registry,
            self.zones.registry,
            self.routes.registry,
            self.plugins.registry,
        ):
            if registry.mode is not mode:
                registry.mode = mode

    async def shutdown(self) -> None:
        """Unregister unprotected plugins, highest order first."""
        for plugin in reversed(self.plugins.list()):
            if self.plugins.registry.is_protected(plugin.id):
                continue
            await self.plugins.unregister(plugin.id)
        self.bootstrapped = False


def create_runtime(settings: Optional[Settings] = None) -> Runtime:
    """Create the process-wide runtime and configure logging for it."""
    settings = settings or get_settings()
    configure_logging(settings)

    runtime = Runtime(settings)
    logger.info(
        "Runtime created",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )
    return runtime
