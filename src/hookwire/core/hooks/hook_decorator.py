"""Hook decorator API for hook registration.

This module provides the decorator-based API for registering hooks,
enabling the ``@runtime.hooks.on_plugin_init()`` syntax.
"""

from typing import Any, Callable, Optional, TypeVar

from hookwire.core.enums import DEFAULT_DOMAIN, Priority
from hookwire.core.hooks.hook_engine import HookEngine
from hookwire.core.hooks.hook_events import HookName

F = TypeVar("F", bound=Callable[..., Any])


class HookDecorator:
    """Provides decorator syntax for hook registration.

    This class wraps the HookEngine and provides one decorator per hook
    name the runtime fires, plus ``on()`` for any other name:

        @runtime.hooks.on_routes_init(order=Priority.HIGH, domain="Users")
        async def add_user_routes(routes, context):
            routes.register(Route(id="users", path="/users"))

        @runtime.hooks.on("cart-updated", sync=True)
        def recount(cart, context):
            context["count"] = len(cart.items)

    Decorated functions are returned unchanged; the id of the registration
    is stored on them as ``__hook_id__``.
    """

    def __init__(self, engine: HookEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> HookEngine:
        """Get the underlying hook engine."""
        return self._engine

    def on(
        self,
        name: str,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
        sync: bool = False,
    ) -> Callable[[F], F]:
        """Register the decorated function on any hook name.

        Args:
            name: Hook name.
            order: Execution order (lower first).
            hook_id: Optional fixed id (overwrites an existing one).
            domain: Group tag for bulk removal.
            sync: Register in the sync namespace (``run_sync``).
        """
        return self._create_decorator(name, order, hook_id, domain, sync)

    # =========================================================================
    # Configuration Hooks
    # =========================================================================

    def on_before_config(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook that may edit the raw config dict before it is validated."""
        return self._create_decorator(HookName.BEFORE_CONFIG, order, hook_id, domain)

    def on_after_config(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook that receives the final Settings."""
        return self._create_decorator(HookName.AFTER_CONFIG, order, hook_id, domain)

    # =========================================================================
    # Plugin Lifecycle Hooks
    # =========================================================================

    def on_plugin_init(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook for plugin initialization.

        Called once every plugin has been registered; the usual place to
        register components and zone components.
        """
        return self._create_decorator(HookName.PLUGIN_INIT, order, hook_id, domain)

    def on_plugin_ready(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook for when bootstrap has finished."""
        return self._create_decorator(HookName.PLUGIN_READY, order, hook_id, domain)

    def on_plugin_unregister(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook called with a plugin before it is removed."""
        return self._create_decorator(HookName.PLUGIN_UNREGISTER, order, hook_id, domain)

    # =========================================================================
    # Routing Hooks
    # =========================================================================

    def on_routes_init(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook that receives the route registry for enrichment."""
        return self._create_decorator(HookName.ROUTES_INIT, order, hook_id, domain)

    def on_register_route(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a sync hook that may edit each route before it is stored."""
        return self._create_decorator(HookName.REGISTER_ROUTE, order, hook_id, domain, sync=True)

    # =========================================================================
    # Server Hooks
    # =========================================================================

    def on_server_middleware(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook that adds entries to the middleware registry."""
        return self._create_decorator(HookName.SERVER_MIDDLEWARE, order, hook_id, domain)

    def on_server_init(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook for server startup."""
        return self._create_decorator(HookName.SERVER_INIT, order, hook_id, domain)

    def on_server_shutdown(
        self,
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> Callable[[F], F]:
        """Register a hook for server shutdown."""
        return self._create_decorator(HookName.SERVER_SHUTDOWN, order, hook_id, domain)

    # =========================================================================
    # Internal Methods
    # =========================================================================

    def _create_decorator(
        self,
        name: str,
        order: float,
        hook_id: Optional[str],
        domain: str,
        sync: bool = False,
    ) -> Callable[[F], F]:
        register = self._engine.register_sync if sync else self._engine.register

        def decorator(func: F) -> F:
            func.__hook_id__ = register(name, func, order, hook_id, domain)  # type: ignore[attr-defined]
            return func

        return decorator
