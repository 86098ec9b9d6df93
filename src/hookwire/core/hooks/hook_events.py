"""Hook names fired by the Hookwire runtime.

Plugins may run and subscribe to any hook name; these are the ones the
runtime itself fires during bootstrap and server startup. Adding names is
non-breaking; renaming one breaks every plugin subscribed to it.
"""

from typing import Iterable


class HookCategory:
    """Categories for organizing hook names."""

    PLUGIN_LIFECYCLE = "plugin_lifecycle"
    CONFIGURATION = "configuration"
    ROUTING = "routing"
    SERVER = "server"
    CUSTOM = "custom"


class HookName:
    """Hook names fired by the runtime.

    Params each hook is run with (the ActionContext always comes last):
    - before-config: (config dict)
    - after-config: (Settings)
    - plugin-init / plugin-ready: ()
    - plugin-unregister: (Plugin)
    - routes-init: (RouteRegistry)
    - register-route (sync): (Route)
    - Server.Middleware: (MiddlewareRegistry, FastAPI app)
    - Server.Init / Server.Shutdown: (FastAPI app)
    """

    # Configuration
    BEFORE_CONFIG = "before-config"
    AFTER_CONFIG = "after-config"

    # Plugin Lifecycle
    PLUGIN_INIT = "plugin-init"
    PLUGIN_READY = "plugin-ready"
    PLUGIN_UNREGISTER = "plugin-unregister"

    # Routing
    ROUTES_INIT = "routes-init"
    REGISTER_ROUTE = "register-route"

    # Server
    SERVER_MIDDLEWARE = "Server.Middleware"
    SERVER_INIT = "Server.Init"
    SERVER_SHUTDOWN = "Server.Shutdown"


# Mapping of hook names to their categories
EVENT_CATEGORIES: dict[str, str] = {
    HookName.BEFORE_CONFIG: HookCategory.CONFIGURATION,
    HookName.AFTER_CONFIG: HookCategory.CONFIGURATION,
    HookName.PLUGIN_INIT: HookCategory.PLUGIN_LIFECYCLE,
    HookName.PLUGIN_READY: HookCategory.PLUGIN_LIFECYCLE,
    HookName.PLUGIN_UNREGISTER: HookCategory.PLUGIN_LIFECYCLE,
    HookName.ROUTES_INIT: HookCategory.ROUTING,
    HookName.REGISTER_ROUTE: HookCategory.ROUTING,
    HookName.SERVER_MIDDLEWARE: HookCategory.SERVER,
    HookName.SERVER_INIT: HookCategory.SERVER,
    HookName.SERVER_SHUTDOWN: HookCategory.SERVER,
}


def is_server_hook(name: str) -> bool:
    """Check if a hook name belongs to the server namespace."""
    return name.startswith("Server.")


def get_hook_category(name: str) -> str:
    """Get the category of a hook name; names plugins invent are "custom"."""
    if name in EVENT_CATEGORIES:
        return EVENT_CATEGORIES[name]
    if is_server_hook(name):
        return HookCategory.SERVER
    return HookCategory.CUSTOM


def group_by_category(names: Iterable[str]) -> dict[str, list[str]]:
    """Group hook names by category, keeping the given order within a group."""
    groups: dict[str, list[str]] = {}
    for name in names:
        groups.setdefault(get_hook_category(name), []).append(name)
    return groups
