"""Base abstraction for plugins."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

from hookwire.core.enums import Priority
from hookwire.core.hooks.domain_handle import DomainHandle

if TYPE_CHECKING:
    from hookwire.runtime import Runtime


class Plugin(ABC):
    """Abstract base class for plugins.

    A plugin does nothing when its module is imported. The host passes
    plugin instances to ``Runtime.bootstrap`` (or ``PluginManager.register``),
    which calls ``register`` with the runtime and a DomainHandle named after
    the plugin id. Every hook registered through that handle is removed when
    the plugin is unregistered.

    Example:
        class HookTesterPlugin(Plugin):
            id = "HookTester"

            def register(self, runtime, hooks):
                async def init(context):
                    runtime.components.register("HookTester", HookTester)

                hooks.register(HookName.PLUGIN_INIT, init)
    """

    id: str = ""
    name: str = ""
    description: str = ""
    version: str = "0.0.0"
    order: float = Priority.NEUTRAL

    @abstractmethod
    def register(self, runtime: "Runtime", hooks: DomainHandle) -> None:
        """Attach the plugin's hooks, components and zones."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, order={self.order!r})"


class FunctionPlugin(Plugin):
    """Plugin whose entry point is a plain function.

    Example:
        def setup(runtime, hooks):
            hooks.register(HookName.PLUGIN_READY, announce)

        plugin = FunctionPlugin("Announcer", setup, order=Priority.LOW)
    """

    def __init__(
        self,
        plugin_id: str,
        setup: Callable[["Runtime", DomainHandle], Any],
        order: float = Priority.NEUTRAL,
        name: Optional[str] = None,
        description: str = "",
        version: str = "0.0.0",
    ) -> None:
        self.id = plugin_id
        self.name = name or plugin_id
        self.description = description
        self.version = version
        self.order = order
        self._setup = setup

    def register(self, runtime: "Runtime", hooks: DomainHandle) -> None:
        self._setup(runtime, hooks)
