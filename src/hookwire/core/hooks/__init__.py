"""Hook system core module.

This module provides the hook engine that every Hookwire subsystem is
built on: named dispatch points whose callbacks run in order, grouped
by domain for bulk teardown.

Example usage:
    from hookwire.core.hooks import HookDecorator, HookEngine, HookName

    engine = HookEngine()
    hooks = HookDecorator(engine)

    @hooks.on_plugin_init(domain="MyPlugin")
    async def init_my_plugin(context):
        components.register("MyComponent", MyComponent)

    await engine.run(HookName.PLUGIN_INIT)
"""

from hookwire.core.hooks.action_sequence import (
    order_declarations,
    run_sequence,
    run_sequence_sync,
)
from hookwire.core.hooks.domain_handle import DomainHandle
from hookwire.core.hooks.hook_decorator import HookDecorator
from hookwire.core.hooks.hook_engine import HookEngine, HookIndex
from hookwire.core.hooks.hook_events import (
    EVENT_CATEGORIES,
    HookCategory,
    HookName,
    get_hook_category,
    group_by_category,
    is_server_hook,
)

__all__ = [
    # Engine
    "HookEngine",
    "HookIndex",
    "DomainHandle",
    # Execution
    "order_declarations",
    "run_sequence",
    "run_sequence_sync",
    # Decorator
    "HookDecorator",
    # Names
    "HookCategory",
    "HookName",
    "EVENT_CATEGORIES",
    "get_hook_category",
    "group_by_category",
    "is_server_hook",
]
