"""Unit tests for HookDecorator and hook names."""

import pytest

from hookwire.core.enums import HookType, Priority
from hookwire.core.hooks import (
    EVENT_CATEGORIES,
    HookCategory,
    HookDecorator,
    HookEngine,
    HookName,
    get_hook_category,
    group_by_category,
    is_server_hook,
)


class TestHookDecorator:
    """Tests for the HookDecorator class."""

    def test_decorator_syntax_registers_hook(self, engine: HookEngine, hooks: HookDecorator) -> None:
        @hooks.on_plugin_init()
        async def my_hook(context):
            return None

        declarations = engine.get_hooks(HookName.PLUGIN_INIT)
        assert len(declarations) == 1
        assert declarations[0].callback is my_hook
        assert declarations[0].id == my_hook.__hook_id__

    def test_decorator_with_order_and_domain(self, engine: HookEngine, hooks: HookDecorator) -> None:
        @hooks.on_routes_init(order=Priority.HIGH, domain="Users", hook_id="users-routes")
        async def add_routes(routes, context):
            return None

        declaration = engine.get("users-routes")
        assert declaration.order == Priority.HIGH
        assert declaration.domain == "Users"

    def test_register_route_is_sync(self, engine: HookEngine, hooks: HookDecorator) -> None:
        @hooks.on_register_route()
        def tag_route(route, context):
            return None

        assert engine.list(HookType.SYNC) == [HookName.REGISTER_ROUTE]
        assert engine.list(HookType.ASYNC) == []

    def test_generic_on(self, engine: HookEngine, hooks: HookDecorator) -> None:
        @hooks.on("cart-updated", sync=True)
        def recount(cart, context):
            context["count"] = len(cart)

        context = engine.run_sync("cart-updated", [1, 2, 3])

        assert context["count"] == 3

    @pytest.mark.asyncio
    async def test_server_shortcuts(self, engine: HookEngine, hooks: HookDecorator) -> None:
        calls = []

        @hooks.on_server_init()
        async def on_init(app, context):
            calls.append(("init", app))

        @hooks.on_server_shutdown()
        async def on_shutdown(app, context):
            calls.append(("shutdown", app))

        await engine.run(HookName.SERVER_INIT, "app")
        await engine.run(HookName.SERVER_SHUTDOWN, "app")

        assert calls == [("init", "app"), ("shutdown", "app")]

    def test_decorated_function_is_returned_unchanged(self, hooks: HookDecorator) -> None:
        async def original(context):
            return "value"

        decorated = hooks.on_plugin_ready()(original)

        assert decorated is original


class TestHookNames:
    """Tests for hook name definitions."""

    def test_every_runtime_hook_has_a_category(self) -> None:
        names = [value for key, value in vars(HookName).items() if not key.startswith("_")]

        assert sorted(names) == sorted(EVENT_CATEGORIES)
        assert EVENT_CATEGORIES[HookName.ROUTES_INIT] == HookCategory.ROUTING

    def test_is_server_hook(self) -> None:
        assert is_server_hook(HookName.SERVER_INIT) is True
        assert is_server_hook(HookName.PLUGIN_INIT) is False

    def test_get_hook_category(self) -> None:
        assert get_hook_category(HookName.BEFORE_CONFIG) == HookCategory.CONFIGURATION
        assert get_hook_category("Server.Metrics") == HookCategory.SERVER
        assert get_hook_category("cart-updated") == HookCategory.CUSTOM

    def test_group_by_category(self) -> None:
        groups = group_by_category([HookName.PLUGIN_INIT, "cart-updated", HookName.PLUGIN_READY])

        assert groups == {
            HookCategory.PLUGIN_LIFECYCLE: [HookName.PLUGIN_INIT, HookName.PLUGIN_READY],
            HookCategory.CUSTOM: ["cart-updated"],
        }
