"""Unit tests for plugins and the PluginManager."""

import pytest

from hookwire.core.enums import Priority
from hookwire.core.exceptions import ProtectedEntryViolation
from hookwire.core.hooks import HookName
from hookwire.infrastructure.plugins import FunctionPlugin, Plugin
from hookwire.runtime import Runtime


def noop(*args):
    return None


class GreeterPlugin(Plugin):
    id = "Greeter"
    name = "Greeter Plugin"
    version = "1.2.0"

    def register(self, runtime, hooks):
        hooks.register(HookName.PLUGIN_INIT, noop)
        hooks.register_sync(HookName.REGISTER_ROUTE, noop)


class TestPluginBase:
    """Tests for the Plugin abstractions."""

    def test_plugin_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Plugin()

    def test_function_plugin_defaults(self) -> None:
        plugin = FunctionPlugin("Announcer", noop, order=Priority.LOW)

        assert plugin.id == "Announcer"
        assert plugin.name == "Announcer"
        assert plugin.order == Priority.LOW
        assert "Announcer" in repr(plugin)


class TestPluginManagerRegister:
    """Tests for PluginManager.register() and register_all()."""

    def test_entry_point_receives_runtime_and_domain(self, runtime: Runtime) -> None:
        received = []
        runtime.plugins.register(
            FunctionPlugin("Inspector", lambda rt, hooks: received.append((rt, hooks.domain)))
        )

        assert received == [(runtime, "Inspector")]
        assert runtime.plugins.is_registered("Inspector")

    def test_hooks_registered_under_plugin_domain(self, runtime: Runtime) -> None:
        runtime.plugins.register(GreeterPlugin())

        assert runtime.hook.domains(HookName.PLUGIN_INIT) == ["Greeter"]
        assert runtime.plugins.get("Greeter").version == "1.2.0"

    def test_register_all_sorts_by_order(self, runtime: Runtime) -> None:
        calls = []
        plugins = [
            FunctionPlugin("late", lambda rt, h: calls.append("late"), order=Priority.LOW),
            FunctionPlugin("a", lambda rt, h: calls.append("a")),
            FunctionPlugin("early", lambda rt, h: calls.append("early"), order=Priority.HIGH),
            FunctionPlugin("b", lambda rt, h: calls.append("b")),
        ]

        ordered = runtime.plugins.register_all(plugins)

        assert calls == ["early", "a", "b", "late"]
        assert [p.id for p in ordered] == calls
        assert [p.id for p in runtime.plugins.list()] == calls
        assert len(runtime.plugins) == 4

    def test_failing_entry_point_is_rolled_back(self, runtime: Runtime) -> None:
        def setup(rt, hooks):
            hooks.register(HookName.PLUGIN_INIT, noop)
            raise RuntimeError("broken plugin")

        with pytest.raises(RuntimeError, match="broken plugin"):
            runtime.plugins.register(FunctionPlugin("Broken", setup))

        assert not runtime.plugins.is_registered("Broken")
        assert runtime.hook.list() == []

    def test_failing_entry_point_with_protected_id(self, runtime: Runtime) -> None:
        def setup(rt, hooks):
            hooks.register(HookName.PLUGIN_INIT, noop)
            raise RuntimeError("broken plugin")

        runtime.plugins.protect("Boom")

        with pytest.raises(RuntimeError, match="broken plugin"):
            runtime.plugins.register(FunctionPlugin("Boom", setup))

        assert not runtime.plugins.is_registered("Boom")
        assert runtime.plugins.registry.is_protected("Boom")
        assert runtime.hook.list() == []

        runtime.plugins.register(FunctionPlugin("Boom", lambda rt, hooks: None))
        assert runtime.plugins.is_registered("Boom")

    def test_reregister_replaces_previous_hooks(self, runtime: Runtime) -> None:
        runtime.plugins.register(
            FunctionPlugin("Swap", lambda rt, h: h.register(HookName.PLUGIN_INIT, noop))
        )
        runtime.plugins.register(
            FunctionPlugin("Swap", lambda rt, h: h.register(HookName.PLUGIN_READY, noop))
        )

        assert runtime.hook.list() == [HookName.PLUGIN_READY]
        assert len(runtime.plugins) == 1

    def test_protected_plugin_cannot_be_replaced(self, runtime: Runtime) -> None:
        runtime.plugins.register(GreeterPlugin())
        runtime.plugins.protect("Greeter")

        with pytest.raises(ProtectedEntryViolation):
            runtime.plugins.register(GreeterPlugin())

        assert runtime.hook.domains(HookName.PLUGIN_INIT) == ["Greeter"]

    def test_banned_plugin_is_not_called(self, runtime: Runtime) -> None:
        calls = []
        runtime.plugins.registry.ban("Blocked")

        with pytest.raises(ProtectedEntryViolation):
            runtime.plugins.register(FunctionPlugin("Blocked", lambda rt, h: calls.append(1)))

        assert calls == []


class TestPluginManagerUnregister:
    """Tests for PluginManager.unregister()."""

    @pytest.mark.asyncio
    async def test_unregister_removes_only_plugin_hooks(self, runtime: Runtime) -> None:
        runtime.plugins.register(GreeterPlugin())
        other = runtime.hook.register(HookName.PLUGIN_INIT, noop, domain="Other")

        assert await runtime.plugins.unregister("Greeter") is True

        assert [d.id for d in runtime.hook.get_hooks(HookName.PLUGIN_INIT)] == [other]
        assert runtime.hook.get_hooks(HookName.REGISTER_ROUTE, "sync") == []
        assert not runtime.plugins.is_registered("Greeter")

    @pytest.mark.asyncio
    async def test_unregister_runs_plugin_unregister_first(self, runtime: Runtime) -> None:
        seen = []

        def setup(rt, hooks):
            async def goodbye(plugin, context):
                seen.append((plugin.id, rt.hook.domains(HookName.PLUGIN_UNREGISTER)))

            hooks.register(HookName.PLUGIN_UNREGISTER, goodbye)

        runtime.plugins.register(FunctionPlugin("Polite", setup))

        await runtime.plugins.unregister("Polite")

        assert seen == [("Polite", ["Polite"])]
        assert runtime.hook.list() == []

    @pytest.mark.asyncio
    async def test_unregister_unknown_plugin(self, runtime: Runtime) -> None:
        assert await runtime.plugins.unregister("missing") is False

    @pytest.mark.asyncio
    async def test_unregister_protected_plugin_raises(self, runtime: Runtime) -> None:
        runtime.plugins.register(GreeterPlugin())
        runtime.plugins.protect("Greeter")

        with pytest.raises(ProtectedEntryViolation):
            await runtime.plugins.unregister("Greeter")

        assert runtime.plugins.is_registered("Greeter")
        assert runtime.hook.domains(HookName.PLUGIN_INIT) == ["Greeter"]
