"""Unit tests for the generic Registry.

Tests cover:
- Ordering and stable tie-breaks
- Protect/unprotect and ban/unban guards
- CLEAN vs HISTORY retention
- Change subscriptions
"""

import pytest

from hookwire.core.enums import Priority, RegistryMode
from hookwire.core.exceptions import ProtectedEntryViolation
from hookwire.core.registry import Registry


@pytest.fixture
def registry() -> Registry[str]:
    return Registry("test")


class TestRegistryRegister:
    """Tests for register(), get() and list."""

    def test_register_and_get(self, registry: Registry[str]) -> None:
        entry = registry.register("hello", "Hello World")

        assert entry.id == "hello"
        assert registry.get("hello") == "Hello World"
        assert registry.is_registered("hello")
        assert "hello" in registry
        assert len(registry) == 1

    def test_get_missing_returns_default(self, registry: Registry[str]) -> None:
        assert registry.get("missing") is None
        assert registry.get("missing", "fallback") == "fallback"

    def test_overwrite_is_last_write_wins(self, registry: Registry[str]) -> None:
        registry.register("a", "first")
        registry.register("a", "second")

        assert registry.get("a") == "second"
        assert len(registry) == 1

    def test_list_sorted_by_order(self, registry: Registry[str]) -> None:
        registry.register("low", "l", Priority.LOW)
        registry.register("core", "c", Priority.CORE)
        registry.register("neutral", "n")

        assert [entry.id for entry in registry.list] == ["core", "neutral", "low"]

    def test_list_ties_keep_insertion_order(self, registry: Registry[str]) -> None:
        for entry_id in ["c", "a", "b"]:
            registry.register(entry_id, entry_id)

        assert [entry.id for entry in registry.list] == ["c", "a", "b"]
        assert [entry.id for entry in registry] == ["c", "a", "b"]

    def test_list_by_id(self, registry: Registry[str]) -> None:
        registry.register("a", "A", 10)
        registry.register("b", "B", -10)

        by_id = registry.list_by_id
        assert list(by_id) == ["a", "b"]
        assert by_id["b"].value == "B"


class TestRegistryUnregister:
    """Tests for unregister() and flush()."""

    def test_unregister_removes_entry(self, registry: Registry[str]) -> None:
        registry.register("a", "A")

        assert registry.unregister("a") is True
        assert registry.get("a") is None
        assert registry.list == []

    def test_unregister_absent_is_noop(self, registry: Registry[str]) -> None:
        assert registry.unregister("missing") is False

    def test_flush_keeps_protected_entries(self, registry: Registry[str]) -> None:
        registry.register("keep", "K")
        registry.register("drop1", "D")
        registry.register("drop2", "D")
        registry.protect("keep")

        assert registry.flush() == 2
        assert [entry.id for entry in registry.list] == ["keep"]


class TestRegistryProtect:
    """Tests for protect()/unprotect()."""

    def test_protected_entry_cannot_be_unregistered(self, registry: Registry[str]) -> None:
        registry.register("core-id", "core")
        registry.protect("core-id")

        with pytest.raises(ProtectedEntryViolation) as exc_info:
            registry.unregister("core-id")

        assert exc_info.value.entry_id == "core-id"
        assert exc_info.value.reason == "protected"
        assert [entry.id for entry in registry.list] == ["core-id"]

    def test_protected_entry_cannot_be_overwritten(self, registry: Registry[str]) -> None:
        registry.register("core-id", "core")
        registry.protect("core-id")

        with pytest.raises(ProtectedEntryViolation):
            registry.register("core-id", "replacement")

        assert registry.get("core-id") == "core"

    def test_unprotect_restores_mutations(self, registry: Registry[str]) -> None:
        registry.register("core-id", "core")
        registry.protect("core-id")
        registry.unprotect("core-id")

        assert registry.unregister("core-id") is True

    def test_protect_flag_on_entry(self, registry: Registry[str]) -> None:
        registry.register("a", "A")
        registry.protect("a")

        assert registry.get_entry("a").protected is True
        assert registry.is_protected("a")

    def test_pre_protected_id_accepts_first_registration(self, registry: Registry[str]) -> None:
        registry.protect("later")

        registry.register("later", "first")

        assert registry.get_entry("later").protected is True
        with pytest.raises(ProtectedEntryViolation):
            registry.register("later", "second")


class TestRegistryBan:
    """Tests for ban()/unban()."""

    def test_ensure_writable(self, registry: Registry[str]) -> None:
        registry.ensure_writable("free")
        registry.ban("evil")
        registry.register("core-id", "core")
        registry.protect("core-id")

        with pytest.raises(ProtectedEntryViolation):
            registry.ensure_writable("evil")
        with pytest.raises(ProtectedEntryViolation):
            registry.ensure_writable("core-id")
        assert "free" not in registry

    def test_banned_id_cannot_be_registered(self, registry: Registry[str]) -> None:
        registry.ban("evil")

        with pytest.raises(ProtectedEntryViolation) as exc_info:
            registry.register("evil", "value")

        assert exc_info.value.reason == "banned"
        assert registry.is_banned("evil")

    def test_ban_removes_live_entry(self, registry: Registry[str]) -> None:
        registry.register("a", "A")

        registry.ban("a")

        assert registry.get("a") is None
        assert registry.list == []

    def test_ban_of_protected_live_entry_raises(self, registry: Registry[str]) -> None:
        registry.register("a", "A")
        registry.protect("a")

        with pytest.raises(ProtectedEntryViolation):
            registry.ban("a")

        assert registry.get("a") == "A"
        assert not registry.is_banned("a")

    def test_unban_allows_registration(self, registry: Registry[str]) -> None:
        registry.ban("a")
        registry.unban("a")

        registry.register("a", "A")

        assert registry.get("a") == "A"


class TestRegistryModes:
    """Tests for CLEAN and HISTORY retention."""

    def test_clean_mode_keeps_no_history(self) -> None:
        registry = Registry("clean", mode=RegistryMode.CLEAN)

        registry.register("a", "A")
        registry.unregister("a")

        assert registry.list == []
        assert registry.history == []

    def test_history_mode_logs_mutations(self) -> None:
        registry = Registry("audited", mode=RegistryMode.HISTORY)

        registry.register("a", "A")
        registry.unregister("a")

        assert registry.list == []
        assert [(record.action, record.id) for record in registry.history] == [
            ("register", "a"),
            ("unregister", "a"),
        ]
        assert registry.history[0].timestamp <= registry.history[1].timestamp

    def test_history_mode_from_string(self) -> None:
        registry = Registry("audited", mode="history")

        assert registry.mode is RegistryMode.HISTORY

    def test_history_logs_protect_and_ban(self) -> None:
        registry = Registry("audited", mode=RegistryMode.HISTORY)

        registry.register("a", "A")
        registry.ban("a")

        assert [record.action for record in registry.history] == ["register", "unregister", "ban"]

    def test_switching_to_clean_drops_history(self) -> None:
        registry = Registry("audited", mode=RegistryMode.HISTORY)
        registry.register("a", "A")

        registry.mode = RegistryMode.CLEAN

        assert registry.history == []

    def test_cleanup_drops_records_of_one_id(self) -> None:
        registry = Registry("audited", mode=RegistryMode.HISTORY)
        registry.register("a", "A")
        registry.register("b", "B")
        registry.unregister("a")

        assert registry.cleanup("a") == 2
        assert [record.id for record in registry.history] == ["b"]

    def test_history_is_a_copy(self) -> None:
        registry = Registry("audited", mode=RegistryMode.HISTORY)
        registry.register("a", "A")

        registry.history.clear()

        assert len(registry.history) == 1


class TestRegistrySubscribe:
    """Tests for change notifications."""

    def test_subscriber_called_after_each_mutation(self, registry: Registry[str]) -> None:
        sizes = []
        registry.subscribe(lambda reg: sizes.append(len(reg)))

        registry.register("a", "A")
        registry.register("b", "B")
        registry.unregister("a")

        assert sizes == [1, 2, 1]

    def test_subscriber_receives_registry(self, registry: Registry[str]) -> None:
        received = []
        registry.subscribe(received.append)

        registry.register("a", "A")

        assert received == [registry]

    def test_unsubscribe_callable(self, registry: Registry[str]) -> None:
        calls = []
        unsubscribe = registry.subscribe(lambda reg: calls.append(1))

        registry.register("a", "A")
        unsubscribe()
        registry.register("b", "B")

        assert calls == [1]

    def test_unsubscribe_by_id_and_all(self, registry: Registry[str]) -> None:
        calls = []
        registry.subscribe(lambda reg: calls.append("x"), "x")
        registry.subscribe(lambda reg: calls.append("y"), "y")

        registry.unsubscribe("x")
        registry.register("a", "A")
        registry.unsubscribe_all()
        registry.register("b", "B")

        assert calls == ["y"]

    def test_failed_mutation_does_not_notify(self, registry: Registry[str]) -> None:
        calls = []
        registry.ban("a")
        registry.subscribe(lambda reg: calls.append(1))

        with pytest.raises(ProtectedEntryViolation):
            registry.register("a", "A")

        assert calls == []
