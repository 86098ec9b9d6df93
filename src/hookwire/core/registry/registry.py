"""Registry - Generic ordered, keyed collection.

The Registry is the pattern behind every named collection in Hookwire
(components, zones, routes, middleware, plugins). It provides:
- Keyed entries sorted by order, ties broken by insertion sequence
- Protection of live entries against removal and overwrite
- Banning of ids so they can never be registered
- Synchronous change notifications
- An optional append-only history log (HISTORY mode)

Subscribers are called inside the mutating call. A subscriber that mutates
the same registry re-enters it while the outer notification loop is still
running; this is not guarded.
"""

from __future__ import annotations

import itertools
import uuid
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from hookwire.core.enums import Priority, RegistryMode
from hookwire.core.exceptions import ProtectedEntryViolation
from hookwire.core.logging import get_logger
from hookwire.domain.entities.registry_entry import HistoryRecord, RegistryEntry

logger = get_logger(__name__)

T = TypeVar("T")

Subscriber = Callable[["Registry[Any]"], Any]


class Registry(Generic[T]):
    """Ordered keyed collection with protect/ban guards.

    Example:
        registry = Registry[str]("greetings", mode=RegistryMode.HISTORY)
        registry.register("hello", "Hello World", order=Priority.HIGH)
        registry.protect("hello")

        unsubscribe = registry.subscribe(lambda reg: print(len(reg)))
        registry.register("bye", "Goodbye")  # prints 2
        unsubscribe()

        [entry.id for entry in registry.list]  # ["hello", "bye"]
    """

    def __init__(self, name: str, mode: RegistryMode | str = RegistryMode.CLEAN) -> None:
        self.name = name
        self._mode = RegistryMode(mode)
        self._entries: dict[str, RegistryEntry[T]] = {}
        self._protected: set[str] = set()
        self._banned: set[str] = set()
        self._history: list[HistoryRecord] = []
        self._subscribers: dict[str, Subscriber] = {}
        self._sequence = itertools.count(1)

    # =========================================================================
    # Mode and history
    # =========================================================================

    @property
    def mode(self) -> RegistryMode:
        return self._mode

    @mode.setter
    def mode(self, value: RegistryMode | str) -> None:
        self._mode = RegistryMode(value)
        if self._mode is RegistryMode.CLEAN:
            self._history.clear()

    @property
    def history(self) -> list[HistoryRecord]:
        """Mutation log. Always empty in CLEAN mode."""
        return list(self._history)

    def cleanup(self, entry_id: str) -> int:
        """Drop the history records of one id.

        Returns:
            Number of records dropped.
        """
        before = len(self._history)
        self._history = [record for record in self._history if record.id != entry_id]
        return before - len(self._history)

    def _record(self, action: str, entry_id: str) -> None:
        if self._mode is RegistryMode.HISTORY:
            self._history.append(HistoryRecord(action=action, id=entry_id))

    # =========================================================================
    # Mutations
    # =========================================================================

    def register(
        self,
        entry_id: str,
        value: T,
        order: float = Priority.NEUTRAL,
    ) -> RegistryEntry[T]:
        """Insert or overwrite the entry at ``entry_id``.

        Args:
            entry_id: Unique key.
            value: Value to store.
            order: Sort order (lower first).

        Returns:
            The stored entry.

        Raises:
            ProtectedEntryViolation: If the id is banned, or protected while
                holding a live entry.
        """
        self.ensure_writable(entry_id)

        entry = RegistryEntry(
            id=entry_id,
            value=value,
            order=order,
            protected=entry_id in self._protected,
            sequence=next(self._sequence),
        )
        # Re-insert so list_by_id reflects the latest registration
        self._entries.pop(entry_id, None)
        self._entries[entry_id] = entry
        self._record("register", entry_id)

        logger.debug("Registry entry registered", registry=self.name, entry_id=entry_id, order=order)
        self.notify()
        return entry

    def ensure_writable(self, entry_id: str) -> None:
        """Raise if registering at ``entry_id`` would be refused.

        Raises:
            ProtectedEntryViolation: If the id is banned, or protected while
                holding a live entry.
        """
        if entry_id in self._banned:
            raise ProtectedEntryViolation(self.name, entry_id, "banned")
        if entry_id in self._protected and entry_id in self._entries:
            raise ProtectedEntryViolation(self.name, entry_id, "protected")

    def unregister(self, entry_id: str) -> bool:
        """Remove the entry at ``entry_id``.

        Returns:
            True if an entry was removed, False if the id was absent.

        Raises:
            ProtectedEntryViolation: If the id is protected.
        """
        if entry_id in self._protected:
            raise ProtectedEntryViolation(self.name, entry_id, "protected")
        if entry_id not in self._entries:
            return False

        del self._entries[entry_id]
        self._record("unregister", entry_id)

        logger.debug("Registry entry unregistered", registry=self.name, entry_id=entry_id)
        self.notify()
        return True

    def protect(self, entry_id: str) -> None:
        """Make ``entry_id`` immune to removal and overwrite."""
        self._protected.add(entry_id)
        entry = self._entries.get(entry_id)
        if entry is not None:
            entry.protected = True
        self._record("protect", entry_id)
        self.notify()

    def unprotect(self, entry_id: str) -> None:
        """Lift the protection of ``entry_id``."""
        self._protected.discard(entry_id)
        entry = self._entries.get(entry_id)
        if entry is not None:
            entry.protected = False
        self._record("unprotect", entry_id)
        self.notify()

    def ban(self, entry_id: str) -> None:
        """Prevent ``entry_id`` from ever being registered.

        A live unprotected entry at the id is removed.

        Raises:
            ProtectedEntryViolation: If the id is protected and live.
        """
        if entry_id in self._protected and entry_id in self._entries:
            raise ProtectedEntryViolation(self.name, entry_id, "protected")

        self._banned.add(entry_id)
        if self._entries.pop(entry_id, None) is not None:
            self._record("unregister", entry_id)
        self._record("ban", entry_id)

        logger.debug("Registry id banned", registry=self.name, entry_id=entry_id)
        self.notify()

    def unban(self, entry_id: str) -> None:
        """Allow ``entry_id`` to be registered again."""
        self._banned.discard(entry_id)
        self._record("unban", entry_id)
        self.notify()

    def flush(self) -> int:
        """Remove every unprotected entry.

        Returns:
            Number of entries removed.
        """
        removable = [entry_id for entry_id in self._entries if entry_id not in self._protected]
        for entry_id in removable:
            del self._entries[entry_id]
            self._record("unregister", entry_id)

        logger.debug("Registry flushed", registry=self.name, count=len(removable))
        self.notify()
        return len(removable)

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(
        self,
        callback: Subscriber,
        subscription_id: Optional[str] = None,
    ) -> Callable[[], None]:
        """Call ``callback(registry)`` after every mutation.

        Returns:
            A function that removes the subscription.
        """
        subscription_id = subscription_id or f"sub_{uuid.uuid4().hex[:12]}"
        self._subscribers[subscription_id] = callback

        def unsubscribe() -> None:
            self.unsubscribe(subscription_id)

        return unsubscribe

    def unsubscribe(self, subscription_id: str) -> None:
        self._subscribers.pop(subscription_id, None)

    def unsubscribe_all(self) -> None:
        self._subscribers.clear()

    def notify(self) -> None:
        """Call every subscriber with this registry."""
        for callback in list(self._subscribers.values()):
            callback(self)

    # =========================================================================
    # Queries
    # =========================================================================

    def get(self, entry_id: str, default: Optional[T] = None) -> Optional[T]:
        """Return the value at ``entry_id``, or ``default``."""
        entry = self._entries.get(entry_id)
        return entry.value if entry is not None else default

    def get_entry(self, entry_id: str) -> Optional[RegistryEntry[T]]:
        return self._entries.get(entry_id)

    def is_registered(self, entry_id: str) -> bool:
        return entry_id in self._entries

    def is_protected(self, entry_id: str) -> bool:
        return entry_id in self._protected

    def is_banned(self, entry_id: str) -> bool:
        return entry_id in self._banned

    @property
    def list(self) -> list[RegistryEntry[T]]:
        """Entries sorted by order, then insertion sequence."""
        return sorted(self._entries.values(), key=lambda e: (e.order, e.sequence))

    @property
    def list_by_id(self) -> dict[str, RegistryEntry[T]]:
        """Entries keyed by id, in insertion order."""
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __iter__(self) -> Iterator[RegistryEntry[T]]:
        return iter(self.list)

    def __repr__(self) -> str:
        return f"Registry(name={self.name!r}, mode={self._mode.value!r}, size={len(self)})"
