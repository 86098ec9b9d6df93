"""Registry entry and history record entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Generic, TypeVar

from hookwire.core.enums import Priority

T = TypeVar("T")


@dataclass
class RegistryEntry(Generic[T]):
    """A value held by a Registry.

    Attributes:
        id: Unique key within the registry.
        value: The registered value.
        order: Sort order (lower first).
        protected: Whether the entry is immune to removal and overwrite.
        banned: Whether the id is banned (always False for live entries).
        sequence: Insertion counter, the order tie-break.
    """

    id: str
    value: T
    order: float = Priority.NEUTRAL
    protected: bool = False
    banned: bool = False
    sequence: int = 0


@dataclass(frozen=True)
class HistoryRecord:
    """One mutation in a HISTORY-mode registry's audit log."""

    action: str
    id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
