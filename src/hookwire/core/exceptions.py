"""Exceptions raised by the Hookwire core."""


class HookwireError(Exception):
    """Base class for Hookwire errors."""


class ProtectedEntryViolation(HookwireError):
    """Raised when a registry mutation targets a protected or banned id.

    Args:
        registry: Name of the registry that refused the mutation.
        entry_id: The id that was targeted.
        reason: Either "protected" or "banned".

    Example:
        registry.protect("core-id")
        registry.unregister("core-id")  # raises ProtectedEntryViolation
    """

    def __init__(self, registry: str, entry_id: str, reason: str = "protected") -> None:
        self.registry = registry
        self.entry_id = entry_id
        self.reason = reason
        super().__init__(f"Registry '{registry}': id '{entry_id}' is {reason}")


class DomainDisposedError(HookwireError):
    """Raised when registering through a DomainHandle that was disposed."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"Domain handle '{domain}' has been disposed")
