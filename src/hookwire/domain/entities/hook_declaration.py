"""Hook declaration entity."""

from dataclasses import dataclass
from typing import Any, Callable

from hookwire.core.enums import DEFAULT_DOMAIN, HookType, Priority


@dataclass(frozen=True)
class HookDeclaration:
    """A callback attached to a hook name.

    Declarations are never mutated. Registering the same id again replaces
    the declaration in the engine's indices.

    Attributes:
        id: Unique identifier within its hook type.
        name: The hook name this callback is attached to.
        callback: Called as ``callback(*params, context)``.
        order: Execution order (lower runs first).
        domain: Group tag used for bulk removal.
        hook_type: Namespace the declaration lives in.
        sequence: Engine-wide registration counter, the order tie-break.
    """

    id: str
    name: str
    callback: Callable[..., Any]
    order: float = Priority.NEUTRAL
    domain: str = DEFAULT_DOMAIN
    hook_type: HookType = HookType.ASYNC
    sequence: int = 0

    @property
    def sort_key(self) -> tuple[float, int]:
        return (self.order, self.sequence)
