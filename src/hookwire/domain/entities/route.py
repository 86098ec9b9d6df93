"""Route entity."""

from dataclasses import dataclass, field
from typing import Any, Optional

from hookwire.core.enums import Priority


@dataclass
class Route:
    """A path bound to a registered component.

    Routes are mutable until stored: ``register-route`` subscribers may
    adjust any field before the route registry keeps it.

    Attributes:
        id: Unique route id.
        path: URL path, e.g. "/users".
        component: Component id (or object) rendered for the path.
        order: Matching order (lower first).
        exact: Whether only the exact path matches.
        meta: Free-form values for subscribers.
    """

    id: str
    path: str
    component: Optional[Any] = None
    order: float = Priority.NEUTRAL
    exact: bool = True
    meta: dict[str, Any] = field(default_factory=dict)

    def matches(self, path: str) -> bool:
        """Check whether this route handles ``path``."""
        own = self.path.rstrip("/") or "/"
        other = path.rstrip("/") or "/"
        if self.exact:
            return own == other
        if own == "/":
            return True
        return other == own or other.startswith(own + "/")
