"""Action context threaded through a hook's subscribers."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ActionContext:
    """Context passed as the last argument to every hook callback.

    One context is built per ``run``/``run_sync`` call and handed to each
    subscriber in turn, so earlier subscribers can leave values for later
    ones. Values are stored with item access:

        def add_title(route, context):
            context["title"] = route.path.title()

    Attributes:
        hook: Name of the hook being run.
        params: The positional params the hook was run with.
        data: Values set by subscribers.
    """

    hook: str
    params: tuple[Any, ...] = ()
    data: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def get(self, key: str, default: Any = None) -> Any:
        """Return a subscriber-provided value, or ``default``."""
        return self.data.get(key, default)
