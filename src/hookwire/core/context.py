"""Current action tracking using ContextVars.

While a hook callback runs, the ActionContext of the enclosing run is
available from anywhere in the call stack (e.g. deep inside a component
factory) without explicit parameter passing. Each asyncio task sees its
own value, so concurrent runs of the same hook do not leak into each other.
"""

from contextvars import ContextVar, Token
from typing import Optional

from hookwire.domain.entities.action_context import ActionContext

_current_action: ContextVar[Optional[ActionContext]] = ContextVar(
    "current_action", default=None
)


def get_current_action() -> Optional[ActionContext]:
    """Get the context of the hook run currently executing, if any."""
    return _current_action.get()


def set_current_action(context: Optional[ActionContext]) -> Token:
    """Set the current action context.

    Returns:
        Token to pass to ``reset_current_action``.
    """
    return _current_action.set(context)


def reset_current_action(token: Token) -> None:
    """Restore the action context that was current before ``set_current_action``."""
    _current_action.reset(token)
