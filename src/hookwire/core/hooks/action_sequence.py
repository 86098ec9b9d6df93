"""ActionSequence - ordered sequential execution of hook subscribers.

Shared by ``HookEngine.run`` and ``HookEngine.run_sync``. Given the
subscribers of one hook and the caller's params, the sequence:

1. builds one ``ActionContext(hook=name, params=params)``
2. calls each callback as ``callback(*params, context)``, lowest order
   first, registration order among equal orders
3. (async only) awaits the callback's result before calling the next one
4. returns the context

The first exception stops the sequence. It is logged and re-raised as is;
the remaining subscribers are not called and no context is returned.
"""

import inspect
from typing import Any, Iterable

from hookwire.core.context import reset_current_action, set_current_action
from hookwire.core.logging import get_logger
from hookwire.domain.entities.action_context import ActionContext
from hookwire.domain.entities.hook_declaration import HookDeclaration

logger = get_logger(__name__)


def order_declarations(declarations: Iterable[HookDeclaration]) -> list[HookDeclaration]:
    """Sort declarations by order, then registration sequence."""
    return sorted(declarations, key=lambda d: d.sort_key)


async def run_sequence(
    name: str,
    declarations: Iterable[HookDeclaration],
    params: tuple[Any, ...],
) -> ActionContext:
    """Run async subscribers one after another.

    Callbacks may be coroutine functions or plain functions; any awaitable
    result is awaited before the next subscriber starts.

    Args:
        name: Hook name, stored on the context.
        declarations: Subscribers of the hook.
        params: Positional params passed to every callback.

    Returns:
        The context after the last subscriber ran.
    """
    sequence = order_declarations(declarations)
    context = ActionContext(hook=name, params=params)

    if sequence:
        logger.debug("Running hook", hook=name, hook_count=len(sequence))

    for declaration in sequence:
        token = set_current_action(context)
        try:
            result = declaration.callback(*params, context)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(
                "Hook callback failed",
                hook=name,
                hook_id=declaration.id,
                domain=declaration.domain,
                error=str(e),
            )
            raise
        finally:
            reset_current_action(token)

    return context


def run_sequence_sync(
    name: str,
    declarations: Iterable[HookDeclaration],
    params: tuple[Any, ...],
) -> ActionContext:
    """Synchronous analogue of ``run_sequence``.

    A callback that returns a coroutine cannot be awaited here; the
    coroutine is closed unstarted and a warning is logged.
    """
    sequence = order_declarations(declarations)
    context = ActionContext(hook=name, params=params)

    if sequence:
        logger.debug("Running sync hook", hook=name, hook_count=len(sequence))

    for declaration in sequence:
        token = set_current_action(context)
        try:
            result = declaration.callback(*params, context)
        except Exception as e:
            logger.error(
                "Sync hook callback failed",
                hook=name,
                hook_id=declaration.id,
                domain=declaration.domain,
                error=str(e),
            )
            raise
        finally:
            reset_current_action(token)

        if inspect.iscoroutine(result):
            result.close()
            logger.warning(
                "Sync hook callback returned a coroutine, register it with register() instead",
                hook=name,
                hook_id=declaration.id,
            )

    return context
