"""Hook engine - named, ordered, domain-scoped callback dispatch.

The HookEngine is the core of Hookwire's extensibility. It provides:
- Registration of callbacks under a hook name with an order and a domain
- Two independent namespaces, async (``run``) and sync (``run_sync``)
- O(1) removal of one callback by id, and of a whole domain group
- Sequential execution through the ActionSequence

Each namespace keeps three indices that are always updated together:

    by_id:     id -> HookDeclaration
    by_name:   name -> ids (insertion ordered)
    by_domain: name -> domain -> ids

Every id reachable from ``by_domain`` is also in ``by_name`` and ``by_id``.

Example:
    engine = HookEngine()

    async def add_user_routes(routes, context):
        routes.register(Route(id="users", path="/users"))

    engine.register("routes-init", add_user_routes, Priority.HIGH, domain="Users")
    context = await engine.run("routes-init", route_registry)

    # Later, remove every callback the Users plugin attached to routes-init
    engine.unregister_domain("routes-init", "Users")
"""

from __future__ import annotations

import itertools
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from hookwire.core.enums import DEFAULT_DOMAIN, HookType, Priority
from hookwire.core.hooks.action_sequence import (
    order_declarations,
    run_sequence,
    run_sequence_sync,
)
from hookwire.core.hooks.domain_handle import DomainHandle
from hookwire.core.logging import get_logger
from hookwire.domain.entities.action_context import ActionContext
from hookwire.domain.entities.hook_declaration import HookDeclaration

logger = get_logger(__name__)


@dataclass
class HookIndex:
    """The three indices of one hook namespace."""

    by_id: dict[str, HookDeclaration] = field(default_factory=dict)
    by_name: dict[str, dict[str, None]] = field(default_factory=dict)
    by_domain: dict[str, dict[str, set[str]]] = field(default_factory=dict)

    def add(self, declaration: HookDeclaration) -> None:
        self.by_id[declaration.id] = declaration
        self.by_name.setdefault(declaration.name, {})[declaration.id] = None
        domains = self.by_domain.setdefault(declaration.name, {})
        domains.setdefault(declaration.domain, set()).add(declaration.id)

    def remove(self, hook_id: str) -> Optional[HookDeclaration]:
        declaration = self.by_id.pop(hook_id, None)
        if declaration is None:
            return None

        name, domain = declaration.name, declaration.domain

        ids = self.by_name.get(name)
        if ids is not None:
            ids.pop(hook_id, None)
            if not ids:
                del self.by_name[name]

        domains = self.by_domain.get(name)
        if domains is not None:
            domain_ids = domains.get(domain)
            if domain_ids is not None:
                domain_ids.discard(hook_id)
                if not domain_ids:
                    del domains[domain]
            if not domains:
                del self.by_domain[name]

        return declaration

    def declarations(self, name: str) -> list[HookDeclaration]:
        return [self.by_id[hook_id] for hook_id in self.by_name.get(name, ())]

    def clear(self) -> int:
        count = len(self.by_id)
        self.by_id.clear()
        self.by_name.clear()
        self.by_domain.clear()
        return count


class HookEngine:
    """Named dispatch points with ordered, domain-scoped subscribers.

    One engine is created per runtime and handed to every consumer; it is
    not a module-level singleton.
    """

    def __init__(self, id_prefix: str = "hook") -> None:
        """Initialize the hook engine.

        Args:
            id_prefix: Prefix for generated hook ids.
        """
        self._id_prefix = id_prefix
        self._indices: dict[HookType, HookIndex] = {
            HookType.ASYNC: HookIndex(),
            HookType.SYNC: HookIndex(),
        }
        self._sequence = itertools.count(1)
        self._domains: dict[str, DomainHandle] = {}

    # =========================================================================
    # Registration
    # =========================================================================

    def register(
        self,
        name: str,
        callback: Callable[..., Any],
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> str:
        """Attach an async-namespace callback to ``name``.

        Args:
            name: Hook name (e.g. "plugin-init").
            callback: Called as ``callback(*params, context)``. May be a
                coroutine function or a plain function.
            order: Execution order. Lower runs first; see ``Priority``.
            hook_id: Optional id. Re-using an existing id replaces that
                declaration (last write wins).
            domain: Group tag for ``unregister_domain``.

        Returns:
            The hook id.
        """
        return self._add(HookType.ASYNC, name, callback, order, hook_id, domain)

    def register_sync(
        self,
        name: str,
        callback: Callable[..., Any],
        order: float = Priority.NEUTRAL,
        hook_id: Optional[str] = None,
        domain: str = DEFAULT_DOMAIN,
    ) -> str:
        """Attach a sync-namespace callback to ``name``. See ``register``."""
        return self._add(HookType.SYNC, name, callback, order, hook_id, domain)

    def _add(
        self,
        hook_type: HookType,
        name: str,
        callback: Callable[..., Any],
        order: float,
        hook_id: Optional[str],
        domain: str,
    ) -> str:
        hook_id = hook_id or f"{self._id_prefix}_{uuid.uuid4().hex[:12]}"
        index = self._indices[hook_type]

        previous = index.remove(hook_id)
        if previous is not None:
            logger.debug(
                "Hook overwritten",
                hook_id=hook_id,
                hook=name,
                previous_hook=previous.name,
                hook_type=hook_type.value,
            )

        index.add(
            HookDeclaration(
                id=hook_id,
                name=name,
                callback=callback,
                order=order,
                domain=domain,
                hook_type=hook_type,
                sequence=next(self._sequence),
            )
        )

        logger.debug(
            "Hook registered",
            hook_id=hook_id,
            hook=name,
            order=order,
            domain=domain,
            hook_type=hook_type.value,
        )
        return hook_id

    # =========================================================================
    # Removal
    # =========================================================================

    def unregister(self, hook_id: str) -> bool:
        """Remove a callback by id, from whichever namespace holds it.

        Returns:
            True if something was removed, False for unknown ids.
        """
        removed = False
        for hook_type, index in self._indices.items():
            declaration = index.remove(hook_id)
            if declaration is not None:
                removed = True
                logger.debug(
                    "Hook unregistered",
                    hook_id=hook_id,
                    hook=declaration.name,
                    hook_type=hook_type.value,
                )
        return removed

    def unregister_domain(self, name: str, domain: str) -> int:
        """Remove every callback attached to ``name`` under ``domain``.

        Both namespaces are cleaned. Other domains of the same hook,
        including "default", are left alone.

        Returns:
            Number of callbacks removed.
        """
        count = 0
        for index in self._indices.values():
            ids = list(index.by_domain.get(name, {}).get(domain, ()))
            for hook_id in ids:
                index.remove(hook_id)
            count += len(ids)

        if count:
            logger.debug("Hook domain unregistered", hook=name, domain=domain, count=count)
        return count

    def flush(self, name: str, hook_type: HookType | str = HookType.ASYNC) -> int:
        """Remove every callback of ``name`` in one namespace, across all domains.

        Returns:
            Number of callbacks removed.
        """
        index = self._indices[HookType(hook_type)]
        ids = list(index.by_name.get(name, ()))
        for hook_id in ids:
            index.remove(hook_id)

        logger.debug("Hook flushed", hook=name, hook_type=HookType(hook_type).value, count=len(ids))
        return len(ids)

    def clear(self) -> int:
        """Remove every callback from both namespaces.

        Returns:
            Number of callbacks removed.
        """
        count = sum(index.clear() for index in self._indices.values())
        logger.debug("Hooks cleared", count=count)
        return count

    # =========================================================================
    # Domains
    # =========================================================================

    def domain(self, domain: str) -> DomainHandle:
        """Get the live handle for ``domain``, creating it on first use.

        Raises:
            ValueError: For the reserved "default" domain.
        """
        handle = self._domains.get(domain)
        if handle is None:
            handle = DomainHandle(self, domain)
            self._domains[domain] = handle
        return handle

    def _release_domain(self, handle: DomainHandle) -> None:
        if self._domains.get(handle.domain) is handle:
            del self._domains[handle.domain]

    def domains(self, name: str, hook_type: HookType | str = HookType.ASYNC) -> list[str]:
        """Domains that hold at least one callback for ``name``."""
        return sorted(self._indices[HookType(hook_type)].by_domain.get(name, {}))

    # =========================================================================
    # Queries
    # =========================================================================

    def get(
        self,
        hook_id: str,
        hook_type: HookType | str | None = None,
    ) -> Optional[HookDeclaration]:
        """Look up a declaration by id.

        Without ``hook_type`` the async namespace is searched first.
        """
        if hook_type is not None:
            return self._indices[HookType(hook_type)].by_id.get(hook_id)
        for index in self._indices.values():
            declaration = index.by_id.get(hook_id)
            if declaration is not None:
                return declaration
        return None

    def get_hooks(
        self,
        name: str,
        hook_type: HookType | str = HookType.ASYNC,
    ) -> list[HookDeclaration]:
        """Declarations of ``name`` in execution order."""
        return order_declarations(self._indices[HookType(hook_type)].declarations(name))

    def list(self, hook_type: HookType | str = HookType.ASYNC) -> list[str]:
        """Alphabetical names of hooks holding at least one callback."""
        return sorted(self._indices[HookType(hook_type)].by_name)

    # =========================================================================
    # Execution
    # =========================================================================

    async def run(self, name: str, *params: Any) -> ActionContext:
        """Run the async subscribers of ``name`` in order.

        Args:
            name: Hook name.
            *params: Passed to every callback before the context.

        Returns:
            The ActionContext threaded through the subscribers.

        Raises:
            Exception: Whatever the first failing subscriber raised.
        """
        declarations = self._indices[HookType.ASYNC].declarations(name)
        return await run_sequence(name, declarations, params)

    def run_sync(self, name: str, *params: Any) -> ActionContext:
        """Run the sync subscribers of ``name`` in order. See ``run``."""
        declarations = self._indices[HookType.SYNC].declarations(name)
        return run_sequence_sync(name, declarations, params)
