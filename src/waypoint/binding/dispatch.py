"""Binder dispatch — run resolved binders and normalize their failures.

A type with no binder anywhere in its ancestry is left alone: not every
type has bound fields. Anything a binder raises comes back as a single
``BindingInvocationError`` with the original exception as its cause.
"""

import logging
from typing import Any

from waypoint._internal.types import ParamStore
from waypoint.binding.registry import BindingRegistry, type_name
from waypoint.errors import BindingInvocationError

logger = logging.getLogger("waypoint.binding")


class BindingDispatcher:
    """Injects store values into targets and saves targets into stores.

    Usage::

        dispatcher = BindingDispatcher(registry)
        dispatcher.inject(screen, {"id": "42"})

        store = {}
        dispatcher.save(store, user, profile)              # with hierarchy
        dispatcher.save(store, user, profile, flatten=True)
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: BindingRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> BindingRegistry:
        return self._registry

    def inject(self, target: Any, store: ParamStore) -> None:
        """Copy values from *store* onto *target* using its injector."""
        cls = type(target)
        logger.debug("Looking up injector for %s", type_name(cls))
        injector = self._registry.resolve_injector(cls)
        if injector is None:
            return
        try:
            injector(target, store)
        except BindingInvocationError:
            # Nested dispatch already wrapped the original failure
            raise
        except Exception as exc:
            raise BindingInvocationError(cls, "inject", str(exc)) from exc

    def save(self, store: ParamStore, *targets: Any, flatten: bool | None = None) -> None:
        """Save each target into *store*.

        When *flatten* is not given and more than one target is passed,
        a trailing ``bool`` is taken as the flatten flag for the others::

            dispatcher.save(store, a, b, True)  # same as flatten=True
        """
        items = list(targets)
        if flatten is None:
            flatten = False
            if len(items) > 1 and isinstance(items[-1], bool):
                flatten = items.pop()

        for target in items:
            self.save_single(store, target, flatten)

    def save_flat(self, store: ParamStore, *targets: Any) -> None:
        """Save each target without its parents' properties."""
        for target in targets:
            self.save_single(store, target, True)

    def save_single(self, store: ParamStore, target: Any, flatten: bool) -> None:
        """Save one target into *store* using its saver."""
        cls = type(target)
        logger.debug("Looking up saver for %s", type_name(cls))
        saver = self._registry.resolve_saver(cls)
        if saver is None:
            return
        try:
            saver(target, store, flatten)
        except BindingInvocationError:
            # Nested dispatch already wrapped the original failure
            raise
        except Exception as exc:
            raise BindingInvocationError(cls, "save", str(exc)) from exc
