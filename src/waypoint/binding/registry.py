"""Binder registry — resolves generated binders by type, with ancestry walking.

Generated binder modules register a companion for each type that has
bound fields. Lookups walk a type's ancestry until a companion is found
or a framework type is reached, and the outcome (hit or miss) is cached
for the original type and every type walked. Once a type is resolved
for a role it is never resolved again.

Thread safety:
    Companions and parents are registered at import time.
    Cache writes hold a Lock; entries are never changed once written,
    and resolution is deterministic, so a racing writer stores the
    same value.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any, Literal

from waypoint._internal.types import Injector, Saver
from waypoint.config import RouterConfig
from waypoint.errors import ConfigurationError

logger = logging.getLogger("waypoint.binding")

Role = Literal["inject", "save"]

_ROLES: tuple[Role, ...] = ("inject", "save")


def type_name(cls: type) -> str:
    """Qualified name used for framework checks and log messages."""
    return f"{cls.__module__}.{cls.__qualname__}"


class BindingRegistry:
    """Generated binders keyed by type, plus resolution caches.

    Usage::

        registry = BindingRegistry()

        @registry.binder(UserScreen)
        class UserScreenBinder:
            @staticmethod
            def inject(target, store): ...

            @staticmethod
            def save(target, store, flatten): ...

        registry.resolve_injector(UserScreen)  # UserScreenBinder.inject
        registry.resolve_injector(AdminScreen)  # inherited if AdminScreen(UserScreen)
    """

    __slots__ = ("_caches", "_companions", "_config", "_lock", "_parents")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._companions: dict[type, Any] = {}
        self._parents: dict[type, type | None] = {}
        self._caches: dict[Role, dict[type, Callable[..., None] | None]] = {
            role: {} for role in _ROLES
        }
        self._lock = threading.Lock()

    # -- Registration (generated code) --

    def companion_name(self, cls: type) -> str:
        """Conventional name of the generated companion, for log messages."""
        return type_name(cls) + self._config.binder_suffix

    def register(self, cls: type, companion: Any) -> None:
        """Record *companion* as the generated binder for *cls*.

        *companion* exposes ``inject(target, store)`` and/or
        ``save(target, store, flatten)``; a missing entry point resolves
        the same as no binder for that role.
        """
        self._companions[cls] = companion

    def binder(self, cls: type) -> Callable[[Any], Any]:
        """Decorator form of ``register``."""

        def decorator(companion: Any) -> Any:
            self.register(cls, companion)
            return companion

        return decorator

    def declare(self, cls: type, parent: type | None) -> None:
        """Record *parent* as the type to try when *cls* has no binder.

        Undeclared types fall back to their first base class. Declaring
        ``None`` stops the walk at *cls*.
        """
        self._parents[cls] = parent

    def parent_of(self, cls: type) -> type | None:
        if cls in self._parents:
            return self._parents[cls]
        return cls.__base__

    # -- Resolution --

    def is_framework_type(self, cls: type) -> bool:
        return type_name(cls).startswith(self._config.framework_prefixes)

    def resolve_injector(self, cls: type) -> Injector | None:
        """Return the injector for *cls* (or an ancestor), or ``None``."""
        return self._resolve(cls, "inject")

    def resolve_saver(self, cls: type) -> Saver | None:
        """Return the saver for *cls* (or an ancestor), or ``None``."""
        return self._resolve(cls, "save")

    def cached(self, cls: type, role: Role) -> bool:
        """Whether *cls* already has a cached outcome for *role*."""
        return cls in self._caches[role]

    def clear_cache(self) -> None:
        """Forget every resolution outcome. Registered companions are kept."""
        with self._lock:
            for cache in self._caches.values():
                cache.clear()

    def _resolve(self, cls: type, role: Role) -> Callable[..., None] | None:
        cache = self._caches[role]
        walked: list[type] = []
        current: type | None = cls
        found: Callable[..., None] | None = None

        while current is not None:
            if current in cache:
                logger.debug("HIT: %s %s cached", type_name(current), role)
                found = cache[current]
                break
            walked.append(current)

            if self.is_framework_type(current):
                logger.debug("MISS: reached framework type %s", type_name(current))
                break

            companion = self._companions.get(current)
            if companion is not None:
                found = getattr(companion, role, None)
                logger.debug("HIT: %s %s", self.companion_name(current), role)
                break

            current = self.parent_of(current)
            if current is None:
                break
            if current in walked:
                msg = f"Declared parents of {type_name(cls)} form a cycle at {type_name(current)}."
                raise ConfigurationError(msg)
            logger.debug("Not found, trying parent %s", type_name(current))

        with self._lock:
            for walked_cls in walked:
                cache.setdefault(walked_cls, found)
        return found
