"""Route table — pattern string to descriptor, in registration order.

Patterns are registered during setup and the table is frozen before
the first navigation call.

Thread safety:
    Registration holds a Lock and publishes a fresh tuple snapshot.
    Readers iterate the snapshot they were handed, so a late
    registration never changes an iteration already in progress.
"""

import logging
import threading
from collections.abc import Iterator
from dataclasses import replace

from waypoint.config import RouterConfig
from waypoint.routing.route import RouteDescriptor, RoutePattern, parse_pattern

logger = logging.getLogger("waypoint.routing")


class RouteTable:
    """Registered patterns and their descriptors.

    Usage::

        table = RouteTable()
        table.register("users/:id", RouteDescriptor(target=UserScreen))
        table.freeze()
        for pattern, descriptor in table.all_patterns():
            ...

    Re-registering a pattern string replaces its descriptor but keeps the
    pattern's original position, so the first-registered pattern still
    wins when two patterns could match the same path.
    """

    __slots__ = ("_config", "_entries", "_frozen", "_lock", "_snapshot")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._entries: dict[str, RouteDescriptor] = {}
        self._snapshot: tuple[tuple[RoutePattern, RouteDescriptor], ...] = ()
        self._frozen = False
        self._lock = threading.Lock()

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        pattern: str,
        descriptor: RouteDescriptor | None = None,
    ) -> RouteDescriptor:
        """Store (or overwrite) the descriptor for *pattern*.

        *pattern* is parsed with this table's config. When *descriptor* is
        given, its target, callback, and defaults are kept and its pattern
        is replaced by the parsed one. Returns the stored descriptor.
        """
        parsed = parse_pattern(pattern, self._config)
        if descriptor is None:
            stored = RouteDescriptor(pattern=parsed)
        else:
            stored = replace(descriptor, pattern=parsed)

        with self._lock:
            if self._frozen:
                msg = (
                    "Cannot register routes after the router has started navigating. "
                    "Map every pattern during setup."
                )
                raise RuntimeError(msg)
            if pattern in self._entries:
                logger.debug("Replacing route for pattern %r", pattern)
            self._entries[pattern] = stored
            self._snapshot = tuple((d.pattern, d) for d in self._entries.values())
        return stored

    def freeze(self) -> None:
        """End the setup phase. No more patterns can be registered."""
        with self._lock:
            self._frozen = True

    def all_patterns(self) -> Iterator[tuple[RoutePattern, RouteDescriptor]]:
        """Yield ``(pattern, descriptor)`` pairs in registration order."""
        return iter(self._snapshot)

    def get(self, pattern: str) -> RouteDescriptor | None:
        """Look up a descriptor by its exact pattern string."""
        return self._entries.get(pattern)

    def __len__(self) -> int:
        return len(self._snapshot)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._entries
