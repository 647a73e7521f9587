"""Route matcher — resolves concrete paths against the route table.

Every successful resolution is memoized by the exact input string.
The cache is append-only and never evicted: its size grows with the
number of distinct paths navigated to.
"""

import logging
import threading
from types import MappingProxyType

from waypoint.errors import RouteNotFoundError
from waypoint.routing.route import PathSegment, ResolvedMatch, split_path
from waypoint.routing.table import RouteTable

logger = logging.getLogger("waypoint.routing")


def match_segments(
    segments: tuple[PathSegment, ...],
    parts: list[str],
) -> dict[str, str] | None:
    """Compare pattern *segments* with path *parts* one by one.

    Returns the extracted parameters (``{"id": "42"}``) on a match, or
    ``None`` when the counts differ or any literal segment is not equal
    to its path segment.
    """
    if len(segments) != len(parts):
        return None

    params: dict[str, str] = {}
    for segment, part in zip(segments, parts, strict=True):
        if segment.is_param:
            params[segment.param_name or ""] = part
            continue
        if segment.value != part:
            return None
    return params


class RouteMatcher:
    """Resolves paths to ``ResolvedMatch`` results.

    Usage::

        matcher = RouteMatcher(table)
        match = matcher.resolve("users/42")
        match.params  # {"id": "42"}

    Repeated calls with the same path string return the same
    ``ResolvedMatch`` object.
    """

    __slots__ = ("_cache", "_lock", "_table")

    def __init__(self, table: RouteTable) -> None:
        self._table = table
        self._cache: dict[str, ResolvedMatch] = {}
        self._lock = threading.Lock()

    def resolve(self, path: str) -> ResolvedMatch:
        """Resolve *path* against the table.

        Raises ``RouteNotFoundError`` if no registered pattern matches.
        """
        cached = self._cache.get(path)
        if cached is not None:
            return cached

        parts = split_path(path, self._table.config.separator)
        result: ResolvedMatch | None = None

        for pattern, descriptor in self._table.all_patterns():
            params = match_segments(pattern.segments, parts)
            if params is None:
                continue
            result = ResolvedMatch(descriptor=descriptor, params=MappingProxyType(params))
            break

        if result is None:
            raise RouteNotFoundError(path)

        logger.debug("Resolved %r to pattern %r", path, result.descriptor.pattern.raw)
        with self._lock:
            # Resolution is pure, so a racing writer stored an equal match
            return self._cache.setdefault(path, result)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        """Drop all memoized matches."""
        with self._lock:
            self._cache.clear()
