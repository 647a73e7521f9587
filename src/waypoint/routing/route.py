"""Route patterns, descriptors, and matches as frozen dataclasses."""

from collections.abc import Hashable
from dataclasses import dataclass, field
from types import MappingProxyType

from waypoint._internal.types import Callback, ParameterMap
from waypoint.config import RouterConfig
from waypoint.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:  ``users``  (is_param=False)
    Param:    ``:id``    (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A registered pattern string and its parsed segments."""

    raw: str
    segments: tuple[PathSegment, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(s.param_name for s in self.segments if s.param_name is not None)

    def __len__(self) -> int:
        return len(self.segments)


EMPTY_PATTERN = RoutePattern(raw="", segments=())


def split_path(path: str, separator: str = "/") -> list[str]:
    """Split *path* into segments, dropping trailing empty segments.

    Leading and inner empty segments are kept and compared literally::

        "users/42"   -> ["users", "42"]
        "users/42/"  -> ["users", "42"]
        "/users/42"  -> ["", "users", "42"]
    """
    parts = path.split(separator)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def parse_pattern(raw: str, config: RouterConfig | None = None) -> RoutePattern:
    """Parse a pattern string into a ``RoutePattern``.

    Examples::

        "users"                      -> [PathSegment("users")]
        "users/:id"                  -> [PathSegment("users"), PathSegment(":id", True, "id")]
        "groups/:id/topics/:topic_id" -> four segments, two parameters

    Raises ``ConfigurationError`` for an unnamed token (a bare ``:``) or a
    parameter name used twice in the same pattern.
    """
    cfg = config or RouterConfig()
    marker = cfg.param_marker
    segments: list[PathSegment] = []
    seen: set[str] = set()

    for part in split_path(raw, cfg.separator):
        if not part.startswith(marker):
            segments.append(PathSegment(value=part))
            continue

        name = part[len(marker) :]
        if not name:
            msg = f"Route pattern {raw!r} has a parameter token with no name."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route pattern {raw!r} uses parameter {name!r} more than once."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(PathSegment(value=part, is_param=True, param_name=name))

    return RoutePattern(raw=raw, segments=tuple(segments))


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """What a pattern routes to.

    Either a *target* to launch through a navigation context, or a
    *callback* invoked directly with the merged parameters.
    """

    pattern: RoutePattern = EMPTY_PATTERN
    target: Hashable | None = None
    callback: Callback | None = None
    default_params: ParameterMap = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        # Read-only copy so a caller's dict can't change a registered route
        object.__setattr__(self, "default_params", MappingProxyType(dict(self.default_params)))

    @property
    def is_callback(self) -> bool:
        return self.callback is not None


@dataclass(frozen=True, slots=True)
class ResolvedMatch:
    """Result of a successful route match."""

    descriptor: RouteDescriptor
    params: ParameterMap = field(hash=False)
