"""Waypoint exception hierarchy.

Shared across the route table, matcher, binding registry, and dispatcher
so every module raises and catches the same types.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a route pattern or registration is invalid.

    Surfaces during setup, before any navigation happens.
    """


class RouteNotFoundError(WaypointError):
    """No registered pattern matches the given path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No route found for url {path!r}")


class MissingContextError(WaypointError):
    """A navigation call was made with no context to launch into."""


class BindingInvocationError(WaypointError):
    """A generated binder raised while injecting or saving.

    The original failure is kept as ``__cause__``.
    """

    def __init__(self, target_type: type, role: str, detail: str = "") -> None:
        self.target_type = target_type
        self.role = role
        name = f"{target_type.__module__}.{target_type.__qualname__}"
        message = f"Unable to {role} for {name}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
