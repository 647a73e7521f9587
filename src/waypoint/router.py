"""Waypoint router — pattern registration, navigation, and field binding.

Mutable during setup (pattern registration). Frozen when the first
navigation call resolves a path.
"""

import threading
from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeVar

from waypoint._internal.types import Callback, ParamStore
from waypoint.binding.dispatch import BindingDispatcher
from waypoint.binding.registry import BindingRegistry
from waypoint.config import RouterConfig
from waypoint.errors import ConfigurationError, MissingContextError
from waypoint.routing.matcher import RouteMatcher
from waypoint.routing.request import (
    NavigationContext,
    NavigationRequest,
    NavigationRequestBuilder,
)
from waypoint.routing.route import ResolvedMatch, RouteDescriptor
from waypoint.routing.table import RouteTable

ROUTES_ATTR = "__routes__"

T = TypeVar("T", bound=type)


def routable(*patterns: str) -> Callable[[T], T]:
    """Mark a class as the target of one or more patterns.

    The class is only tagged; ``Router.register_routes`` maps it::

        @routable("users/:id", "profiles/:id")
        class UserScreen: ...

        router.register_routes(UserScreen)
    """

    def decorator(cls: T) -> T:
        setattr(cls, ROUTES_ATTR, tuple(patterns))
        return cls

    return decorator


class Router:
    """Maps path patterns to targets or callbacks and opens paths.

    Usage::

        router = Router(context=launcher)
        router.map("users/:id", UserScreen)
        router.map("logout", callback=lambda params: session.clear())

        router.open("users/42")  # launcher.launch(NavigationRequest(...))
        router.open("logout")    # runs the callback

    Thread safety:
        The setup phase is single-threaded. The first navigation call
        freezes the route table under a Lock + double-check, so exactly
        one thread performs the transition.
    """

    __slots__ = (
        "_builder",
        "_context",
        "_dispatcher",
        "_freeze_lock",
        "_frozen",
        "_matcher",
        "_table",
        "config",
    )

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        context: NavigationContext | None = None,
        registry: BindingRegistry | None = None,
    ) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._context: NavigationContext | None = context
        self._table = RouteTable(self.config)
        self._matcher = RouteMatcher(self._table)
        self._builder = NavigationRequestBuilder()
        self._dispatcher = BindingDispatcher(registry or BindingRegistry(self.config))
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def registry(self) -> BindingRegistry:
        return self._dispatcher.registry

    @property
    def context(self) -> NavigationContext | None:
        return self._context

    def set_context(self, context: NavigationContext) -> None:
        """Set the context used when ``open`` is called without one."""
        self._context = context

    # -- Route registration --

    def map(
        self,
        pattern: str,
        target: Hashable | None = None,
        *,
        callback: Callback | None = None,
        default_params: Mapping[str, str] | None = None,
    ) -> RouteDescriptor:
        """Map *pattern* to a *target*, a *callback*, or both.

        Args:
            pattern: Path pattern, e.g. ``"users/:id"`` or
                ``"groups/:id/topics/:topic_id"``.
            target: What the navigation context should launch.
            callback: Called with the merged parameters instead of
                launching *target*.
            default_params: Parameters merged under the path parameters.
        """
        if target is None and callback is None:
            msg = f"Route {pattern!r} needs a target or a callback."
            raise ConfigurationError(msg)
        descriptor = RouteDescriptor(
            target=target,
            callback=callback,
            default_params=default_params or {},
        )
        return self._table.register(pattern, descriptor)

    def register_routes(self, *targets: type) -> "Router":
        """Map every pattern declared on *targets* with ``@routable``.

        Classes without their own declared patterns are skipped;
        patterns are not inherited by subclasses.
        """
        for target in targets:
            for pattern in vars(target).get(ROUTES_ATTR, ()):
                self.map(pattern, target)
        return self

    # -- Navigation --

    def params_for(self, url: str) -> ResolvedMatch:
        """Resolve *url*. Raises ``RouteNotFoundError`` if nothing matches."""
        self._ensure_frozen()
        return self._matcher.resolve(url)

    def is_callback_url(self, url: str) -> bool:
        """Whether *url* resolves to a callback route."""
        return self.params_for(url).descriptor.is_callback

    def request_for(
        self,
        url: str,
        context: NavigationContext | None = None,
    ) -> NavigationRequest | None:
        """Build the request for *url*, or ``None`` for a callback route.

        ``new_task`` is set when *context* is omitted or is the router's
        own configured context.
        """
        match = self.params_for(url)
        if match.descriptor.is_callback:
            return None
        new_task = context is None or context is self._context
        return self._builder.request_for(url, match, new_task=new_task)

    def open(self, url: str, context: NavigationContext | None = None) -> Any:
        """Open *url*: run its callback, or launch its target.

        Raises ``MissingContextError`` if no context is passed and none
        was configured, and ``RouteNotFoundError`` if nothing matches.
        """
        if context is None:
            context = self._context
        if context is None:
            msg = f"You need to supply a context for {self!r} to open {url!r}."
            raise MissingContextError(msg)

        match = self.params_for(url)
        callback = match.descriptor.callback
        if callback is not None:
            return callback(self._builder.build(match))

        request = self._builder.request_for(url, match, new_task=context is self._context)
        return context.launch(request)

    # -- Binding --

    def inject(self, target: Any, store: ParamStore | None = None) -> None:
        """Copy parameters into *target*'s bound fields.

        When *store* is omitted, the target's own ``params`` mapping is
        used (a launched screen's navigation parameters).
        """
        if store is None:
            store = getattr(target, "params", None)
            if store is None:
                store = {}
        self._dispatcher.inject(target, store)

    def save(self, store: ParamStore, *targets: Any, flatten: bool | None = None) -> None:
        self._dispatcher.save(store, *targets, flatten=flatten)

    def save_flat(self, store: ParamStore, *targets: Any) -> None:
        self._dispatcher.save_flat(store, *targets)

    def save_single(self, store: ParamStore, target: Any, flatten: bool) -> None:
        self._dispatcher.save_single(store, target, flatten)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._table.freeze()
            self._frozen = True

    def __repr__(self) -> str:
        return f"<Router routes={len(self._table)}>"


_default_router: Router | None = None
_default_lock = threading.Lock()


def default_router() -> Router:
    """Return the process-wide shared router, creating it on first use."""
    global _default_router
    if _default_router is None:
        with _default_lock:
            if _default_router is None:
                _default_router = Router()
    return _default_router
