"""Waypoint — declarative path routing and field binding for navigation.

Maps path patterns like ``"users/:id"`` to screens or callbacks, and
copies navigation parameters into a screen's fields through generated
binders.

Basic usage::

    from waypoint import Router

    router = Router(context=launcher)
    router.map("users/:id", UserScreen)
    router.map("groups/:id/topics/:topic_id", TopicScreen)

    router.open("groups/5/topics/20")
    # launcher.launch(NavigationRequest(target=TopicScreen,
    #                                   params={"id": "5", "topic_id": "20"}))

Binding::

    from waypoint import RouteProperty, generate_binder

    router.registry.register(
        UserScreen,
        generate_binder(UserScreen, [RouteProperty("user_id", key="id", kind="int")]),
    )
    router.inject(screen, {"id": "42"})  # screen.user_id == 42
"""

__version__ = "0.1.0-dev"
__all__ = [
    "BindingDispatcher",
    "BindingInvocationError",
    "BindingRegistry",
    "ConfigurationError",
    "MissingContextError",
    "NavigationContext",
    "NavigationRequest",
    "RouteNotFoundError",
    "RouteProperty",
    "Router",
    "RouterConfig",
    "WaypointError",
    "default_router",
    "generate_binder",
    "routable",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "BindingDispatcher": "waypoint.binding.dispatch",
    "BindingInvocationError": "waypoint.errors",
    "BindingRegistry": "waypoint.binding.registry",
    "ConfigurationError": "waypoint.errors",
    "MissingContextError": "waypoint.errors",
    "NavigationContext": "waypoint.routing.request",
    "NavigationRequest": "waypoint.routing.request",
    "RouteNotFoundError": "waypoint.errors",
    "RouteProperty": "waypoint.binding.generate",
    "Router": "waypoint.router",
    "RouterConfig": "waypoint.config",
    "WaypointError": "waypoint.errors",
    "default_router": "waypoint.router",
    "generate_binder": "waypoint.binding.generate",
    "routable": "waypoint.router",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
