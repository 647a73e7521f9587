"""Field binding for navigation targets.

Generated binders copy named parameters between a target's attributes
and a parameter store. The registry finds the binder for a type, walking
its ancestry; the dispatcher runs it.

Usage::

    from waypoint.binding import BindingDispatcher, BindingRegistry
    from waypoint.binding import RouteProperty, generate_binder

    registry = BindingRegistry()
    registry.register(
        UserScreen,
        generate_binder(UserScreen, [RouteProperty("user_id", key="id", kind="int")]),
    )

    BindingDispatcher(registry).inject(screen, {"id": "42"})
"""

from waypoint.binding.dispatch import BindingDispatcher
from waypoint.binding.generate import RouteProperty, generate_binder
from waypoint.binding.registry import BindingRegistry

__all__ = [
    "BindingDispatcher",
    "BindingRegistry",
    "RouteProperty",
    "generate_binder",
]
