"""Declarative binders — build a companion from a list of bound properties.

Binder companions are normally produced ahead of time by a code
generator. ``generate_binder`` builds the same shape at import time from
a list of ``RouteProperty`` declarations, for apps that don't run the
generator and for tests.

Supported property kinds: ``str``, ``int``, ``float``, ``bool``, and
``raw`` (value copied as-is). Missing keys leave the attribute untouched.
Conversion failures keep the raw value.
"""

from dataclasses import dataclass
from typing import Any, Literal

from waypoint._internal.types import ParamStore

Kind = Literal["str", "int", "float", "bool", "raw"]


@dataclass(frozen=True, slots=True)
class RouteProperty:
    """One bound attribute.

    *key* is the store key; it defaults to the attribute name.
    """

    attr: str
    key: str | None = None
    kind: Kind = "str"

    @property
    def store_key(self) -> str:
        return self.key or self.attr


def convert(value: Any, kind: Kind) -> Any:
    """Convert *value* to *kind*, returning *value* unchanged on failure."""
    if kind == "str":
        return value if isinstance(value, str) else str(value)

    if kind == "int":
        try:
            return int(value)
        except (ValueError, TypeError):
            return value

    if kind == "float":
        try:
            return float(value)
        except (ValueError, TypeError):
            return value

    if kind == "bool":
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return bool(value)

    return value


def generate_binder(
    cls: type,
    properties: list[RouteProperty] | tuple[RouteProperty, ...],
    *,
    parent: Any = None,
) -> type:
    """Build a binder companion for *cls*.

    ``inject`` runs *parent*'s injector first, then copies each property
    from the store onto the target. ``save`` writes each property into
    the store; unless *flatten* is true it then runs *parent*'s saver,
    so the whole hierarchy ends up in the store.
    """
    props = tuple(properties)
    parent_inject = getattr(parent, "inject", None)
    parent_save = getattr(parent, "save", None)

    def inject(target: Any, store: ParamStore) -> None:
        if parent_inject is not None:
            parent_inject(target, store)
        for prop in props:
            if prop.store_key not in store:
                continue
            setattr(target, prop.attr, convert(store[prop.store_key], prop.kind))

    def save(target: Any, store: ParamStore, flatten: bool) -> None:
        for prop in props:
            store[prop.store_key] = getattr(target, prop.attr)
        if not flatten and parent_save is not None:
            parent_save(target, store, flatten)

    namespace = {
        "__module__": cls.__module__,
        "__qualname__": f"{cls.__qualname__}Binder",
        "__doc__": f"Generated binder for {cls.__qualname__}.",
        "target_type": cls,
        "properties": props,
        "inject": staticmethod(inject),
        "save": staticmethod(save),
    }
    return type(f"{cls.__name__}Binder", (), namespace)
