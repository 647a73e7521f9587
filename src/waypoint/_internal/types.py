"""Shared type aliases used across waypoint modules."""

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, TypeAlias

# Named parameters extracted from a path, or merged with route defaults
ParameterMap: TypeAlias = Mapping[str, str]

# Opaque string-keyed store that binders read from and write to
ParamStore: TypeAlias = MutableMapping[str, Any]

# Route callback — invoked with the merged parameters instead of launching a target
Callback: TypeAlias = Callable[[dict[str, str]], Any]

# Generated binder entry points
Injector: TypeAlias = Callable[[Any, ParamStore], None]
Saver: TypeAlias = Callable[[Any, ParamStore, bool], None]
