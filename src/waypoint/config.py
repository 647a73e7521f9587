"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, shared by
the route table, matcher, and binding registry.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(param_marker="$", binder_suffix="_Binder")
    """

    # Pattern syntax
    separator: str = "/"
    param_marker: str = ":"

    # Generated binders are registered as "<module>.<qualname><suffix>"
    binder_suffix: str = "__Binder"

    # Ancestry walking stops at types whose qualified name starts with one of these
    framework_prefixes: tuple[str, ...] = (
        "builtins.",
        "abc.",
        "typing.",
        "collections.",
        "enum.",
        "waypoint.",
    )

    def __post_init__(self) -> None:
        from waypoint.errors import ConfigurationError

        if not self.separator:
            msg = "RouterConfig.separator must not be empty."
            raise ConfigurationError(msg)
        if not self.param_marker:
            msg = "RouterConfig.param_marker must not be empty."
            raise ConfigurationError(msg)
        if self.separator in self.param_marker:
            msg = (
                f"RouterConfig.param_marker {self.param_marker!r} must not contain "
                f"the separator {self.separator!r}."
            )
            raise ConfigurationError(msg)
        if isinstance(self.framework_prefixes, str):
            msg = "RouterConfig.framework_prefixes must be a sequence of prefixes, not a str."
            raise ConfigurationError(msg)
        # str.startswith only accepts a str or a tuple
        object.__setattr__(self, "framework_prefixes", tuple(self.framework_prefixes))
