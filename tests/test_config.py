"""Tests for waypoint.config — RouterConfig defaults and validation."""

import pytest

from waypoint.config import RouterConfig
from waypoint.errors import ConfigurationError
from waypoint.router import Router


class TestDefaults:
    def test_syntax(self) -> None:
        config = RouterConfig()
        assert config.separator == "/"
        assert config.param_marker == ":"
        assert config.binder_suffix == "__Binder"

    def test_framework_prefixes(self) -> None:
        config = RouterConfig()
        assert "builtins." in config.framework_prefixes
        assert "waypoint." in config.framework_prefixes

    def test_frozen(self) -> None:
        config = RouterConfig()
        with pytest.raises(AttributeError):
            config.separator = "."  # type: ignore[misc]


class TestValidation:
    def test_empty_separator(self) -> None:
        with pytest.raises(ConfigurationError, match="separator"):
            RouterConfig(separator="")

    def test_empty_marker(self) -> None:
        with pytest.raises(ConfigurationError, match="param_marker"):
            RouterConfig(param_marker="")

    def test_marker_containing_separator(self) -> None:
        with pytest.raises(ConfigurationError):
            RouterConfig(param_marker="/:")


class TestCustomSyntax:
    def test_router_uses_config(self) -> None:
        router = Router(RouterConfig(separator=".", param_marker="$"))
        router.map("users.$id", object)
        assert router.params_for("users.42").params == {"id": "42"}


class TestFrameworkPrefixes:
    def test_list_stored_as_tuple(self) -> None:
        config = RouterConfig(framework_prefixes=["app.", "builtins."])  # type: ignore[arg-type]
        assert config.framework_prefixes == ("app.", "builtins.")

    def test_list_usable_for_resolution(self) -> None:
        from waypoint.binding.registry import BindingRegistry

        registry = BindingRegistry(RouterConfig(framework_prefixes=["builtins."]))  # type: ignore[arg-type]
        assert registry.is_framework_type(dict)
        assert registry.resolve_injector(TestFrameworkPrefixes) is None

    def test_bare_string_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="framework_prefixes"):
            RouterConfig(framework_prefixes="builtins.")  # type: ignore[arg-type]
