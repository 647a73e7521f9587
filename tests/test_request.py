"""Tests for waypoint.routing.request — parameter merging and requests."""

from types import MappingProxyType

import pytest

from waypoint.routing.request import (
    NavigationContext,
    NavigationRequest,
    NavigationRequestBuilder,
)
from waypoint.routing.route import ResolvedMatch, RouteDescriptor, parse_pattern


class UserScreen:
    pass


def _match(
    pattern: str,
    params: dict[str, str],
    defaults: dict[str, str] | None = None,
) -> ResolvedMatch:
    descriptor = RouteDescriptor(
        parse_pattern(pattern),
        target=UserScreen,
        default_params=defaults or {},
    )
    return ResolvedMatch(descriptor=descriptor, params=MappingProxyType(params))


class TestBuild:
    def test_path_params_only(self) -> None:
        built = NavigationRequestBuilder().build(_match("users/:id", {"id": "42"}))
        assert built == {"id": "42"}

    def test_defaults_only(self) -> None:
        built = NavigationRequestBuilder().build(_match("about", {}, {"tab": "team"}))
        assert built == {"tab": "team"}

    def test_defaults_and_params_merged(self) -> None:
        built = NavigationRequestBuilder().build(
            _match("users/:id", {"id": "42"}, {"tab": "posts"})
        )
        assert built == {"id": "42", "tab": "posts"}

    def test_path_params_override_defaults(self) -> None:
        built = NavigationRequestBuilder().build(
            _match("users/:id", {"id": "42"}, {"id": "0", "tab": "posts"})
        )
        assert built == {"id": "42", "tab": "posts"}

    def test_returns_fresh_dict(self) -> None:
        builder = NavigationRequestBuilder()
        match = _match("users/:id", {"id": "42"}, {"tab": "posts"})
        first = builder.build(match)
        first["tab"] = "changed"
        assert builder.build(match) == {"id": "42", "tab": "posts"}
        assert match.descriptor.default_params["tab"] == "posts"


class TestRequestFor:
    def test_request(self) -> None:
        request = NavigationRequestBuilder().request_for(
            "users/42", _match("users/:id", {"id": "42"})
        )
        assert request == NavigationRequest(
            url="users/42",
            target=UserScreen,
            params={"id": "42"},
            new_task=False,
        )

    def test_new_task(self) -> None:
        request = NavigationRequestBuilder().request_for(
            "users/42", _match("users/:id", {"id": "42"}), new_task=True
        )
        assert request.new_task is True

    def test_frozen(self) -> None:
        request = NavigationRequestBuilder().request_for(
            "users/42", _match("users/:id", {"id": "42"})
        )
        with pytest.raises(AttributeError):
            request.url = "other"  # type: ignore[misc]


class TestNavigationContext:
    def test_structural(self) -> None:
        class Launcher:
            def launch(self, request: NavigationRequest) -> None:
                pass

        assert isinstance(Launcher(), NavigationContext)

    def test_missing_launch(self) -> None:
        assert not isinstance(object(), NavigationContext)
