"""Tests for waypoint.routing.table — ordered, freezable route table."""

import pytest

from waypoint.errors import ConfigurationError
from waypoint.routing.route import RouteDescriptor
from waypoint.routing.table import RouteTable


class UserScreen:
    pass


class ProfileScreen:
    pass


class TestRegister:
    def test_register_parses_pattern(self) -> None:
        table = RouteTable()
        stored = table.register("users/:id", RouteDescriptor(target=UserScreen))
        assert stored.pattern.raw == "users/:id"
        assert stored.pattern.param_names == ("id",)
        assert stored.target is UserScreen

    def test_register_without_descriptor(self) -> None:
        table = RouteTable()
        stored = table.register("about")
        assert stored.target is None
        assert "about" in table

    def test_register_keeps_descriptor_fields(self) -> None:
        table = RouteTable()
        stored = table.register(
            "users/:id",
            RouteDescriptor(target=UserScreen, default_params={"tab": "posts"}),
        )
        assert dict(stored.default_params) == {"tab": "posts"}

    def test_get(self) -> None:
        table = RouteTable()
        stored = table.register("users/:id", RouteDescriptor(target=UserScreen))
        assert table.get("users/:id") is stored
        assert table.get("users/:name") is None

    def test_len_and_contains(self) -> None:
        table = RouteTable()
        table.register("users/:id", RouteDescriptor(target=UserScreen))
        table.register("profiles/:id", RouteDescriptor(target=ProfileScreen))
        assert len(table) == 2
        assert "users/:id" in table
        assert "users/42" not in table

    def test_invalid_pattern_rejected(self) -> None:
        table = RouteTable()
        with pytest.raises(ConfigurationError):
            table.register("users/:", RouteDescriptor(target=UserScreen))
        assert len(table) == 0


class TestOrdering:
    def test_registration_order(self) -> None:
        table = RouteTable()
        table.register("b", RouteDescriptor(target=UserScreen))
        table.register("a", RouteDescriptor(target=UserScreen))
        table.register("c", RouteDescriptor(target=UserScreen))
        assert [p.raw for p, _ in table.all_patterns()] == ["b", "a", "c"]

    def test_duplicate_overwrites_in_place(self) -> None:
        table = RouteTable()
        table.register("users/:id", RouteDescriptor(target=UserScreen))
        table.register("about", RouteDescriptor(target=UserScreen))
        table.register("users/:id", RouteDescriptor(target=ProfileScreen))

        pairs = list(table.all_patterns())
        assert len(pairs) == 2
        assert pairs[0][0].raw == "users/:id"
        assert pairs[0][1].target is ProfileScreen

    def test_snapshot_unaffected_by_later_registration(self) -> None:
        table = RouteTable()
        table.register("a", RouteDescriptor(target=UserScreen))
        iterator = table.all_patterns()
        table.register("b", RouteDescriptor(target=UserScreen))
        assert [p.raw for p, _ in iterator] == ["a"]


class TestFreeze:
    def test_register_after_freeze_fails(self) -> None:
        table = RouteTable()
        table.register("users/:id", RouteDescriptor(target=UserScreen))
        table.freeze()
        assert table.frozen is True
        with pytest.raises(RuntimeError, match="after the router has started"):
            table.register("about", RouteDescriptor(target=UserScreen))

    def test_reads_after_freeze(self) -> None:
        table = RouteTable()
        table.register("users/:id", RouteDescriptor(target=UserScreen))
        table.freeze()
        assert len(list(table.all_patterns())) == 1
