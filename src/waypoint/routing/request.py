"""Navigation requests — what gets handed to the platform launcher.

The launcher itself lives outside waypoint. Anything with a
``launch(request)`` method can act as a ``NavigationContext``.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from waypoint.routing.route import ResolvedMatch


@dataclass(frozen=True, slots=True)
class NavigationRequest:
    """A resolved navigation, ready for a ``NavigationContext``.

    ``new_task`` is set when the request is launched through the router's
    own configured context rather than one supplied by the caller.
    """

    url: str
    target: Hashable | None
    params: dict[str, str] = field(hash=False)
    new_task: bool = False


@runtime_checkable
class NavigationContext(Protocol):
    """The platform side of navigation: shows the target for a request."""

    def launch(self, request: NavigationRequest) -> Any: ...


class NavigationRequestBuilder:
    """Composes the final parameter map for a resolved match."""

    __slots__ = ()

    def build(self, match: ResolvedMatch) -> dict[str, str]:
        """Route defaults first, then path parameters on top."""
        params = dict(match.descriptor.default_params)
        params.update(match.params)
        return params

    def request_for(
        self,
        url: str,
        match: ResolvedMatch,
        *,
        new_task: bool = False,
    ) -> NavigationRequest:
        return NavigationRequest(
            url=url,
            target=match.descriptor.target,
            params=self.build(match),
            new_task=new_task,
        )
