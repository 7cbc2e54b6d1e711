"""RenderComponent and RedirectTo: what a route does on navigation.

Frozen dataclasses handed to the host router. The router renders the
component or issues the redirect; routegate only decides which.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from routegate._internal.presence import frozen_props


@dataclass(frozen=True, slots=True)
class RenderComponent:
    """Render *component*, passing *route_props* through to the router.

    ``route_props`` is stored as a read-only copy and left out of the
    hash, so the outcome hashes whenever its component does.
    """

    component: Any
    route_props: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "route_props", frozen_props(self.route_props))


@dataclass(frozen=True, slots=True)
class RedirectTo:
    """Redirect the navigation to *target*."""

    target: str


type Outcome = RenderComponent | RedirectTo
