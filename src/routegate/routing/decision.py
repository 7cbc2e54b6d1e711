"""Deferred render-or-redirect decisions for gated routes.

Auth state can change between building the route list and a user
actually navigating, so gated routes do not carry a precomputed result.
They carry a ``GatedDecision``: plain captured parameters plus a pure
``evaluate(is_authenticated)``. A decision is plain data, so it
compares and serializes like any other value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from routegate._internal.presence import frozen_props, truth
from routegate.routing.declaration import Category
from routegate.routing.outcomes import Outcome, RedirectTo, RenderComponent


def describe_component(component: Any) -> str:
    """Human-readable name for an opaque component."""
    name = getattr(component, "__qualname__", None) or getattr(component, "__name__", None)
    if isinstance(name, str):
        return name
    return type(component).__qualname__


@dataclass(frozen=True, slots=True)
class GatedDecision:
    """Render/redirect rule for an authorized or unauthorized route.

    Authorized routes render when the user is authenticated, unauthorized
    routes when they are not; either way ``condition`` must also hold.
    Failing that, the navigation redirects to the route's own
    ``redirect_path`` or, if it has none, the set's ``fallback_path``.
    """

    category: Category
    component: Any
    fallback_path: str
    redirect_path: str = ""
    condition: bool = True
    route_props: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.category.is_gated:
            msg = f"GatedDecision requires a gated category, got {self.category!r}"
            raise ValueError(msg)
        object.__setattr__(self, "condition", truth(self.condition, default=True))
        object.__setattr__(self, "route_props", frozen_props(self.route_props))

    @property
    def redirect_target(self) -> str:
        if isinstance(self.redirect_path, str) and self.redirect_path.strip():
            return self.redirect_path
        return self.fallback_path

    def allows(self, is_authenticated: bool) -> bool:
        """True when the route should render for this auth state."""
        authenticated = truth(is_authenticated, default=False)
        if self.category is Category.AUTHORIZED:
            permitted = authenticated
        else:
            permitted = not authenticated
        return permitted and self.condition

    def evaluate(self, is_authenticated: bool) -> Outcome:
        if self.allows(is_authenticated):
            return RenderComponent(self.component, self.route_props)
        return RedirectTo(self.redirect_target)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly description; the component is named, not embedded."""
        return {
            "category": str(self.category),
            "component": describe_component(self.component),
            "fallback_path": self.fallback_path,
            "redirect_path": self.redirect_path,
            "condition": self.condition,
        }
