"""ResolvedRouteEntry: one row of the route list handed to the host router."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from routegate._internal.presence import frozen_props
from routegate.routing.declaration import Category
from routegate.routing.decision import GatedDecision, describe_component
from routegate.routing.outcomes import Outcome, RedirectTo, RenderComponent

CATCH_ALL_KEY = "__catch_all__"


@dataclass(frozen=True, slots=True)
class ResolvedRouteEntry:
    """A resolved route.

    ``render_outcome`` is a ``RenderComponent`` for anonymous routes and
    the catch-all, and a ``GatedDecision`` for gated routes. Call
    ``outcome()`` at navigation time to get what to do.

    ``resolved_as`` records the auth state the list was resolved with;
    it is used when ``outcome()`` is called without a current value.

    Entries hash by everything except ``route_props``, which is held as
    a read-only copy.
    """

    key: str
    path: str | None
    render_outcome: RenderComponent | GatedDecision
    category: Category | None = None
    exact: bool = True
    route_props: Mapping[str, Any] = field(default_factory=dict, hash=False)
    resolved_as: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "route_props", frozen_props(self.route_props))

    @property
    def is_catch_all(self) -> bool:
        return self.path is None

    @property
    def is_deferred(self) -> bool:
        return isinstance(self.render_outcome, GatedDecision)

    @property
    def component(self) -> Any:
        return self.render_outcome.component

    def outcome(self, is_authenticated: bool | None = None) -> Outcome:
        """Render or redirect, for the given (or resolution-time) auth state."""
        decision = self.render_outcome
        if isinstance(decision, RenderComponent):
            return decision
        if is_authenticated is None:
            is_authenticated = self.resolved_as
        return decision.evaluate(is_authenticated)

    def to_dict(self, is_authenticated: bool | None = None) -> dict[str, Any]:
        """Describe the entry, with its outcome evaluated for *is_authenticated*."""
        result = self.outcome(is_authenticated)
        if isinstance(result, RedirectTo):
            outcome = {"redirect": result.target}
        else:
            outcome = {"render": describe_component(result.component)}
        return {
            "key": self.key,
            "path": self.path,
            "category": str(self.category) if self.category is not None else None,
            "exact": self.exact,
            "deferred": self.is_deferred,
            "outcome": outcome,
        }
