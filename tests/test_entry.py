"""Tests for routegate.routing.entry: ResolvedRouteEntry."""

import pytest

from routegate.routing.declaration import Category
from routegate.routing.decision import GatedDecision
from routegate.routing.entry import CATCH_ALL_KEY, ResolvedRouteEntry
from routegate.routing.outcomes import RedirectTo, RenderComponent


def _home() -> str:
    return "home"


def _gated_entry(resolved_as: bool) -> ResolvedRouteEntry:
    return ResolvedRouteEntry(
        key="/dashboard_0",
        path="/dashboard",
        render_outcome=GatedDecision(
            category=Category.AUTHORIZED, component=_home, fallback_path="/login"
        ),
        category=Category.AUTHORIZED,
        resolved_as=resolved_as,
    )


class TestStaticEntry:
    def test_always_renders(self) -> None:
        entry = ResolvedRouteEntry(
            key="/_0",
            path="/",
            render_outcome=RenderComponent(_home),
            category=Category.ANONYMOUS,
        )
        assert entry.outcome() == RenderComponent(_home)
        assert entry.outcome(True) == RenderComponent(_home)
        assert entry.outcome(False) == RenderComponent(_home)
        assert entry.is_deferred is False
        assert entry.is_catch_all is False
        assert entry.component is _home


class TestDeferredEntry:
    def test_uses_resolution_time_state_by_default(self) -> None:
        assert _gated_entry(resolved_as=False).outcome() == RedirectTo("/login")
        assert _gated_entry(resolved_as=True).outcome() == RenderComponent(_home)

    def test_current_state_overrides(self) -> None:
        entry = _gated_entry(resolved_as=False)
        assert entry.outcome(True) == RenderComponent(_home)

    def test_is_deferred(self) -> None:
        assert _gated_entry(resolved_as=False).is_deferred is True


class TestCatchAll:
    def test_catch_all(self) -> None:
        entry = ResolvedRouteEntry(
            key=CATCH_ALL_KEY, path=None, render_outcome=RenderComponent(_home), exact=False
        )
        assert entry.is_catch_all is True
        assert entry.category is None


class TestToDict:
    def test_redirect(self) -> None:
        assert _gated_entry(resolved_as=False).to_dict() == {
            "key": "/dashboard_0",
            "path": "/dashboard",
            "category": "authorized",
            "exact": True,
            "deferred": True,
            "outcome": {"redirect": "/login"},
        }

    def test_render(self) -> None:
        info = _gated_entry(resolved_as=False).to_dict(True)
        assert info["outcome"] == {"render": "_home"}

    def test_frozen(self) -> None:
        entry = _gated_entry(resolved_as=False)
        with pytest.raises(AttributeError):
            entry.path = "/x"  # type: ignore[misc]


class TestHashing:
    def test_entries_hash(self) -> None:
        first = _gated_entry(resolved_as=False)
        second = _gated_entry(resolved_as=False)
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_props_are_read_only_copies(self) -> None:
        props = {"title": "Home"}
        entry = ResolvedRouteEntry(
            key="/_0", path="/", render_outcome=RenderComponent(_home, props), route_props=props
        )
        props["title"] = "Changed"
        assert entry.route_props == {"title": "Home"}
        assert entry.outcome().route_props == {"title": "Home"}
        with pytest.raises(TypeError):
            entry.route_props["title"] = "x"  # type: ignore[index]
