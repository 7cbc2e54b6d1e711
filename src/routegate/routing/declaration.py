"""Route declarations, route sets, and the full route structure.

All three are frozen dataclasses built from caller input through
``from_raw``. Input may be a mapping, an object with attributes or
garbage; missing fields come back as empty values rather than errors,
and validation decides later what is usable.

Snake_case keys are canonical. The camelCase spellings
(``routeProps``, ``anonymousStructure``, ...) are accepted as aliases.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

from routegate._internal.presence import field as read_field
from routegate._internal.presence import frozen_props, has, truth


class Category(StrEnum):
    """Access category of a route set."""

    ANONYMOUS = "anonymous"
    AUTHORIZED = "authorized"
    UNAUTHORIZED = "unauthorized"

    @property
    def is_gated(self) -> bool:
        """True for categories whose visibility depends on auth state."""
        return self is not Category.ANONYMOUS

    @classmethod
    def _missing_(cls, value: object) -> Category | None:
        # Case variants such as "unAuthorized"
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None


RESOLUTION_ORDER: tuple[Category, ...] = (
    Category.ANONYMOUS,
    Category.AUTHORIZED,
    Category.UNAUTHORIZED,
)

# Structure keys per category: canonical name first, then aliases
_SET_KEYS: dict[Category, tuple[str, ...]] = {
    Category.ANONYMOUS: ("anonymous_structure", "anonymousStructure"),
    Category.AUTHORIZED: ("authorized_structure", "authorizedStructure"),
    Category.UNAUTHORIZED: (
        "unauthorized_structure",
        "unAuthorizedStructure",
        "unauthorizedStructure",
    ),
}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True, slots=True)
class RouteDeclaration:
    """A single navigable entry as authored by the caller.

    Fields are normalized on construction, so a declaration built
    directly is as safe to resolve as one parsed by ``from_raw``.
    """

    path: str = ""
    component: Any = None
    route_props: Mapping[str, Any] = field(default_factory=dict, hash=False)
    redirect_path: str = ""
    condition: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _text(self.path))
        object.__setattr__(self, "route_props", frozen_props(self.route_props))
        object.__setattr__(self, "redirect_path", _text(self.redirect_path))
        object.__setattr__(self, "condition", truth(self.condition, default=True))

    @classmethod
    def from_raw(cls, raw: Any) -> RouteDeclaration:
        """Build a declaration from any caller-supplied shape."""
        if isinstance(raw, RouteDeclaration):
            return raw

        return cls(
            path=read_field(raw, "path", default=""),
            component=read_field(raw, "component"),
            route_props=read_field(raw, "route_props", "routeProps", default={}),
            redirect_path=read_field(raw, "redirect_path", "redirectPath", default=""),
            condition=read_field(raw, "condition", default=True),
        )


@dataclass(frozen=True, slots=True)
class RouteSet:
    """A group of declarations sharing one access category.

    ``routes`` keeps the raw entries; ``None`` means the set carried no
    usable ``routes`` sequence at all.
    """

    category: Category
    fallback_path: str = ""
    routes: tuple[Any, ...] | None = None

    def __post_init__(self) -> None:
        routes = self.routes
        if isinstance(routes, (str, bytes)) or not isinstance(routes, Sequence):
            routes = None
        object.__setattr__(self, "fallback_path", _text(self.fallback_path))
        object.__setattr__(self, "routes", tuple(routes) if routes is not None else None)

    @property
    def requires_fallback(self) -> bool:
        return self.category.is_gated

    @classmethod
    def from_raw(cls, raw: Any, category: Category) -> RouteSet:
        if isinstance(raw, RouteSet):
            if raw.category is not category:
                return replace(raw, category=category)
            return raw

        return cls(
            category=category,
            fallback_path=read_field(raw, "fallback_path", "fallbackPath", default=""),
            routes=read_field(raw, "routes"),
        )


@dataclass(frozen=True, slots=True)
class RouteStructure:
    """The complete input: three optional sets plus a catch-all view."""

    is_authenticated: bool = False
    anonymous: RouteSet | None = None
    authorized: RouteSet | None = None
    unauthorized: RouteSet | None = None
    fallback_component: Any = None

    def route_set(self, category: Category) -> RouteSet | None:
        """Return the set for *category*, or ``None`` when not configured."""
        match category:
            case Category.ANONYMOUS:
                return self.anonymous
            case Category.AUTHORIZED:
                return self.authorized
            case Category.UNAUTHORIZED:
                return self.unauthorized

    @classmethod
    def from_raw(cls, raw: Any) -> RouteStructure:
        """Build a structure from a mapping or object; garbage yields an empty one."""
        if isinstance(raw, RouteStructure):
            return raw

        sets: dict[Category, RouteSet | None] = {}
        for category, keys in _SET_KEYS.items():
            present = next((key for key in keys if has(raw, key)), None)
            sets[category] = (
                RouteSet.from_raw(read_field(raw, present), category) if present else None
            )

        return cls(
            is_authenticated=truth(
                read_field(raw, "is_authenticated", "isAuthenticated", default=False),
                default=False,
            ),
            anonymous=sets[Category.ANONYMOUS],
            authorized=sets[Category.AUTHORIZED],
            unauthorized=sets[Category.UNAUTHORIZED],
            fallback_component=read_field(raw, "fallback_component", "fallbackComponent"),
        )
