"""Resolver: turn a route structure into an ordered list of entries.

Sets are processed in a fixed order: anonymous, authorized,
unauthorized, then the catch-all. Host routers match first-applicable,
so an anonymous path shadows a gated route declared with the same
pattern.

Usage::

    from routegate import resolve

    entries = resolve({
        "anonymous_structure": {"routes": [{"path": "/", "component": home}]},
        "authorized_structure": {
            "fallback_path": "/login",
            "routes": [{"path": "/dashboard", "component": dashboard}],
        },
        "fallback_component": not_found,
    }, is_authenticated=user.is_authenticated)

    for entry in entries:
        router.add(entry.path, entry.outcome)

Resolution never raises on malformed input. Bad routes are skipped and
reported through the configured diagnostic sink.
"""

import logging
from typing import Any

from routegate._internal.presence import truth
from routegate.config import ResolverConfig
from routegate.diagnostics import Diagnostic, DiagnosticCode, DiagnosticSink, emit
from routegate.routing.declaration import (
    RESOLUTION_ORDER,
    Category,
    RouteDeclaration,
    RouteSet,
    RouteStructure,
)
from routegate.routing.decision import GatedDecision
from routegate.routing.entry import CATCH_ALL_KEY, ResolvedRouteEntry
from routegate.routing.outcomes import RenderComponent
from routegate.validation import validate

logger = logging.getLogger("routegate.resolver")


class _CountingSink:
    """Forwards diagnostics while counting them for the summary log line."""

    __slots__ = ("count", "sink")

    def __init__(self, sink: DiagnosticSink | None) -> None:
        self.sink = sink
        self.count = 0

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.count += 1
        emit(self.sink, diagnostic)


class Resolver:
    """Stateless route resolver.

    Holds only its frozen configuration, so one instance can serve any
    number of concurrent ``resolve`` calls.

    Usage::

        resolver = Resolver(ResolverConfig(sink=diagnostics.append))
        entries = resolver.resolve(structure, is_authenticated=False)
    """

    __slots__ = ("_config",)

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config or ResolverConfig()

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(
        self,
        structure: Any,
        is_authenticated: bool | None = None,
    ) -> list[ResolvedRouteEntry]:
        """Resolve *structure* into an ordered list of route entries.

        Args:
            structure: A ``RouteStructure``, mapping, or object. Every
                field is optional; ``None`` resolves to an empty list.
            is_authenticated: Current auth state. ``None`` falls back to
                the structure's own ``is_authenticated`` (default False).

        Returns:
            Entries from the anonymous set, then the authorized set,
            then the unauthorized set, then the catch-all if configured.
        """
        parsed = RouteStructure.from_raw(structure)
        if is_authenticated is None:
            is_authenticated = parsed.is_authenticated
        authenticated = truth(is_authenticated, default=False)
        sink = _CountingSink(self._config.sink)

        entries: list[ResolvedRouteEntry] = []
        for category in RESOLUTION_ORDER:
            route_set = parsed.route_set(category)
            if route_set is not None:
                entries.extend(self._resolve_set(route_set, authenticated, sink))

        catch_all = self._catch_all(parsed.fallback_component)
        if catch_all is not None:
            entries.append(catch_all)

        logger.debug(
            "Resolved %d route entries (authenticated=%s, %d diagnostics)",
            len(entries),
            authenticated,
            sink.count,
        )
        return entries

    def _resolve_set(
        self,
        route_set: RouteSet,
        is_authenticated: bool,
        sink: DiagnosticSink,
    ) -> list[ResolvedRouteEntry]:
        """Validate and convert every declaration in one set."""
        category = route_set.category
        if not route_set.routes:
            if self._config.warn_on_empty_sets:
                sink(
                    Diagnostic(
                        codes=(DiagnosticCode.EMPTY_ROUTE_SET,),
                        message=f"routes not found for the {category} set",
                        category=str(category),
                    )
                )
            return []

        cfg = self._config
        entries: list[ResolvedRouteEntry] = []
        for index, raw in enumerate(route_set.routes):
            route = RouteDeclaration.from_raw(raw)
            key = f"{route.path}{cfg.key_separator}{index}"
            result = validate(
                route,
                category,
                route_set.fallback_path,
                is_renderable=cfg.is_renderable,
                sink=sink,
                key=key,
            )
            if not result:
                continue
            entries.append(self._entry(route, route_set, key, is_authenticated))
        return entries

    def _entry(
        self,
        route: RouteDeclaration,
        route_set: RouteSet,
        key: str,
        is_authenticated: bool,
    ) -> ResolvedRouteEntry:
        category = route_set.category
        props = dict(route.route_props)
        exact = truth(props.pop("exact", self._config.exact), default=self._config.exact)

        render_outcome: RenderComponent | GatedDecision
        if category is Category.ANONYMOUS:
            # Visible to every persona: condition and auth state do not apply
            render_outcome = RenderComponent(route.component, props)
        else:
            render_outcome = GatedDecision(
                category=category,
                component=route.component,
                fallback_path=route_set.fallback_path,
                redirect_path=route.redirect_path,
                condition=route.condition,
                route_props=props,
            )

        return ResolvedRouteEntry(
            key=key,
            path=route.path,
            render_outcome=render_outcome,
            category=category,
            exact=exact,
            route_props=props,
            resolved_as=is_authenticated,
        )

    def _catch_all(self, component: Any) -> ResolvedRouteEntry | None:
        """Terminal entry for the fallback view; absent or invalid means none."""
        if component is None or not self._config.is_renderable(component):
            return None
        return ResolvedRouteEntry(
            key=CATCH_ALL_KEY,
            path=None,
            render_outcome=RenderComponent(component),
            exact=False,
        )


def resolve(
    structure: Any,
    is_authenticated: bool | None = None,
    *,
    config: ResolverConfig | None = None,
) -> list[ResolvedRouteEntry]:
    """Resolve *structure* with a one-off ``Resolver``.

    See ``Resolver.resolve``.
    """
    return Resolver(config).resolve(structure, is_authenticated)
