"""routegate: authentication-gated route resolution.

Describe which views everyone can reach, which need a signed-in user,
and which are only for signed-out visitors; routegate turns that into
an ordered list of entries that render or redirect.

Basic usage::

    from routegate import resolve

    entries = resolve({
        "anonymous_structure": {"routes": [{"path": "/", "component": home}]},
        "authorized_structure": {
            "fallback_path": "/login",
            "routes": [{"path": "/dashboard", "component": dashboard}],
        },
        "unauthorized_structure": {
            "fallback_path": "/dashboard",
            "routes": [{"path": "/login", "component": login}],
        },
        "fallback_component": not_found,
    }, is_authenticated=False)

    entries[1].outcome()      # RedirectTo(target="/login")
    entries[1].outcome(True)  # RenderComponent(component=dashboard, ...)
"""

__version__ = "0.1.0"
__all__ = [
    "Category",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "GatedDecision",
    "RedirectTo",
    "RenderComponent",
    "Renderable",
    "ResolvedRouteEntry",
    "Resolver",
    "ResolverConfig",
    "RouteDeclaration",
    "RouteGateError",
    "RouteSet",
    "RouteStructure",
    "ValidationResult",
    "is_valid_renderable",
    "resolve",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routegate`` fast while providing a clean top-level API.
    """
    if name in ("Resolver", "resolve"):
        from routegate import resolver as _resolver

        return getattr(_resolver, name)

    if name == "ResolverConfig":
        from routegate.config import ResolverConfig

        return ResolverConfig

    if name in ("Category", "RouteDeclaration", "RouteSet", "RouteStructure"):
        from routegate.routing import declaration as _decl

        return getattr(_decl, name)

    if name in ("RenderComponent", "RedirectTo"):
        from routegate.routing import outcomes as _outcomes

        return getattr(_outcomes, name)

    if name == "GatedDecision":
        from routegate.routing.decision import GatedDecision

        return GatedDecision

    if name == "ResolvedRouteEntry":
        from routegate.routing.entry import ResolvedRouteEntry

        return ResolvedRouteEntry

    if name in ("validate", "ValidationResult"):
        from routegate import validation as _validation

        return getattr(_validation, name)

    if name in ("Diagnostic", "DiagnosticCode"):
        from routegate import diagnostics as _diagnostics

        return getattr(_diagnostics, name)

    if name in ("Renderable", "is_valid_renderable"):
        from routegate import renderable as _renderable

        return getattr(_renderable, name)

    if name in ("RouteGateError", "ConfigurationError"):
        from routegate import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
