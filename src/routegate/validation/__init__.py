"""Route validation: decide whether a declaration can be emitted.

Usage::

    from routegate.validation import validate
    from routegate.routing.declaration import Category

    result = validate({"path": "/dashboard", "component": Dashboard},
                      Category.AUTHORIZED, "/login")
    if not result:
        ...  # result.reason lists every problem
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from routegate.diagnostics import Diagnostic, DiagnosticSink, emit, log_diagnostic
from routegate.renderable import is_valid_renderable
from routegate.routing.declaration import Category, RouteDeclaration
from routegate.validation.result import ValidationFailure, ValidationResult
from routegate.validation.rules import RULES, Rule, RuleContext

__all__ = [
    "RULES",
    "Rule",
    "RuleContext",
    "ValidationFailure",
    "ValidationResult",
    "validate",
]


def validate(
    declaration: Any,
    category: Category | str,
    fallback_path: str | None = "",
    *,
    is_renderable: Callable[[Any], bool] = is_valid_renderable,
    sink: DiagnosticSink | None = log_diagnostic,
    key: str | None = None,
) -> ValidationResult:
    """Validate one route declaration within its set's context.

    Args:
        declaration: Any caller-supplied shape; normalized through
            ``RouteDeclaration.from_raw``, so missing fields count as
            absent rather than raising.
        category: The set's access category. Strings match case-
            insensitively, so ``"unAuthorized"`` is accepted; a name
            that is no category at all raises ``ValueError``.
        fallback_path: The set's fallback redirect target.
        is_renderable: Host view-layer predicate for components.
        sink: Receives one ``Diagnostic`` when the declaration is
            rejected; defaults to a logged warning. ``None`` keeps
            validation silent.
        key: Identifies the entry in the diagnostic.

    Returns:
        A ``ValidationResult``; falsy on rejection, with ``.reason``
        naming every failed rule in order.
    """
    route = RouteDeclaration.from_raw(declaration)
    context = RuleContext(
        category=Category(category),
        fallback_path=fallback_path if isinstance(fallback_path, str) else "",
        is_renderable=is_renderable,
    )

    failures: list[ValidationFailure] = []
    for code, rule in RULES:
        message = rule(route, context)
        if message is not None:
            failures.append(ValidationFailure(code=code, message=message))

    result = ValidationResult(failures=tuple(failures))
    if not result:
        emit(
            sink,
            Diagnostic(
                codes=result.codes,
                message=f"A route in the {context.category} set is skipped: {result.reason}",
                category=str(context.category),
                key=key,
                path=route.path or None,
            ),
        )
    return result
