"""Built-in route validation rules.

Each rule has the signature::

    def rule(declaration: RouteDeclaration, context: RuleContext) -> str | None:
        '''Return a failure message, or None if the rule passes.'''

``RULES`` pairs every rule with the diagnostic code it reports, in the
order failures are listed in a composite reason.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from routegate.diagnostics import DiagnosticCode
from routegate.renderable import is_valid_renderable
from routegate.routing.declaration import Category, RouteDeclaration


@dataclass(frozen=True, slots=True)
class RuleContext:
    """The route-set context a declaration is validated in."""

    category: Category
    fallback_path: str = ""
    is_renderable: Callable[[Any], bool] = is_valid_renderable


type Rule = Callable[[RouteDeclaration, RuleContext], str | None]


def path_present(declaration: RouteDeclaration, context: RuleContext) -> str | None:
    """Route must have a non-blank path."""
    if not declaration.path or not declaration.path.strip():
        return "no valid path provided for the route"
    return None


def fallback_present(declaration: RouteDeclaration, context: RuleContext) -> str | None:
    """Gated sets must define a non-blank target for denied navigations."""
    if context.category.is_gated and not context.fallback_path.strip():
        return f"no fallback_path for the {context.category} set"
    return None


def component_renderable(declaration: RouteDeclaration, context: RuleContext) -> str | None:
    """Component must pass the host's renderable check."""
    if not context.is_renderable(declaration.component):
        return "no valid component provided for the route"
    return None


RULES: tuple[tuple[DiagnosticCode, Rule], ...] = (
    (DiagnosticCode.MISSING_PATH, path_present),
    (DiagnosticCode.MISSING_FALLBACK, fallback_present),
    (DiagnosticCode.INVALID_COMPONENT, component_renderable),
)
