"""Diagnostics: non-fatal reports about skipped routes.

Every problem found while resolving a structure is handled by leaving
the offending entry out and emitting a ``Diagnostic`` to a sink. The
default sink writes a warning to the ``routegate.resolver`` logger.
Tests and tools can pass any callable instead::

    found: list[Diagnostic] = []
    resolve(structure, config=ResolverConfig(sink=found.append))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

logger = logging.getLogger("routegate.resolver")


class DiagnosticCode(StrEnum):
    """Why an entry (or a whole set) was left out of the route list."""

    MISSING_PATH = "missing_path"
    MISSING_FALLBACK = "missing_fallback"
    INVALID_COMPONENT = "invalid_component"
    EMPTY_ROUTE_SET = "empty_route_set"
    # Consumer-side: a navigation matched nothing and no catch-all exists
    UNRESOLVED_NAVIGATION = "unresolved_navigation"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A structured, non-fatal resolution report."""

    codes: tuple[DiagnosticCode, ...]
    message: str
    category: str | None = None
    key: str | None = None
    path: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def code(self) -> DiagnosticCode:
        """The first (most significant) code."""
        return self.codes[0]


type DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: one warning per diagnostic."""
    logger.warning(
        "%s [%s]",
        diagnostic.message,
        ", ".join(diagnostic.codes),
    )


def emit(sink: DiagnosticSink | None, diagnostic: Diagnostic) -> None:
    """Deliver *diagnostic* to *sink*, best effort.

    A failing sink must not change resolution results, so its errors
    are logged at debug level and dropped.
    """
    if sink is None:
        return
    try:
        sink(diagnostic)
    except Exception:
        logger.debug("Diagnostic sink %r failed", sink, exc_info=True)
