"""Resolver configuration.

ResolverConfig is a frozen dataclass: immutable after creation, safe
to share between threads and resolver instances.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from routegate.diagnostics import DiagnosticSink, log_diagnostic
from routegate.errors import ConfigurationError
from routegate.renderable import is_valid_renderable


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(exact=False, sink=collected.append)
    """

    # Default exact-match hint for declared routes (route_props may override)
    exact: bool = True

    # Entry keys are f"{path}{key_separator}{index}"
    key_separator: str = "_"

    # Host view-layer predicate for components
    is_renderable: Callable[[Any], bool] = is_valid_renderable

    # Diagnostics
    sink: DiagnosticSink | None = log_diagnostic
    warn_on_empty_sets: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.key_separator, str) or not self.key_separator:
            msg = f"key_separator must be a non-empty string, got {self.key_separator!r}"
            raise ConfigurationError(msg)
        if not callable(self.is_renderable):
            msg = "is_renderable must be callable: (component) -> bool"
            raise ConfigurationError(msg)
        if self.sink is not None and not callable(self.sink):
            msg = "sink must be callable: (Diagnostic) -> None, or None to disable diagnostics"
            raise ConfigurationError(msg)
