"""Validation result: accept, or reject with every failing reason."""

from dataclasses import dataclass

from routegate.diagnostics import DiagnosticCode


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """One failed rule."""

    code: DiagnosticCode
    message: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating one route declaration.

    The result is falsy when rejected, so you can write::

        result = validate(route, Category.AUTHORIZED, "/login")
        if not result:
            print(result.reason)

    ``failures`` lists every failing rule in rule order, not just the first.
    """

    failures: tuple[ValidationFailure, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if every rule passed."""
        return not self.failures

    @property
    def codes(self) -> tuple[DiagnosticCode, ...]:
        return tuple(failure.code for failure in self.failures)

    @property
    def reason(self) -> str:
        """Composite message naming each failing condition; empty when valid."""
        return "; ".join(failure.message for failure in self.failures)

    def __bool__(self) -> bool:
        """Falsy when rejected: enables ``if not result:`` pattern."""
        return self.is_valid
