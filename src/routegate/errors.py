"""routegate exception hierarchy.

Resolution itself never raises: malformed routes are skipped and
reported through diagnostics. These exceptions cover programmer
errors around it: bad configuration, unresolvable CLI targets.
"""


class RouteGateError(Exception):
    """Base for all routegate-specific errors."""


class ConfigurationError(RouteGateError):
    """Raised when resolver configuration is invalid.

    Surfaced at ``ResolverConfig`` construction, before any routes
    are resolved.
    """
