"""Structure import resolution: ``"module:attribute"`` strings to route structures.

Shared by ``routegate routes`` and ``routegate check``.
"""

import importlib
from collections.abc import Mapping
from typing import Any

from routegate.errors import ConfigurationError
from routegate.routing.declaration import RouteStructure


def resolve_structure(import_string: str) -> Any:
    """Resolve an import string to a route structure.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"routes"``.

    If the resolved object is callable it is treated as a factory and
    called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        ConfigurationError: If the result is not a mapping or
            ``RouteStructure``, or the factory raised.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (Mapping, RouteStructure)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise ConfigurationError(msg) from exc

    if not isinstance(obj, (Mapping, RouteStructure)):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a route structure"
        raise ConfigurationError(msg)

    return obj
