"""Renderable capability: what the host view layer can display.

The resolver never looks inside a component. It only asks whether a
value is something the view layer knows how to render, then passes it
through untouched.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Minimal renderable protocol.

    Any object with a ``render`` method satisfies this, such as a
    template object or a pre-built page value.
    """

    def render(self, *args: Any, **kwargs: Any) -> Any: ...


# Plain data, never a view
_NON_RENDERABLE = (bool, int, float, complex, str, bytes, bytearray, Mapping, list, tuple, set)


def is_valid_renderable(value: Any) -> bool:
    """Default renderable-validity check.

    Accepts objects satisfying ``Renderable`` and any callable (view
    functions and view classes). Rejects ``None``, strings, numbers,
    and plain containers.
    """
    if value is None or isinstance(value, _NON_RENDERABLE):
        return False
    return isinstance(value, Renderable) or callable(value)
