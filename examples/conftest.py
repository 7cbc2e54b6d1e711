"""Shared pytest configuration for routegate examples.

Provides the ``example_routes`` fixture that loads the route structure
from the ``routes.py`` file in the same directory as the test.  Each
call re-executes routes.py in an isolated module namespace.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_routes(request: pytest.FixtureRequest):
    """Load the ``routes`` structure from the sibling routes.py."""
    routes_path = Path(request.path).parent / "routes.py"
    module_name = f"example_{routes_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, routes_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
