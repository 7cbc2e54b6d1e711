"""``routegate check``: report routes that resolution would skip."""

import argparse
import sys

from routegate.cli._resolve import resolve_structure
from routegate.config import ResolverConfig
from routegate.diagnostics import Diagnostic
from routegate.errors import ConfigurationError
from routegate.resolver import resolve


def run_check(args: argparse.Namespace) -> None:
    """Resolve the structure and print every diagnostic.

    Exits with status 1 when anything was skipped, 0 otherwise.
    """
    try:
        structure = resolve_structure(args.structure)
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    found: list[Diagnostic] = []
    entries = resolve(structure, config=ResolverConfig(sink=found.append))

    if not found:
        print(f"All clear: {len(entries)} route entries, no problems found.")
        return

    for diagnostic in found:
        location = diagnostic.key or diagnostic.category or "-"
        codes = ", ".join(diagnostic.codes)
        print(f"  {location}: {diagnostic.message} [{codes}]")
    print(f"\n{len(found)} problem(s) found, {len(entries)} route entries resolved.")
    raise SystemExit(1)
