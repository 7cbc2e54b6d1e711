"""``routegate routes``: list resolved route entries.

Resolves an import string to a route structure and prints every entry
in resolution order with what it does for the chosen auth state.
"""

import argparse
import sys

from routegate.cli._resolve import resolve_structure
from routegate.errors import ConfigurationError
from routegate.resolver import resolve


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of KEY, PATH, CATEGORY, and OUTCOME."""
    try:
        structure = resolve_structure(args.structure)
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    entries = resolve(structure, is_authenticated=args.authenticated)
    if not entries:
        print("No routes resolved.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for entry in entries:
        info = entry.to_dict(args.authenticated)
        outcome = info["outcome"]
        if "redirect" in outcome:
            outcome_str = f"-> {outcome['redirect']}"
        else:
            outcome_str = outcome["render"]
        rows.append(
            (
                entry.key,
                entry.path if entry.path is not None else "*",
                info["category"] or "catch-all",
                outcome_str,
            )
        )

    headers = ("KEY", "PATH", "CATEGORY")
    widths = [max(len(headers[i]), *(len(r[i]) for r in rows)) for i in range(3)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*headers, "OUTCOME"))
    sep_len = sum(widths) + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
