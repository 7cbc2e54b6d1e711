"""routegate CLI: inspect and check route structures.

Entry point registered as ``routegate`` in ``pyproject.toml``::

    [project.scripts]
    routegate = "routegate.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routegate`` command."""
    parser = argparse.ArgumentParser(
        prog="routegate",
        description="routegate: authentication-gated route resolution.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routegate routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List resolved route entries")
    routes_parser.add_argument(
        "structure",
        help="Import string (e.g. myapp.routing:routes)",
    )
    routes_parser.add_argument(
        "--authenticated",
        action="store_true",
        help="Evaluate gated routes as a signed-in user",
    )

    # -- routegate check --------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Report skipped or misconfigured routes")
    check_parser.add_argument(
        "structure",
        help="Import string (e.g. myapp.routing:routes)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routegate.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from routegate.cli._check import run_check

        run_check(args)
