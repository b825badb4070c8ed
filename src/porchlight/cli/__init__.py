"""Porchlight CLI — serve a site and inspect its routes.

Entry point registered as ``porchlight`` in ``pyproject.toml``::

    [project.scripts]
    porchlight = "porchlight.cli:main"
"""

import argparse
import sys

DEFAULT_APP = "porchlight.site:create_app"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``porchlight`` command."""
    parser = argparse.ArgumentParser(
        prog="porchlight",
        description="Porchlight — a minimal static content server.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- porchlight run ---------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Bind the port and serve")
    run_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--asset-dir",
        default=None,
        help="Directory of files served ahead of the routes",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: from the app config)",
    )

    # -- porchlight routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from porchlight.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from porchlight.cli._routes import run_routes

        run_routes(args)
