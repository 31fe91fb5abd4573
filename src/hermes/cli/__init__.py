"""Hermes CLI — route listing and a server runner.

Entry point registered as ``hermes`` in ``pyproject.toml``::

    [project.scripts]
    hermes = "hermes.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``hermes`` command."""
    parser = argparse.ArgumentParser(
        prog="hermes",
        description="Hermes — a small middleware router for ASGI.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- hermes run -------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve an app")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    # -- hermes routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from hermes.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from hermes.cli._routes import run_routes

        run_routes(args)
