"""``hermes routes`` — list registered routes in match order."""

import argparse
import sys

from hermes.cli._resolve import resolve_app


def _handler_name(handler: object) -> str:
    return getattr(handler, "__name__", None) or type(handler).__name__


def run_routes(args: argparse.Namespace) -> None:
    """Print METHOD, PATH and the handler chain for every route."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.get_routes()
    if not routes:
        print("No routes registered.")
        return

    rows = [
        (key.method, key.path, " -> ".join(_handler_name(h) for h in handlers))
        for key, handlers in routes.items()
    ]

    max_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    max_path = max(4, *(len(r[1]) for r in rows))  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLERS"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, chain in rows:
        print(fmt.format(method, path, chain))

    middleware = app.get_global_middleware()
    if middleware:
        print()
        print("Global middleware: " + ", ".join(_handler_name(h) for h in middleware))
