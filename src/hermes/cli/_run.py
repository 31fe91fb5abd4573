"""``hermes run`` — serve an app with uvicorn until interrupted."""

import argparse
import sys

from hermes.cli._resolve import resolve_app


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and block in ``App.listen``.

    ``--host`` / ``--port`` win over the app's config.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    host = args.host if args.host is not None else app.config.host
    port = args.port if args.port is not None else app.config.port

    def announce() -> None:
        print(f"hermes listening on http://{host}:{port}")

    app.listen(port, announce, host=host)
