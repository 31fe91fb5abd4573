"""Listening entry point.

Starts a uvicorn ASGI server with the live hermes App object and fires
an optional callback once the server is accepting connections.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

import anyio
import uvicorn

from hermes._internal.invoke import invoke

logger = logging.getLogger("hermes.server")

# How often serve() checks whether uvicorn has finished binding
_STARTUP_POLL_INTERVAL = 0.01


def build_server(
    app: Any,
    host: str,
    port: int,
    *,
    log_level: str = "info",
    access_log: bool = True,
) -> uvicorn.Server:
    """Create a single-process uvicorn server for *app* (not yet started)."""
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level,
        access_log=access_log,
        lifespan="on",
    )
    return uvicorn.Server(config)


async def serve(
    app: Any,
    host: str,
    port: int,
    *,
    callback: Callable[[], Any] | None = None,
    log_level: str = "info",
    access_log: bool = True,
) -> None:
    """Serve *app* until the server shuts down.

    Args:
        app: ASGI callable (hermes App instance).
        host: Bind host address.
        port: Bind port number.
        callback: Called with no arguments once the listener is bound.
            May be sync or async.
        log_level: uvicorn log level.
        access_log: Whether uvicorn logs one line per request.
    """
    server = build_server(app, host, port, log_level=log_level, access_log=access_log)

    async with anyio.create_task_group() as tg:
        tg.start_soon(server.serve)
        if callback is None:
            return
        while not server.started:
            if server.should_exit:
                return
            await anyio.sleep(_STARTUP_POLL_INTERVAL)
        logger.debug("Listening on %s:%d", host, port)
        await invoke(callback)


def run_server(
    app: Any,
    host: str,
    port: int,
    *,
    callback: Callable[[], Any] | None = None,
    log_level: str = "info",
    access_log: bool = True,
) -> None:
    """Blocking form of :func:`serve` that owns the event loop."""
    anyio.run(
        functools.partial(
            serve,
            app,
            host,
            port,
            callback=callback,
            log_level=log_level,
            access_log=access_log,
        )
    )
