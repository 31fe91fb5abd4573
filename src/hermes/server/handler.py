"""ASGI handler — translates ASGI scope/messages to hermes types.

Builds a Request from the scope, resolves the route once, runs the
handler chain and sends the finished Response back through ASGI send().
"""

import logging
from collections.abc import Sequence

from hermes._internal.asgi import Receive, Scope, Send
from hermes.http.decorators import decorate_request
from hermes.http.request import Request
from hermes.http.response import Response
from hermes.middleware.chain import run_chain
from hermes.middleware.protocol import Handler
from hermes.routing.table import RouteTable
from hermes.server.sender import send_response

logger = logging.getLogger("hermes.server")

NOT_FOUND_STATUS = 404
NOT_FOUND_BODY = "Not found"


def not_found() -> Response:
    """The fixed response for requests no route matches."""
    response = Response(status_code=NOT_FOUND_STATUS)
    response.set_header("Content-Type", "text/plain; charset=utf-8")
    response.send(NOT_FOUND_BODY)
    return response


def _match_path(scope: Scope) -> str:
    """Path used for route matching.

    Prefers the undecoded ``raw_path`` so percent escapes are decoded
    exactly once, when parameters are extracted.
    """
    raw_path = scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1").partition("?")[0]
    return scope["path"]


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    routes: RouteTable,
    global_middleware: Sequence[Handler],
    response_decorator: Handler,
) -> None:
    """Process a single HTTP request through the full pipeline.

    Handler exceptions are logged and re-raised; no error response is
    produced for them.
    """
    request = Request.from_asgi(scope, receive)
    match = routes.match(request.method, _match_path(scope))

    if match is None:
        logger.debug("No route for %s %s", request.method, request.path)
        await send_response(not_found(), send)
        return

    request.params.update(match.params)
    response = Response()

    chain: list[Handler] = [
        decorate_request,
        response_decorator,
        *global_middleware,
        *match.handlers,
    ]

    try:
        await run_chain(request, response, chain)
    except Exception:
        logger.exception("Unhandled error in handler chain for %s %s", request.method, request.path)
        raise

    if not response.ended:
        logger.warning(
            "Handler chain for %s %s finished without ending the response",
            request.method,
            request.path,
        )
        return

    await send_response(response, send)
