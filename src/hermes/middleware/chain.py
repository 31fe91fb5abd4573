"""Middleware chain executor.

Runs a handler sequence for one request. Each handler receives a
``next`` continuation that runs the rest of the sequence; a handler that
never calls it halts the chain there.
"""

import inspect
from collections.abc import Awaitable, Coroutine, Sequence
from typing import Any

from hermes._internal.invoke import invoke
from hermes.errors import MiddlewareError
from hermes.http.request import Request
from hermes.http.response import Response
from hermes.middleware.protocol import Handler


async def run_chain(
    request: Request,
    response: Response,
    handlers: Sequence[Handler],
) -> None:
    """Invoke *handlers* in order for one request.

    An empty sequence returns immediately. Otherwise the head is called
    with ``(request, response, next)`` where ``next()`` runs this
    function on the tail. Exceptions raised by any handler propagate to
    the caller unchanged.

    Sync handlers call ``next()`` without awaiting it; the executor
    notices the continuation was never started and awaits it once the
    handler returns, so both styles run the tail exactly once.
    """
    if not handlers:
        return

    head, tail = handlers[0], handlers[1:]
    pending: list[Coroutine[Any, Any, None]] = []

    def next() -> Awaitable[None]:  # noqa: A001
        if pending:
            name = getattr(head, "__name__", repr(head))
            msg = f"next() called multiple times in {name}"
            raise MiddlewareError(msg)
        continuation = run_chain(request, response, tail)
        pending.append(continuation)
        return continuation

    try:
        await invoke(head, request, response, next)
    except BaseException:
        if pending and inspect.getcoroutinestate(pending[0]) == inspect.CORO_CREATED:
            pending[0].close()
        raise

    if pending and inspect.getcoroutinestate(pending[0]) == inspect.CORO_CREATED:
        await pending[0]
