"""Handler protocol, Next type alias and the Mountable router contract.

A handler (route handler or middleware, there is no difference) is any
callable matching::

    def my_mw(request: Request, response: Response, next: Next) -> None: ...
    async def my_mw(request: Request, response: Response, next: Next) -> None: ...

No base class required. The framework checks the shape, not the lineage.

A handler finishes its part of the request either by calling ``next()``
to pass control down the chain or by ending the response with
``response.json()`` / ``response.send()``.
"""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, Protocol, TypeAlias, runtime_checkable

from hermes.http.request import Request
from hermes.http.response import Response

# Continuation handed to every handler. Awaiting it is optional for sync
# handlers; the chain executor awaits an un-awaited continuation itself.
Next: TypeAlias = Callable[[], Awaitable[None]]

# Route handler or middleware, sync or async
Handler: TypeAlias = Callable[[Request, Response, Next], Any]


class Middleware(Protocol):
    """Protocol for hermes handlers.

    Accepts both functions and callable objects::

        # Function middleware
        async def timing(request, response, next):
            start = time.monotonic()
            await next()
            logger.info("%s took %.3fs", request.path, time.monotonic() - start)

        # Class middleware
        class RequireToken:
            def __call__(self, request, response, next):
                if request.headers.get("authorization") != "Bearer s3cr3t":
                    response.status(401).send("Unauthorized")
                    return
                next()
    """

    def __call__(self, request: Request, response: Response, next: Next) -> Any: ...


@runtime_checkable
class Mountable(Protocol):
    """What ``App.use_router()`` needs from a child router.

    Any object with these two accessors can be mounted; it does not have
    to be a hermes ``App``.
    """

    def get_routes(self) -> Mapping[Any, Sequence[Handler]]: ...
    def get_global_middleware(self) -> Sequence[Handler]: ...
