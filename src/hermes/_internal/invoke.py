"""Invoke helpers — call sync or async handlers uniformly.

Hermes handlers can be ``def`` or ``async def``. Anything that calls a
user-provided handler goes through :func:`invoke` so the sync/async
check lives in exactly one place.
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        def log_hit(request, response, next):
            print(request.path)
            next()

        async def load_user(request, response, next):
            request.state["user"] = await users.get(request.params["id"])
            await next()
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
