"""Request and response decorators.

The first two links of every handler chain. They prepare the
per-request ``Request`` and ``Response`` values before any user
middleware runs.
"""

from typing import Any

from hermes.config import AppConfig
from hermes.http.query import parse_query
from hermes.http.request import Request
from hermes.http.response import Response
from hermes.middleware.protocol import Next


def decorate_request(request: Request, response: Response, next: Next) -> Any:  # noqa: A002
    """Fill ``request.query`` from the query string.

    ``request.params`` already holds the route parameters attached by the
    dispatcher. Keys set on ``request.query`` before this point are kept;
    parsed values are merged over them.
    """
    if request.query_string:
        request.query.update(parse_query(request.query_string))
    return next()


class ResponseDecorator:
    """Apply app-wide response defaults from :class:`AppConfig`.

    Adds ``config.default_headers`` the response does not already carry
    and binds the JSON serialization options used by ``Response.json()``.
    """

    __slots__ = ("_headers", "_json_options")

    def __init__(self, config: AppConfig) -> None:
        self._headers = config.default_headers
        self._json_options: dict[str, Any] = {"ensure_ascii": config.json_ensure_ascii}
        if config.json_indent is not None:
            self._json_options["indent"] = config.json_indent

    def __call__(self, request: Request, response: Response, next: Next) -> Any:  # noqa: A002
        for name, value in self._headers:
            if name not in response.headers:
                response.headers[name] = value
        response.json_options.update(self._json_options)
        return next()

    def __repr__(self) -> str:
        return f"ResponseDecorator(headers={self._headers!r})"
