"""Per-request HTTP response.

Handlers write to the response through three helpers::

    response.status(201).json({"ok": True})
    response.send("plain body")

Ending a response fixes its status, headers and body; the dispatcher
flushes it to the ASGI server once the chain returns. Writing to an
ended response raises ``ResponseEndedError``.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, field
from typing import Any

from hermes.errors import ResponseEndedError
from hermes.http.headers import Headers

JSON_CONTENT_TYPE = "application/json"


@dataclass(slots=True)
class Response:
    """Mutable response state for one request."""

    status_code: int = 200
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""
    ended: bool = False

    # Keyword arguments for json.dumps, installed by the response decorator
    json_options: dict[str, Any] = field(default_factory=dict, repr=False)

    def _check_open(self, action: str) -> None:
        if self.ended:
            msg = f"Cannot {action}: response already ended"
            raise ResponseEndedError(msg)

    # -- Chainable setters --

    def status(self, code: int) -> Response:
        """Set the status code and return the response for chaining."""
        self._check_open("set status")
        self.status_code = code
        return self

    def set_header(self, name: str, value: str) -> Response:
        """Set (replace) a header and return the response for chaining."""
        self._check_open("set header")
        self.headers[name] = value
        return self

    # -- Terminal writers --

    def json(self, data: Any) -> None:
        """Serialize *data* as JSON, set the content type and end the response."""
        self._check_open("write JSON")
        self.headers["Content-Type"] = JSON_CONTENT_TYPE
        self.end(json_module.dumps(data, **self.json_options))

    def send(self, data: str | bytes | None = None) -> None:
        """End the response with *data* as the raw body.

        Headers are left alone; set a content type first if one is needed.
        """
        self.end(data)

    def end(self, data: str | bytes | None = None) -> None:
        """Finish the response. ``str`` bodies are encoded as UTF-8."""
        self._check_open("end")
        if data is None:
            data = b""
        elif isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, bytes | bytearray | memoryview):
            msg = f"Response body must be str or bytes, not {type(data).__name__}"
            raise TypeError(msg)
        self.body = bytes(data)
        self.ended = True

    # -- Body helpers --

    @property
    def text(self) -> str:
        """Body as string."""
        return self.body.decode("utf-8")
