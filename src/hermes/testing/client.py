"""Test client for hermes applications.

Sends requests through the ASGI interface directly — no sockets, no
server process — and collects what the app sends back.
"""

import json as json_module
from dataclasses import dataclass, field
from typing import Any

from hermes._internal.asgi import Message
from hermes.http.headers import Headers
from hermes.http.query import split_target


@dataclass(frozen=True, slots=True)
class ClientResponse:
    """What the app sent for one request."""

    status: int
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body as string."""
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(self.body)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of a response header."""
        return self.headers.get(name, default)


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for hermes applications.

    Usage::

        async with TestClient(app) as client:
            response = await client.get("/users/42?verbose=1")
            assert response.status == 200
    """

    __slots__ = ("app",)

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __aenter__(self) -> "TestClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        pass

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> ClientResponse:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> ClientResponse:
        """Send a POST request, optionally with a JSON body."""
        return await self.request("POST", path, headers=headers, body=body, json=json)

    async def put(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> ClientResponse:
        """Send a PUT request."""
        return await self.request("PUT", path, headers=headers, body=body, json=json)

    async def patch(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> ClientResponse:
        """Send a PATCH request."""
        return await self.request("PATCH", path, headers=headers, body=body, json=json)

    async def delete(self, path: str, *, headers: dict[str, str] | None = None) -> ClientResponse:
        """Send a DELETE request."""
        return await self.request("DELETE", path, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> ClientResponse:
        """Send an arbitrary request through the ASGI app.

        Raises:
            RuntimeError: The app returned without starting a response.
        """
        path_part, query_string = split_target(path)

        extra_headers: dict[str, str] = {}
        request_body = body or b""
        if json is not None:
            request_body = json_module.dumps(json).encode("utf-8")
            extra_headers["content-type"] = "application/json"

        raw_headers = Headers({**extra_headers, **(headers or {})}.items()).raw()

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": path_part,
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        body_sent = False

        async def receive() -> Message:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": request_body, "more_body": False}
            return {"type": "http.disconnect"}

        started: Message | None = None
        body_parts: list[bytes] = []

        async def send(message: Message) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = message
            elif message["type"] == "http.response.body":
                body_parts.append(message.get("body", b""))

        await self.app(scope, receive, send)

        if started is None:
            msg = f"{method.upper()} {path} returned without sending a response"
            raise RuntimeError(msg)

        return ClientResponse(
            status=started["status"],
            headers=Headers.from_raw(started.get("headers", [])),
            body=b"".join(body_parts),
        )
