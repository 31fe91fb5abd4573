"""ASGI response sending — translates a finished Response into ASGI messages."""

from hermes._internal.asgi import Send
from hermes.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: Response, send: Send) -> None:
    """Translate an ended Response into ASGI send() calls.

    ``content-length`` is always computed here; a value set by a handler
    is replaced. No content type is invented for responses that lack one.
    """
    body = response.body if _body_allowed(response.status_code) else b""

    raw_headers = [
        (name, value) for name, value in response.headers.raw() if name != b"content-length"
    ]
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status_code,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
