"""Tests for hermes.server.sender response emission rules."""

import pytest

from hermes.http.response import Response
from hermes.server.sender import send_response


def _ended(body: str, status: int = 200) -> Response:
    response = Response(status_code=status)
    response.send(body)
    return response


class TestSendResponse:
    @pytest.mark.asyncio
    async def test_200_preserves_body(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(_ended("ok"), send)

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 200
        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"2"
        assert messages[1] == {"type": "http.response.body", "body": b"ok"}

    @pytest.mark.asyncio
    async def test_204_drops_body_and_sets_zero_content_length(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(_ended("unexpected-body", status=204), send)

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    @pytest.mark.asyncio
    async def test_handler_content_length_is_replaced(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        response = Response()
        response.set_header("Content-Length", "999").send("abc")
        await send_response(response, send)

        lengths = [v for k, v in messages[0]["headers"] if k == b"content-length"]
        assert lengths == [b"3"]

    @pytest.mark.asyncio
    async def test_no_content_type_invented(self) -> None:
        messages: list[dict] = []

        async def send(message: dict) -> None:
            messages.append(message)

        await send_response(_ended("raw"), send)

        names = [k for k, _ in messages[0]["headers"]]
        assert b"content-type" not in names
