"""Tests for hermes.middleware.chain — sequential (request, response, next) execution."""

import anyio
import pytest

from hermes.errors import MiddlewareError
from hermes.http.request import Request
from hermes.http.response import Response
from hermes.middleware.chain import run_chain


def _pair() -> tuple[Request, Response]:
    return Request(method="GET", path="/"), Response()


def _recorder(log: list[str], name: str):
    def handler(request, response, next):
        log.append(name)
        next()

    handler.__name__ = name
    return handler


@pytest.mark.anyio
async def test_empty_chain_is_a_no_op() -> None:
    request, response = _pair()
    await run_chain(request, response, [])
    assert response.ended is False


@pytest.mark.anyio
async def test_runs_in_order() -> None:
    log: list[str] = []
    request, response = _pair()

    await run_chain(request, response, [_recorder(log, "a"), _recorder(log, "b"), _recorder(log, "c")])

    assert log == ["a", "b", "c"]


@pytest.mark.anyio
async def test_handler_that_skips_next_halts_chain() -> None:
    log: list[str] = []
    request, response = _pair()

    def stop(request, response, next):
        log.append("stop")
        response.send("done")

    await run_chain(request, response, [_recorder(log, "a"), stop, _recorder(log, "never")])

    assert log == ["a", "stop"]
    assert response.text == "done"


@pytest.mark.anyio
async def test_async_handler_resumes_after_await_next() -> None:
    log: list[str] = []
    request, response = _pair()

    async def outer(request, response, next):
        log.append("outer:before")
        await next()
        log.append("outer:after")

    await run_chain(request, response, [outer, _recorder(log, "inner")])

    assert log == ["outer:before", "inner", "outer:after"]


@pytest.mark.anyio
async def test_async_work_before_next() -> None:
    log: list[str] = []
    request, response = _pair()

    async def slow(request, response, next):
        await anyio.sleep(0)
        request.state["loaded"] = True
        await next()

    def check(request, response, next):
        log.append(f"loaded={request.state.get('loaded')}")
        response.send("ok")

    await run_chain(request, response, [slow, check])

    assert log == ["loaded=True"]


@pytest.mark.anyio
async def test_unawaited_next_from_async_handler_still_runs() -> None:
    log: list[str] = []
    request, response = _pair()

    async def forgetful(request, response, next):
        next()

    await run_chain(request, response, [forgetful, _recorder(log, "tail")])

    assert log == ["tail"]


@pytest.mark.anyio
async def test_next_called_twice_raises() -> None:
    request, response = _pair()

    def twice(request, response, next):
        next()
        next()

    with pytest.raises(MiddlewareError, match="multiple times"):
        await run_chain(request, response, [twice, _recorder([], "tail")])


@pytest.mark.anyio
async def test_handler_exception_propagates() -> None:
    log: list[str] = []
    request, response = _pair()

    def boom(request, response, next):
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await run_chain(request, response, [_recorder(log, "a"), boom, _recorder(log, "never")])

    assert log == ["a"]


@pytest.mark.anyio
async def test_exception_in_tail_surfaces_through_awaiting_handler() -> None:
    log: list[str] = []
    request, response = _pair()

    async def outer(request, response, next):
        try:
            await next()
        finally:
            log.append("outer:finally")

    async def failing(request, response, next):
        raise RuntimeError("tail failed")

    with pytest.raises(RuntimeError, match="tail failed"):
        await run_chain(request, response, [outer, failing])

    assert log == ["outer:finally"]


@pytest.mark.anyio
async def test_callable_object_handler() -> None:
    request, response = _pair()

    class Stamp:
        def __call__(self, request, response, next):
            response.headers["X-Stamp"] = "yes"
            return next()

    def finish(request, response, next):
        response.send("ok")

    await run_chain(request, response, [Stamp(), finish])

    assert response.headers["x-stamp"] == "yes"
    assert response.ended is True
