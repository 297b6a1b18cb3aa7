import logging

import httpx
import pytest

from greeting.config import Settings
from greeting.frontend.view import WelcomeView
from greeting.services.backend_client import BackendClient


def make_view(client: httpx.AsyncClient) -> WelcomeView:
    return WelcomeView(BackendClient(client, Settings()))


@pytest.mark.asyncio
async def test_mount_stores_backend_message() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"message": "X"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        view = make_view(client)
        assert view.backend_message == ""
        await view.mount()

    assert view.backend_message == "X"
    assert view.message == "Welcome to Vue.js Frontend!"


@pytest.mark.asyncio
async def test_mount_failure_leaves_message_blank(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    async def handler(_: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        view = make_view(client)
        await view.mount()

    assert view.backend_message == ""
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].getMessage() == "Error fetching data"
    assert errors[0].name == "greeting.frontend.view"


@pytest.mark.asyncio
async def test_mount_non_json_response_leaves_message_blank() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<!doctype html>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        view = make_view(client)
        await view.mount()

    assert view.backend_message == ""


@pytest.mark.asyncio
async def test_mount_runs_only_once() -> None:
    calls = 0

    async def handler(_: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(200, json={"message": f"call {calls}"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        view = make_view(client)
        await view.mount()
        await view.mount()

    assert calls == 1
    assert view.backend_message == "call 1"


@pytest.mark.asyncio
async def test_render_escapes_backend_message() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"message": "<b>hi</b> & bye"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        view = make_view(client)
        await view.mount()

    assert view.render() == (
        '<div id="app"><h1>Welcome to Vue.js Frontend!</h1>'
        "<p>&lt;b&gt;hi&lt;/b&gt; &amp; bye</p></div>"
    )
    assert view.render_text() == "Welcome to Vue.js Frontend!\n<b>hi</b> & bye"


@pytest.mark.asyncio
async def test_mount_shows_message_from_error_status_response() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "X"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        view = make_view(client)
        await view.mount()

    assert view.backend_message == "X"


@pytest.mark.asyncio
async def test_mount_invalid_backend_url_is_logged(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.ERROR)
    monkeypatch.setenv("BACKEND_URL", "http://localhost:abc/api/data")

    async with httpx.AsyncClient() as client:
        view = make_view(client)
        await view.mount()

    assert view.backend_message == ""
    errors = [r for r in caplog.records if r.name == "greeting.frontend.view"]
    assert len(errors) == 1
    assert errors[0].code == "fetch_error"
