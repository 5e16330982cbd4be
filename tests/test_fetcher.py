import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from site_mirror.crawler.fetcher import PageFetcher
from site_mirror.errors import FetchFailure


def make_app():
    async def index(request):
        return web.Response(body=b"<html>hello</html>", content_type="text/html")

    async def missing(request):
        return web.Response(status=404, text="not here")

    async def broken(request):
        return web.Response(status=500)

    async def slow(request):
        await asyncio.sleep(1)
        return web.Response(text="late")

    async def moved(request):
        raise web.HTTPFound("/")

    app = web.Application()
    app.router.add_get("/", index)
    app.router.add_get("/missing", missing)
    app.router.add_get("/broken", broken)
    app.router.add_get("/slow", slow)
    app.router.add_get("/moved", moved)
    return app


def fetch_path(path, timeout=5):
    async def scenario():
        async with TestServer(make_app()) as server:
            async with PageFetcher(timeout=timeout) as fetcher:
                return await fetcher.fetch(str(server.make_url(path)))

    return asyncio.run(scenario())


def test_fetch_returns_body():
    assert fetch_path("/") == b"<html>hello</html>"


def test_redirects_are_followed():
    assert fetch_path("/moved") == b"<html>hello</html>"


@pytest.mark.parametrize("path, status", [("/missing", 404), ("/broken", 500)])
def test_non_success_status_is_a_failure(path, status):
    with pytest.raises(FetchFailure) as excinfo:
        fetch_path(path)

    assert excinfo.value.reason == f"HTTP {status}"


def test_timeout_is_a_failure():
    with pytest.raises(FetchFailure):
        fetch_path("/slow", timeout=0.2)


def test_unreachable_host_is_a_failure():
    async def scenario():
        async with PageFetcher(timeout=5) as fetcher:
            await fetcher.fetch("http://127.0.0.1:1/")

    with pytest.raises(FetchFailure):
        asyncio.run(scenario())


def test_fetch_requires_open_session():
    with pytest.raises(RuntimeError):
        asyncio.run(PageFetcher().fetch("http://127.0.0.1:1/"))
