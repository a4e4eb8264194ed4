"""
Unit tests for source liveness checks.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest
from aiohttp import test_utils, web

from interview_eval.core.config import SourceCheckConfig
from interview_eval.core.exceptions import SourceCheckError
from interview_eval.quality.content import Source
from interview_eval.quality.sources import SourceChecker, SourceValidation, structural_source_validation


class TestCheckUrl:
    """Test cases for SourceChecker.check_url."""

    def setup_method(self):
        self.checker = SourceChecker(SourceCheckConfig(retries=0, retry_delay=0))

    @pytest.mark.asyncio
    async def test_head_success(self):
        self.checker._request = AsyncMock(return_value=200)

        assert await self.checker.check_url("https://example.com")
        self.checker._request.assert_called_once_with('HEAD', "https://example.com")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [403, 405])
    async def test_head_rejected_still_live(self, status):
        self.checker._request = AsyncMock(return_value=status)
        assert await self.checker.check_url("https://example.com")

    @pytest.mark.asyncio
    async def test_head_not_found(self):
        self.checker._request = AsyncMock(return_value=404)

        assert not await self.checker.check_url("https://example.com/missing")
        assert self.checker._request.call_count == 1

    @pytest.mark.asyncio
    async def test_get_fallback_on_transport_failure(self):
        self.checker._request = AsyncMock(side_effect=[SourceCheckError("reset"), 200])

        assert await self.checker.check_url("https://example.com")
        assert [c.args[0] for c in self.checker._request.call_args_list] == ['HEAD', 'GET']

    @pytest.mark.asyncio
    async def test_get_fallback_must_be_2xx(self):
        self.checker._request = AsyncMock(side_effect=[SourceCheckError("reset"), 403])
        assert not await self.checker.check_url("https://example.com")

    @pytest.mark.asyncio
    async def test_unreachable(self):
        self.checker._request = AsyncMock(side_effect=SourceCheckError("down"))
        assert not await self.checker.check_url("https://example.com")

    @pytest.mark.asyncio
    async def test_empty_url(self):
        self.checker._request = AsyncMock(return_value=200)
        assert not await self.checker.check_url("")
        self.checker._request.assert_not_called()

    @pytest.mark.asyncio
    async def test_retries_transport_errors(self):
        checker = SourceChecker(SourceCheckConfig(retries=1, retry_delay=0))
        checker._request = AsyncMock(side_effect=[SourceCheckError("timeout"), 200])

        assert await checker.check_url("https://example.com")
        assert [c.args[0] for c in checker._request.call_args_list] == ['HEAD', 'HEAD']


def make_app(seen):
    """Small site: a live page, a redirect, a GET-only page and a missing page."""
    async def page(request):
        seen.append((request.method, request.path))
        return web.Response(text="ok")

    async def moved(request):
        seen.append((request.method, request.path))
        raise web.HTTPMovedPermanently('/live')

    async def missing(request):
        seen.append((request.method, request.path))
        return web.Response(status=404)

    app = web.Application()
    app.router.add_get('/live', page)
    app.router.add_get('/moved', moved)
    app.router.add_get('/get-only', page, allow_head=False)
    app.router.add_route('*', '/gone', missing)
    return app


class TestCheckUrlOverHttp:
    """Test cases for SourceChecker against a local HTTP server."""

    def setup_method(self):
        self.seen = []
        self.config = SourceCheckConfig(retries=0, retry_delay=0, timeout=5)

    @pytest.mark.asyncio
    async def test_live_page(self):
        async with test_utils.TestServer(make_app(self.seen)) as server:
            async with SourceChecker(self.config) as checker:
                assert await checker.check_url(str(server.make_url('/live')))

        assert self.seen == [('HEAD', '/live')]

    @pytest.mark.asyncio
    async def test_redirect_is_followed(self):
        async with test_utils.TestServer(make_app(self.seen)) as server:
            async with SourceChecker(self.config) as checker:
                assert await checker.check_url(str(server.make_url('/moved')))

        assert self.seen == [('HEAD', '/moved'), ('HEAD', '/live')]

    @pytest.mark.asyncio
    async def test_head_not_allowed_counts_as_live(self):
        async with test_utils.TestServer(make_app(self.seen)) as server:
            async with SourceChecker(self.config) as checker:
                status = await checker._request('HEAD', str(server.make_url('/get-only')))
                assert status == 405
                assert await checker.check_url(str(server.make_url('/get-only')))

        assert self.seen == []

    @pytest.mark.asyncio
    async def test_missing_page(self):
        async with test_utils.TestServer(make_app(self.seen)) as server:
            async with SourceChecker(self.config) as checker:
                assert not await checker.check_url(str(server.make_url('/gone')))

        assert self.seen == [('HEAD', '/gone')]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        aiohttp.ClientConnectionError("connection refused"),
        asyncio.TimeoutError(),
    ])
    async def test_transport_errors_become_source_check_errors(self, error):
        async with SourceChecker(self.config) as checker:
            with patch.object(aiohttp.ClientSession, 'request', side_effect=error):
                with pytest.raises(SourceCheckError) as exc_info:
                    await checker._request('HEAD', "https://example.com/down")

        assert exc_info.value.url == "https://example.com/down"
        assert "HEAD https://example.com/down failed" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_connection_failure_falls_back_to_get(self):
        async with SourceChecker(self.config) as checker:
            with patch.object(aiohttp.ClientSession, 'request',
                              side_effect=aiohttp.ClientConnectionError("refused")) as request:
                assert not await checker.check_url("https://example.com/down")

        assert [c.args[0] for c in request.call_args_list] == ['HEAD', 'GET']
        assert all(c.kwargs['allow_redirects'] for c in request.call_args_list)


class TestValidateSources:
    """Test cases for source partitioning."""

    def setup_method(self):
        self.sources = [
            Source("Live", "https://example.com/live"),
            Source("Dead", "https://example.com/dead"),
            Source("", "https://example.com/untitled"),
            Source("No URL", ""),
        ]

    @pytest.mark.asyncio
    async def test_partition(self):
        checker = SourceChecker(SourceCheckConfig(retries=0))
        checker.check_url = AsyncMock(side_effect=lambda url: url.endswith("live"))

        result = await checker.validate_sources(self.sources)

        assert [s.title for s in result.valid] == ["Live"]
        assert len(result.invalid) == 3
        assert {i['reason'] for i in result.invalid} == {
            'Missing URL or title', 'URL returned 404 or unreachable'
        }
        assert result.checked
        assert result.valid_percentage == 0.25
        assert checker.check_url.call_count == 2

    @pytest.mark.asyncio
    async def test_context_manager_closes_session(self):
        async with SourceChecker() as checker:
            session = await checker._ensure_session()
            assert not session.closed
        assert session.closed

    def test_structural_validation(self):
        result = structural_source_validation(self.sources)

        assert not result.checked
        assert len(result.valid) == 2
        assert result.to_dict()['invalid'] == 2

    def test_empty_validation(self):
        result = SourceValidation()
        assert result.total == 0
        assert result.valid_percentage == 0.0
