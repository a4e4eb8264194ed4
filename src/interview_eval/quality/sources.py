"""
Source Liveness Checks

Verifies that a blog post's cited sources are reachable. A HEAD request is
tried first; servers that reject HEAD (403/405) still count as live. When
HEAD fails at the transport level a GET is attempted instead.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import aiohttp

from ..core.config import SourceCheckConfig
from ..core.exceptions import SourceCheckError
from ..utils.async_helpers import retry_with_backoff, gather_with_concurrency
from ..utils.logging import get_logger
from .content import Source

logger = get_logger(__name__)

HEAD_ACCEPTED_STATUSES = (403, 405)


@dataclass
class SourceValidation:
    """Valid and invalid sources of one blog post."""
    valid: List[Source] = field(default_factory=list)
    invalid: List[Dict[str, Any]] = field(default_factory=list)
    checked: bool = True

    @property
    def total(self) -> int:
        return len(self.valid) + len(self.invalid)

    @property
    def valid_percentage(self) -> float:
        return len(self.valid) / self.total if self.total else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': self.total,
            'valid': len(self.valid),
            'invalid': len(self.invalid),
            'valid_percentage': self.valid_percentage,
            'invalid_sources': list(self.invalid),
            'checked': self.checked,
        }


class SourceChecker:
    """Checks source URLs over HTTP with bounded concurrency."""

    def __init__(self, config: Optional[SourceCheckConfig] = None):
        self.config = config or SourceCheckConfig()
        self.session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self.session = aiohttp.ClientSession(
                timeout=timeout,
                headers={'User-Agent': self.config.user_agent},
            )
        return self.session

    async def _request(self, method: str, url: str) -> int:
        """Issue a request and return its status code."""
        session = await self._ensure_session()
        try:
            async with session.request(method, url, allow_redirects=True) as response:
                return response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise SourceCheckError(f"{method} {url} failed: {type(e).__name__}", url=url)

    async def _request_with_retry(self, method: str, url: str) -> int:
        request = retry_with_backoff(
            max_retries=self.config.retries,
            base_delay=self.config.retry_delay,
            max_delay=self.config.timeout,
            retry_on=(SourceCheckError,),
        )(self._request)
        return await request(method, url)

    async def check_url(self, url: str) -> bool:
        """True when ``url`` answers like a live page."""
        if not url:
            return False

        try:
            status = await self._request_with_retry('HEAD', url)
            return 200 <= status < 300 or status in HEAD_ACCEPTED_STATUSES
        except SourceCheckError as e:
            logger.debug(f"HEAD failed, falling back to GET: {e}")

        try:
            status = await self._request_with_retry('GET', url)
            return 200 <= status < 300
        except SourceCheckError as e:
            logger.debug(f"Source unreachable: {e}")
            return False

    async def validate_sources(self, sources: Sequence[Source]) -> SourceValidation:
        """Partition sources into valid and invalid ones."""
        result = SourceValidation()
        to_check = []

        for source in sources:
            if not source.url or not source.title:
                result.invalid.append({**source.to_dict(), 'reason': 'Missing URL or title'})
            else:
                to_check.append(source)

        live = await gather_with_concurrency(
            self.config.max_concurrent,
            (self.check_url(source.url) for source in to_check),
        )

        for source, is_live in zip(to_check, live):
            if is_live:
                result.valid.append(source)
            else:
                result.invalid.append({**source.to_dict(), 'reason': 'URL returned 404 or unreachable'})

        logger.info(f"Source check: {len(result.valid)}/{result.total} valid")
        return result

    async def close(self) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


def structural_source_validation(sources: Sequence[Source]) -> SourceValidation:
    """Offline validation: only title and URL presence is checked."""
    result = SourceValidation(checked=False)
    for source in sources:
        if source.url and source.title:
            result.valid.append(source)
        else:
            result.invalid.append({**source.to_dict(), 'reason': 'Missing URL or title'})
    return result
