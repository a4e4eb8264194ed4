"""
Async Utility Functions

Retry and bounded-concurrency helpers used by the quality gate's
network checks.
"""

import asyncio
import random
from functools import wraps
from typing import Awaitable, Callable, Any, Iterable, List, Tuple, Type

from ..core.exceptions import SourceCheckError
from .logging import get_logger

logger = get_logger(__name__)


def retry_with_backoff(max_retries: int = 3, base_delay: float = 1.0,
                       max_delay: float = 60.0, backoff_factor: float = 2.0,
                       jitter: bool = True,
                       retry_on: Tuple[Type[BaseException], ...] = (SourceCheckError, asyncio.TimeoutError)):
    """
    Decorator for retry logic with exponential backoff.

    Args:
        max_retries: Maximum number of retry attempts
        base_delay: Base delay in seconds
        max_delay: Maximum delay in seconds
        backoff_factor: Multiplier for exponential backoff
        jitter: Add random jitter to prevent thundering herd
        retry_on: Exception types that trigger a retry
    """
    def decorator(func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except retry_on as e:
                    if attempt == max_retries:
                        logger.debug(f"{func.__name__} failed after {max_retries} retries: {e}")
                        raise

                    delay = min(base_delay * (backoff_factor ** attempt), max_delay)
                    if jitter:
                        delay = delay * (0.5 + random.random() * 0.5)

                    logger.debug(
                        f"{func.__name__} failed (attempt {attempt + 1}/{max_retries + 1}), "
                        f"retrying in {delay:.2f}s: {e}"
                    )
                    await asyncio.sleep(delay)

        return wrapper
    return decorator


async def gather_with_concurrency(limit: int, coroutines: Iterable[Awaitable[Any]]) -> List[Any]:
    """
    Await coroutines with at most ``limit`` running at once.

    Results are returned in input order.
    """
    semaphore = asyncio.Semaphore(max(1, limit))

    async def run(coro: Awaitable[Any]) -> Any:
        async with semaphore:
            return await coro

    return await asyncio.gather(*(run(c) for c in coroutines))
