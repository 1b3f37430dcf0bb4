"""Exponential backoff for rate-limited calls to the model service."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

RATE_LIMIT_STATUS = 429


def is_rate_limited(exc: BaseException) -> bool:
    """True when the failure signals HTTP 429 (too many requests)."""
    for attr in ("code", "status_code"):
        if getattr(exc, attr, None) == RATE_LIMIT_STATUS:
            return True
    return str(RATE_LIMIT_STATUS) in str(exc)


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    initial_delay_ms: int = 1000,
    is_retryable: Callable[[BaseException], bool] = is_rate_limited,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Await `operation`, retrying retryable failures up to `max_retries` times.

    The wait before retry n (0-based) is `initial_delay_ms * 2**n`, so the
    defaults make up to 4 calls, waiting 1s, 2s then 4s. Non-retryable
    failures propagate at once, and the last failure propagates when retries
    run out.
    """
    retries = 0
    while True:
        try:
            return await operation()
        except Exception as exc:
            if retries >= max_retries or not is_retryable(exc):
                raise
            delay_ms = initial_delay_ms * 2 ** retries
            logger.warning(
                f"Rate limited (retry {retries + 1}/{max_retries}). Retrying in {delay_ms}ms..."
            )
            await sleep(delay_ms / 1000)
            retries += 1
