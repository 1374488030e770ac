"""
Bounded retry with backoff for async actions.

The loop is kept separate from the HTTP client so it can be exercised with a
scripted action and a fake clock.

Usage:
    >>> result = await retry_with_backoff(
    ...     call_upstream,
    ...     max_attempts=3,
    ...     backoff=linear_backoff(1.0),
    ...     is_retryable=lambda exc: isinstance(exc, TransientError),
    ... )
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


def linear_backoff(base_seconds: float) -> Callable[[int], float]:
    """Delay before attempt n is n * base_seconds (attempt 0 waits nothing)."""

    def backoff(attempt: int) -> float:
        return attempt * base_seconds

    return backoff


async def retry_with_backoff(
    action: Callable[[int], Awaitable[T]],
    *,
    max_attempts: int,
    backoff: Callable[[int], float],
    is_retryable: Callable[[BaseException], bool],
    sleep: Sleep = asyncio.sleep,
    on_retry: Optional[Callable[[int, BaseException], None]] = None,
) -> T:
    """
    Await `action(attempt)` until it succeeds or the attempt budget runs out.

    Args:
        action: Coroutine function receiving the zero-based attempt number
        max_attempts: Total number of attempts (first call included), >= 1
        backoff: Maps attempt number to seconds to wait before that attempt
        is_retryable: Decides whether a raised exception earns another attempt
        sleep: Awaitable sleep, injectable for tests
        on_retry: Called with (failed_attempt, exc) before a retry is scheduled

    Returns:
        Whatever the first successful attempt returned.

    Raises:
        The first non-retryable exception, or the exception of the last
        attempt once the budget is exhausted.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(max_attempts):
        if attempt > 0:
            delay = backoff(attempt)
            logger.info(f"Retry attempt {attempt} of {max_attempts - 1} in {delay:.1f}s")
            await sleep(delay)

        try:
            return await action(attempt)
        except Exception as exc:
            if not is_retryable(exc) or attempt == max_attempts - 1:
                raise
            if on_retry is not None:
                on_retry(attempt, exc)

    # Unreachable: the last attempt either returns or raises
    raise RuntimeError("retry loop exited without a result")
