"""
Exponential backoff retry logic for API calls.

Retries transient failures (429 rate limits, 5xx, connection errors) with
exponential backoff and a configurable retry budget. Client errors (4xx) are
raised on the first attempt.
"""

import asyncio
import logging
from typing import Any, Callable

from stripe_sdk.errors import ApiError, RateLimitError

logger = logging.getLogger("stripe_sdk.retry")

RETRIABLE_STATUS_CODES = {429, 500, 502, 503, 504}
MAX_DELAY = 30.0


async def with_retry(
    func: Callable[..., Any],
    *args: Any,
    max_retries: int = 2,
    base_delay: float = 0.5,
    **kwargs: Any,
) -> Any:
    """
    Execute an async function with exponential backoff on retriable errors.

    Args:
        func: Async callable to execute.
        max_retries: Maximum number of retry attempts after the first call.
        base_delay: Initial sleep in seconds, doubled after every failure.

    Returns:
        The result of the function call.

    Raises:
        ApiError: On a non-retriable failure or once retries are exhausted.
    """
    delay = base_delay

    for attempt in range(max_retries + 1):
        try:
            return await func(*args, **kwargs)
        except ApiError as e:
            if not e.retriable or attempt >= max_retries:
                if e.retriable:
                    logger.error("Exhausted %d retries for API call: %s", max_retries, e)
                raise

            sleep_for = min(delay, MAX_DELAY)
            if isinstance(e, RateLimitError) and e.retry_after:
                sleep_for = min(e.retry_after, MAX_DELAY)

            logger.warning(
                "Retriable error on attempt %d/%d: %s, sleeping %.1fs",
                attempt + 1,
                max_retries + 1,
                e,
                sleep_for,
            )
            await asyncio.sleep(sleep_for)
            delay = min(delay * 2, MAX_DELAY)

    raise ApiError("Unknown error after retries")
