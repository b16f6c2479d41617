from __future__ import annotations

import logging
import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

import httpx

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def is_retryable(error: Exception) -> bool:
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500 or error.response.status_code == 429
    return False


def retry(
    max_attempts: int = 3,
    backoff_seconds: float = 0.5,
    sleep: Callable[[float], None] = time.sleep,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """
    Retry a call on transport errors, 429 and 5xx responses with exponential backoff.

    Args:
        max_attempts: Total number of attempts, the first one included
        backoff_seconds: Wait before the second attempt, doubled after each failure
        sleep: Sleep function, replaced in tests
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except httpx.HTTPError as e:
                    if not is_retryable(e) or attempt == max_attempts - 1:
                        raise
                    wait_time = backoff_seconds * (2**attempt)
                    logger.warning(
                        "Booking API call failed, retrying",
                        extra={"attempt": attempt + 1, "error": str(e), "wait": wait_time},
                    )
                    sleep(wait_time)
            raise RuntimeError("Retry loop exited without result")

        return wrapper

    return decorator
