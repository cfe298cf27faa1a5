r"""Shared retry decision logic for sync and async operations.

This module contains the retry decisions shared by the synchronous and
asynchronous request executors.
"""

from __future__ import annotations

__all__ = ["calculate_sleep_time", "should_retry_response"]

import logging
import random
from typing import TYPE_CHECKING

from arcedit.exceptions import FeatureServiceError

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def should_retry_response(
    response: httpx.Response,
    url: str,
    method: str,
    status_forcelist: tuple[int, ...],
) -> bool:
    """Determine if a response should trigger a retry.

    Args:
        response: The HTTP response to evaluate.
        url: The URL being requested.
        method: The HTTP method being used.
        status_forcelist: Tuple of retryable HTTP status codes.

    Returns:
        ``True`` if the status code is retryable, ``False`` for a
        successful response.

    Raises:
        FeatureServiceError: For non-retryable error responses.
    """
    if response.status_code < 400:
        return False
    if response.status_code in status_forcelist:
        return True
    logger.debug(
        f"{method} request to {url} failed with non-retryable status {response.status_code}"
    )
    raise FeatureServiceError(
        method=method,
        url=url,
        message=f"{method} request to {url} failed with status {response.status_code}",
        status_code=response.status_code,
        response=response,
    )


def calculate_sleep_time(attempt: int, backoff_factor: float, jitter_factor: float) -> float:
    """Compute the backoff delay before the next attempt.

    Args:
        attempt: The current attempt number (0-indexed).
        backoff_factor: Factor for exponential backoff.
        jitter_factor: Factor for the random jitter added on top of the
            base delay. ``0`` disables jitter.

    Returns:
        The number of seconds to sleep.

    Example:
        ```pycon
        >>> from arcedit.core.retry_logic import calculate_sleep_time
        >>> calculate_sleep_time(attempt=2, backoff_factor=0.5, jitter_factor=0.0)
        2.0

        ```
    """
    sleep_time = backoff_factor * (2**attempt)
    if jitter_factor > 0:
        sleep_time += random.uniform(0, jitter_factor) * sleep_time  # noqa: S311
    return sleep_time
