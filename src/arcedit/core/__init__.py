r"""Core shared logic for sync and async feature service requests.

This module contains the configuration, validation, retry decisions and
response handling shared by the synchronous and asynchronous request
executors.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_FACTOR",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "RETRY_STATUS_CODES",
    "RequestConfig",
    "calculate_sleep_time",
    "check_for_errors",
    "parse_response",
    "should_retry_response",
    "validate_retry_params",
    "validate_timeout",
]

from arcedit.core.config import (
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    RETRY_STATUS_CODES,
    RequestConfig,
)
from arcedit.core.response import check_for_errors, parse_response
from arcedit.core.retry_logic import calculate_sleep_time, should_retry_response
from arcedit.core.validation import validate_retry_params, validate_timeout
