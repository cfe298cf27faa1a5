r"""Configuration dataclass and defaults for the request executor.

This module provides configuration constants and a dataclass-based
configuration object controlling how the default request executor
retries transient failures.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_FACTOR",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "RETRY_STATUS_CODES",
    "RequestConfig",
]

from dataclasses import dataclass, field, replace
from typing import Any

from arcedit.core.validation import validate_retry_params

# Default timeout in seconds for feature service requests
DEFAULT_TIMEOUT = 10.0

# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Wait time = backoff_factor * (2 ** attempt)
# With 0.3: 1st retry waits 0.3s, 2nd waits 0.6s, 3rd waits 1.2s
DEFAULT_BACKOFF_FACTOR = 0.3

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


@dataclass
class RequestConfig:
    """Configuration for the default request executor.

    Note:
        The timeout parameter is NOT included in this config as it is used
        directly by httpx.Client/AsyncClient when the executor creates its
        own client.

    Args:
        max_retries: Maximum number of retry attempts for failed requests.
            Must be >= 0.
        backoff_factor: Factor for exponential backoff between retries.
            Must be >= 0.
        status_forcelist: Tuple of HTTP status codes that should trigger a retry.
        jitter_factor: Factor for adding random jitter to backoff delays.
            Must be >= 0.

    Example:
        ```pycon
        >>> from arcedit.core.config import RequestConfig
        >>> config = RequestConfig()
        >>> config.max_retries
        3
        >>> merged = RequestConfig(max_retries=5).merge(max_retries=10)
        >>> merged.max_retries
        10

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    backoff_factor: float = DEFAULT_BACKOFF_FACTOR
    status_forcelist: tuple[int, ...] = field(default_factory=lambda: RETRY_STATUS_CODES)
    jitter_factor: float = 0.0

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_params(
            max_retries=self.max_retries,
            backoff_factor=self.backoff_factor,
            jitter_factor=self.jitter_factor,
        )

    def merge(self, **overrides: Any) -> RequestConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, and the current
        instance is left unchanged.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RequestConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from arcedit.core.config import RequestConfig
            >>> config = RequestConfig(max_retries=3)
            >>> config.merge(max_retries=None, jitter_factor=0.1).jitter_factor
            0.1

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with retry configuration parameters.
        """
        return {
            "max_retries": self.max_retries,
            "backoff_factor": self.backoff_factor,
            "status_forcelist": self.status_forcelist,
            "jitter_factor": self.jitter_factor,
        }
