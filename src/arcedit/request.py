r"""Contains the default synchronous request executor.

The executor POSTs the encoded parameters of a ``FinalRequestOptions``
to a feature service, retries transient failures and returns the
decoded JSON response.
"""

from __future__ import annotations

__all__ = ["request"]

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from arcedit.core.config import DEFAULT_TIMEOUT, RequestConfig
from arcedit.core.response import parse_response
from arcedit.core.retry_logic import calculate_sleep_time, should_retry_response
from arcedit.core.validation import validate_timeout
from arcedit.exceptions import FeatureServiceError
from arcedit.params import encode_params

if TYPE_CHECKING:
    from arcedit.options import FinalRequestOptions

logger: logging.Logger = logging.getLogger(__name__)

METHOD = "POST"


def request(
    url: str,
    options: FinalRequestOptions,
    *,
    client: httpx.Client | None = None,
    config: RequestConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> Any:
    r"""Send a feature service request with automatic retry logic.

    Retryable status codes (``config.status_forcelist``), timeouts and
    network errors are retried with exponential backoff:
    ``backoff_factor * (2 ** attempt)`` seconds plus optional jitter.

    Args:
        url: The operation URL.
        options: The normalized request options.
        client: An optional httpx.Client object to use for making requests.
            If None, a new client will be created and closed after use.
        config: An optional RequestConfig object with retry configuration.
            If None, default RequestConfig values are used.
        timeout: Maximum seconds to wait for the server response.
            Only used if client is None. Must be > 0.

    Returns:
        The decoded JSON response.

    Raises:
        FeatureServiceError: If the request times out, encounters network
            errors, fails with a non-retryable status, fails after
            exhausting all retries, or the service reports an error.
        ValueError: If timeout is non-positive.
    """
    validate_timeout(timeout)
    config = config if config is not None else RequestConfig()
    data = encode_params(options.params)
    headers = dict(options.headers)

    owns_client = client is None
    client = client or httpx.Client(timeout=timeout)
    try:
        response = _post_with_retry(client, url, data=data, headers=headers, config=config)
    finally:
        if owns_client:
            client.close()
    return parse_response(response, url=url, method=METHOD)


def _post_with_retry(
    client: httpx.Client,
    url: str,
    *,
    data: dict[str, str],
    headers: dict[str, str],
    config: RequestConfig,
) -> httpx.Response:
    max_retries = config.max_retries
    for attempt in range(max_retries + 1):
        try:
            response = client.post(url=url, data=data, headers=headers)
        except httpx.TimeoutException as exc:
            logger.debug(
                f"{METHOD} request to {url} timed out on attempt {attempt + 1}/{max_retries + 1}"
            )
            if attempt == max_retries:
                raise FeatureServiceError(
                    method=METHOD,
                    url=url,
                    message=f"{METHOD} request to {url} timed out ({max_retries + 1} attempts)",
                    cause=exc,
                ) from exc
        except httpx.RequestError as exc:
            logger.debug(
                f"{METHOD} request to {url} encountered {type(exc).__name__} on attempt "
                f"{attempt + 1}/{max_retries + 1}: {exc}"
            )
            if attempt == max_retries:
                raise FeatureServiceError(
                    method=METHOD,
                    url=url,
                    message=(
                        f"{METHOD} request to {url} failed after {max_retries + 1} attempts: {exc}"
                    ),
                    cause=exc,
                ) from exc
        else:
            if not should_retry_response(response, url, METHOD, config.status_forcelist):
                return response
            if attempt == max_retries:
                raise FeatureServiceError(
                    method=METHOD,
                    url=url,
                    message=(
                        f"{METHOD} request to {url} failed with status "
                        f"{response.status_code} after {max_retries + 1} attempts"
                    ),
                    status_code=response.status_code,
                    response=response,
                )

        sleep_time = calculate_sleep_time(attempt, config.backoff_factor, config.jitter_factor)
        logger.debug(
            f"{METHOD} request to {url} will be retried in {sleep_time:.2f} seconds "
            f"(attempt {attempt + 2}/{max_retries + 1})"
        )
        time.sleep(sleep_time)

    msg = f"{METHOD} request to {url} failed after {max_retries + 1} attempts"  # pragma: no cover
    raise FeatureServiceError(method=METHOD, url=url, message=msg)  # pragma: no cover
