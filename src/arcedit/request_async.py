r"""Contains the default asynchronous request executor."""

from __future__ import annotations

__all__ = ["request_async"]

import asyncio
import logging
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


async def request_async(
    url: str,
    options: FinalRequestOptions,
    *,
    client: httpx.AsyncClient | None = None,
    config: RequestConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> Any:
    r"""Send a feature service request asynchronously with automatic
    retry logic.

    Args:
        url: The operation URL.
        options: The normalized request options.
        client: An optional httpx.AsyncClient object to use for making
            requests. If None, a new client will be created and closed
            after use.
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

    Example:
        ```pycon
        >>> import asyncio
        >>> from arcedit.options import FinalRequestOptions
        >>> from arcedit.request_async import request_async
        >>> async def example():
        ...     return await request_async(
        ...         "https://svc/FeatureServer/0/deleteFeatures",
        ...         FinalRequestOptions(params={"objectIds": [1]}),
        ...     )
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """
    validate_timeout(timeout)
    config = config if config is not None else RequestConfig()
    data = encode_params(options.params)
    headers = dict(options.headers)

    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=timeout)
    try:
        response = await _post_with_retry_async(
            client, url, data=data, headers=headers, config=config
        )
    finally:
        if owns_client:
            await client.aclose()
    return parse_response(response, url=url, method=METHOD)


async def _post_with_retry_async(
    client: httpx.AsyncClient,
    url: str,
    *,
    data: dict[str, str],
    headers: dict[str, str],
    config: RequestConfig,
) -> httpx.Response:
    max_retries = config.max_retries
    for attempt in range(max_retries + 1):
        try:
            response = await client.post(url=url, data=data, headers=headers)
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
        await asyncio.sleep(sleep_time)

    msg = f"{METHOD} request to {url} failed after {max_retries + 1} attempts"  # pragma: no cover
    raise FeatureServiceError(method=METHOD, url=url, message=msg)  # pragma: no cover
