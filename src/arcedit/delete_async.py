r"""Contains the asynchronous ``deleteFeatures`` request."""

from __future__ import annotations

__all__ = ["delete_features_async"]

import logging
from functools import partial
from typing import TYPE_CHECKING

from arcedit.core.config import DEFAULT_TIMEOUT
from arcedit.delete import delete_features_url
from arcedit.options import normalize_delete_options
from arcedit.request_async import request_async

if TYPE_CHECKING:
    import httpx

    from arcedit.core.config import RequestConfig
    from arcedit.diagnostics import WarnCallback
    from arcedit.options import DeleteFeaturesOptions
    from arcedit.types import AsyncRequestExecutor, DeleteFeaturesResult

logger: logging.Logger = logging.getLogger(__name__)


async def delete_features_async(
    options: DeleteFeaturesOptions,
    *,
    executor: AsyncRequestExecutor | None = None,
    warn: WarnCallback | None = None,
    client: httpx.AsyncClient | None = None,
    config: RequestConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> DeleteFeaturesResult:
    r"""Delete features from a feature service asynchronously.

    Args:
        options: The options of the request.
        executor: The coroutine function performing the request, called
            as ``await executor(url, final_options)``. Defaults to
            ``arcedit.request_async.request_async`` bound to ``client``,
            ``config`` and ``timeout``.
        warn: The callable receiving the deprecation warning when the
            ``deletes`` alias is used. Defaults to
            ``arcedit.diagnostics.warn``.
        client: An optional httpx.AsyncClient object used by the default
            executor.
        config: An optional RequestConfig object used by the default
            executor.
        timeout: Maximum seconds to wait for the server response.
            Only used by the default executor when client is None.

    Returns:
        The ``deleteFeatures`` response, as returned by the executor.

    Raises:
        FeatureServiceError: If the default executor fails.

    Example:
        ```pycon
        >>> import asyncio
        >>> from arcedit import DeleteFeaturesOptions, delete_features_async
        >>> async def example():
        ...     return await delete_features_async(
        ...         DeleteFeaturesOptions(url="https://svc/FeatureServer/0", object_ids=[1, 2, 3])
        ...     )
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """
    url = delete_features_url(options.url)
    final_options = normalize_delete_options(options, warn=warn)
    if executor is None:
        executor = partial(request_async, client=client, config=config, timeout=timeout)
    logger.debug(f"Deleting features at {url}")
    return await executor(url, final_options)
