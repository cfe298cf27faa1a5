r"""Contains the synchronous ``deleteFeatures`` request."""

from __future__ import annotations

__all__ = ["delete_features", "delete_features_url"]

import logging
from functools import partial
from typing import TYPE_CHECKING

from arcedit.core.config import DEFAULT_TIMEOUT
from arcedit.options import normalize_delete_options
from arcedit.request import request

if TYPE_CHECKING:
    import httpx

    from arcedit.core.config import RequestConfig
    from arcedit.diagnostics import WarnCallback
    from arcedit.options import DeleteFeaturesOptions
    from arcedit.types import DeleteFeaturesResult, RequestExecutor

logger: logging.Logger = logging.getLogger(__name__)


def delete_features_url(url: str) -> str:
    r"""Return the ``deleteFeatures`` operation URL of a feature layer.

    Example:
        ```pycon
        >>> from arcedit.delete import delete_features_url
        >>> delete_features_url("https://svc/FeatureServer/0")
        'https://svc/FeatureServer/0/deleteFeatures'

        ```
    """
    return f"{url}/deleteFeatures"


def delete_features(
    options: DeleteFeaturesOptions,
    *,
    executor: RequestExecutor | None = None,
    warn: WarnCallback | None = None,
    client: httpx.Client | None = None,
    config: RequestConfig | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
) -> DeleteFeaturesResult:
    r"""Delete features from a feature service.

    The request parameters are normalized with
    ``normalize_delete_options`` and handed to ``executor`` together
    with the operation URL. The executor result is returned unchanged,
    and its exceptions propagate unchanged: nothing is validated or
    retried here.

    Args:
        options: The options of the request.
        executor: The callable performing the request, called as
            ``executor(url, final_options)``. Defaults to
            ``arcedit.request.request`` bound to ``client``, ``config``
            and ``timeout``.
        warn: The callable receiving the deprecation warning when the
            ``deletes`` alias is used. Defaults to
            ``arcedit.diagnostics.warn``.
        client: An optional httpx.Client object used by the default
            executor.
        config: An optional RequestConfig object used by the default
            executor.
        timeout: Maximum seconds to wait for the server response.
            Only used by the default executor when client is None.

    Returns:
        The ``deleteFeatures`` response.

    Raises:
        FeatureServiceError: If the default executor fails.

    Example:
        ```pycon
        >>> from arcedit import DeleteFeaturesOptions, delete_features
        >>> result = delete_features(
        ...     DeleteFeaturesOptions(
        ...         url="https://sampleserver6.arcgisonline.com/arcgis/rest/services/ServiceRequest/FeatureServer/0",
        ...         object_ids=[1, 2, 3],
        ...     )
        ... )  # doctest: +SKIP

        ```
    """
    url = delete_features_url(options.url)
    final_options = normalize_delete_options(options, warn=warn)
    if executor is None:
        executor = partial(request, client=client, config=config, timeout=timeout)
    logger.debug(f"Deleting features at {url}")
    return executor(url, final_options)
