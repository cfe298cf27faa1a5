r"""arcedit - Edit requests for ArcGIS-style feature services.

This package builds and sends the ``deleteFeatures`` operation of a
feature service. The request parameters are normalized into a single
read-only structure, including the resolution of the deprecated
``deletes`` alias, and handed to a request executor. The default
executor is built on httpx and retries transient failures.

Example:
    ```pycon
    >>> from arcedit import DeleteFeaturesOptions, delete_features
    >>> result = delete_features(
    ...     DeleteFeaturesOptions(url="https://svc/FeatureServer/0", object_ids=[1, 2, 3])
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "DeleteFeaturesOptions",
    "DeleteFeaturesResult",
    "EditFeatureResult",
    "FeatureServiceError",
    "FinalRequestOptions",
    "RequestConfig",
    "__version__",
    "delete_features",
    "delete_features_async",
    "normalize_delete_options",
    "request",
    "request_async",
]

from importlib.metadata import PackageNotFoundError, version

from arcedit.core.config import RequestConfig
from arcedit.delete import delete_features
from arcedit.delete_async import delete_features_async
from arcedit.exceptions import FeatureServiceError
from arcedit.options import (
    DeleteFeaturesOptions,
    FinalRequestOptions,
    normalize_delete_options,
)
from arcedit.request import request
from arcedit.request_async import request_async
from arcedit.types import DeleteFeaturesResult, EditFeatureResult

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
