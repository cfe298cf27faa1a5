r"""Options of the ``deleteFeatures`` operation and their normalization.

This module turns the caller-facing ``DeleteFeaturesOptions`` into the
``FinalRequestOptions`` handed to a request executor. The
normalization is pure: it never modifies the caller's options and
always returns a new, read-only structure.
"""

from __future__ import annotations

__all__ = [
    "DELETES_DEPRECATION_MESSAGE",
    "DeleteFeaturesOptions",
    "FinalRequestOptions",
    "normalize_delete_options",
]

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from arcedit.diagnostics import warn as default_warn
from arcedit.params import append_custom_params, copy_param

if TYPE_CHECKING:
    from arcedit.diagnostics import WarnCallback

logger: logging.Logger = logging.getLogger(__name__)

DELETES_DEPRECATION_MESSAGE = (
    "The `deletes` parameter is deprecated and will be removed in a future release. "
    "Please use `objectIds` instead."
)


@dataclass(frozen=True)
class DeleteFeaturesOptions:
    """Options of a ``deleteFeatures`` request.

    Args:
        url: The feature service (layer) URL, e.g.
            ``https://host/arcgis/rest/services/Name/FeatureServer/0``.
        object_ids: The object IDs of the features to delete.
        deletes: Deprecated alias of ``object_ids``. When non-empty it
            takes precedence over ``object_ids``.
        params: Additional query parameters sent with the request, keyed
            by their wire names.
        where: A where clause selecting the features to delete.
        geometry: A geometry selecting the features to delete.
        geometry_type: The type of ``geometry``.
        spatial_rel: The spatial relationship applied to ``geometry``.
        gdb_version: The geodatabase version to apply the edits to.
        return_edit_moment: Whether the response should include the
            time of the edit.
        rollback_on_failure: Whether all deletes are rolled back when
            one of them fails.
        headers: Additional HTTP headers. Opaque to the builder, used
            by the request executor.
    """

    url: str
    object_ids: Sequence[int] | None = None
    deletes: Sequence[int] | None = None
    params: Mapping[str, Any] | None = None
    where: str | None = None
    geometry: Mapping[str, Any] | None = None
    geometry_type: str | None = None
    spatial_rel: str | None = None
    gdb_version: str | None = None
    return_edit_moment: bool | None = None
    rollback_on_failure: bool | None = None
    headers: Mapping[str, str] | None = None


@dataclass(frozen=True)
class FinalRequestOptions:
    """Normalized options handed to the request executor.

    Attributes:
        params: The request parameters keyed by wire name. Never
            contains a ``deletes`` key.
        headers: The HTTP headers of the request.
    """

    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


def normalize_delete_options(
    options: DeleteFeaturesOptions, warn: WarnCallback | None = None
) -> FinalRequestOptions:
    r"""Build the final request options of a ``deleteFeatures`` request.

    The parameters start from an empty mapping overlaid with a copy of
    ``options.params``, then the declared fields of ``options`` are
    merged in and override same-named keys. If the merged ``deletes``
    is non-empty it replaces ``objectIds`` and a deprecation warning is
    emitted. The ``deletes`` key never reaches the final parameters.

    Args:
        options: The caller's options. Not modified.
        warn: The callable receiving the deprecation warning. Defaults
            to ``arcedit.diagnostics.warn``.

    Returns:
        The final, read-only request options.

    Example:
        ```pycon
        >>> from arcedit.options import DeleteFeaturesOptions, normalize_delete_options
        >>> final = normalize_delete_options(
        ...     DeleteFeaturesOptions(url="https://svc/FeatureServer/0", object_ids=[1, 2, 3])
        ... )
        >>> dict(final.params)
        {'objectIds': [1, 2, 3]}

        ```
    """
    params = append_custom_params(options, copy_param(options.params or {}))

    deletes = params.pop("deletes", None)
    if deletes:
        # the legacy alias wins over objectIds when both are given; only the
        # declared `deletes` field is carried over
        params["objectIds"] = copy_param(options.deletes) if options.deletes is not None else None
        logger.debug(f"Resolved deprecated `deletes` into objectIds={params['objectIds']}")
        (warn or default_warn)(DELETES_DEPRECATION_MESSAGE)

    return FinalRequestOptions(
        params=MappingProxyType(params),
        headers=MappingProxyType(dict(options.headers or {})),
    )
