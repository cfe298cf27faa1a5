r"""Custom parameter mixin and form encoding of request parameters.

Edit operations accept a handful of well-known parameters as declared
fields of their options (``object_ids``, ``where``, ...). This module
folds those fields into the free-form ``params`` mapping under their
wire names, and encodes the resulting mapping as the form body the
feature service expects.
"""

from __future__ import annotations

__all__ = [
    "CUSTOM_PARAM_NAMES",
    "append_custom_params",
    "copy_param",
    "encode_param",
    "encode_params",
    "get_custom_params",
]

import json
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

# Declared option fields and their wire names, in merge order
CUSTOM_PARAM_NAMES: dict[str, str] = {
    "object_ids": "objectIds",
    "deletes": "deletes",
    "where": "where",
    "geometry": "geometry",
    "geometry_type": "geometryType",
    "spatial_rel": "spatialRel",
    "gdb_version": "gdbVersion",
    "return_edit_moment": "returnEditMoment",
    "rollback_on_failure": "rollbackOnFailure",
}


def copy_param(value: Any) -> Any:
    r"""Return a detached, JSON-friendly copy of a parameter value.

    Mappings become dicts and other non-string sequences become lists,
    recursively. Other values are returned as is.

    Example:
        ```pycon
        >>> from types import MappingProxyType
        >>> from arcedit.params import copy_param
        >>> copy_param(MappingProxyType({"rings": ((0, 0), (1, 1))}))
        {'rings': [[0, 0], [1, 1]]}

        ```
    """
    if isinstance(value, Mapping):
        return {key: copy_param(item) for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [copy_param(item) for item in value]
    return value


def get_custom_params(options: Any) -> dict[str, Any]:
    r"""Return the declared parameters of ``options`` keyed by wire name.

    Fields set to ``None`` are skipped. Other falsy values (``[]``,
    ``False``, ``""``) are kept.

    Args:
        options: The request options, typically a
            ``DeleteFeaturesOptions``.

    Returns:
        A new dictionary of custom parameters.

    Example:
        ```pycon
        >>> from arcedit.options import DeleteFeaturesOptions
        >>> from arcedit.params import get_custom_params
        >>> get_custom_params(DeleteFeaturesOptions(url="https://svc", object_ids=[1, 2]))
        {'objectIds': [1, 2]}

        ```
    """
    custom = {}
    for name, wire_name in CUSTOM_PARAM_NAMES.items():
        value = getattr(options, name, None)
        if value is None:
            continue
        custom[wire_name] = copy_param(value)
    return custom


def append_custom_params(source: Any, params: Mapping[str, Any]) -> dict[str, Any]:
    r"""Merge the custom parameters of ``source`` into ``params``.

    The merge is ordered: ``params`` first, then the declared fields of
    ``source``, so a declared field overrides a same-named key of
    ``params``. Keys of ``params`` without a declared counterpart are
    left alone. Neither input is modified.

    Args:
        source: The request options declaring the custom parameters.
        params: The parameters to merge into.

    Returns:
        A new dictionary with the merged parameters.

    Example:
        ```pycon
        >>> from arcedit.options import DeleteFeaturesOptions
        >>> from arcedit.params import append_custom_params
        >>> options = DeleteFeaturesOptions(url="https://svc", where="1=1")
        >>> append_custom_params(options, {"where": "0=1", "f": "pjson"})
        {'where': '1=1', 'f': 'pjson'}

        ```
    """
    return {**params, **get_custom_params(source)}


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (Mapping, list, tuple))


def encode_param(value: Any) -> str:
    r"""Encode a single parameter value for a form body.

    Args:
        value: The value to encode.

    Returns:
        The encoded value. Booleans become ``"true"``/``"false"``,
        datetimes become epoch milliseconds, sequences of scalars are
        joined with commas and any other structure is JSON-encoded.

    Example:
        ```pycon
        >>> from arcedit.params import encode_param
        >>> encode_param([1, 2, 3])
        '1,2,3'
        >>> encode_param(True)
        'true'
        >>> encode_param({"x": 1, "y": 2})
        '{"x": 1, "y": 2}'

        ```
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        return str(int(value.timestamp() * 1000))
    if isinstance(value, Sequence) and all(_is_scalar(item) for item in value):
        return ",".join(encode_param(item) for item in value)
    if isinstance(value, (Mapping, Sequence)):
        return json.dumps(copy_param(value))
    return str(value)


def encode_params(params: Mapping[str, Any]) -> dict[str, str]:
    r"""Encode request parameters for a form body.

    ``None`` values are dropped and the response format defaults to
    JSON (``f=json``) unless ``params`` sets ``f``.

    Args:
        params: The parameters to encode.

    Returns:
        A new dictionary of encoded parameters.

    Example:
        ```pycon
        >>> from arcedit.params import encode_params
        >>> encode_params({"objectIds": [1, 2], "gdbVersion": None})
        {'f': 'json', 'objectIds': '1,2'}

        ```
    """
    encoded = {"f": "json"}
    encoded.update({key: encode_param(value) for key, value in params.items() if value is not None})
    return encoded
