r"""Typed shapes of the feature service payloads and executors.

The result types are declarative only: the JSON returned by the
service is passed through without validation.
"""

from __future__ import annotations

__all__ = [
    "AsyncRequestExecutor",
    "DeleteFeaturesResult",
    "EditFeatureError",
    "EditFeatureResult",
    "RequestExecutor",
]

from collections.abc import Awaitable, Callable
from typing import Any, TypedDict

from arcedit.options import FinalRequestOptions


class EditFeatureError(TypedDict):
    """Error attached to a failed per-feature edit."""

    code: int
    description: str


class _EditFeatureResultBase(TypedDict):
    objectId: int
    success: bool


class EditFeatureResult(_EditFeatureResultBase, total=False):
    """Outcome of an edit operation for a single feature."""

    globalId: str
    error: EditFeatureError


class DeleteFeaturesResult(TypedDict, total=False):
    """Response of the ``deleteFeatures`` operation.

    Attributes:
        deleteResults: One entry per feature the service tried to delete.
        editMoment: Server time of the edit, when requested with
            ``return_edit_moment``.
    """

    deleteResults: list[EditFeatureResult]
    editMoment: int


RequestExecutor = Callable[[str, FinalRequestOptions], Any]
AsyncRequestExecutor = Callable[[str, FinalRequestOptions], Awaitable[Any]]
