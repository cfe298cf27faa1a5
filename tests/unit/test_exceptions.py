r"""Unit tests for FeatureServiceError."""

from __future__ import annotations

from unittest.mock import Mock

import httpx

from arcedit import FeatureServiceError

TEST_URL = "https://svc/FeatureServer/0/deleteFeatures"

#########################################
#     Tests for FeatureServiceError     #
#########################################


def test_feature_service_error_minimal() -> None:
    """Test the default attribute values."""
    error = FeatureServiceError(method="POST", url=TEST_URL, message="failed")

    assert str(error) == "failed"
    assert error.method == "POST"
    assert error.url == TEST_URL
    assert error.status_code is None
    assert error.code is None
    assert error.details == []
    assert error.response is None
    assert error.cause is None


def test_feature_service_error_all_fields() -> None:
    """Test that every attribute is stored."""
    response = Mock(spec=httpx.Response, status_code=200)
    cause = ValueError("bad")
    error = FeatureServiceError(
        method="POST",
        url=TEST_URL,
        message="400: Unable to complete operation.",
        status_code=200,
        code=400,
        details=["Invalid objectIds."],
        response=response,
        cause=cause,
    )

    assert error.message == "400: Unable to complete operation."
    assert error.status_code == 200
    assert error.code == 400
    assert error.details == ["Invalid objectIds."]
    assert error.response is response
    assert error.cause is cause


def test_feature_service_error_repr() -> None:
    """Test the representation of the error."""
    error = FeatureServiceError(method="POST", url=TEST_URL, message="failed", code=498)
    assert repr(error) == (
        f"FeatureServiceError(method='POST', url='{TEST_URL}', status_code=None, code=498)"
    )
