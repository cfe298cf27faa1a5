r"""Unit tests for the response handling in core/response.py."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from arcedit.core import check_for_errors, parse_response
from arcedit.exceptions import FeatureServiceError

TEST_URL = "https://svc/FeatureServer/0/deleteFeatures"

######################################
#     Tests for check_for_errors     #
######################################


@pytest.mark.parametrize("payload", [{"deleteResults": []}, {}, [], "ok"])
def test_check_for_errors_no_error(payload: object) -> None:
    """Test that payloads without an error object pass."""
    check_for_errors(payload, url=TEST_URL, method="POST")


def test_check_for_errors_service_error() -> None:
    """Test that an error object is turned into FeatureServiceError."""
    payload = {
        "error": {
            "code": 400,
            "message": "Unable to complete operation.",
            "details": ["Invalid objectIds."],
        }
    }
    with pytest.raises(FeatureServiceError, match=r"400: Unable to complete operation\.") as exc:
        check_for_errors(payload, url=TEST_URL, method="POST")
    assert exc.value.code == 400
    assert exc.value.details == ["Invalid objectIds."]
    assert exc.value.url == TEST_URL
    assert exc.value.status_code is None


def test_check_for_errors_without_code() -> None:
    """Test an error object without a code."""
    with pytest.raises(FeatureServiceError, match=r"^Unknown error$") as exc:
        check_for_errors({"error": {}}, url=TEST_URL, method="POST")
    assert exc.value.code is None
    assert exc.value.details == []


####################################
#     Tests for parse_response     #
####################################


def test_parse_response_returns_payload() -> None:
    """Test that the decoded body is returned."""
    payload = {"deleteResults": [{"objectId": 1, "success": True}]}
    response = Mock(spec=httpx.Response, status_code=200, json=Mock(return_value=payload))
    assert parse_response(response, url=TEST_URL, method="POST") == payload


def test_parse_response_invalid_json() -> None:
    """Test that a non-JSON body raises FeatureServiceError."""
    response = Mock(spec=httpx.Response, status_code=200, json=Mock(side_effect=ValueError("bad")))
    with pytest.raises(FeatureServiceError, match=r"invalid JSON body") as exc:
        parse_response(response, url=TEST_URL, method="POST")
    assert isinstance(exc.value.cause, ValueError)
    assert exc.value.status_code == 200


def test_parse_response_service_error() -> None:
    """Test that an embedded service error keeps the HTTP status."""
    response = Mock(
        spec=httpx.Response,
        status_code=200,
        json=Mock(return_value={"error": {"code": 498, "message": "Invalid token."}}),
    )
    with pytest.raises(FeatureServiceError, match=r"498: Invalid token\.") as exc:
        parse_response(response, url=TEST_URL, method="POST")
    assert exc.value.status_code == 200
    assert exc.value.response is response
