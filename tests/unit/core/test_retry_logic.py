r"""Unit tests for the retry decisions in core/retry_logic.py."""

from __future__ import annotations

from unittest.mock import Mock, patch

import httpx
import pytest

from arcedit.core import RETRY_STATUS_CODES, calculate_sleep_time, should_retry_response
from arcedit.exceptions import FeatureServiceError

TEST_URL = "https://svc/FeatureServer/0/deleteFeatures"

###########################################
#     Tests for should_retry_response     #
###########################################


@pytest.mark.parametrize("status_code", [200, 201, 302])
def test_should_retry_response_success(status_code: int) -> None:
    """Test that successful responses are not retried."""
    response = Mock(spec=httpx.Response, status_code=status_code)
    assert not should_retry_response(response, TEST_URL, "POST", RETRY_STATUS_CODES)


@pytest.mark.parametrize("status_code", RETRY_STATUS_CODES)
def test_should_retry_response_retryable(status_code: int) -> None:
    """Test that retryable status codes are retried."""
    response = Mock(spec=httpx.Response, status_code=status_code)
    assert should_retry_response(response, TEST_URL, "POST", RETRY_STATUS_CODES)


@pytest.mark.parametrize("status_code", [400, 401, 403, 404])
def test_should_retry_response_non_retryable(status_code: int) -> None:
    """Test that non-retryable error responses raise immediately."""
    response = Mock(spec=httpx.Response, status_code=status_code)
    with pytest.raises(FeatureServiceError, match=rf"failed with status {status_code}") as exc:
        should_retry_response(response, TEST_URL, "POST", RETRY_STATUS_CODES)
    assert exc.value.status_code == status_code
    assert exc.value.response is response


##########################################
#     Tests for calculate_sleep_time     #
##########################################


@pytest.mark.parametrize(("attempt", "expected"), [(0, 0.3), (1, 0.6), (2, 1.2)])
def test_calculate_sleep_time_exponential(attempt: int, expected: float) -> None:
    """Test the exponential backoff without jitter."""
    assert calculate_sleep_time(attempt, backoff_factor=0.3, jitter_factor=0.0) == pytest.approx(
        expected
    )


def test_calculate_sleep_time_with_jitter() -> None:
    """Test that jitter is added on top of the base delay."""
    with patch("arcedit.core.retry_logic.random.uniform", return_value=0.5):
        assert calculate_sleep_time(1, backoff_factor=1.0, jitter_factor=0.5) == 3.0
