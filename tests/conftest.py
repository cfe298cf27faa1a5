from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

DELETE_RESULT = {"deleteResults": [{"objectId": 1, "success": True}]}


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response carrying a deleteFeatures body."""
    return Mock(spec=httpx.Response, status_code=200, json=Mock(return_value=DELETE_RESULT))


@pytest.fixture
def mock_client(mock_response: httpx.Response) -> httpx.Client:
    """Create a mock httpx.Client for testing."""
    return Mock(spec=httpx.Client, post=Mock(return_value=mock_response))


@pytest.fixture
def mock_async_client(mock_response: httpx.Response) -> httpx.AsyncClient:
    """Create a mock httpx.AsyncClient for testing."""
    return Mock(
        spec=httpx.AsyncClient, post=AsyncMock(return_value=mock_response), aclose=AsyncMock()
    )


@pytest.fixture
def mock_warn() -> Mock:
    """Create a mock warning callback."""
    return Mock()
