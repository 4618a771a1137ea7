"""Unit test fixtures with a mocked transport."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from account_client import AsyncAccountClient, TransportFailure


def structured_failure(code: str | None, detail: str | None = "server says no", status: int = 400):
    return TransportFailure(
        f"Request failed with status code {status}",
        status_code=status,
        code=code,
        detail=detail,
    )


def connection_failure(message: str = "Connection refused"):
    return TransportFailure(message)


@pytest.fixture
def mock_transport():
    """Mock for an async transport; configure ``send.return_value`` per test."""
    mock = MagicMock()
    mock.send = AsyncMock()
    mock.aclose = AsyncMock()
    return mock


@pytest.fixture
def client(mock_transport):
    return AsyncAccountClient(transport=mock_transport)
