"""
Unit Test Fixtures.

Fixtures for unit tests - the network is always mocked.
Unit tests should be fast and isolated, never opening sockets.
"""

from collections.abc import Generator
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Typer test runner."""
    return CliRunner()


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_request() -> Generator[AsyncMock, None, None]:
    """
    Patch httpx.AsyncClient.request for the duration of a test.

    Defaults to an empty 200 response.

    Usage:
        def test_ping(mock_request):
            mock_request.return_value = httpx.Response(200, text="pong")
            # invoke code that calls APIClient
            mock_request.assert_awaited_once()
    """
    with patch.object(httpx.AsyncClient, "request", new_callable=AsyncMock) as mocked:
        mocked.return_value = httpx.Response(200, text="")
        yield mocked
