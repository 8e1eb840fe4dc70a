"""
Shared pytest fixtures for esa client tests.

Provides an in-memory esa API built on ``httpx.MockTransport`` and clients
wired to it.
"""

from typing import Any, Dict, List, Optional, Union

import httpx
import pytest
import pytest_asyncio

from esa_client import EsaClient

# Load environment variables from .env files
from . import load_env  # noqa: F401 - Used for side effects

TEST_TOKEN = "test-token"
TEST_TEAM = "test-team"


class MockEsaAPI:
    """Scripted esa API: answers queued responses in order and records requests."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._queue: List[Union[httpx.Response, Exception]] = []
        self.transport = httpx.MockTransport(self._handle)

    def add_response(
        self,
        status_code: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        if json is not None:
            response = httpx.Response(status_code, json=json, headers=headers)
        elif text is not None:
            response = httpx.Response(status_code, text=text, headers=headers)
        else:
            response = httpx.Response(status_code, content=content or b"", headers=headers)
        self._queue.append(response)

    def add_exception(self, error: Exception) -> None:
        self._queue.append(error)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            return httpx.Response(200, json={})
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def mock_api() -> MockEsaAPI:
    """Provide a fresh scripted esa API."""
    return MockEsaAPI()


@pytest_asyncio.fixture
async def esa_client(mock_api):
    """Create an EsaClient with a default team, wired to the scripted API."""
    client = EsaClient(
        access_token=TEST_TOKEN, team_name=TEST_TEAM, transport=mock_api.transport
    )
    try:
        yield client
    finally:
        await client.close()


@pytest_asyncio.fixture
async def teamless_client(mock_api):
    """Create an EsaClient without a default team."""
    client = EsaClient(access_token=TEST_TOKEN, transport=mock_api.transport)
    try:
        yield client
    finally:
        await client.close()
