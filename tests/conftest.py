"""Pytest configuration and fixtures."""

from typing import Callable, List
from uuid import UUID

import httpx
import pytest
import pytest_asyncio

from accounts_client import AccountsClient, ClientSettings
from fake_server import TEST_API_KEY, TEST_BEARER_TOKEN, FakeAccountStore, create_app

TEST_BASE_URL = "http://testserver"


class RecordingTransport(httpx.AsyncBaseTransport):
    """Wraps another transport and keeps every request it sends."""

    def __init__(self, inner: httpx.AsyncBaseTransport):
        self.inner = inner
        self.requests: List[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return await self.inner.handle_async_request(request)

    async def aclose(self) -> None:
        await self.inner.aclose()

    def calls(self, method: str = None) -> List[str]:
        """``"METHOD path"`` of each recorded request, optionally filtered by method."""
        return [
            f"{r.method} {r.url.path}"
            for r in self.requests
            if method is None or r.method == method
        ]

    def reset(self) -> None:
        self.requests.clear()


@pytest.fixture
def settings() -> ClientSettings:
    """Client settings pointing at the fake service."""
    return ClientSettings(
        environment="test",
        base_url=TEST_BASE_URL,
        bearer_token=TEST_BEARER_TOKEN,
        api_key=TEST_API_KEY,
    )


@pytest.fixture
def store() -> FakeAccountStore:
    """Fresh in-memory state for the fake service."""
    return FakeAccountStore()


@pytest.fixture
def recorder(store) -> RecordingTransport:
    return RecordingTransport(httpx.ASGITransport(app=create_app(store)))


@pytest_asyncio.fixture
async def client(settings, recorder):
    """Accounts client wired to the fake service."""
    async with AccountsClient(settings, transport=recorder) as client:
        yield client


@pytest_asyncio.fixture
async def mock_client(settings):
    """
    Factory building a client over ``httpx.MockTransport``.

    Requests seen by the handler are appended to the returned list.
    """
    clients = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        seen: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = AccountsClient(settings, transport=httpx.MockTransport(recording_handler))
        clients.append(client)
        return client, seen

    yield factory

    for client in clients:
        await client.aclose()


@pytest.fixture
def user_id():
    """Test user ID."""
    return UUID("550e8400-e29b-41d4-a716-446655440098")


@pytest.fixture
def other_user_id():
    return UUID("550e8400-e29b-41d4-a716-446655440099")
