"""Tests for the HTTP transport, credential injection and request logging."""

from uuid import uuid4

import httpx
import pytest
import structlog
from structlog.testing import capture_logs

from accounts_client.errors import DecodeFailure, TransportFailure, UnexpectedStatus
from accounts_client.middleware.auth import BearerApiKeyAuth
from accounts_client.middleware.logging import configure_logging, sanitize_headers


def ok_json(payload, status_code=200):
    return lambda request: httpx.Response(status_code, json=payload)


@pytest.mark.asyncio
async def test_requests_carry_credentials_and_json_headers(mock_client):
    client, seen = mock_client(ok_json([]))

    await client.permissions.list_permissions()

    request = seen[0]
    assert str(request.url) == "http://testserver/api/v1/permissions"
    assert request.headers["Authorization"] == "Bearer test-token"
    assert request.headers["X-Api-Key"] == "test-key"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["User-Agent"] == "accounts-client/1.0"
    assert request.headers["X-Request-ID"]


def test_auth_replaces_differently_cased_headers():
    auth = BearerApiKeyAuth("token", "key")
    request = httpx.Request(
        "GET",
        "http://testserver/",
        headers={"authorization": "Basic abc", "x-api-key": "stale"},
    )

    sent = next(auth.auth_flow(request))

    assert sent.headers.get_list("Authorization") == ["Bearer token"]
    assert sent.headers.get_list("X-Api-Key") == ["key"]


@pytest.mark.parametrize("token,key", [("", "key"), ("token", "")])
def test_auth_requires_both_credentials(token, key):
    with pytest.raises(ValueError):
        BearerApiKeyAuth(token, key)


@pytest.mark.asyncio
async def test_unexpected_status_carries_body(mock_client):
    client, _ = mock_client(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(UnexpectedStatus) as exc_info:
        await client.permissions.list_permissions()

    error = exc_info.value
    assert error.status_code == 500
    assert error.body == "boom"
    assert error.method == "GET"
    assert error.path == "/permissions"
    assert "got 500" in str(error)


@pytest.mark.asyncio
async def test_network_error_is_transport_failure(mock_client):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = mock_client(refuse)

    with pytest.raises(TransportFailure) as exc_info:
        await client.permissions.list_permissions()

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.path == "/permissions"


@pytest.mark.asyncio
async def test_invalid_json_is_decode_failure(mock_client):
    client, _ = mock_client(lambda request: httpx.Response(200, content=b"not json"))

    with pytest.raises(DecodeFailure):
        await client.permissions.list_permissions()


@pytest.mark.asyncio
async def test_invalid_utf8_is_decode_failure(mock_client):
    client, _ = mock_client(
        lambda request: httpx.Response(
            200,
            content=b'{"id": "\xff\xfe", "name": "x"}',
            headers={"Content-Type": "application/json"},
        )
    )

    with pytest.raises(DecodeFailure):
        await client.permissions.get_permission_by_id(uuid4())


@pytest.mark.asyncio
async def test_schema_mismatch_is_decode_failure(mock_client):
    client, _ = mock_client(ok_json({"id": "not-a-uuid", "name": "x"}))

    with pytest.raises(DecodeFailure):
        await client.permissions.get_permission_by_name("x")


@pytest.mark.asyncio
async def test_missing_envelope_is_decode_failure(mock_client):
    client, _ = mock_client(ok_json([]))

    with pytest.raises(DecodeFailure):
        await client.agencies.list()


@pytest.mark.asyncio
async def test_null_collection_decodes_empty(mock_client):
    client, _ = mock_client(ok_json({"accounts": None}))

    assert await client.agencies.list() == []


@pytest.mark.asyncio
async def test_exchange_is_logged(mock_client):
    client, _ = mock_client(ok_json([]))

    with capture_logs() as logs:
        await client.permissions.list_permissions()

    started, completed = logs
    assert started["event"] == "HTTP request started"
    assert started["method"] == "GET"
    assert started["path"] == "/api/v1/permissions"
    assert completed["event"] == "HTTP request completed successfully"
    assert completed["log_level"] == "info"
    assert completed["status_code"] == 200
    assert completed["request_id"] == started["request_id"]
    assert completed["process_time_ms"] >= 0
    assert "headers" not in started


@pytest.mark.asyncio
async def test_client_errors_are_logged_as_warnings(mock_client):
    client, _ = mock_client(lambda request: httpx.Response(404, json={"detail": "not found"}))

    with capture_logs() as logs:
        assert not await client.permissions.does_permission_exist(uuid4())

    assert logs[-1]["event"] == "HTTP request completed with client error"
    assert logs[-1]["log_level"] == "warning"


def test_sanitize_headers():
    sanitized = sanitize_headers({
        "Authorization": "Bearer secret",
        "X-Api-Key": "secret",
        "Accept": "application/json",
    })

    assert sanitized == {
        "Authorization": "[REDACTED]",
        "X-Api-Key": "[REDACTED]",
        "Accept": "application/json",
    }


def test_configure_logging():
    try:
        configure_logging("debug")
        assert structlog.is_configured()
    finally:
        structlog.reset_defaults()
