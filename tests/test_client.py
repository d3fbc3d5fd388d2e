"""Tests for the client composition root."""

import httpx
import pytest

from accounts_client import AccountsClient


@pytest.mark.asyncio
async def test_context_manager_closes_the_transport(settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[]))

    async with AccountsClient(settings, transport=transport) as client:
        assert not client.is_closed
        await client.permissions.list_permissions()

    assert client.is_closed


@pytest.mark.asyncio
async def test_sub_clients_share_one_transport(settings):
    client = AccountsClient(settings, transport=httpx.MockTransport(lambda request: httpx.Response(200)))

    try:
        transports = {
            id(sub_client.transport)
            for sub_client in (
                client.accounts,
                client.agencies,
                client.businesses,
                client.celebrities,
                client.enterprises,
                client.governments,
                client.memberships,
                client.links,
                client.permissions,
                client.service_accounts,
                client.tokens,
            )
        }
        assert transports == {id(client.transport)}
        assert client.agencies.memberships is client.memberships
    finally:
        await client.aclose()
