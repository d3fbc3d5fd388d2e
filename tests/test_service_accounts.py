"""Tests for service accounts."""

import json
from datetime import timedelta
from uuid import uuid4

import httpx
import pytest

from accounts_client.errors import UnexpectedStatus, ValidationFailure
from accounts_client.schemas.service_account import ServiceAccount, ServiceAccountCreate
from accounts_client.utils.validators import utc_now

PREFIX = "/api/v1"


@pytest.mark.asyncio
async def test_create_service_account(client, recorder):
    service_account = await client.service_accounts.create_service_account(
        ServiceAccountCreate(service_name="billing", roles=["reader"])
    )

    assert service_account.service_name == "billing"
    assert service_account.roles == ["reader"]
    assert service_account.secret is None
    assert recorder.requests[-1].url.path == f"{PREFIX}/service-accounts"
    assert json.loads(recorder.requests[-1].content) == {"service_name": "billing", "roles": ["reader"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "request_data,code",
    [
        ({"service_name": "", "roles": ["reader"]}, "SERVICE_NAME_REQUIRED"),
        ({"service_name": "billing", "roles": []}, "ROLE_REQUIRED"),
        (
            {"service_name": "billing", "roles": ["reader"], "expires_at": utc_now() - timedelta(minutes=1)},
            "EXPIRY_NOT_IN_FUTURE",
        ),
    ],
)
async def test_create_is_validated_before_sending(client, recorder, request_data, code):
    with pytest.raises(ValidationFailure) as exc_info:
        await client.service_accounts.create_service_account(ServiceAccountCreate(**request_data))

    assert [e.code for e in exc_info.value.validation_errors] == [code]
    assert recorder.requests == []


def test_secret_is_never_serialized():
    service_account = ServiceAccount(
        id=uuid4(),
        service_name="billing",
        roles=["reader"],
        secret="s3cret",
    )

    assert service_account.secret.get_secret_value() == "s3cret"
    assert "secret" not in service_account.to_payload()
    assert "s3cret" not in service_account.model_dump_json()


@pytest.mark.asyncio
async def test_lifecycle(client):
    created = await client.service_accounts.create_service_account(
        ServiceAccountCreate(service_name="ingest", roles=["writer"], expires_at=utc_now() + timedelta(days=30))
    )

    assert (await client.service_accounts.get_service_account_by_id(created.id)).service_name == "ingest"
    assert (await client.service_accounts.get_service_account_by_name("ingest")).id == created.id

    created.secret = "rotated-secret"
    created.roles = ["writer", "reader"]
    updated = await client.service_accounts.update_service_account(created)
    assert updated.roles == ["writer", "reader"]

    assert [sa.id for sa in await client.service_accounts.list_service_accounts()] == [created.id]

    await client.service_accounts.delete_service_account(created.id)
    with pytest.raises(UnexpectedStatus) as exc_info:
        await client.service_accounts.get_service_account_by_id(created.id)
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_update_is_validated_before_sending(client, recorder):
    service_account = ServiceAccount(id=uuid4(), service_name="billing", roles=[])

    with pytest.raises(ValidationFailure) as exc_info:
        await client.service_accounts.update_service_account(service_account)

    assert [e.code for e in exc_info.value.validation_errors] == ["ROLE_REQUIRED"]
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_role_assignment(client, store, recorder):
    service_account = await client.service_accounts.create_service_account(
        ServiceAccountCreate(service_name="reports", roles=["reader"])
    )
    role = store.add_role("auditor", "Reads audit logs")

    await client.service_accounts.assign_role(service_account.id, role["id"])
    assert json.loads(recorder.requests[-1].content) == {
        "service_account_id": str(service_account.id),
        "role_id": str(role["id"]),
    }

    roles = await client.service_accounts.get_roles(service_account.id)
    assert [r.name for r in roles] == ["auditor"]
    assert await client.service_accounts.is_role_assigned(service_account.id, role["id"])
    by_role = await client.service_accounts.get_service_accounts_by_role_id(role["id"])
    assert [sa.id for sa in by_role] == [service_account.id]

    await client.service_accounts.remove_role(service_account.id, role["id"])
    assert not await client.service_accounts.is_role_assigned(service_account.id, role["id"])
    assert await client.service_accounts.get_roles(service_account.id) == []


def test_naive_expiry_is_sent_as_utc():
    expires_at = utc_now().replace(tzinfo=None, microsecond=0) + timedelta(days=1)

    payload = ServiceAccountCreate(service_name="billing", roles=["reader"], expires_at=expires_at).to_payload()

    assert payload["expires_at"] == expires_at.isoformat() + "Z"


@pytest.mark.asyncio
async def test_service_account_name_is_path_escaped(mock_client):
    client, seen = mock_client(lambda request: httpx.Response(404, json={"detail": "not found"}))

    with pytest.raises(UnexpectedStatus):
        await client.service_accounts.get_service_account_by_name("billing/worker?x=1")

    assert seen[0].url.raw_path == f"{PREFIX}/service-accounts/name/billing%2Fworker%3Fx%3D1".encode()
    assert not seen[0].url.params


@pytest.mark.asyncio
async def test_name_with_slash_round_trips(client):
    created = await client.service_accounts.create_service_account(
        ServiceAccountCreate(service_name="billing/worker", roles=["reader"])
    )

    found = await client.service_accounts.get_service_account_by_name("billing/worker")

    assert found.id == created.id
