"""Tests for resource path building."""

from uuid import uuid4

import pytest

from accounts_client.errors import UnsupportedOperation
from accounts_client.schemas.account import AccountKind
from accounts_client.services.paths import SUPPORTED_OPERATIONS, Operation, build_path, supports

ACCOUNT_ID = "3f2b8c1e-8a44-4c1f-9d3e-2f6a1b7c9d10"
USER_ID = "550e8400-e29b-41d4-a716-446655440098"


@pytest.mark.parametrize(
    "kind,operation,expected",
    [
        (AccountKind.USER, Operation.CREATE, "/user"),
        (AccountKind.AGENCY, Operation.LIST, "/agency"),
        (AccountKind.CELEBRITY, Operation.READ, f"/celebrity/{ACCOUNT_ID}"),
        (AccountKind.BUSINESS, Operation.UPDATE, f"/business/{ACCOUNT_ID}"),
        (AccountKind.ENTERPRISE, Operation.DELETE, f"/enterprise/{ACCOUNT_ID}"),
        (AccountKind.GOVERNMENT, Operation.SEARCH, "/government/search"),
        (AccountKind.AGENCY, Operation.VERIFY, f"/agency/{ACCOUNT_ID}/verify"),
        (AccountKind.BUSINESS, Operation.LIST_BY_USER, f"/users/{USER_ID}/business"),
        (AccountKind.SERVICE, Operation.CREATE, "/service-accounts"),
        (AccountKind.SERVICE, Operation.READ, f"/service-accounts/{ACCOUNT_ID}"),
    ],
)
def test_build_path(kind, operation, expected):
    assert build_path(kind, operation, resource_id=ACCOUNT_ID, user_id=USER_ID) == expected


def test_build_path_accepts_plain_values():
    assert build_path("agency", "read", ACCOUNT_ID) == f"/agency/{ACCOUNT_ID}"


@pytest.mark.parametrize(
    "kind,operation",
    [(kind, operation) for kind, operations in SUPPORTED_OPERATIONS.items() for operation in operations],
)
def test_build_path_is_deterministic(kind, operation):
    resource_id = uuid4()
    user_id = uuid4()

    first = build_path(kind, operation, resource_id, user_id)
    second = build_path(kind, operation, resource_id, user_id)

    assert first == second
    assert first.startswith("/")


@pytest.mark.parametrize(
    "kind,operation",
    [
        (AccountKind.SERVICE, Operation.SEARCH),
        (AccountKind.SERVICE, Operation.VERIFY),
        (AccountKind.SERVICE, Operation.LIST_BY_USER),
        (AccountKind.USER, Operation.LIST_BY_USER),
    ],
)
def test_unsupported_combinations(kind, operation):
    assert not supports(kind, operation)
    with pytest.raises(UnsupportedOperation):
        build_path(kind, operation, resource_id=ACCOUNT_ID, user_id=USER_ID)


def test_missing_resource_id():
    with pytest.raises(ValueError):
        build_path(AccountKind.AGENCY, Operation.READ)


def test_missing_user_id():
    with pytest.raises(ValueError):
        build_path(AccountKind.AGENCY, Operation.LIST_BY_USER)
