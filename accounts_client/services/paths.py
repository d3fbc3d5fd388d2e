"""Resource path building per account kind and operation."""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Union
from uuid import UUID

from accounts_client.errors import UnsupportedOperation
from accounts_client.schemas.account import ACCOUNT_KINDS, AccountKind


class Operation(str, Enum):
    """Operations addressable through the path builder."""
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"
    SEARCH = "search"
    VERIFY = "verify"
    LIST_BY_USER = "list_by_user"


KIND_SEGMENTS: Dict[AccountKind, str] = {
    **{kind: kind.value for kind in ACCOUNT_KINDS},
    AccountKind.SERVICE: "service-accounts",
}

_CRUD = frozenset({
    Operation.CREATE,
    Operation.READ,
    Operation.UPDATE,
    Operation.DELETE,
    Operation.LIST,
})

SUPPORTED_OPERATIONS: Dict[AccountKind, FrozenSet[Operation]] = {
    AccountKind.USER: _CRUD | {Operation.SEARCH, Operation.VERIFY},
    AccountKind.AGENCY: _CRUD | {Operation.SEARCH, Operation.VERIFY, Operation.LIST_BY_USER},
    AccountKind.CELEBRITY: _CRUD | {Operation.SEARCH, Operation.VERIFY, Operation.LIST_BY_USER},
    AccountKind.BUSINESS: _CRUD | {Operation.SEARCH, Operation.VERIFY, Operation.LIST_BY_USER},
    AccountKind.ENTERPRISE: _CRUD | {Operation.SEARCH, Operation.VERIFY, Operation.LIST_BY_USER},
    AccountKind.GOVERNMENT: _CRUD | {Operation.SEARCH, Operation.VERIFY, Operation.LIST_BY_USER},
    AccountKind.SERVICE: _CRUD,
}

_NEEDS_RESOURCE_ID = {Operation.READ, Operation.UPDATE, Operation.DELETE, Operation.VERIFY}


def supports(kind: AccountKind, operation: Operation) -> bool:
    return operation in SUPPORTED_OPERATIONS.get(kind, frozenset())


def build_path(
    kind: AccountKind,
    operation: Operation,
    resource_id: Optional[Union[UUID, str]] = None,
    user_id: Optional[Union[UUID, str]] = None
) -> str:
    """
    Map a kind and operation to the service path.

    Args:
        kind: Account kind
        operation: Operation to address
        resource_id: Account identifier for read, update, delete and verify
        user_id: Owning user for list_by_user

    Returns:
        str: Path relative to the service URL

    Raises:
        UnsupportedOperation: If the service has no endpoint for the pair
        ValueError: If a required identifier is missing
    """
    kind = AccountKind(kind)
    operation = Operation(operation)
    if not supports(kind, operation):
        raise UnsupportedOperation(
            f"operation '{operation.value}' is not available for '{kind.value}' accounts"
        )

    segment = KIND_SEGMENTS[kind]

    if operation in _NEEDS_RESOURCE_ID and resource_id is None:
        raise ValueError(f"operation '{operation.value}' requires a resource id")

    if operation in (Operation.CREATE, Operation.LIST):
        return f"/{segment}"
    if operation == Operation.SEARCH:
        return f"/{segment}/search"
    if operation == Operation.VERIFY:
        return f"/{segment}/{resource_id}/verify"
    if operation == Operation.LIST_BY_USER:
        if user_id is None:
            raise ValueError("operation 'list_by_user' requires a user id")
        return f"/users/{user_id}/{segment}"
    return f"/{segment}/{resource_id}"
