"""Membership service shared by every account kind."""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from accounts_client.core.transport import AccountTransport
from accounts_client.schemas.account import AccountKind
from accounts_client.schemas.membership import (
    AccountMembership,
    AccountMembershipCreate,
    AccountMembershipUpdate,
    Role,
)

logger = logging.getLogger(__name__)

MEMBERSHIPS_PATH = "/account-memberships"


def membership_key_path(account_type: AccountKind, account_id: UUID, user_id: UUID) -> str:
    """Path of the membership identified by (account type, account id, user id)."""
    return f"{MEMBERSHIPS_PATH}/{AccountKind(account_type).value}/{account_id}/users/{user_id}"


class MembershipService:
    """
    Service for the user to account membership graph.

    Handles:
    - Membership lifecycle keyed by (account type, account id, user id)
    - Partial updates: only fields set on the update are sent
    - Membership and role queries for a user in an account

    The service rejects a second membership for an existing key with 409,
    which surfaces as ``UnexpectedStatus``.
    """

    def __init__(self, transport: AccountTransport):
        self.transport = transport

    async def create_membership(self, membership: AccountMembershipCreate) -> AccountMembership:
        """Create a membership; expects 201."""
        logger.info(
            f"Adding user {membership.user_id} to {membership.account_type.value} "
            f"account {membership.account_id} as {membership.role}"
        )
        response = await self.transport.send(
            "POST",
            MEMBERSHIPS_PATH,
            expected_status=201,
            json_body=membership.to_payload(),
        )
        return self.transport.decode(response, AccountMembership)

    async def get_membership(
        self,
        account_type: AccountKind,
        account_id: UUID,
        user_id: UUID
    ) -> AccountMembership:
        response = await self.transport.send(
            "GET",
            membership_key_path(account_type, account_id, user_id),
            expected_status=200,
        )
        return self.transport.decode(response, AccountMembership)

    async def get_membership_by_id(self, membership_id: UUID) -> AccountMembership:
        response = await self.transport.send(
            "GET",
            f"{MEMBERSHIPS_PATH}/{membership_id}",
            expected_status=200,
        )
        return self.transport.decode(response, AccountMembership)

    async def list_memberships(
        self,
        user_id: Optional[UUID] = None,
        account_type: Optional[AccountKind] = None,
        account_id: Optional[UUID] = None
    ) -> List[AccountMembership]:
        """List memberships, filtered by any combination of user, kind and account."""
        params: Dict[str, Any] = {}
        if user_id is not None:
            params["user_id"] = str(user_id)
        if account_type is not None:
            params["account_type"] = AccountKind(account_type).value
        if account_id is not None:
            params["account_id"] = str(account_id)

        response = await self.transport.send(
            "GET",
            MEMBERSHIPS_PATH,
            expected_status=200,
            params=params or None,
        )
        return self.transport.decode_list(response, AccountMembership)

    async def get_memberships_by_user_id(self, user_id: UUID) -> List[AccountMembership]:
        return await self.list_memberships(user_id=user_id)

    async def get_memberships_by_account_id(self, account_id: UUID) -> List[AccountMembership]:
        return await self.list_memberships(account_id=account_id)

    async def get_memberships_by_account_type(self, account_type: AccountKind) -> List[AccountMembership]:
        return await self.list_memberships(account_type=account_type)

    async def update_membership(
        self,
        membership_id: UUID,
        update: AccountMembershipUpdate
    ) -> AccountMembership:
        """
        Patch a membership.

        Only fields explicitly set on ``update`` are sent, unlike account
        updates which replace the whole record.
        """
        response = await self.transport.send(
            "PATCH",
            f"{MEMBERSHIPS_PATH}/{membership_id}",
            expected_status=200,
            json_body=update.to_payload(exclude_unset=True),
        )
        return self.transport.decode(response, AccountMembership)

    async def update_member_role(
        self,
        account_type: AccountKind,
        account_id: UUID,
        user_id: UUID,
        role: str
    ) -> AccountMembership:
        """Patch only the role of the membership identified by its key."""
        update = AccountMembershipUpdate(role=role)
        logger.info(f"Changing role of user {user_id} in {AccountKind(account_type).value} account {account_id} to {role}")
        response = await self.transport.send(
            "PATCH",
            membership_key_path(account_type, account_id, user_id),
            expected_status=200,
            json_body=update.to_payload(exclude_unset=True),
        )
        return self.transport.decode(response, AccountMembership)

    async def delete_membership(self, account_type: AccountKind, account_id: UUID, user_id: UUID) -> None:
        logger.info(f"Removing user {user_id} from {AccountKind(account_type).value} account {account_id}")
        await self.transport.send(
            "DELETE",
            membership_key_path(account_type, account_id, user_id),
            expected_status=200,
        )

    async def is_user_a_member_of_account(self, user_id: UUID, account_id: UUID) -> bool:
        response = await self.transport.send(
            "GET",
            f"/accounts/{account_id}/members/{user_id}",
            expected_status=200,
        )
        return self.transport.decode_field(response, "is_member", bool)

    async def get_members_of_account(self, account_id: UUID) -> List[UUID]:
        """Identifiers of every user holding a membership in the account."""
        response = await self.transport.send(
            "GET",
            f"/accounts/{account_id}/members",
            expected_status=200,
        )
        return self.transport.decode_value(response, List[UUID])

    async def get_roles_for_user_in_account(self, user_id: UUID, account_id: UUID) -> List[Role]:
        response = await self.transport.send(
            "GET",
            f"/accounts/{account_id}/users/{user_id}/roles",
            expected_status=200,
        )
        return self.transport.decode_list(response, Role)
