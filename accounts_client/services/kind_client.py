"""Kind-specific account sub-clients."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Type
from uuid import UUID

from accounts_client.core.transport import AccountTransport
from accounts_client.schemas.account import (
    AccountKind,
    AgencyAccount,
    BusinessAccount,
    CelebrityAccount,
    EnterpriseAccount,
    GovernmentAccount,
    KindAccount,
    KindAccountCreate,
    KindAccountUpdate,
)
from accounts_client.schemas.membership import AccountMembership, AccountMembershipCreate
from accounts_client.services.account_service import ACCOUNTS_ENVELOPE
from accounts_client.services.membership_service import MembershipService
from accounts_client.services.paths import Operation, build_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KindSpec:
    """Per-kind metadata for a KindClient."""
    kind: AccountKind
    model: Type[KindAccount]
    name_field: str
    create_status: int


AGENCY = KindSpec(AccountKind.AGENCY, AgencyAccount, "agency_name", 201)
BUSINESS = KindSpec(AccountKind.BUSINESS, BusinessAccount, "business_name", 201)
CELEBRITY = KindSpec(AccountKind.CELEBRITY, CelebrityAccount, "celebrity_name", 201)
# Enterprise and government creates answer 200, not 201.
ENTERPRISE = KindSpec(AccountKind.ENTERPRISE, EnterpriseAccount, "enterprise_name", 200)
GOVERNMENT = KindSpec(AccountKind.GOVERNMENT, GovernmentAccount, "government_name", 200)

KIND_SPECS: Dict[AccountKind, KindSpec] = {
    spec.kind: spec for spec in (AGENCY, BUSINESS, CELEBRITY, ENTERPRISE, GOVERNMENT)
}


class KindClient:
    """
    Client for one kind of account owned by a user.

    Handles:
    - Account lifecycle under the kind's resource path
    - Listing the accounts a user owns
    - Member management, delegated to the shared membership service
    """

    def __init__(self, transport: AccountTransport, spec: KindSpec, memberships: MembershipService):
        self.transport = transport
        self.spec = spec
        self.memberships = memberships

    @property
    def kind(self) -> AccountKind:
        return self.spec.kind

    def _payload(self, user_id: UUID, name: str) -> Dict[str, str]:
        return {"user_id": str(user_id), self.spec.name_field: name}

    async def create(self, user_id: UUID, name: str) -> KindAccount:
        """
        Create an account of this kind owned by ``user_id``.

        Args:
            user_id: Owning user identifier
            name: Display name, sent under the kind's name field

        Returns:
            KindAccount: Created record, typed as the kind's model
        """
        request = KindAccountCreate(user_id=user_id, name=name)
        logger.info(f"Creating {self.kind.value} account '{request.name}' for user {user_id}")

        response = await self.transport.send(
            "POST",
            build_path(self.kind, Operation.CREATE),
            expected_status=self.spec.create_status,
            json_body=self._payload(request.user_id, request.name),
        )
        return self.transport.decode(response, self.spec.model)

    async def get_by_id(self, account_id: UUID) -> KindAccount:
        response = await self.transport.send(
            "GET",
            build_path(self.kind, Operation.READ, account_id),
            expected_status=200,
        )
        return self.transport.decode(response, self.spec.model)

    async def get_by_user_id(self, user_id: UUID) -> List[KindAccount]:
        """Accounts of this kind owned by a user."""
        response = await self.transport.send(
            "GET",
            build_path(self.kind, Operation.LIST_BY_USER, user_id=user_id),
            expected_status=200,
        )
        return self.transport.decode_list(response, self.spec.model, envelope=ACCOUNTS_ENVELOPE)

    async def update(self, account_id: UUID, user_id: UUID, name: str) -> KindAccount:
        """Replace the owner and name of an account."""
        request = KindAccountUpdate(user_id=user_id, name=name)
        logger.info(f"Updating {self.kind.value} account {account_id}")

        response = await self.transport.send(
            "PUT",
            build_path(self.kind, Operation.UPDATE, account_id),
            expected_status=200,
            json_body=self._payload(request.user_id, request.name),
        )
        return self.transport.decode(response, self.spec.model)

    async def delete(self, account_id: UUID) -> None:
        logger.info(f"Deleting {self.kind.value} account {account_id}")
        await self.transport.send(
            "DELETE",
            build_path(self.kind, Operation.DELETE, account_id),
            expected_status=200,
        )

    async def list(self) -> List[KindAccount]:
        response = await self.transport.send(
            "GET",
            build_path(self.kind, Operation.LIST),
            expected_status=200,
        )
        return self.transport.decode_list(response, self.spec.model, envelope=ACCOUNTS_ENVELOPE)

    # Member management

    async def add_member(self, account_id: UUID, user_id: UUID, role: str) -> AccountMembership:
        return await self.memberships.create_membership(
            AccountMembershipCreate(
                account_type=self.kind,
                account_id=account_id,
                user_id=user_id,
                role=role,
            )
        )

    async def remove_member(self, account_id: UUID, user_id: UUID) -> None:
        await self.memberships.delete_membership(self.kind, account_id, user_id)

    async def get_members(self, account_id: UUID) -> List[AccountMembership]:
        """Memberships of one account of this kind."""
        return await self.memberships.list_memberships(account_type=self.kind, account_id=account_id)

    async def update_member_role(self, account_id: UUID, user_id: UUID, role: str) -> AccountMembership:
        return await self.memberships.update_member_role(self.kind, account_id, user_id, role)
