"""Service for managing service accounts and their roles."""

import logging
from typing import List
from urllib.parse import quote
from uuid import UUID

from accounts_client.core.transport import AccountTransport
from accounts_client.errors import ValidationFailure
from accounts_client.schemas.account import AccountKind
from accounts_client.schemas.membership import Role
from accounts_client.schemas.service_account import ServiceAccount, ServiceAccountCreate
from accounts_client.services.paths import KIND_SEGMENTS, Operation, build_path
from accounts_client.utils.validators import ServiceAccountRules

logger = logging.getLogger(__name__)


class ServiceAccountService:
    """
    Service for machine principals.

    Handles:
    - Service account lifecycle (create, update, delete)
    - Role assignment and lookup
    """

    def __init__(self, transport: AccountTransport):
        self.transport = transport

    def _roles_path(self, service_account_id: UUID) -> str:
        return f"/{KIND_SEGMENTS[AccountKind.SERVICE]}/{service_account_id}/roles"

    # Service Account Management

    async def create_service_account(self, service_account: ServiceAccountCreate) -> ServiceAccount:
        """
        Create a new service account.

        Raises:
            ValidationFailure: If the name or roles are missing, or the expiry
                is not in the future
        """
        validation = ServiceAccountRules.validate_service_account_creation(
            service_account.service_name,
            service_account.roles,
            service_account.expires_at
        )
        if not validation.is_valid:
            raise ValidationFailure("Service account validation failed", validation.errors)

        logger.info(f"Creating service account '{service_account.service_name}'")
        response = await self.transport.send(
            "POST",
            build_path(AccountKind.SERVICE, Operation.CREATE),
            expected_status=201,
            json_body=service_account.to_payload(exclude_none=True),
        )
        return self.transport.decode(response, ServiceAccount)

    async def get_service_account_by_id(self, service_account_id: UUID) -> ServiceAccount:
        response = await self.transport.send(
            "GET",
            build_path(AccountKind.SERVICE, Operation.READ, service_account_id),
            expected_status=200,
        )
        return self.transport.decode(response, ServiceAccount)

    async def get_service_account_by_name(self, name: str) -> ServiceAccount:
        response = await self.transport.send(
            "GET",
            f"/{KIND_SEGMENTS[AccountKind.SERVICE]}/name/{quote(name, safe='')}",
            expected_status=200,
        )
        return self.transport.decode(response, ServiceAccount)

    async def update_service_account(self, service_account: ServiceAccount) -> ServiceAccount:
        """Replace a service account. The secret is never sent."""
        validation = ServiceAccountRules.validate_service_account_update(
            service_account.id,
            service_account.service_name,
            service_account.roles
        )
        if not validation.is_valid:
            raise ValidationFailure("Service account validation failed", validation.errors)

        response = await self.transport.send(
            "PUT",
            build_path(AccountKind.SERVICE, Operation.UPDATE, service_account.id),
            expected_status=200,
            json_body=service_account.to_payload(),
        )
        return self.transport.decode(response, ServiceAccount)

    async def delete_service_account(self, service_account_id: UUID) -> None:
        logger.info(f"Deleting service account {service_account_id}")
        await self.transport.send(
            "DELETE",
            build_path(AccountKind.SERVICE, Operation.DELETE, service_account_id),
            expected_status=200,
        )

    async def list_service_accounts(self) -> List[ServiceAccount]:
        response = await self.transport.send(
            "GET",
            build_path(AccountKind.SERVICE, Operation.LIST),
            expected_status=200,
        )
        return self.transport.decode_list(response, ServiceAccount)

    # Role Management

    async def assign_role(self, service_account_id: UUID, role_id: UUID) -> None:
        logger.info(f"Assigning role {role_id} to service account {service_account_id}")
        await self.transport.send(
            "POST",
            self._roles_path(service_account_id),
            expected_status=200,
            json_body={
                "service_account_id": str(service_account_id),
                "role_id": str(role_id),
            },
        )

    async def remove_role(self, service_account_id: UUID, role_id: UUID) -> None:
        logger.info(f"Removing role {role_id} from service account {service_account_id}")
        await self.transport.send(
            "DELETE",
            f"{self._roles_path(service_account_id)}/{role_id}",
            expected_status=200,
        )

    async def get_roles(self, service_account_id: UUID) -> List[Role]:
        response = await self.transport.send(
            "GET",
            self._roles_path(service_account_id),
            expected_status=200,
        )
        return self.transport.decode_list(response, Role)

    async def get_service_accounts_by_role_id(self, role_id: UUID) -> List[ServiceAccount]:
        response = await self.transport.send(
            "GET",
            f"/roles/{role_id}/service-accounts",
            expected_status=200,
        )
        return self.transport.decode_list(response, ServiceAccount)

    async def is_role_assigned(self, service_account_id: UUID, role_id: UUID) -> bool:
        response = await self.transport.send(
            "GET",
            f"{self._roles_path(service_account_id)}/{role_id}",
            expected_status=200,
        )
        return self.transport.decode_field(response, "is_role_assigned", bool)
