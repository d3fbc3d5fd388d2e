"""Permission catalogue service."""

import logging
from typing import List
from urllib.parse import quote
from uuid import UUID

from accounts_client.core.transport import AccountTransport
from accounts_client.errors import ValidationFailure
from accounts_client.schemas.permission import Permission
from accounts_client.utils.validators import IdentifierRules, PermissionRules

logger = logging.getLogger(__name__)

PERMISSIONS_PATH = "/permissions"


class PermissionService:
    """Service for named permissions and their user and role assignments."""

    def __init__(self, transport: AccountTransport):
        self.transport = transport

    async def create_permission(self, permission: Permission) -> Permission:
        """
        Create a permission.

        Raises:
            ValidationFailure: If the name is empty
        """
        validation = PermissionRules.validate_permission_creation(permission.name)
        if not validation.is_valid:
            raise ValidationFailure("Permission validation failed", validation.errors)

        logger.info(f"Creating permission '{permission.name}'")
        response = await self.transport.send(
            "POST",
            PERMISSIONS_PATH,
            expected_status=201,
            json_body=permission.to_payload(exclude_none=True),
        )
        return self.transport.decode(response, Permission)

    async def get_permission_by_id(self, permission_id: UUID) -> Permission:
        response = await self.transport.send(
            "GET",
            f"{PERMISSIONS_PATH}/{permission_id}",
            expected_status=200,
        )
        return self.transport.decode(response, Permission)

    async def get_permission_by_name(self, name: str) -> Permission:
        response = await self.transport.send(
            "GET",
            f"{PERMISSIONS_PATH}/name/{quote(name, safe='')}",
            expected_status=200,
        )
        return self.transport.decode(response, Permission)

    async def update_permission(self, permission: Permission) -> Permission:
        """Replace a permission; both its id and name are required."""
        validation = PermissionRules.validate_permission(permission.id, permission.name)
        if not validation.is_valid:
            raise ValidationFailure("Permission validation failed", validation.errors)

        response = await self.transport.send(
            "PUT",
            f"{PERMISSIONS_PATH}/{permission.id}",
            expected_status=200,
            json_body=permission.to_payload(),
        )
        return self.transport.decode(response, Permission)

    async def delete_permission(self, permission_id: UUID) -> None:
        errors = IdentifierRules.validate_required("id", permission_id)
        if errors:
            raise ValidationFailure("Permission id is required", errors)

        logger.info(f"Deleting permission {permission_id}")
        await self.transport.send(
            "DELETE",
            f"{PERMISSIONS_PATH}/{permission_id}",
            expected_status=200,
        )

    async def list_permissions(self) -> List[Permission]:
        response = await self.transport.send("GET", PERMISSIONS_PATH, expected_status=200)
        return self.transport.decode_list(response, Permission)

    async def does_permission_exist(self, permission_id: UUID) -> bool:
        """True if a permission with this id exists; 404 maps to False."""
        response = await self.transport.send(
            "GET",
            f"{PERMISSIONS_PATH}/{permission_id}",
            expected_status=(200, 404),
        )
        return response.status_code == 200

    async def get_permissions_by_user_id(self, user_id: UUID) -> List[Permission]:
        response = await self.transport.send(
            "GET",
            f"/users/{user_id}/permissions",
            expected_status=200,
        )
        return self.transport.decode_list(response, Permission)

    async def get_permissions_by_role_id(self, role_id: UUID) -> List[Permission]:
        response = await self.transport.send(
            "GET",
            f"/roles/{role_id}/permissions",
            expected_status=200,
        )
        return self.transport.decode_list(response, Permission)
