"""Membership and role schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from .account import AccountKind
from .base import BaseSchema


class Role(BaseSchema):
    """Named role a user or service account can hold."""

    id: UUID = Field(description="Role identifier")
    name: str = Field(description="Role name")
    description: Optional[str] = Field(None, description="Role description")


class AccountMembership(BaseSchema):
    """
    Binds a user to an account of any kind with a role.

    (account_type, account_id, user_id) identifies at most one membership.
    """

    id: UUID = Field(description="Membership identifier")
    account_type: AccountKind = Field(description="Kind of the account")
    account_id: UUID = Field(description="Account identifier")
    user_id: UUID = Field(description="Member user identifier")
    role: str = Field(description="Role held by the user in the account")
    joined_at: datetime = Field(description="Timestamp the user joined")


class AccountMembershipCreate(BaseSchema):
    """Create request for a membership."""

    account_type: AccountKind = Field(description="Kind of the account")
    account_id: UUID = Field(description="Account identifier")
    user_id: UUID = Field(description="Member user identifier")
    role: str = Field(min_length=1, max_length=100, description="Role to grant")


class AccountMembershipUpdate(BaseSchema):
    """Partial update of a membership; only fields set are sent."""

    account_type: Optional[AccountKind] = None
    account_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    role: Optional[str] = Field(None, min_length=1, max_length=100)
