"""Account link schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .account import AccountKind
from .base import BaseSchema


class AccountLinkRequest(BaseSchema):
    """User to account linkage, as sent to the service."""

    user_id: UUID = Field(description="Linked user identifier")
    account_type: AccountKind = Field(description="Kind of the linked account")
    account_id: UUID = Field(description="Linked account identifier")


class AccountLink(AccountLinkRequest):
    """Coarse user to account binding. Distinct from a membership: it carries no role."""

    created_at: datetime = Field(description="Link creation timestamp")
