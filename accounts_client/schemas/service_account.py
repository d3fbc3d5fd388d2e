"""Service account schemas."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, SecretStr, field_validator

from accounts_client.utils.validators import as_utc

from .base import BaseSchema


class ServiceAccount(BaseSchema):
    """
    Machine credential principal.

    ``secret`` is write-only: it may be set locally but is excluded from every
    serialization of the record.
    """

    id: UUID = Field(description="Service account identifier")
    service_name: str = Field(description="Name of the service using the account")
    roles: List[str] = Field(default_factory=list, description="Role names held by the account")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    expires_at: Optional[datetime] = Field(None, description="Optional expiry")
    secret: Optional[SecretStr] = Field(None, exclude=True, description="Write-only secret")


class ServiceAccountCreate(BaseSchema):
    """Create request for a service account."""

    service_name: str = Field("", description="Name of the service using the account")
    roles: List[str] = Field(default_factory=list, description="Role names, at least one")
    expires_at: Optional[datetime] = Field(None, description="Optional expiry, must be in the future")

    @field_validator("expires_at")
    @classmethod
    def normalize_expires_at(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Send expiries as UTC; naive values are taken to be UTC already."""
        return as_utc(v) if v is not None else v
