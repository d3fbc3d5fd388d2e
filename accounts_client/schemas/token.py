"""Authentication token schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from accounts_client.utils.validators import as_utc, utc_now

from .base import BaseSchema


class Token(BaseSchema):
    """
    Opaque bearer credential scoped to a user.

    ``plaintext`` is only present on the issuance response; later reads carry
    the server-side ``hash`` instead.
    """

    id: Optional[UUID] = Field(None, description="Token identifier")
    plaintext: Optional[str] = Field(None, description="Plaintext token, issuance response only")
    hash: Optional[str] = Field(None, description="Server-side token hash")
    user_id: UUID = Field(description="Owning user identifier")
    expiry: datetime = Field(description="Expiry timestamp")
    scope: str = Field(description="Token scope")

    @property
    def is_expired(self) -> bool:
        return as_utc(self.expiry) <= utc_now()


class TokenCreate(BaseSchema):
    """Token issuance request."""

    user_id: UUID = Field(description="Owning user identifier")
    scope: str = Field(description="Token scope")
    expiry: datetime = Field(description="Expiry timestamp, strictly in the future")

    @field_validator("expiry")
    @classmethod
    def normalize_expiry(cls, v: datetime) -> datetime:
        return as_utc(v)


class TokenVerifyRequest(BaseSchema):
    """Plaintext token submitted for verification."""

    token: str = Field(min_length=1, description="Plaintext token")
