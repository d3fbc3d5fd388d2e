"""Account-related Pydantic schemas."""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union
from uuid import UUID

from pydantic import Field, field_validator

from .base import BaseSchema


class AccountKind(str, Enum):
    """Discriminant of an account record."""
    USER = "user"
    AGENCY = "agency"
    CELEBRITY = "celebrity"
    BUSINESS = "business"
    ENTERPRISE = "enterprise"
    GOVERNMENT = "government"
    SERVICE = "service"


# Resolution and fan-out order.
ACCOUNT_KINDS = (
    AccountKind.USER,
    AccountKind.AGENCY,
    AccountKind.CELEBRITY,
    AccountKind.BUSINESS,
    AccountKind.ENTERPRISE,
    AccountKind.GOVERNMENT,
)

KIND_IDENTIFIER_FIELDS: Dict[AccountKind, str] = {
    AccountKind.USER: "user_id",
    AccountKind.AGENCY: "agency_id",
    AccountKind.CELEBRITY: "celebrity_id",
    AccountKind.BUSINESS: "business_id",
    AccountKind.ENTERPRISE: "enterprise_id",
    AccountKind.GOVERNMENT: "government_id",
}


# Generic account schemas

class AccountIdentifiers(BaseSchema):
    """
    Sparse account input carrying up to six kind identifiers.

    A valid input populates exactly one of them; the populated field names the
    account kind. Wire names keep the service's mixed casing (``user_id`` next
    to ``agencyId``); Python code uses the snake_case attribute names.
    """

    user_id: Optional[UUID] = Field(None, alias="user_id", description="User account identifier")
    agency_id: Optional[UUID] = Field(None, alias="agencyId", description="Agency account identifier")
    celebrity_id: Optional[UUID] = Field(None, alias="celebrityId", description="Celebrity account identifier")
    business_id: Optional[UUID] = Field(None, alias="businessId", description="Business account identifier")
    enterprise_id: Optional[UUID] = Field(None, alias="enterpriseId", description="Enterprise account identifier")
    government_id: Optional[UUID] = Field(None, alias="governmentId", description="Government account identifier")

    @classmethod
    def for_kind(cls, kind: AccountKind, identifier: UUID) -> "AccountIdentifiers":
        """Build an input with only ``kind``'s identifier populated."""
        if kind not in KIND_IDENTIFIER_FIELDS:
            raise ValueError(f"Kind '{kind.value}' has no account identifier")
        return cls(**{KIND_IDENTIFIER_FIELDS[kind]: identifier})

    def identifier_for(self, kind: AccountKind) -> Optional[UUID]:
        field = KIND_IDENTIFIER_FIELDS.get(kind)
        return getattr(self, field) if field else None

    def populated_kinds(self) -> List[AccountKind]:
        """Kinds whose identifier is set, in resolution order."""
        return [kind for kind in ACCOUNT_KINDS if self.identifier_for(kind) is not None]

    def identifiers_payload(self) -> Dict[str, str]:
        """Populated identifiers under their wire names."""
        return self.to_payload(
            include=set(KIND_IDENTIFIER_FIELDS.values()),
            exclude_none=True
        )

    def to_query_params(self) -> Dict[str, str]:
        """Populated identifiers as snake_case query parameters."""
        return {
            KIND_IDENTIFIER_FIELDS[kind]: str(self.identifier_for(kind))
            for kind in self.populated_kinds()
        }


class Account(AccountIdentifiers):
    """Generic account record specializing into exactly one kind."""

    id: UUID = Field(description="Account identifier")

    @property
    def kind(self) -> Optional[AccountKind]:
        """First populated kind, or None for a record carrying no identifier."""
        kinds = self.populated_kinds()
        return kinds[0] if kinds else None


class AccountRef(BaseSchema):
    """Tagged account input: one kind and the identifier under that kind."""

    kind: AccountKind = Field(description="Account kind")
    account_id: UUID = Field(description="Identifier under the given kind")

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: AccountKind) -> AccountKind:
        if v not in KIND_IDENTIFIER_FIELDS:
            raise ValueError(f"Kind must be one of: {[k.value for k in ACCOUNT_KINDS]}")
        return v

    def to_identifiers(self) -> AccountIdentifiers:
        return AccountIdentifiers.for_kind(self.kind, self.account_id)


AccountInput = Union[AccountRef, AccountIdentifiers]


class VerifyAccountInput(BaseSchema):
    """Explicit kind and identifier of an account to verify."""

    account_id: UUID = Field(description="Account identifier")
    account_type: AccountKind = Field(description="Account kind")


class AccountList(BaseSchema):
    """Collection envelope returned by kind list endpoints."""

    accounts: List[Account] = Field(default_factory=list)


# Kind-specific schemas

class KindAccount(BaseSchema):
    """Kind-specific account record owned by a user."""

    id: UUID = Field(description="Account identifier")
    user_account_id: UUID = Field(description="Owning user account identifier")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class AgencyAccount(KindAccount):
    """Agency account record."""


class BusinessAccount(KindAccount):
    """Business account record."""


class CelebrityAccount(KindAccount):
    """Celebrity account record."""


class EnterpriseAccount(KindAccount):
    """Enterprise account record."""


class GovernmentAccount(KindAccount):
    """Government account record."""


class KindAccountCreate(BaseSchema):
    """Create request for a kind-specific account."""

    user_id: UUID = Field(description="Owning user identifier")
    name: str = Field(min_length=1, max_length=255, description="Display name of the account")


class KindAccountUpdate(BaseSchema):
    """Full replacement of a kind-specific account's mutable fields."""

    user_id: UUID = Field(description="Owning user identifier")
    name: str = Field(min_length=1, max_length=255, description="Display name of the account")
