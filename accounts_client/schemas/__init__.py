"""Pydantic schemas for request/response validation."""

from .base import *
from .account import *
from .membership import *
from .link import *
from .permission import *
from .service_account import *
from .token import *

__all__ = [
    # Base schemas
    "BaseSchema",

    # Account schemas
    "AccountKind",
    "ACCOUNT_KINDS",
    "KIND_IDENTIFIER_FIELDS",
    "AccountIdentifiers",
    "Account",
    "AccountRef",
    "AccountInput",
    "AccountList",
    "VerifyAccountInput",
    "KindAccount",
    "AgencyAccount",
    "BusinessAccount",
    "CelebrityAccount",
    "EnterpriseAccount",
    "GovernmentAccount",
    "KindAccountCreate",
    "KindAccountUpdate",

    # Membership schemas
    "Role",
    "AccountMembership",
    "AccountMembershipCreate",
    "AccountMembershipUpdate",

    # Link schemas
    "AccountLink",
    "AccountLinkRequest",

    # Permission schemas
    "Permission",

    # Service account schemas
    "ServiceAccount",
    "ServiceAccountCreate",

    # Token schemas
    "Token",
    "TokenCreate",
    "TokenVerifyRequest",
]
