"""Account service sub-clients."""

from .account_service import AccountService
from .kind_client import KIND_SPECS, KindClient, KindSpec
from .link_service import LinkService
from .membership_service import MembershipService
from .paths import Operation, build_path, supports
from .permission_service import PermissionService
from .resolver import resolve_account_kind, resolve_account_ref
from .service_account_service import ServiceAccountService
from .token_service import TokenService

__all__ = [
    "AccountService",
    "KindClient",
    "KindSpec",
    "KIND_SPECS",
    "LinkService",
    "MembershipService",
    "Operation",
    "build_path",
    "supports",
    "PermissionService",
    "resolve_account_kind",
    "resolve_account_ref",
    "ServiceAccountService",
    "TokenService",
]
