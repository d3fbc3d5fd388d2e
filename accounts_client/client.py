"""Composition root wiring every sub-client to one transport."""

from typing import Optional

import httpx

from accounts_client.core.settings import ClientSettings
from accounts_client.core.transport import AccountTransport
from accounts_client.errors import UnsupportedOperation
from accounts_client.schemas.account import AccountKind
from accounts_client.services.account_service import AccountService
from accounts_client.services.kind_client import (
    AGENCY,
    BUSINESS,
    CELEBRITY,
    ENTERPRISE,
    GOVERNMENT,
    KindClient,
)
from accounts_client.services.link_service import LinkService
from accounts_client.services.membership_service import MembershipService
from accounts_client.services.permission_service import PermissionService
from accounts_client.services.service_account_service import ServiceAccountService
from accounts_client.services.token_service import TokenService


class AccountsClient:
    """
    Async client for the account management service.

    Usage::

        async with AccountsClient(get_settings()) as client:
            agency = await client.agencies.create(user_id, "Acme Talent")
            await client.agencies.add_member(agency.id, other_user_id, "admin")

    All sub-clients share one ``httpx.AsyncClient``; close it with
    ``aclose()`` or by leaving the ``async with`` block.
    """

    def __init__(
        self,
        settings: ClientSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        strict_kind_resolution: bool = True,
        log_headers: bool = False
    ):
        self.settings = settings
        self.transport = AccountTransport(settings, transport=transport, log_headers=log_headers)

        self.memberships = MembershipService(self.transport)
        self.accounts = AccountService(self.transport, strict_kind_resolution=strict_kind_resolution)
        self.agencies = KindClient(self.transport, AGENCY, self.memberships)
        self.businesses = KindClient(self.transport, BUSINESS, self.memberships)
        self.celebrities = KindClient(self.transport, CELEBRITY, self.memberships)
        self.enterprises = KindClient(self.transport, ENTERPRISE, self.memberships)
        self.governments = KindClient(self.transport, GOVERNMENT, self.memberships)
        self.links = LinkService(self.transport)
        self.permissions = PermissionService(self.transport)
        self.service_accounts = ServiceAccountService(self.transport)
        self.tokens = TokenService(self.transport)

        self._kind_clients = {
            client.kind: client
            for client in (self.agencies, self.businesses, self.celebrities, self.enterprises, self.governments)
        }

    def kind(self, kind: AccountKind) -> KindClient:
        """Sub-client for a kind of account owned by a user."""
        kind = AccountKind(kind)
        if kind not in self._kind_clients:
            raise UnsupportedOperation(f"'{kind.value}' accounts have no kind-specific client")
        return self._kind_clients[kind]

    @property
    def is_closed(self) -> bool:
        return self.transport.is_closed

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "AccountsClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()
