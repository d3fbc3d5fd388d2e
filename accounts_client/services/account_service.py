"""Generic account service over every account kind.

This service resolves the kind an input addresses, builds the kind's resource
path and issues the exchange. Operations that cannot know the kind up front
(delete by bare id, list everything) fan out over the kinds in resolution
order, one request at a time.
"""

import logging
from typing import List, Optional, Union
from urllib.parse import quote
from uuid import UUID

from accounts_client.core.transport import AccountTransport
from accounts_client.errors import AccountNotFound, ValidationFailure
from accounts_client.schemas.account import (
    ACCOUNT_KINDS,
    Account,
    AccountInput,
    AccountKind,
    AccountRef,
    VerifyAccountInput,
)
from accounts_client.services.paths import Operation, build_path
from accounts_client.services.resolver import resolve_account_kind, resolve_account_ref
from accounts_client.utils.validators import ValidationError

logger = logging.getLogger(__name__)

ACCOUNTS_ENVELOPE = "accounts"


class AccountService:
    """
    Generic account facade.

    Handles:
    - Kind resolution for sparse or tagged account inputs
    - Create and full-replace update against the resolved kind
    - Fan-out delete and list across all kinds
    - Search, verification and direct field lookups
    """

    def __init__(self, transport: AccountTransport, strict_kind_resolution: bool = True):
        """
        Initialize the AccountService.

        Args:
            transport: Shared account transport
            strict_kind_resolution: Reject inputs populating several kinds
        """
        self.transport = transport
        self.strict = strict_kind_resolution

    async def create_account(self, account: AccountInput) -> Account:
        """
        Create an account of the kind the input addresses.

        Args:
            account: Sparse identifiers or a tagged reference

        Returns:
            Account: Created account

        Raises:
            KindUndetermined: If the input names no kind
            AmbiguousKind: If the input names several kinds
            UnexpectedStatus: If the service does not answer 200
        """
        ref = resolve_account_ref(account, strict=self.strict)
        logger.info(f"Creating {ref.kind.value} account {ref.account_id}")

        response = await self.transport.send(
            "POST",
            build_path(ref.kind, Operation.CREATE),
            expected_status=200,
            json_body=ref.to_identifiers().identifiers_payload(),
        )
        return self.transport.decode(response, Account)

    async def update_account(self, account_id: UUID, account: AccountInput) -> Account:
        """
        Replace the kind-specific fields of an account.

        The body carries the full identifier set; the service treats it as a
        replacement, not a patch.
        """
        ref = resolve_account_ref(account, strict=self.strict)
        logger.info(f"Updating {ref.kind.value} account {account_id}")

        response = await self.transport.send(
            "PUT",
            build_path(ref.kind, Operation.UPDATE, account_id),
            expected_status=200,
            json_body=ref.to_identifiers().identifiers_payload(),
        )
        return self.transport.decode(response, Account)

    async def delete_account(self, account_id: UUID, kind: Optional[AccountKind] = None) -> AccountKind:
        """
        Delete an account by identifier.

        Without ``kind`` every kind's delete endpoint is probed in resolution
        order: 200 ends the search, 404 moves on to the next kind, anything
        else is an error. Pass ``kind`` when it is known to issue one request.

        Args:
            account_id: Account identifier
            kind: Kind of the account, if known

        Returns:
            AccountKind: Kind the account was deleted from

        Raises:
            AccountNotFound: If no kind holds the account
            UnexpectedStatus: If a probe answers anything but 200 or 404
        """
        if kind is not None:
            await self.transport.send(
                "DELETE",
                build_path(kind, Operation.DELETE, account_id),
                expected_status=200,
            )
            logger.info(f"Deleted {AccountKind(kind).value} account {account_id}")
            return AccountKind(kind)

        for candidate in ACCOUNT_KINDS:
            response = await self.transport.send(
                "DELETE",
                build_path(candidate, Operation.DELETE, account_id),
                expected_status=(200, 404),
            )
            if response.status_code == 200:
                logger.info(f"Deleted {candidate.value} account {account_id}")
                return candidate
            logger.debug(f"Account {account_id} is not a {candidate.value} account")

        logger.warning(f"Account {account_id} not found under any kind")
        raise AccountNotFound(f"account {account_id} not found")

    async def list_accounts(self) -> List[Account]:
        """
        List accounts of every kind.

        Kinds are disjoint, so results are concatenated without deduplication.
        The first failing kind aborts the whole listing.
        """
        accounts: List[Account] = []
        for kind in ACCOUNT_KINDS:
            response = await self.transport.send(
                "GET",
                build_path(kind, Operation.LIST),
                expected_status=200,
            )
            batch = self.transport.decode_list(response, Account, envelope=ACCOUNTS_ENVELOPE)
            logger.debug(f"Listed {len(batch)} {kind.value} accounts")
            accounts.extend(batch)
        return accounts

    async def search_accounts(self, account: AccountInput) -> List[Account]:
        """Search the resolved kind using every populated identifier as a filter."""
        identifiers = account.to_identifiers() if isinstance(account, AccountRef) else account
        kind = resolve_account_kind(identifiers, strict=self.strict)

        response = await self.transport.send(
            "GET",
            build_path(kind, Operation.SEARCH),
            expected_status=200,
            params=identifiers.to_query_params(),
        )
        return self.transport.decode_list(response, Account)

    async def verify_account(self, verification: VerifyAccountInput) -> Account:
        """Assert that an account exists under an explicit kind."""
        response = await self.transport.send(
            "GET",
            build_path(verification.account_type, Operation.VERIFY, verification.account_id),
            expected_status=200,
        )
        return self.transport.decode(response, Account)

    async def get_account_by_field(self, field: str, value: Union[UUID, str]) -> Account:
        """Look an account up by one of its fields, bypassing kind resolution."""
        if not field or not field.strip():
            raise ValidationFailure(
                "Field name is required",
                [ValidationError(field="field", code="FIELD_REQUIRED", message="Field name is required")]
            )

        response = await self.transport.send(
            "GET",
            f"/accounts/{quote(field.strip(), safe='')}/{quote(str(value), safe='')}",
            expected_status=200,
        )
        return self.transport.decode(response, Account)
