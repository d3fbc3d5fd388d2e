"""Account link service."""

import logging
from typing import List
from uuid import UUID

from accounts_client.core.transport import AccountTransport
from accounts_client.schemas.account import AccountKind
from accounts_client.schemas.link import AccountLink, AccountLinkRequest

logger = logging.getLogger(__name__)

LINKS_PATH = "/account-links"


class LinkService:
    """
    Service for coarse user to account links.

    A link binds a user to an account without a role. It is a separate
    relation from memberships and is managed on its own endpoints.
    """

    def __init__(self, transport: AccountTransport):
        self.transport = transport

    async def create_link(self, link: AccountLinkRequest) -> AccountLink:
        logger.info(f"Linking user {link.user_id} to {link.account_type.value} account {link.account_id}")
        response = await self.transport.send(
            "POST",
            LINKS_PATH,
            expected_status=201,
            json_body=link.to_payload(),
        )
        return self.transport.decode(response, AccountLink)

    async def get_link(self, user_id: UUID, account_id: UUID) -> AccountLink:
        response = await self.transport.send(
            "GET",
            f"{LINKS_PATH}/{user_id}/{account_id}",
            expected_status=200,
        )
        return self.transport.decode(response, AccountLink)

    async def get_links_by_user_id(self, user_id: UUID) -> List[AccountLink]:
        response = await self.transport.send(
            "GET",
            f"/users/{user_id}/account-links",
            expected_status=200,
        )
        return self.transport.decode_list(response, AccountLink)

    async def get_links_by_account_id(self, account_id: UUID) -> List[AccountLink]:
        response = await self.transport.send(
            "GET",
            f"/accounts/{account_id}/account-links",
            expected_status=200,
        )
        return self.transport.decode_list(response, AccountLink)

    async def get_links_by_account_type(self, account_type: AccountKind) -> List[AccountLink]:
        response = await self.transport.send(
            "GET",
            LINKS_PATH,
            expected_status=200,
            params={"account_type": AccountKind(account_type).value},
        )
        return self.transport.decode_list(response, AccountLink)

    async def update_link(self, user_id: UUID, account_type: AccountKind, account_id: UUID) -> AccountLink:
        """Point a user's link at another account."""
        link = AccountLinkRequest(user_id=user_id, account_type=account_type, account_id=account_id)
        response = await self.transport.send(
            "PUT",
            f"{LINKS_PATH}/{user_id}",
            expected_status=200,
            json_body=link.to_payload(),
        )
        return self.transport.decode(response, AccountLink)

    async def delete_link(self, link: AccountLinkRequest) -> None:
        logger.info(f"Unlinking user {link.user_id} from {link.account_type.value} account {link.account_id}")
        await self.transport.send(
            "DELETE",
            f"{LINKS_PATH}/{link.user_id}/{link.account_id}",
            expected_status=200,
            params={"account_type": link.account_type.value},
        )

    async def is_user_linked_to_account(self, user_id: UUID, account_id: UUID) -> bool:
        """
        Check whether a link exists.

        The link lookup answers 404 for a missing link, which maps to False
        here instead of an error.
        """
        response = await self.transport.send(
            "GET",
            f"{LINKS_PATH}/{user_id}/{account_id}",
            expected_status=(200, 404),
        )
        return response.status_code == 200
