"""Token client for the account service's authentication tokens."""

import logging
from datetime import datetime, timedelta
from typing import List, Optional
from urllib.parse import quote
from uuid import UUID

from accounts_client.core.transport import AccountTransport
from accounts_client.errors import ValidationFailure
from accounts_client.schemas.token import Token, TokenCreate, TokenVerifyRequest
from accounts_client.utils.validators import TokenRules, utc_now

logger = logging.getLogger(__name__)

TOKENS_PATH = "/tokens"
DEFAULT_TOKEN_LIFETIME = timedelta(hours=24)


class TokenService:
    """
    Service for user-scoped bearer tokens.

    Handles:
    - Token issuance, checked locally before anything is sent
    - Lookup by plaintext, user and scope
    - Revocation and expiry cleanup
    - Verification of a presented plaintext token
    """

    def __init__(self, transport: AccountTransport):
        self.transport = transport

    async def create_token(
        self,
        user_id: UUID,
        scope: str,
        expiry: Optional[datetime] = None
    ) -> Token:
        """
        Issue a token for a user.

        Args:
            user_id: Owning user
            scope: Token scope
            expiry: Expiry timestamp, defaults to 24 hours from now

        Returns:
            Token: Issued token, including its plaintext

        Raises:
            ValidationFailure: If the user id or scope is missing, or the
                expiry is not strictly in the future
        """
        if expiry is None:
            expiry = utc_now() + DEFAULT_TOKEN_LIFETIME

        validation = TokenRules.validate_token_creation(user_id, scope, expiry)
        if not validation.is_valid:
            raise ValidationFailure("Token validation failed", validation.errors)

        request = TokenCreate(user_id=user_id, scope=scope, expiry=expiry)
        logger.info(f"Issuing '{scope}' token for user {user_id}")

        response = await self.transport.send(
            "POST",
            TOKENS_PATH,
            expected_status=201,
            json_body=request.to_payload(),
        )
        return self.transport.decode(response, Token)

    async def get_token_by_plaintext(self, plaintext: str) -> Token:
        response = await self.transport.send(
            "GET",
            f"{TOKENS_PATH}/{quote(plaintext, safe='')}",
            expected_status=200,
        )
        return self.transport.decode(response, Token)

    async def get_tokens_by_user_id(self, user_id: UUID) -> List[Token]:
        response = await self.transport.send(
            "GET",
            f"/users/{user_id}/tokens",
            expected_status=200,
        )
        return self.transport.decode_list(response, Token)

    async def get_tokens_by_scope(self, scope: str) -> List[Token]:
        response = await self.transport.send(
            "GET",
            f"{TOKENS_PATH}/scope/{quote(scope, safe='')}",
            expected_status=200,
        )
        return self.transport.decode_list(response, Token)

    async def delete_token(self, user_id: UUID, token_id: UUID) -> None:
        """Revoke one token; the service answers 204."""
        validation = TokenRules.validate_token_deletion(user_id, token_id)
        if not validation.is_valid:
            raise ValidationFailure("Token deletion validation failed", validation.errors)

        logger.info(f"Revoking token {token_id} of user {user_id}")
        await self.transport.send(
            "DELETE",
            f"/users/{user_id}/tokens/{token_id}",
            expected_status=204,
        )

    async def delete_tokens_by_user_id(self, user_id: UUID) -> None:
        logger.info(f"Revoking all tokens of user {user_id}")
        await self.transport.send(
            "DELETE",
            f"/users/{user_id}/tokens",
            expected_status=200,
        )

    async def delete_expired_tokens(self) -> None:
        await self.transport.send(
            "DELETE",
            f"{TOKENS_PATH}/expired",
            expected_status=200,
        )

    async def verify_token(self, plaintext: str) -> Token:
        """Verify a presented plaintext token and return its record."""
        request = TokenVerifyRequest(token=plaintext)
        response = await self.transport.send(
            "POST",
            f"{TOKENS_PATH}/verify",
            expected_status=200,
            json_body=request.to_payload(),
        )
        return self.transport.decode(response, Token)
