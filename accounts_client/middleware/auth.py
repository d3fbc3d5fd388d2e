"""Credential injection for outbound requests."""

from typing import Generator

import httpx

from accounts_client.core.settings import ClientSettings

AUTHORIZATION_HEADER = "Authorization"
API_KEY_HEADER = "X-Api-Key"


class BearerApiKeyAuth(httpx.Auth):
    """
    httpx authentication flow attaching the bearer token and API key.

    Every request leaves with exactly one ``Authorization: Bearer <token>``
    header and one ``X-Api-Key`` header. Header lookups in httpx are
    case-insensitive, so any differently-cased value set by a caller is
    replaced rather than duplicated.
    """

    def __init__(self, bearer_token: str, api_key: str):
        if not bearer_token:
            raise ValueError("Bearer token is required")
        if not api_key:
            raise ValueError("API key is required")
        self._bearer_token = bearer_token
        self._api_key = api_key

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "BearerApiKeyAuth":
        return cls(settings.bearer_token, settings.api_key)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[AUTHORIZATION_HEADER] = f"Bearer {self._bearer_token}"
        request.headers[API_KEY_HEADER] = self._api_key
        yield request
