"""Async client for the account management service."""

from accounts_client.client import AccountsClient
from accounts_client.core.settings import ClientSettings, get_settings
from accounts_client.errors import (
    AccountNotFound,
    AccountsClientError,
    AmbiguousKind,
    DecodeFailure,
    KindResolutionError,
    KindUndetermined,
    TransportFailure,
    UnexpectedStatus,
    UnsupportedOperation,
    ValidationFailure,
)
from accounts_client.middleware.logging import configure_logging
from accounts_client.schemas.account import AccountIdentifiers, AccountKind, AccountRef

__version__ = "1.0.0"

__all__ = [
    "AccountsClient",
    "ClientSettings",
    "get_settings",
    "configure_logging",
    "AccountKind",
    "AccountIdentifiers",
    "AccountRef",
    # Errors
    "AccountsClientError",
    "TransportFailure",
    "UnexpectedStatus",
    "DecodeFailure",
    "ValidationFailure",
    "KindResolutionError",
    "KindUndetermined",
    "AmbiguousKind",
    "AccountNotFound",
    "UnsupportedOperation",
]
