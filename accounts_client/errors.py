"""Exceptions raised by the accounts client."""

from typing import List, Optional

from accounts_client.utils.validators import ValidationError


class AccountsClientError(Exception):
    """Base exception for accounts client errors."""
    pass


class TransportFailure(AccountsClientError):
    """Raised when the HTTP exchange could not be completed."""

    def __init__(self, message: str, method: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message)
        self.method = method
        self.path = path


class UnexpectedStatus(AccountsClientError):
    """Raised when the server answers with a status the operation does not expect."""

    def __init__(
        self,
        status_code: int,
        body: str,
        method: Optional[str] = None,
        path: Optional[str] = None
    ):
        super().__init__(f"unexpected status code: got {status_code}, body: {body}")
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path


class DecodeFailure(AccountsClientError):
    """Raised when a response body does not match the expected schema."""
    pass


class ValidationFailure(AccountsClientError):
    """Raised when a client-side precondition fails before any request is sent."""

    def __init__(self, message: str, validation_errors: List[ValidationError] = None):
        super().__init__(message)
        self.validation_errors = validation_errors or []


class KindResolutionError(AccountsClientError):
    """Raised when a sparse account input does not name exactly one kind."""
    pass


class KindUndetermined(KindResolutionError):
    """Raised when no kind identifier is populated."""
    pass


class AmbiguousKind(KindResolutionError):
    """Raised when more than one kind identifier is populated."""

    def __init__(self, message: str, kinds: List[str] = None):
        super().__init__(message)
        self.kinds = kinds or []


class AccountNotFound(AccountsClientError):
    """Raised when no account kind holds the requested account."""
    pass


class UnsupportedOperation(AccountsClientError):
    """Raised when the server has no endpoint for an operation on a kind."""
    pass
