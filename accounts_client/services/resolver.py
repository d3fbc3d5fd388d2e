"""Account kind resolution for sparse account inputs."""

from accounts_client.errors import AmbiguousKind, KindUndetermined
from accounts_client.schemas.account import (
    ACCOUNT_KINDS,
    AccountIdentifiers,
    AccountInput,
    AccountKind,
    AccountRef,
)

RESOLUTION_ORDER = ACCOUNT_KINDS


def resolve_account_kind(identifiers: AccountIdentifiers, strict: bool = True) -> AccountKind:
    """
    Determine which account kind a sparse input addresses.

    Kinds are checked in the fixed order user, agency, celebrity, business,
    enterprise, government.

    Args:
        identifiers: Input with up to six kind identifiers
        strict: Reject inputs populating more than one identifier. When False
            the first populated kind in resolution order wins.

    Returns:
        AccountKind: The single populated kind

    Raises:
        KindUndetermined: If no identifier is populated
        AmbiguousKind: If several identifiers are populated and ``strict`` is set
    """
    kinds = identifiers.populated_kinds()
    if not kinds:
        raise KindUndetermined("could not determine the account type")
    if strict and len(kinds) > 1:
        names = [kind.value for kind in kinds]
        raise AmbiguousKind(
            f"account input populates several kinds: {', '.join(names)}",
            kinds=names
        )
    return kinds[0]


def resolve_account_ref(account: AccountInput, strict: bool = True) -> AccountRef:
    """Normalize either input shape to a tagged ``AccountRef``."""
    if isinstance(account, AccountRef):
        return account
    kind = resolve_account_kind(account, strict=strict)
    return AccountRef(kind=kind, account_id=account.identifier_for(kind))
