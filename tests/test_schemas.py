"""Tests for wire schemas."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from accounts_client.schemas.account import (
    Account,
    AccountIdentifiers,
    AccountKind,
    AgencyAccount,
    GovernmentAccount,
    KindAccountCreate,
)
from accounts_client.schemas.membership import AccountMembershipUpdate


@pytest.mark.parametrize("model", [AgencyAccount, GovernmentAccount])
def test_kind_record_round_trips_through_json(model):
    record = model(
        id=uuid4(),
        user_account_id=uuid4(),
        created_at=datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc),
        updated_at=datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc),
    )

    decoded = model.model_validate_json(record.model_dump_json())

    assert decoded == record
    assert decoded.model_dump() == record.model_dump()


def test_identifiers_payload_uses_wire_names():
    identifiers = AccountIdentifiers(user_id=uuid4(), celebrity_id=uuid4())

    payload = identifiers.identifiers_payload()

    assert set(payload) == {"user_id", "celebrityId"}
    assert identifiers.to_query_params() == {
        "user_id": str(identifiers.user_id),
        "celebrity_id": str(identifiers.celebrity_id),
    }


def test_account_kind_derives_from_populated_identifier():
    account_id = uuid4()
    account = Account.model_validate({"id": str(account_id), "enterpriseId": str(account_id), "extra": 1})

    assert account.kind == AccountKind.ENTERPRISE
    assert Account(id=uuid4()).kind is None


def test_kind_create_requires_name():
    with pytest.raises(ValidationError):
        KindAccountCreate(user_id=uuid4(), name="  ")


def test_membership_update_payload_holds_only_set_fields():
    assert AccountMembershipUpdate(role="owner").to_payload(exclude_unset=True) == {"role": "owner"}
