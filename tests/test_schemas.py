"""Tests for account schemas and the data envelope."""

from datetime import datetime, timezone

import pytest

from fixtures import ACCOUNT_ID, ORGANISATION_ID
from form_accounts.schemas import (
    Account,
    AccountAttributes,
    CreateAccountRequest,
    unwrap_envelope,
    wrap_envelope,
)


class TestEnvelope:
    """Test {"data": ...} wrapping."""

    def test_wrap(self):
        assert wrap_envelope({"id": "1"}) == {"data": {"id": "1"}}

    def test_unwrap(self):
        assert unwrap_envelope({"data": {"id": "1"}, "links": {}}) == {"id": "1"}

    @pytest.mark.parametrize("body", [None, [], "data", {}, {"data": None}, {"data": [1]}])
    def test_unwrap_rejects_malformed(self, body):
        with pytest.raises(ValueError):
            unwrap_envelope(body)


class TestAccountAttributes:
    """Test sparse attribute encoding."""

    def test_absent_fields_are_omitted(self):
        attrs = AccountAttributes(country="GB", name=["fake account"])
        assert attrs.to_dict() == {"country": "GB", "name": ["fake account"]}

    def test_false_and_empty_values_are_kept(self):
        """Zero values are present values; only None means absent."""
        attrs = AccountAttributes(joint_account=False, switched=False, bank_id="", alternative_names=[])

        assert attrs.to_dict() == {
            "joint_account": False,
            "switched": False,
            "bank_id": "",
            "alternative_names": [],
        }

    def test_empty_attributes(self):
        assert AccountAttributes().to_dict() == {}

    def test_from_dict_ignores_unknown_keys(self):
        attrs = AccountAttributes.from_dict({"country": "GB", "processing_service": "ABC"})

        assert attrs.country == "GB"
        assert not hasattr(attrs, "processing_service")

    def test_from_dict_rejects_non_list_names(self):
        with pytest.raises(TypeError):
            AccountAttributes.from_dict({"name": "single string"})


class TestAccount:
    """Test Account parsing."""

    def test_from_dict(self, sample_account):
        account = Account.from_dict(sample_account)

        assert account.id == ACCOUNT_ID
        assert account.organisation_id == ORGANISATION_ID
        assert account.version == 0
        assert account.attributes.bank_id_code == "GBDSC"
        assert account.attributes.account_matching_opt_out is False
        assert account.modified_on.tzinfo == timezone.utc

    def test_from_dict_minimal(self):
        account = Account.from_dict({"id": ACCOUNT_ID})

        assert account.id == ACCOUNT_ID
        assert account.version is None
        assert account.attributes is None
        assert account.created_on is None

    def test_offset_timestamps(self):
        account = Account.from_dict({"created_on": "2021-03-14T10:26:53+01:00"})
        assert account.created_on == datetime(2021, 3, 14, 9, 26, 53, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "data",
        [
            {"version": "1"},
            {"version": True},
            {"created_on": 1615713413},
            {"modified_on": "not a date"},
            {"attributes": ["GB"]},
        ],
    )
    def test_from_dict_rejects_malformed(self, data):
        with pytest.raises((TypeError, ValueError)):
            Account.from_dict(data)

    def test_to_dict(self, sample_account):
        data = Account.from_dict(sample_account).to_dict()

        assert data["id"] == ACCOUNT_ID
        assert data["version"] == 0
        assert data["created_on"] == "2021-03-14T09:26:53.123000Z"
        assert data["attributes"] == sample_account["attributes"]


class TestCreateAccountRequest:
    """Test create request encoding."""

    def test_to_dict(self):
        request = CreateAccountRequest(
            id=ACCOUNT_ID,
            organisation_id=ORGANISATION_ID,
            type="accounts",
            attributes=AccountAttributes(country="GB", name=["fake account"]),
        )

        assert request.to_dict() == {
            "id": ACCOUNT_ID,
            "organisation_id": ORGANISATION_ID,
            "type": "accounts",
            "attributes": {"country": "GB", "name": ["fake account"]},
        }

    def test_absent_fields_are_omitted(self):
        assert CreateAccountRequest().to_dict() == {}
