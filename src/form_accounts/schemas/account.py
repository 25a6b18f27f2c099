"""
Account resource schemas.

Field names follow the accounts API JSON exactly. Every optional field uses
None for "absent" and is omitted from serialized payloads, so a partially
filled record never sends zero values the API would treat as set.
"""

import logging
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

logger = logging.getLogger(__name__)

ENVELOPE_KEY = "data"


def wrap_envelope(payload: dict[str, Any]) -> dict[str, Any]:
    """Wrap a resource payload as {"data": payload}."""
    return {ENVELOPE_KEY: payload}


def unwrap_envelope(body: Any) -> dict[str, Any]:
    """
    Extract the resource payload from a {"data": ...} body.

    Raises:
        ValueError: If body is not an object carrying an object under "data"
    """
    if not isinstance(body, dict):
        raise ValueError(f"expected JSON object, got {type(body).__name__}")
    if ENVELOPE_KEY not in body:
        raise ValueError(f"missing '{ENVELOPE_KEY}' key in response body")
    payload = body[ENVELOPE_KEY]
    if not isinstance(payload, dict):
        raise ValueError(f"expected object under '{ENVELOPE_KEY}', got {type(payload).__name__}")
    return payload


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    return datetime.fromisoformat(value)


def _format_timestamp(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _parse_string_list(key: str, value: Any) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise TypeError(f"{key} must be a list, got {type(value).__name__}")
    return [str(v) for v in value]


@dataclass
class AccountAttributes:
    """
    Banking attributes of an account.

    All fields are optional; which ones the API requires depends on the
    country and is enforced server-side.
    """

    account_classification: str | None = None
    account_matching_opt_out: bool | None = None
    account_number: str | None = None
    alternative_names: list[str] | None = None
    bank_id: str | None = None
    bank_id_code: str | None = None
    base_currency: str | None = None
    bic: str | None = None
    country: str | None = None
    iban: str | None = None
    joint_account: bool | None = None
    name: list[str] | None = None
    secondary_identification: str | None = None
    status: str | None = None
    switched: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to API JSON format, skipping absent fields."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.name] = list(value) if isinstance(value, list) else value
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AccountAttributes":
        """Create from API response attributes; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise TypeError(f"attributes must be an object, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"Ignoring unknown account attributes: {sorted(unknown)}")

        values = {k: v for k, v in data.items() if k in known}
        for key in ("alternative_names", "name"):
            if key in values:
                values[key] = _parse_string_list(key, values[key])
        return cls(**values)


@dataclass
class Account:
    """Account resource as returned by the accounts API."""

    id: str | None = None
    organisation_id: str | None = None
    type: str | None = None
    version: int | None = None
    attributes: AccountAttributes | None = None

    # Server-assigned
    created_on: datetime | None = None
    modified_on: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        """
        Create from the payload inside the response envelope.

        Raises:
            TypeError: If a field has the wrong JSON type
            ValueError: If a timestamp is not ISO-8601
        """
        version = data.get("version")
        if version is not None and (isinstance(version, bool) or not isinstance(version, int)):
            raise TypeError(f"version must be an integer, got {type(version).__name__}")

        raw_attributes = data.get("attributes")
        return cls(
            id=data.get("id"),
            organisation_id=data.get("organisation_id"),
            type=data.get("type"),
            version=version,
            attributes=(
                AccountAttributes.from_dict(raw_attributes) if raw_attributes is not None else None
            ),
            created_on=_parse_timestamp(data.get("created_on")),
            modified_on=_parse_timestamp(data.get("modified_on")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to API JSON format."""
        result: dict[str, Any] = {}
        optional_fields = [
            ("id", self.id),
            ("organisation_id", self.organisation_id),
            ("type", self.type),
            ("version", self.version),
        ]
        for field_name, value in optional_fields:
            if value is not None:
                result[field_name] = value

        if self.attributes is not None:
            result["attributes"] = self.attributes.to_dict()
        if self.created_on is not None:
            result["created_on"] = _format_timestamp(self.created_on)
        if self.modified_on is not None:
            result["modified_on"] = _format_timestamp(self.modified_on)
        return result


@dataclass
class CreateAccountRequest:
    """Parameters of a create-account request."""

    attributes: AccountAttributes | None = None
    id: str | None = None
    organisation_id: str | None = None
    type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to API JSON format, skipping absent fields."""
        result: dict[str, Any] = {}
        if self.attributes is not None:
            result["attributes"] = self.attributes.to_dict()
        for field_name, value in (
            ("id", self.id),
            ("organisation_id", self.organisation_id),
            ("type", self.type),
        ):
            if value is not None:
                result[field_name] = value
        return result
