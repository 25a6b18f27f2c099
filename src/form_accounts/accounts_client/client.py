"""
Accounts API client implementation.
"""

import json
import logging
import re
from http import HTTPStatus

import requests

from ..config import ClientConfig
from ..context import RequestContext
from ..errors import (
    BadRequestError,
    ConfigValidationError,
    ConflictError,
    DecodeError,
    EncodeError,
    NotFoundError,
    TransportError,
    UnexpectedStatusCodeError,
    ValidationError,
)
from ..schemas.account import Account, CreateAccountRequest, unwrap_envelope, wrap_envelope
from ..transport import AccountsTransport, DefaultTransport

logger = logging.getLogger(__name__)

ACCOUNTS_PATH = "/v1/organisation/accounts"

_TRANSPORT_FAILURES = (TransportError, requests.exceptions.RequestException)

_HEX_UUID = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
# Hyphenated, {braced}, urn:uuid: prefixed, or 32 bare hex digits
_UUID_PATTERN = re.compile(
    "|".join(
        [
            _HEX_UUID,
            r"\{" + _HEX_UUID + r"\}",
            "(?i:urn:uuid:)" + _HEX_UUID,
            "[0-9a-fA-F]{32}",
        ]
    )
)


def _validate_account_id(account_id: str) -> None:
    if not isinstance(account_id, str) or not _UUID_PATTERN.fullmatch(account_id):
        raise ValidationError("id isn't uuid")


def _validate_create_account_request(request: CreateAccountRequest) -> None:
    # The API enforces per-country required attributes; only presence is checked here.
    if request.attributes is None:
        raise ValidationError("Attributes property can't be empty")


def _read_body_text(response: requests.Response) -> str | None:
    try:
        return response.text
    except (requests.exceptions.RequestException, OSError, RuntimeError) as e:
        logger.warning(f"Failed to read response body: {e}")
        return None


class AccountAPIClient:
    """
    Client for the accounts API.

    Features:
    - Fetch an account by id
    - Create an account
    - Delete an account by id and version

    Holds no per-call state, so one instance may serve concurrent callers
    as long as the transport can.
    """

    def __init__(self, transport: AccountsTransport):
        """
        Initialize accounts client.

        Args:
            transport: Any object implementing AccountsTransport
        """
        self.transport = transport

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        session: requests.Session | None = None,
    ) -> "AccountAPIClient":
        """
        Build a client backed by DefaultTransport.

        Raises:
            ConfigValidationError: If config.validate() reports problems
        """
        errors = config.validate()
        if errors:
            raise ConfigValidationError("; ".join(errors))

        transport = DefaultTransport(config.base_url, config.to_transport_config(session))
        return cls(transport)

    def fetch_account_by_id(
        self,
        account_id: str,
        ctx: RequestContext | None = None,
    ) -> Account:
        """
        Fetch an account using GET /v1/organisation/accounts/{account_id}.

        Raises:
            ValidationError: If account_id isn't a UUID (no request is sent)
            NotFoundError: If the account doesn't exist
            UnexpectedStatusCodeError: For any status other than 200/404
            TransportError: If the request couldn't be sent
            DecodeError: If the response body isn't a valid account envelope
        """
        _validate_account_id(account_id)

        try:
            response = self.transport.get(f"{ACCOUNTS_PATH}/{account_id}", ctx)
        except _TRANSPORT_FAILURES as e:
            raise TransportError(f"GET request failed: {e}") from e

        with response:
            status = response.status_code
            if status == HTTPStatus.OK:
                try:
                    return Account.from_dict(unwrap_envelope(response.json()))
                except (ValueError, TypeError, requests.exceptions.RequestException) as e:
                    logger.warning(f"Failed to decode account {account_id}: {e}")
                    raise DecodeError(f"failed to decode body: {e}") from e
            if status == HTTPStatus.NOT_FOUND:
                raise NotFoundError()

            logger.warning(f"Unexpected status {status} fetching account {account_id}")
            raise UnexpectedStatusCodeError(status)

    def create_account(
        self,
        request: CreateAccountRequest,
        ctx: RequestContext | None = None,
    ) -> None:
        """
        Create an account using POST /v1/organisation/accounts.

        Raises:
            ValidationError: If request has no attributes (no request is sent)
            BadRequestError: If the API rejects the payload; carries the response text
            ConflictError: If the account already exists
            UnexpectedStatusCodeError: For any status other than 201/400/409
            TransportError: If the request couldn't be sent
            EncodeError: If the payload can't be serialized
        """
        _validate_create_account_request(request)

        try:
            body = json.dumps(wrap_envelope(request.to_dict())).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodeError(f"failed to marshal payload to json: {e}") from e

        try:
            response = self.transport.post(ACCOUNTS_PATH, body, ctx)
        except _TRANSPORT_FAILURES as e:
            raise TransportError(f"POST request failed: {e}") from e

        with response:
            status = response.status_code
            if status == HTTPStatus.CREATED:
                logger.info(f"Created account id={request.id}")
                return None
            if status == HTTPStatus.BAD_REQUEST:
                text = _read_body_text(response)
                raise BadRequestError(text if text is not None else "unknown")
            if status == HTTPStatus.CONFLICT:
                raise ConflictError("account already exists")

            logger.warning(f"Unexpected status {status} creating account {request.id}")
            raise UnexpectedStatusCodeError(status)

    def delete_account_by_id(
        self,
        account_id: str,
        version: int,
        ctx: RequestContext | None = None,
    ) -> None:
        """
        Delete an account using DELETE /v1/organisation/accounts/{account_id}?version={version}.

        Args:
            account_id: Account UUID
            version: Version the caller believes is current

        Raises:
            ValidationError: If account_id isn't a UUID (no request is sent)
            NotFoundError: If the account doesn't exist
            ConflictError: If version doesn't match the current one
            UnexpectedStatusCodeError: For any status other than 204/404/409
            TransportError: If the request couldn't be sent
        """
        _validate_account_id(account_id)

        try:
            response = self.transport.delete_with_query_params(
                f"{ACCOUNTS_PATH}/{account_id}",
                {"version": str(version)},
                ctx,
            )
        except _TRANSPORT_FAILURES as e:
            raise TransportError(f"DELETE request failed: {e}") from e

        with response:
            status = response.status_code
            if status == HTTPStatus.NO_CONTENT:
                logger.info(f"Deleted account id={account_id} version={version}")
                return None
            if status == HTTPStatus.NOT_FOUND:
                raise NotFoundError()
            if status == HTTPStatus.CONFLICT:
                raise ConflictError("specified version incorrect")

            logger.warning(f"Unexpected status {status} deleting account {account_id}")
            raise UnexpectedStatusCodeError(status)
