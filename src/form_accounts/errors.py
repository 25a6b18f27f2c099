"""
Error taxonomy for the accounts API client.

Every failure raised by this package derives from AccountsError, so callers
can catch broadly or by kind:

- ValidationError: input rejected before any network call
- NotFoundError: resource does not exist
- ConflictError: version mismatch or duplicate resource
- BadRequestError: the API rejected the payload
- UnexpectedStatusCodeError: status not handled for the operation
- TransportError / SerializationError: wrapped I/O or JSON failures,
  always chained to the original exception via ``__cause__``
"""


class AccountsError(Exception):
    """Base exception for accounts client errors."""

    pass


class ValidationError(AccountsError):
    """Parameters passed to the client are known to be wrong."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"request body isn't valid: {reason}")


class NotFoundError(AccountsError):
    """Requested resource doesn't exist."""

    def __init__(self) -> None:
        super().__init__("not found")


class ConflictError(AccountsError):
    """Requested action conflicts with the current resource state."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class BadRequestError(AccountsError):
    """API returned 400; reason is the raw response body."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"bad request: {reason}")


class UnexpectedStatusCodeError(AccountsError):
    """API returned a status code with no more specific translation."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"unexpected status code {status_code}")


class TransportError(AccountsError):
    """Building or executing the HTTP request failed."""

    pass


class SerializationError(AccountsError):
    """Payload could not be converted to or from JSON."""

    pass


class DecodeError(SerializationError):
    """Response body could not be decoded."""

    pass


class EncodeError(SerializationError):
    """Request payload could not be encoded."""

    pass


class ConfigValidationError(AccountsError):
    """Raised when client configuration is invalid."""

    pass
