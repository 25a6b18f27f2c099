"""
Client library for the Form3 accounts API.

Fetch, create and delete account resources over HTTP/JSON, with HTTP
outcomes translated into typed exceptions.
"""

from .accounts_client import AccountAPIClient
from .config import ClientConfig, load_config
from .context import Cancelled, DeadlineExceeded, RequestContext
from .errors import (
    AccountsError,
    BadRequestError,
    ConfigValidationError,
    ConflictError,
    DecodeError,
    EncodeError,
    NotFoundError,
    SerializationError,
    TransportError,
    UnexpectedStatusCodeError,
    ValidationError,
)
from .schemas import Account, AccountAttributes, CreateAccountRequest
from .transport import AccountsTransport, DefaultTransport, TransportConfig

__version__ = "0.1.0"

__all__ = [
    "AccountAPIClient",
    "AccountsTransport",
    "DefaultTransport",
    "TransportConfig",
    "ClientConfig",
    "load_config",
    "RequestContext",
    "Cancelled",
    "DeadlineExceeded",
    "Account",
    "AccountAttributes",
    "CreateAccountRequest",
    # Errors
    "AccountsError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "BadRequestError",
    "UnexpectedStatusCodeError",
    "TransportError",
    "SerializationError",
    "DecodeError",
    "EncodeError",
    "ConfigValidationError",
]
