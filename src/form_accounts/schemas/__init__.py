"""
Resource schemas for the accounts API.

All request/response bodies use the {"data": ...} envelope.
"""

from .account import (
    ENVELOPE_KEY,
    Account,
    AccountAttributes,
    CreateAccountRequest,
    unwrap_envelope,
    wrap_envelope,
)

__all__ = [
    "Account",
    "AccountAttributes",
    "CreateAccountRequest",
    "ENVELOPE_KEY",
    "wrap_envelope",
    "unwrap_envelope",
]
