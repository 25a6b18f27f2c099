"""
HTTP transport for the accounts API.

Provides:
- AccountsTransport protocol (what the accounts client depends on)
- DefaultTransport backed by requests.Session
- TransportConfig with session injection and scheme selection
"""

from .base import AccountsTransport, RequestBody
from .client import DefaultTransport, TransportConfig

__all__ = [
    "AccountsTransport",
    "DefaultTransport",
    "RequestBody",
    "TransportConfig",
]
