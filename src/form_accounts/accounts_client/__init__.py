"""
Accounts API client.

Provides:
- Fetch account (GET /v1/organisation/accounts/{id})
- Create account (POST /v1/organisation/accounts)
- Delete account (DELETE /v1/organisation/accounts/{id}?version=n)

Status codes are translated into the exceptions of form_accounts.errors.
"""

from .client import ACCOUNTS_PATH, AccountAPIClient

__all__ = [
    "ACCOUNTS_PATH",
    "AccountAPIClient",
]
