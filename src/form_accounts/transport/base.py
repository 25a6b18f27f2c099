"""
Transport capability used by the accounts client.

Any object with these three methods can back AccountAPIClient, including
test doubles that never touch the network.
"""

from typing import IO, Mapping, Protocol, runtime_checkable

import requests

from ..context import RequestContext

RequestBody = bytes | str | IO[bytes]


@runtime_checkable
class AccountsTransport(Protocol):
    """HTTP operations against a fixed base address.

    Implementations return the raw response for every status code and raise
    TransportError only when the request could not be built or executed.
    """

    def get(self, path: str, ctx: RequestContext | None = None) -> requests.Response: ...

    def post(
        self,
        path: str,
        body: RequestBody,
        ctx: RequestContext | None = None,
    ) -> requests.Response: ...

    def delete_with_query_params(
        self,
        path: str,
        params: Mapping[str, str],
        ctx: RequestContext | None = None,
    ) -> requests.Response: ...
