"""
Default requests-based transport implementation.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

import requests

from ..context import DeadlineExceeded, RequestContext
from ..errors import ConfigValidationError, TransportError
from .base import RequestBody

logger = logging.getLogger(__name__)


@dataclass
class TransportConfig:
    """
    Construction options for DefaultTransport.

    Attributes:
        session: HTTP client to send requests with. Defaults to a new
            requests.Session owned (and closed) by the transport.
        use_https: Use the https scheme instead of plain http.
        timeout: Per-request socket timeout in seconds, tightened further
            by the deadline of the call's RequestContext.
    """

    DEFAULT_TIMEOUT = 30.0

    session: requests.Session | None = None
    use_https: bool = False
    timeout: float | None = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigValidationError(f"timeout must be positive, got {self.timeout}")

    @property
    def scheme(self) -> str:
        return "https" if self.use_https else "http"


def _validate_base_url(base_url: str) -> None:
    """Check base_url is a bare network location such as "host" or "host:8080"."""
    if not base_url:
        raise ConfigValidationError("empty base_url")

    try:
        parts = urlsplit(f"//{base_url}")
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise ConfigValidationError(f"failed to parse base_url: {base_url}") from e

    if not parts.hostname or parts.netloc != base_url or parts.path or parts.query or parts.fragment:
        raise ConfigValidationError(f"failed to parse base_url: {base_url}")


class DefaultTransport:
    """
    Transport sending requests to a fixed host through requests.

    Status codes are not interpreted; every response is handed back to the
    caller, which owns closing it.
    """

    def __init__(self, base_url: str, config: TransportConfig | None = None):
        """
        Initialize transport.

        Args:
            base_url: Host of the accounts API, optionally with port (e.g., "localhost:8080")
            config: Transport options; defaults apply when omitted

        Raises:
            ConfigValidationError: If base_url is empty or not a valid host
        """
        _validate_base_url(base_url)

        self.base_url = base_url
        self.config = config or TransportConfig()
        self._owns_session = self.config.session is None
        self.session = self.config.session or requests.Session()

    @property
    def scheme(self) -> str:
        return self.config.scheme

    def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session:
            self.session.close()

    def build_url(self, path: str, params: Mapping[str, str] | None = None) -> str:
        query = urlencode(params) if params else ""
        return urlunsplit((self.scheme, self.base_url, quote(path), query, ""))

    def get(self, path: str, ctx: RequestContext | None = None) -> requests.Response:
        return self._send("GET", path, ctx)

    def post(
        self,
        path: str,
        body: RequestBody,
        ctx: RequestContext | None = None,
    ) -> requests.Response:
        return self._send(
            "POST",
            path,
            ctx,
            data=body,
            headers={"Content-Type": "application/json"},
        )

    def delete_with_query_params(
        self,
        path: str,
        params: Mapping[str, str],
        ctx: RequestContext | None = None,
    ) -> requests.Response:
        return self._send("DELETE", path, ctx, params=params)

    def _send(
        self,
        method: str,
        path: str,
        ctx: RequestContext | None,
        data: Any = None,
        params: Mapping[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Build the request, then execute it; each step fails with its own message."""
        ctx = ctx or RequestContext.background()
        url = self.build_url(path, params)

        err = ctx.err()
        timeout = ctx.request_timeout(self.config.timeout)
        if err is None and timeout is not None and timeout <= 0:
            # Deadline passed after the liveness check
            err = DeadlineExceeded()
        if err is not None:
            logger.warning(f"Not sending {method} {url}: {err}")
            raise TransportError(f"failed to create new {method} request: {err}") from err

        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        try:
            prepared = self.session.prepare_request(
                requests.Request(method, url, data=data, headers=request_headers)
            )
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning(f"Failed to build {method} request for {url}: {e}")
            raise TransportError(f"failed to create new {method} request: {e}") from e

        settings = self.session.merge_environment_settings(prepared.url, {}, None, None, None)

        logger.debug(f"API Request: {method} {prepared.url} (timeout={timeout})")
        try:
            response = self.session.send(prepared, timeout=timeout, **settings)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request error for {method} {prepared.url}: {e}")
            raise TransportError(f"request failed: {e}") from e

        logger.debug(f"Response status: {response.status_code}")
        return response
