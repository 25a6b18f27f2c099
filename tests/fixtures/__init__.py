"""
Test doubles and sample payloads for the accounts client.

- SAMPLE_ACCOUNT: account payload as found inside the response envelope
- RecordingTransport: in-memory AccountsTransport
- make_response: requests.Response built without any network
"""

import io

import requests

ACCOUNT_ID = "ad27e265-9605-4b4b-a0e5-3003ea9cc4dc"
ORGANISATION_ID = "eb0bd6f5-c3f5-44b2-b677-acd23cdde73c"

SAMPLE_ACCOUNT = {
    "id": ACCOUNT_ID,
    "organisation_id": ORGANISATION_ID,
    "type": "accounts",
    "version": 0,
    "created_on": "2021-03-14T09:26:53.123Z",
    "modified_on": "2021-03-14T09:26:53.123Z",
    "attributes": {
        "account_classification": "Personal",
        "account_matching_opt_out": False,
        "alternative_names": ["Sam Holder"],
        "bank_id": "400300",
        "bank_id_code": "GBDSC",
        "base_currency": "GBP",
        "bic": "NWBKGB22",
        "country": "GB",
        "joint_account": False,
        "name": ["Samantha Holder"],
        "status": "confirmed",
        "switched": False,
    },
}


class RecordingTransport:
    """AccountsTransport that records calls and replays one canned outcome."""

    def __init__(self, response: requests.Response | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple] = []

    def _reply(self) -> requests.Response:
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, path, ctx=None):
        self.calls.append(("GET", path, ctx))
        return self._reply()

    def post(self, path, body, ctx=None):
        self.calls.append(("POST", path, body, ctx))
        return self._reply()

    def delete_with_query_params(self, path, params, ctx=None):
        self.calls.append(("DELETE", path, dict(params), ctx))
        return self._reply()


class BrokenBody:
    """Raw stream that fails when read, like a connection reset mid-body."""

    def read(self, *args, **kwargs):
        raise OSError("connection reset by peer")

    def close(self):
        pass


class TrackedResponse(requests.Response):
    """Response remembering whether its owner released it."""

    def __init__(self):
        super().__init__()
        self.was_closed = False

    def close(self):
        self.was_closed = True
        super().close()


def make_response(status_code: int, body: bytes = b"", raw=None) -> TrackedResponse:
    """Build a requests.Response whose body is read from memory."""
    response = TrackedResponse()
    response.status_code = status_code
    response.encoding = "utf-8"
    response.raw = raw if raw is not None else io.BytesIO(body)
    return response
