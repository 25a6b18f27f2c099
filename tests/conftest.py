"""Test fixtures and utilities."""

import copy

import pytest

from fixtures import SAMPLE_ACCOUNT

from form_accounts.context import RequestContext


@pytest.fixture
def sample_account() -> dict:
    """Account payload as the API returns it inside the envelope."""
    return copy.deepcopy(SAMPLE_ACCOUNT)


@pytest.fixture
def ctx() -> RequestContext:
    """Live context with a generous deadline."""
    return RequestContext(timeout=10)
