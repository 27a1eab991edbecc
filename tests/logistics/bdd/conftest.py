"""Shared BDD fixtures and step definitions for logistics."""

import pytest
from logistics.errors import LogisticsError
from pytest_bdd import given, parsers

HASH_KEY = "5294y06JbISpM5x9"
HASH_IV = "v77hoKGq4kWxNNIS"


@pytest.fixture()
def error():
    """Container for captured logistics errors."""
    return {"exc": None}


@pytest.fixture()
def capture(error):
    """Run ``action`` and keep any LogisticsError it raises."""

    def _capture(action):
        try:
            return action()
        except LogisticsError as exc:
            error["exc"] = exc
            return None

    return _capture


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('merchant "{merchant_id}" with the stage test credentials'), target_fixture="merchant")
def merchant(merchant_id):
    return {"merchant_id": merchant_id, "hash_key": HASH_KEY, "hash_iv": HASH_IV}
