"""Root pytest configuration for all tests."""

import logging

import pytest

from tests.helpers.fake_http import FakeClock

# urllib3 logs every connection retry at WARNING; keep test output quiet.
logging.getLogger("urllib3").setLevel(logging.ERROR)


@pytest.fixture
def fake_clock():
    """A clock whose sleep() returns immediately and advances time."""
    return FakeClock()
