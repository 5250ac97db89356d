"""Test helper modules.

This package provides utilities for unit testing without a network:
- fake_http: scripted HTTP transport and manually driven clock
"""

from .fake_http import FakeClock, FakeSession, make_response

__all__ = [
    'FakeClock',
    'FakeSession',
    'make_response',
]
