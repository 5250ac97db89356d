"""Test fixtures for content client tests.

This module provides sample content API payloads (items, pagination,
list responses) and HTML bodies for formatter tests.
"""

from .api_responses import (
    ORGANIZATION,
    DOCS_ITEMS,
    SAMPLE_BODY_HTML,
    make_item,
    make_pagination,
    make_list_response,
)

__all__ = [
    'ORGANIZATION',
    'DOCS_ITEMS',
    'SAMPLE_BODY_HTML',
    'make_item',
    'make_pagination',
    'make_list_response',
]
