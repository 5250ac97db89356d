"""Content client library.

This package provides a Python client for the public content API (blog posts
and documentation pages), with bounded timeouts, retries with exponential
backoff and typed errors.
"""

from .errors import (
    ContentClientError,
    ClientError,
    ResponseValidationError,
    ConfigError,
)
from .config import ClientConfig, ConfigLoader, DEFAULT_CONFIG
from .models import (
    Author,
    DocsTree,
    Item,
    ItemsPage,
    Organization,
    Pagination,
    Seo,
    Tag,
)
from .request_builder import FetchItemOptions, FetchItemsOptions
from .fetcher import ResilientFetcher, SystemClock
from .service import ContentService

__all__ = [
    "ContentClientError",
    "ClientError",
    "ResponseValidationError",
    "ConfigError",
    "ClientConfig",
    "ConfigLoader",
    "DEFAULT_CONFIG",
    "Author",
    "DocsTree",
    "Item",
    "ItemsPage",
    "Organization",
    "Pagination",
    "Seo",
    "Tag",
    "FetchItemOptions",
    "FetchItemsOptions",
    "ResilientFetcher",
    "SystemClock",
    "ContentService",
]
