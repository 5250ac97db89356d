"""Content service: the public API for reading an organization's content.

This module composes the request builder and the resilient fetcher into the
three public read operations (list, single item, document tree) and turns
the untyped JSON responses into validated models.
"""

import logging
from typing import Any, Mapping, Optional

import requests

from src.content_formatter.text_utils import calculate_read_time
from src.doc_tree.tree_builder import build_tree

from .config import ClientConfig, DEFAULT_CONFIG
from .errors import ClientError, ConfigError
from .fetcher import ResilientFetcher, SystemClock
from .models import DocsTree, Item, ItemsPage
from .request_builder import (
    FetchItemOptions,
    FetchItemsOptions,
    build_item_params,
    build_list_params,
    build_url,
)

logger = logging.getLogger(__name__)


class ContentService:
    """Reads items for one organization from the content API.

    Error policy:
    1. A 404 for a single item returns None
    2. Every other ClientError propagates unchanged
    3. Malformed response bodies raise ResponseValidationError

    Example:
        >>> service = ContentService("acme")
        >>> page = service.fetch_items(page=2, tags=["python"])
        >>> post = service.fetch_one("hello-world")
        >>> docs = service.fetch_as_tree()
    """

    def __init__(
        self,
        organization_slug: str,
        config: ClientConfig = DEFAULT_CONFIG,
        overrides: Optional[Mapping[str, Any]] = None,
        session: Optional[requests.Session] = None,
        clock: Optional[SystemClock] = None,
    ):
        """Initialize the service.

        Args:
            organization_slug: Organization whose content is read
            config: Base configuration (defaults when omitted)
            overrides: Per-instance settings; these win over config
            session: HTTP transport passed to the fetcher
            clock: Clock passed to the fetcher

        Raises:
            ConfigError: If organization_slug is empty or overrides are invalid
        """
        if not organization_slug or not organization_slug.strip():
            raise ConfigError("cannot be empty", "organization_slug")

        self._organization_slug = organization_slug.strip()
        self._config = config.merged(overrides)
        self._fetcher = ResilientFetcher(self._config, session=session, clock=clock)

    @property
    def organization_slug(self) -> str:
        return self._organization_slug

    @property
    def config(self) -> ClientConfig:
        return self._config

    def fetch_items(self, options: Optional[FetchItemsOptions] = None, **kwargs) -> ItemsPage:
        """Fetch one page of items.

        Args:
            options: FetchItemsOptions; alternatively pass its fields as keywords

        Returns:
            ItemsPage with items, pagination and organization

        Raises:
            ClientError: If the request fails
            ResponseValidationError: If the response has the wrong shape
            ValueError: If page or limit is below 1
        """
        options = _resolve(options, FetchItemsOptions, kwargs)
        limit = options.limit if options.limit is not None else self._config.default_limit

        params = build_list_params(
            page=options.page,
            limit=limit,
            include_html_body=options.include_html_body,
            tags=options.tags,
            search=options.search,
        )
        url = build_url(self._config, self._organization_slug, params=params)

        logger.info(f"Fetching items page {options.page} for {self._organization_slug}")
        data = self._fetcher.execute(url)
        page = ItemsPage.from_dict(data)
        logger.debug(f"Received {len(page.items)} items")
        return page

    # Blog-facing name for the list operation
    fetch_posts = fetch_items

    def fetch_one(self, slug: str, options: Optional[FetchItemOptions] = None,
                  **kwargs) -> Optional[Item]:
        """Fetch a single item by slug.

        Args:
            slug: The item slug
            options: FetchItemOptions; alternatively pass its fields as keywords

        Returns:
            The item, or None if the API answers 404

        Raises:
            ClientError: For any failure other than 404
            ResponseValidationError: If the response has the wrong shape
            ValueError: If slug is empty
        """
        if not slug or not slug.strip():
            raise ValueError("slug cannot be empty")

        options = _resolve(options, FetchItemOptions, kwargs)
        params = build_item_params(options.include_html_body)
        url = build_url(self._config, self._organization_slug, slug=slug.strip(), params=params)

        logger.info(f"Fetching item '{slug}' for {self._organization_slug}")
        try:
            data = self._fetcher.execute(url)
        except ClientError as e:
            # For a single item, 404 means it doesn't exist (not an error)
            if e.status == 404:
                logger.info(f"Item '{slug}' not found")
                return None
            raise

        return Item.from_dict(data)

    def fetch_as_tree(self, options: Optional[FetchItemsOptions] = None, **kwargs) -> DocsTree:
        """Fetch one page of items and nest it into a document tree.

        Returns:
            DocsTree with root nodes sorted by id, pagination and organization

        Raises:
            ClientError: If the request fails
            ResponseValidationError: If the response has the wrong shape
            TreeCycleError: If parent references in the page form a cycle
        """
        page = self.fetch_items(options, **kwargs)
        tree = build_tree(page.items, path_prefix=self._config.docs_path_prefix)
        return DocsTree(tree=tree, pagination=page.pagination, organization=page.organization)

    def read_time(self, item: Item) -> str:
        """Reading time label for an item at the configured words_per_minute.

        Uses the HTML body, falling back to the plain text excerpt.
        """
        body = item.html_content or item.text_content or ""
        return calculate_read_time(body, self._config.words_per_minute)


def _resolve(options, options_cls, kwargs):
    """Return options, or build them from keyword arguments."""
    if options is not None and kwargs:
        raise TypeError("Pass either an options object or keyword arguments, not both")
    if options is None:
        return options_cls(**kwargs)
    return options
