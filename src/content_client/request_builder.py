"""URL and query string construction for the content API.

Query parameters are only emitted for meaningful values: an empty tag list
or a blank search term contributes nothing to the query string.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode

from .config import ClientConfig

QueryParams = List[Tuple[str, str]]


@dataclass
class FetchItemsOptions:
    """Options for listing items.

    Attributes:
        page: 1-based page number
        limit: Page size; None uses the configured default
        include_html_body: Ask the API to include rendered HTML bodies
        tags: Tag names to filter by (all sent, comma-joined)
        search: Free-text search term, trimmed before use
    """
    page: int = 1
    limit: Optional[int] = None
    include_html_body: bool = True
    tags: Sequence[str] = field(default_factory=list)
    search: str = ""


@dataclass
class FetchItemOptions:
    """Options for fetching a single item by slug."""
    include_html_body: bool = True


def build_url(
    config: ClientConfig,
    organization_slug: str,
    slug: Optional[str] = None,
    params: Optional[QueryParams] = None,
) -> str:
    """Build the full request URL.

    Args:
        config: Client configuration providing base URL and API path
        organization_slug: Organization whose content is addressed
        slug: Optional item slug scoping the URL to one item
        params: Ordered query parameters

    Returns:
        ``{base_url}{api_path}/{organization_slug}[/{slug}][?{query}]``
    """
    url = f"{config.base_url}{config.api_path}/{quote(organization_slug, safe='')}"
    if slug:
        url = f"{url}/{quote(slug, safe='')}"
    if params:
        url = f"{url}?{urlencode(params)}"
    return url


def build_list_params(
    page: int = 1,
    limit: int = 10,
    include_html_body: bool = True,
    tags: Sequence[str] = (),
    search: str = "",
) -> QueryParams:
    """Build query parameters for the list endpoint.

    Raises:
        ValueError: If page or limit is below 1
        TypeError: If tags is a single string instead of a sequence of names
    """
    if isinstance(tags, str):
        raise TypeError(f"tags must be a sequence of tag names, not a string: {tags!r}")
    if page < 1:
        raise ValueError(f"page must be at least 1, got {page}")
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    params: QueryParams = [('page', str(page)), ('limit', str(limit))]

    if include_html_body:
        params.append(('html', 'true'))

    tag_list = list(tags or ())
    if tag_list:
        params.append(('tags', ','.join(tag_list)))

    search_term = (search or "").strip()
    if search_term:
        params.append(('search', search_term))

    return params


def build_item_params(include_html_body: bool = True) -> QueryParams:
    """Build query parameters for the single-item endpoint."""
    return [('html', 'true')] if include_html_body else []
